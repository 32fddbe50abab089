"""Utility helpers for tagselector."""

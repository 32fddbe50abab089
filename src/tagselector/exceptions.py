"""Custom exceptions for tagselector."""


class TagSelectorError(Exception):
    """Base exception for tagselector operations."""


class ConfigurationMissingError(TagSelectorError):
    """No tag directory has been configured."""


class DocumentUnreadableError(TagSelectorError):
    """A tag document could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not read tag document {path}: {reason}")
        self.path = path
        self.reason = reason


class EmptyResultError(TagSelectorError):
    """No tags were found in any tag document."""


class TagNotFoundError(TagSelectorError):
    """The requested tag does not exist in the forest."""


class NoActiveTargetError(TagSelectorError):
    """There is no buffer or cursor to insert into."""

"""HTTP API serving tag forests to selection UIs."""

"""GlobPathology auth portal."""

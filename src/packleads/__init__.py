"""Page metadata, crawler documents, and request validation for Packleads."""

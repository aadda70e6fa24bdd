"""HTTP handlers for Packleads."""

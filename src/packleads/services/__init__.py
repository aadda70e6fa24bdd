"""Services implementing Packleads operations."""

"""FastAPI dependencies for Packleads."""

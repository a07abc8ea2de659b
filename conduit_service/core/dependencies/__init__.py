"""FastAPI dependencies shared across features."""

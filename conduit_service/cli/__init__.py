"""Command-line interface for conduit-service."""

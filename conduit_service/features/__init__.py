"""Feature modules (one package per bounded context)."""

"""Articles feature: storage, service, REST endpoints."""

"""GraphQL API (strawberry) exposing Relay-style article connections."""

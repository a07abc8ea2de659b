"""Conduit blogging platform backend."""

"""Core building blocks: settings, errors, pagination."""

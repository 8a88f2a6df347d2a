"""Core: configuration, logging, exceptions."""

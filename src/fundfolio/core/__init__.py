"""Core infrastructure: configuration, exceptions, logging, dispatch."""

"""Core infrastructure: config, exceptions, logging and the CLI."""

"""Core infrastructure: exceptions, constants, configuration, logging and CLI output."""

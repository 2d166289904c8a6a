"""Core infrastructure: settings, logging, errors and dataset access."""

"""Core models, configuration and utilities for shardsplit."""

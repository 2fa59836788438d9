"""Shared helpers: coordinates, config, logging, CLI options."""

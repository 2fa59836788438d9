"""Main window menu actions."""

"""Helpers shared by the library and the CLI."""

"""Execwrap command-line interface."""

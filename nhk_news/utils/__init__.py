"""Shared utilities: logging setup and configuration loading."""

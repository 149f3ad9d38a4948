"""Utilities - configuration loading."""

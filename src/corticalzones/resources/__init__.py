"""Packaged icons."""

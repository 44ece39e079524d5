"""Thin REST client wrappers and response assertions."""

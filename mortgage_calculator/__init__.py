# This project was developed with assistance from AI tools.
"""Mortgage payment calculator service."""

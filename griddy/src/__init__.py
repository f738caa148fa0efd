"""Core sources for the griddy package."""

"""Compute semver release variables for a CI tag-and-release step."""

__version__ = "1.0.0"

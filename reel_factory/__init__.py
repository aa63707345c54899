"""Reel Factory - narrated vertical-video pipeline."""

__version__ = "1.0.0"

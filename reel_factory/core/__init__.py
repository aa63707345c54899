"""Core settings and logging."""

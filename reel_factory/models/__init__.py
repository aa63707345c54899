"""Pydantic models for the pipeline."""

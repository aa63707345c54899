"""Utility functions for Reel Factory."""

from reel_factory.utils.io_utils import OutputLayout, create_output_layout, write_text
from reel_factory.utils.text_utils import estimate_spoken_duration, estimate_total_duration

__all__ = [
    "OutputLayout",
    "create_output_layout",
    "write_text",
    "estimate_spoken_duration",
    "estimate_total_duration",
]

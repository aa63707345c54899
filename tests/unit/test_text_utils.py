"""Tests for narration length estimates."""

import pytest

from reel_factory.utils.text_utils import estimate_spoken_duration, estimate_total_duration


def test_estimate_spoken_duration():
    assert estimate_spoken_duration("one two three", words_per_minute=60) == 3.0
    assert estimate_spoken_duration("", words_per_minute=155) == 0.0


def test_estimate_total_duration():
    assert estimate_total_duration(["a b", "c d e f"], words_per_minute=120) == 3.0


def test_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        estimate_spoken_duration("words", words_per_minute=0)

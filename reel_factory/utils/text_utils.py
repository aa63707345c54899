"""Text utility functions for narration planning."""


def estimate_spoken_duration(text: str, words_per_minute: int = 155) -> float:
    """
    Estimate the spoken duration of text in seconds.

    Args:
        text: Text to estimate duration for.
        words_per_minute: Speaking rate (default matches the espeak -s default).

    Returns:
        Estimated duration in seconds.
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    word_count = len(text.split())
    return word_count / words_per_minute * 60


def estimate_total_duration(narrations: list[str], words_per_minute: int = 155) -> float:
    """Sum of per-line estimates; used by dry runs before any audio exists."""
    return sum(estimate_spoken_duration(text, words_per_minute) for text in narrations)

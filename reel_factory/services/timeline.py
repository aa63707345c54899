"""Timeline & Caption Builder - turns measured clip durations into SubRip captions.

Scene ``i`` starts where scene ``i - 1`` ends. The offsets are a running sum
over the duration sequence, so the intervals tile ``[0, total)`` with no gaps
or overlaps and ``total`` is the narrated voice duration used downstream.
"""

import math
from itertools import accumulate
from pathlib import Path
from typing import Sequence

from reel_factory.models.schemas import CaptionBuild, CaptionRecord, Scene, Timeline, TimelineEntry
from reel_factory.utils.error_handler import InvalidDurationError, PreconditionError, TimelineMismatchError
from reel_factory.utils.io_utils import write_text

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def _check_duration(value: float, label: str) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidDurationError(f"{label} is not a number: {value!r}") from e
    if not math.isfinite(seconds):
        raise InvalidDurationError(f"{label} is not finite: {value!r}")
    if seconds < 0:
        raise InvalidDurationError(f"{label} is negative: {value!r}")
    return seconds


def build_timeline(durations: Sequence[float]) -> Timeline:
    """
    Fold clip durations into contiguous start/end offsets.

    Args:
        durations: Clip lengths in seconds, in scene order.

    Returns:
        Timeline whose entries satisfy start[0] == 0 and end[i] == start[i + 1].

    Raises:
        InvalidDurationError: If any duration is negative, NaN or infinite.
    """
    checked = [_check_duration(d, f"duration #{i}") for i, d in enumerate(durations, start=1)]
    ends = list(accumulate(checked))
    starts = [0.0] + ends[:-1]
    entries = tuple(
        TimelineEntry(index=i, start=start, end=end)
        for i, (start, end) in enumerate(zip(starts, ends), start=1)
    )
    return Timeline(entries=entries, total=ends[-1] if ends else 0.0)


def build_captions(scenes: Sequence[Scene], durations: Sequence[float]) -> CaptionBuild:
    """
    Build one caption per scene from its measured narration duration.

    Args:
        scenes: Scenes in narration order.
        durations: Clip durations aligned by position with ``scenes``.

    Returns:
        CaptionBuild with records numbered 1..N and the underlying timeline.

    Raises:
        TimelineMismatchError: If the sequences differ in length.
        PreconditionError: If there are no scenes.
        InvalidDurationError: If any duration is negative or non-finite.
    """
    if len(scenes) != len(durations):
        raise TimelineMismatchError(len(scenes), len(durations))
    if not scenes:
        raise PreconditionError("at least one scene is required to build captions")

    timeline = build_timeline(durations)
    records = tuple(
        CaptionRecord(sequence=entry.index, start=entry.start, end=entry.end, text=scene.narration)
        for scene, entry in zip(scenes, timeline.entries)
    )
    return CaptionBuild(records=records, timeline=timeline)


def format_timestamp(seconds: float) -> str:
    """
    Format seconds as a SubRip timestamp ``HH:MM:SS,mmm``.

    Milliseconds are rounded half-up on the whole value, so a fraction that
    rounds to 1000 ms carries into the seconds field: 59.9996 -> 00:01:00,000.

    Raises:
        InvalidDurationError: If ``seconds`` is negative or not finite.
    """
    seconds = _check_duration(seconds, "timestamp")
    total_ms = math.floor(seconds * MS_PER_SECOND + 0.5)
    hours, rest = divmod(total_ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    secs, millis = divmod(rest, MS_PER_SECOND)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def serialize_srt(records: Sequence[CaptionRecord]) -> str:
    """Serialize caption records as SubRip text, blocks separated by a blank line."""
    lines: list[str] = []
    for record in records:
        lines.append(str(record.sequence))
        lines.append(f"{format_timestamp(record.start)} --> {format_timestamp(record.end)}")
        lines.append(record.text)
        lines.append("")
    return "\n".join(lines)


def write_captions(records: Sequence[CaptionRecord], path: Path) -> Path:
    """Write the SubRip file for ``records`` to ``path``."""
    return write_text(path, serialize_srt(records))

"""Duration Prober - measures each narration clip."""

import math
from pathlib import Path
from typing import Any, Sequence

from reel_factory.core.config import Settings
from reel_factory.services.toolchain import MediaToolchain
from reel_factory.utils.error_handler import ProbeOutputError


class DurationProber:
    """Probes clip durations in order and refuses values the timeline cannot use."""

    def __init__(self, settings: Settings, logger: Any, toolchain: MediaToolchain):
        self.settings = settings
        self.logger = logger
        self.toolchain = toolchain

    def probe(self, clip_path: Path) -> float:
        duration = self.toolchain.probe_duration(clip_path)
        if not isinstance(duration, (int, float)) or not math.isfinite(duration) or duration < 0:
            raise ProbeOutputError(str(clip_path), repr(duration), "not a finite, non-negative number")
        return float(duration)

    def probe_all(self, clip_paths: Sequence[Path]) -> list[float]:
        """
        Probe every clip, in order.

        Args:
            clip_paths: Narration clips in scene order

        Returns:
            Durations in seconds aligned by position with ``clip_paths``
        """
        durations = []
        for clip_path in clip_paths:
            duration = self.probe(clip_path)
            self.logger.debug(f"{clip_path.name}: {duration:.3f}s")
            durations.append(duration)
        self.logger.info(f"Probed {len(durations)} clips, {sum(durations):.2f}s of narration")
        return durations

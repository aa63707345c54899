"""Narration Synthesizer - one speech clip per scene."""

from pathlib import Path
from typing import Any, Sequence

from reel_factory.core.config import Settings
from reel_factory.models.schemas import Scene
from reel_factory.services.toolchain import MediaToolchain
from reel_factory.utils.io_utils import OutputLayout


class NarrationSynthesizer:
    """Synthesizes each scene's narration to audio/scene{N}.wav, in scene order."""

    def __init__(self, settings: Settings, logger: Any, toolchain: MediaToolchain):
        """
        Initialize narration synthesizer.

        Args:
            settings: Application settings
            logger: Logger instance
            toolchain: Media toolchain used for speech synthesis
        """
        self.settings = settings
        self.logger = logger
        self.toolchain = toolchain

    def synthesize_all(self, scenes: Sequence[Scene], layout: OutputLayout) -> list[Path]:
        """
        Generate one narration clip per scene.

        Args:
            scenes: Scenes in narration order
            layout: Output layout

        Returns:
            Clip paths aligned by position with ``scenes``
        """
        clips: list[Path] = []
        for index, scene in enumerate(scenes, start=1):
            clip_path = layout.scene_audio(index)
            self.logger.info(f"  - Narrating scene {index}/{len(scenes)}: {scene.title}")
            self.toolchain.synthesize_speech(scene.narration, clip_path)
            clips.append(clip_path)
        self.logger.info(f"Generated {len(clips)} narration clips")
        return clips

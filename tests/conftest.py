"""Shared pytest fixtures and configuration."""

from pathlib import Path

import pytest

from reel_factory.core.config import Settings
from reel_factory.core.logging_config import get_logger
from reel_factory.models.schemas import (
    DistributionSpec,
    ProjectInfo,
    Scene,
    SceneCatalog,
    ThumbnailSpec,
)
from reel_factory.utils.io_utils import create_output_layout


class FakeToolchain:
    """Deterministic MediaToolchain: writes placeholder files and records every call."""

    def __init__(self, durations=None, probe_values=None):
        self.durations = list(durations or [])
        self.probe_values = probe_values
        self.calls = []

    def _touch(self, path: Path, content: str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def verify_available(self) -> None:
        self.calls.append(("verify_available",))

    def synthesize_speech(self, text, output_path):
        self.calls.append(("synthesize_speech", text, Path(output_path)))
        self._touch(output_path, text)

    def probe_duration(self, media_path):
        self.calls.append(("probe_duration", Path(media_path)))
        index = int(Path(media_path).stem.replace("scene", "")) - 1
        if self.probe_values is not None:
            return self.probe_values[index]
        return self.durations[index]

    def concat_audio(self, list_file, output_path):
        self.calls.append(("concat_audio", Path(list_file), Path(output_path)))
        self._touch(output_path, "voiceover")

    def generate_noise_bed(self, duration_seconds, output_path):
        self.calls.append(("generate_noise_bed", duration_seconds, Path(output_path)))
        self._touch(output_path, "music")

    def mix_audio(self, voice_path, music_path, output_path):
        self.calls.append(("mix_audio", Path(voice_path), Path(music_path), Path(output_path)))
        self._touch(output_path, "mix")

    def render_image(self, heading, body, output_path):
        self.calls.append(("render_image", heading, body, Path(output_path)))
        self._touch(output_path, heading)

    def compose_video(self, image_paths, durations, output_path):
        self.calls.append(("compose_video", list(image_paths), list(durations), Path(output_path)))
        self._touch(output_path, "video")

    def mux_audio(self, video_path, audio_path, output_path):
        self.calls.append(("mux_audio", Path(video_path), Path(audio_path), Path(output_path)))
        self._touch(output_path, "video+audio")

    def burn_subtitles(self, video_path, subtitle_path, output_path):
        self.calls.append(("burn_subtitles", Path(video_path), Path(subtitle_path), Path(output_path)))
        self._touch(output_path, "final")

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def settings(tmp_path):
    """Create test settings instance writing under tmp_path."""
    return Settings(output_dir=str(tmp_path / "assets"))


@pytest.fixture
def logger():
    """Create test logger instance."""
    return get_logger(__name__)


@pytest.fixture
def layout(settings):
    """Create the output directory tree."""
    return create_output_layout(settings.output_dir)


@pytest.fixture
def sample_catalog():
    """Three-scene catalog with short narrations."""
    return SceneCatalog(
        project=ProjectInfo(topic="Test topic", uniqueness="Rarely told"),
        script_title="TEST TITLE",
        outro="Who did it?",
        scenes=[
            Scene(title="A", visual="Visual A", prompt="Prompt A", narration="x"),
            Scene(title="B", visual="Visual B", prompt="Prompt B", narration="y"),
            Scene(title="C", visual="Visual C", prompt="Prompt C", narration="z"),
        ],
        thumbnail=ThumbnailSpec(title="THUMB", visual_prompt="Thumb prompt"),
        distribution=DistributionSpec(
            title="Test Video",
            description="A test description.",
            hashtags=["#Mystery", "Shorts"],
            tags=["test", "mystery"],
        ),
    )


@pytest.fixture
def fake_toolchain():
    """Factory for FakeToolchain instances."""
    return FakeToolchain

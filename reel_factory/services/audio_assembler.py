"""Audio Assembler - voiceover, noise bed and final mix."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from reel_factory.core.config import Settings
from reel_factory.services.toolchain import MediaToolchain
from reel_factory.utils.error_handler import InvalidDurationError
from reel_factory.utils.io_utils import OutputLayout, write_text


@dataclass(frozen=True)
class AudioAssembly:
    """Paths and lengths produced by the audio stage."""

    voiceover: Path
    music: Path
    final_audio: Path
    voice_duration: float
    total_duration: float


def quote_concat_path(path: Path | str) -> str:
    """Single-quote a path for the concat demuxer; an embedded quote becomes '\\''."""
    return "'" + str(path).replace("'", "'\\''") + "'"


def render_concat_list(clip_paths: Sequence[Path]) -> str:
    """ffmpeg concat demuxer list with absolute paths, one ``file '...'`` per line."""
    return "\n".join(f"file {quote_concat_path(Path(p).resolve())}" for p in clip_paths)


class AudioAssembler:
    """Builds audio/voiceover.wav, audio/music.wav and audio/final_audio.wav."""

    def __init__(self, settings: Settings, logger: Any, toolchain: MediaToolchain):
        """
        Initialize audio assembler.

        Args:
            settings: Application settings (music padding, mix levels)
            logger: Logger instance
            toolchain: Media toolchain
        """
        self.settings = settings
        self.logger = logger
        self.toolchain = toolchain

    def build_voiceover(self, clip_paths: Sequence[Path], layout: OutputLayout) -> Path:
        write_text(layout.concat_list, render_concat_list(clip_paths))
        self.toolchain.concat_audio(layout.concat_list, layout.voiceover)
        self.logger.info(f"Voiceover: {layout.voiceover}")
        return layout.voiceover

    def music_duration(self, voice_duration: float) -> float:
        if voice_duration < 0:
            raise InvalidDurationError(f"voice duration is negative: {voice_duration!r}")
        return voice_duration + self.settings.music_padding_seconds

    def build_music_bed(self, voice_duration: float, layout: OutputLayout) -> float:
        """
        Render a filtered noise bed a little longer than the narration.

        Args:
            voice_duration: Narrated length in seconds (timeline total)
            layout: Output layout

        Returns:
            Length of the bed in seconds
        """
        total = self.music_duration(voice_duration)
        self.toolchain.generate_noise_bed(total, layout.music)
        self.logger.info(f"Music bed: {layout.music} ({total:.2f}s)")
        return total

    def mix(self, layout: OutputLayout) -> Path:
        self.toolchain.mix_audio(layout.voiceover, layout.music, layout.final_audio)
        self.logger.info(f"Final audio: {layout.final_audio}")
        return layout.final_audio

    def assemble(self, clip_paths: Sequence[Path], voice_duration: float, layout: OutputLayout) -> AudioAssembly:
        """
        Run the whole audio stage.

        Args:
            clip_paths: Narration clips in scene order
            voice_duration: Narrated length in seconds
            layout: Output layout

        Returns:
            AudioAssembly describing the produced tracks
        """
        voiceover = self.build_voiceover(clip_paths, layout)
        total = self.build_music_bed(voice_duration, layout)
        final_audio = self.mix(layout)
        return AudioAssembly(
            voiceover=voiceover,
            music=layout.music,
            final_audio=final_audio,
            voice_duration=voice_duration,
            total_duration=total,
        )

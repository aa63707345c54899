"""Media toolchain - the narrow interface every stage uses to run external media tools.

Stages depend on the ``MediaToolchain`` protocol, never on subprocess. The
default ``FFmpegToolchain`` runs espeak, ffprobe, ffmpeg and ImageMagick as
argument lists (no shell) and turns a non-zero exit into ``ExternalToolError``.
"""

import math
import shutil
import subprocess
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

from reel_factory.core.config import Settings
from reel_factory.utils.error_handler import (
    ExternalToolError,
    PreconditionError,
    ProbeOutputError,
    ToolNotFoundError,
)

RENDERER_IMAGEMAGICK = "imagemagick"
RENDERER_PILLOW = "pillow"


class MediaToolchain(Protocol):
    """Capabilities the pipeline needs from the outside world."""

    def verify_available(self) -> None: ...

    def synthesize_speech(self, text: str, output_path: Path) -> None: ...

    def probe_duration(self, media_path: Path) -> float: ...

    def concat_audio(self, list_file: Path, output_path: Path) -> None: ...

    def generate_noise_bed(self, duration_seconds: float, output_path: Path) -> None: ...

    def mix_audio(self, voice_path: Path, music_path: Path, output_path: Path) -> None: ...

    def render_image(self, heading: str, body: str, output_path: Path) -> None: ...

    def compose_video(self, image_paths: Sequence[Path], durations: Sequence[float], output_path: Path) -> None: ...

    def mux_audio(self, video_path: Path, audio_path: Path, output_path: Path) -> None: ...

    def burn_subtitles(self, video_path: Path, subtitle_path: Path, output_path: Path) -> None: ...


def parse_probe_output(raw_output: str, media_path: Path | str) -> float:
    """
    Parse ffprobe's ``format=duration`` output into seconds.

    Args:
        raw_output: Probe stdout (e.g. "3.512000\\n")
        media_path: File that was probed, for the error message

    Returns:
        Duration in seconds

    Raises:
        ProbeOutputError: If the text is not a finite, non-negative number
    """
    text = raw_output.strip()
    try:
        value = float(text)
    except ValueError:
        raise ProbeOutputError(str(media_path), raw_output, "not a number") from None
    if not math.isfinite(value):
        raise ProbeOutputError(str(media_path), raw_output, "not finite")
    if value < 0:
        raise ProbeOutputError(str(media_path), raw_output, "negative")
    return value


def escape_filter_path(path: Path | str) -> str:
    """
    Escape a path for use as a filter option value inside ``-vf``.

    Two levels apply. The option parser treats backslash, quote and colon
    as special, and the filtergraph parser strips one level of backslashes
    (plus brackets, commas and semicolons) before it.
    """
    value = str(path)
    for char in "\\':":
        value = value.replace(char, "\\" + char)
    return "".join("\\" + char if char in "\\'[],;" else char for char in value)


class FFmpegToolchain:
    """MediaToolchain backed by espeak, ffprobe, ffmpeg and ImageMagick (or Pillow)."""

    def __init__(self, settings: Settings, logger: Any):
        """
        Initialize the toolchain.

        Args:
            settings: Application settings (binaries, voice, canvas, mix levels)
            logger: Logger instance
        """
        self.settings = settings
        self.logger = logger
        self.image_renderer = settings.image_renderer.lower()
        if self.image_renderer not in (RENDERER_IMAGEMAGICK, RENDERER_PILLOW):
            raise PreconditionError(
                f"Unknown image renderer '{settings.image_renderer}' (expected 'imagemagick' or 'pillow')"
            )

    def required_tools(self) -> list[str]:
        tools = [self.settings.espeak_bin, self.settings.ffmpeg_bin, self.settings.ffprobe_bin]
        if self.image_renderer == RENDERER_IMAGEMAGICK:
            tools.append(self.settings.convert_bin)
        return tools

    def verify_available(self) -> None:
        """Fail before any stage runs if a required binary is missing."""
        missing = [tool for tool in self.required_tools() if shutil.which(tool) is None]
        if missing:
            raise ToolNotFoundError(missing)
        self.logger.debug(f"All media tools found: {', '.join(self.required_tools())}")

    def _run(self, cmd: list[str], capture_stdout: bool = False) -> str:
        tool = Path(cmd[0]).name
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.PIPE if capture_stdout else subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            self.logger.error(f"{tool} failed with exit code {e.returncode}:\n{e.stderr or ''}")
            raise ExternalToolError(tool, e.returncode, e.stderr or "") from e
        except FileNotFoundError as e:
            raise ToolNotFoundError([cmd[0]]) from e
        return result.stdout or ""

    def synthesize_speech(self, text: str, output_path: Path) -> None:
        self._run(
            [
                self.settings.espeak_bin,
                "-v", self.settings.espeak_voice,
                "-s", str(self.settings.espeak_speed),
                "-w", str(output_path),
                text,
            ]
        )

    def probe_duration(self, media_path: Path) -> float:
        output = self._run(
            [
                self.settings.ffprobe_bin,
                "-v", "error",
                "-show_entries", "format=duration",
                "-of", "default=noprint_wrappers=1:nokey=1",
                str(media_path),
            ],
            capture_stdout=True,
        )
        return parse_probe_output(output, media_path)

    def concat_audio(self, list_file: Path, output_path: Path) -> None:
        self._run(
            [
                self.settings.ffmpeg_bin, "-y",
                "-f", "concat", "-safe", "0",
                "-i", str(list_file),
                "-c", "copy",
                str(output_path),
            ]
        )

    def generate_noise_bed(self, duration_seconds: float, output_path: Path) -> None:
        s = self.settings
        self._run(
            [
                s.ffmpeg_bin, "-y",
                "-f", "lavfi",
                "-i", f"anoisesrc=color={s.noise_color}:amplitude={s.noise_amplitude}",
                "-t", f"{duration_seconds:.2f}",
                "-af", f"lowpass=f={s.music_lowpass_hz},volume={s.music_volume}",
                str(output_path),
            ]
        )

    def mix_filter(self) -> str:
        s = self.settings
        delay = s.music_delay_ms
        return (
            f"[0:a]volume={s.voice_gain}[a0];"
            f"[1:a]adelay={delay}|{delay},volume={s.music_gain}[a1];"
            f"[a0][a1]amix=inputs=2:dropout_transition=2,volume={s.master_gain}"
        )

    def mix_audio(self, voice_path: Path, music_path: Path, output_path: Path) -> None:
        self._run(
            [
                self.settings.ffmpeg_bin, "-y",
                "-i", str(voice_path),
                "-i", str(music_path),
                "-filter_complex", self.mix_filter(),
                "-ar", str(self.settings.audio_sample_rate),
                str(output_path),
            ]
        )

    def render_image(self, heading: str, body: str, output_path: Path) -> None:
        if self.image_renderer == RENDERER_PILLOW:
            from reel_factory.services.title_card import render_title_card

            render_title_card(heading, body, output_path, self.settings)
            return

        s = self.settings
        self._run(
            [
                s.convert_bin,
                "-size", f"{s.video_width}x{s.video_height}",
                f"gradient:{s.card_gradient_top}-{s.card_gradient_bottom}",
                "-gravity", "center",
                "-fill", s.card_title_color,
                "-font", s.card_font,
                "-pointsize", str(s.card_title_pointsize),
                "-annotate", _offset(s.card_title_offset), heading,
                "-fill", s.card_body_color,
                "-pointsize", str(s.card_body_pointsize),
                "-annotate", _offset(s.card_body_offset), body,
                str(output_path),
            ]
        )

    def compose_video(self, image_paths: Sequence[Path], durations: Sequence[float], output_path: Path) -> None:
        from reel_factory.services.video_compositor import build_filter_graph, build_inputs

        self._run(
            [
                self.settings.ffmpeg_bin, "-y",
                *build_inputs(image_paths, durations),
                "-filter_complex", build_filter_graph(durations, self.settings),
                "-map", "[v]",
                "-preset", self.settings.encoder_preset,
                "-r", str(self.settings.video_fps),
                str(output_path),
            ]
        )

    def mux_audio(self, video_path: Path, audio_path: Path, output_path: Path) -> None:
        self._run(
            [
                self.settings.ffmpeg_bin, "-y",
                "-i", str(video_path),
                "-i", str(audio_path),
                "-c:v", "copy",
                "-c:a", "aac",
                "-b:a", self.settings.audio_bitrate,
                "-shortest",
                str(output_path),
            ]
        )

    def burn_subtitles(self, video_path: Path, subtitle_path: Path, output_path: Path) -> None:
        self._run(
            [
                self.settings.ffmpeg_bin, "-y",
                "-i", str(video_path),
                "-vf", f"subtitles={escape_filter_path(subtitle_path)}",
                "-c:a", "copy",
                str(output_path),
            ]
        )


def _offset(value: int) -> str:
    """ImageMagick -annotate geometry for a vertical offset, e.g. +0-650."""
    return f"+0{value:+d}"


def create_toolchain(settings: Settings, logger: Any, toolchain: Optional[MediaToolchain] = None) -> MediaToolchain:
    """Return ``toolchain`` if given, else the default binary-backed toolchain."""
    return toolchain if toolchain is not None else FFmpegToolchain(settings, logger)

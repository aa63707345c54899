"""Video Compositor - pan/zoom slideshow, audio mux and caption burn-in."""

from pathlib import Path
from typing import Any, Sequence

from reel_factory.core.config import Settings
from reel_factory.services.toolchain import MediaToolchain
from reel_factory.utils.error_handler import PreconditionError
from reel_factory.utils.io_utils import OutputLayout

# trim=duration=0 means "no trim" to ffmpeg, so shorter clips are left out of the slideshow
MIN_CLIP_SECONDS = 0.01


def build_inputs(image_paths: Sequence[Path], durations: Sequence[float]) -> list[str]:
    """ffmpeg input arguments: each still image looped for its clip's duration."""
    args: list[str] = []
    for image_path, duration in zip(image_paths, durations):
        args += ["-loop", "1", "-t", f"{duration:.2f}", "-i", str(image_path)]
    return args


def build_filter_graph(durations: Sequence[float], settings: Settings) -> str:
    """
    filter_complex that zooms each still, trims it to its clip and concatenates.

    Args:
        durations: Clip durations in scene order
        settings: Canvas size, fps and zoom parameters

    Returns:
        Filter graph whose output pad is ``[v]``
    """
    size = f"{settings.video_width}x{settings.video_height}"
    scale = f"{settings.video_width}:{settings.video_height}"
    zoom = f"z='min({settings.zoom_max},zoom+{settings.zoom_step})'"

    chains = [
        f"[{i}:v]settb=AVTB,format=rgba,scale={scale},"
        f"zoompan={zoom}:d={settings.zoompan_frames}:s={size}:fps={settings.video_fps},"
        f"trim=duration={duration:.2f},setpts=PTS-STARTPTS[v{i}]"
        for i, duration in enumerate(durations)
    ]
    labels = "".join(f"[v{i}]" for i in range(len(durations)))
    return ";".join(chains) + f";{labels}concat=n={len(durations)}:v=1:a=0,format=yuv420p[v]"


class VideoCompositor:
    """Produces video/temp_video.mp4, video/video_with_audio.mp4 and video/final_video.mp4."""

    def __init__(self, settings: Settings, logger: Any, toolchain: MediaToolchain):
        """
        Initialize video compositor.

        Args:
            settings: Application settings
            logger: Logger instance
            toolchain: Media toolchain
        """
        self.settings = settings
        self.logger = logger
        self.toolchain = toolchain

    def compose(self, image_paths: Sequence[Path], durations: Sequence[float], layout: OutputLayout) -> Path:
        """
        Build the final captioned video.

        Args:
            image_paths: Title cards in scene order
            durations: Clip durations aligned with ``image_paths``. Clips shorter
                than MIN_CLIP_SECONDS are left out of the slideshow.
            layout: Output layout (final audio and captions must already exist)

        Returns:
            Path to video/final_video.mp4

        Raises:
            PreconditionError: If image and duration counts differ, are empty,
                or no clip reaches MIN_CLIP_SECONDS
        """
        if len(image_paths) != len(durations):
            raise PreconditionError(
                f"image/duration count mismatch: {len(image_paths)} images but {len(durations)} durations"
            )
        if not image_paths:
            raise PreconditionError("no images to compose")

        clips = []
        for index, (image_path, duration) in enumerate(zip(image_paths, durations), start=1):
            if duration < MIN_CLIP_SECONDS:
                self.logger.warning(f"Scene {index} is shorter than {MIN_CLIP_SECONDS}s ({duration:.3f}s), leaving it out")
                continue
            clips.append((image_path, duration))
        if not clips:
            raise PreconditionError(f"every clip is shorter than {MIN_CLIP_SECONDS}s")
        kept_images, kept_durations = (list(column) for column in zip(*clips))

        self.logger.info(f"Composing {len(kept_images)} clips at {self.settings.video_fps} fps...")
        self.toolchain.compose_video(kept_images, kept_durations, layout.temp_video)

        self.logger.info("Muxing final audio...")
        self.toolchain.mux_audio(layout.temp_video, layout.final_audio, layout.video_with_audio)

        self.logger.info("Burning in captions...")
        self.toolchain.burn_subtitles(layout.video_with_audio, layout.captions, layout.final_video)

        self.logger.info(f"Final video: {layout.final_video}")
        return layout.final_video

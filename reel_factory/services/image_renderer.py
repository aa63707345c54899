"""Image Renderer - placeholder title card per scene."""

from pathlib import Path
from typing import Any, Sequence

from reel_factory.core.config import Settings
from reel_factory.models.schemas import Scene
from reel_factory.services.toolchain import MediaToolchain
from reel_factory.utils.io_utils import OutputLayout


def card_heading(index: int, scene: Scene) -> str:
    return f"Scene {index}: {scene.title}"


class ImageRenderer:
    """Renders images/scene{NN}.png for every scene."""

    def __init__(self, settings: Settings, logger: Any, toolchain: MediaToolchain):
        self.settings = settings
        self.logger = logger
        self.toolchain = toolchain

    def render_all(self, scenes: Sequence[Scene], layout: OutputLayout) -> list[Path]:
        """
        Render one title card per scene.

        Args:
            scenes: Scenes in order
            layout: Output layout

        Returns:
            Image paths aligned by position with ``scenes``
        """
        images: list[Path] = []
        for index, scene in enumerate(scenes, start=1):
            image_path = layout.scene_image(index)
            self.toolchain.render_image(card_heading(index, scene), scene.visual, image_path)
            images.append(image_path)
        self.logger.info(
            f"Rendered {len(images)} title cards ({self.settings.video_width}x{self.settings.video_height})"
        )
        return images

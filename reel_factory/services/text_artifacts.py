"""Text Artifact Writer - renders the catalog into the script and image prompt list."""

from pathlib import Path
from typing import Any

from reel_factory.core.config import Settings
from reel_factory.models.schemas import SceneCatalog
from reel_factory.utils.io_utils import OutputLayout, write_text


def render_script(catalog: SceneCatalog) -> str:
    """Narration script: the first scene is the hook, the rest are numbered beats."""
    hook, *beats = catalog.scenes
    lines = [
        f"TITLE: {catalog.script_title}",
        "",
        "HOOK:",
        hook.narration,
        "",
        "STORY BEATS:",
        *(f"{i}. {scene.narration}" for i, scene in enumerate(beats, start=1)),
        "",
        "OUTRO:",
        f'"{catalog.outro}"',
    ]
    return "\n".join(lines)


def render_image_prompts(catalog: SceneCatalog) -> str:
    blocks = [
        f"Scene {i}: {scene.title}\nDescription: {scene.visual}\nPrompt: {scene.prompt}\n"
        for i, scene in enumerate(catalog.scenes, start=1)
    ]
    return "\n".join(blocks)


class TextArtifactWriter:
    """Writes meta/script.txt and meta/image_prompts.txt."""

    def __init__(self, settings: Settings, logger: Any):
        self.settings = settings
        self.logger = logger

    def write(self, catalog: SceneCatalog, layout: OutputLayout) -> tuple[Path, Path]:
        script_path = write_text(layout.script, render_script(catalog))
        prompts_path = write_text(layout.image_prompts, render_image_prompts(catalog))
        self.logger.info(f"Wrote script: {script_path}")
        self.logger.info(f"Wrote image prompts: {prompts_path}")
        return script_path, prompts_path

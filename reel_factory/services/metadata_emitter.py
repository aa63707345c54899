"""Metadata Emitter - project summary JSON, thumbnail prompt and distribution text."""

import json
from pathlib import Path
from typing import Any, Sequence

from reel_factory.core.config import Settings
from reel_factory.models.schemas import DistributionSpec, SceneCatalog, ThumbnailSpec, Timeline
from reel_factory.utils.io_utils import OutputLayout, write_text


def normalize_hashtags(hashtags: Sequence[str], max_tags: int = 15) -> list[str]:
    """
    Prefix hashtags with '#', drop blanks and duplicates, keep order.

    Args:
        hashtags: Raw hashtags from the catalog
        max_tags: Maximum number of hashtags

    Returns:
        Normalized hashtags
    """
    tags = []
    for tag in hashtags:
        tag = tag.strip().replace(" ", "")
        if not tag or tag == "#":
            continue
        tags.append(tag if tag.startswith("#") else f"#{tag}")
    unique_tags = list(dict.fromkeys(tags))  # Preserves order
    return unique_tags[:max_tags]


def render_thumbnail_prompt(thumbnail: ThumbnailSpec) -> str:
    return "\n".join([f"Title: '{thumbnail.title}'", f"Visual Prompt: {thumbnail.visual_prompt}"])


def render_distribution_meta(distribution: DistributionSpec, max_hashtags: int = 15) -> str:
    lines = [
        f"YouTube Title: {distribution.title}",
        "",
        "Description:",
        distribution.description,
        "",
        "Hashtags:",
        " ".join(normalize_hashtags(distribution.hashtags, max_hashtags)),
        "",
        "Tags:",
        ", ".join(tag.strip() for tag in distribution.tags if tag.strip()),
    ]
    return "\n".join(lines)


def build_project_summary(
    catalog: SceneCatalog,
    durations: Sequence[float],
    timeline: Timeline,
    total_duration: float,
) -> dict[str, Any]:
    return {
        "project": catalog.project.model_dump(),
        "scenes": [scene.model_dump() for scene in catalog.scenes],
        "durations": list(durations),
        "timeline": timeline.as_pairs(),
        "voiceDuration": timeline.total,
        "totalDuration": total_duration,
    }


class MetadataEmitter:
    """Writes meta/video_metadata.json, meta/thumbnail_prompt.txt and meta/distribution_meta.txt."""

    def __init__(self, settings: Settings, logger: Any):
        """
        Initialize metadata emitter.

        Args:
            settings: Application settings
            logger: Logger instance
        """
        self.settings = settings
        self.logger = logger

    def write_project_summary(
        self,
        catalog: SceneCatalog,
        durations: Sequence[float],
        timeline: Timeline,
        total_duration: float,
        layout: OutputLayout,
    ) -> Path:
        """
        Write the JSON project summary.

        Args:
            catalog: Scene catalog
            durations: Measured clip durations
            timeline: Timeline built from ``durations``
            total_duration: Music bed length (voice duration plus padding)
            layout: Output layout

        Returns:
            Path to meta/video_metadata.json
        """
        summary = build_project_summary(catalog, durations, timeline, total_duration)
        layout.video_metadata.parent.mkdir(parents=True, exist_ok=True)
        with open(layout.video_metadata, "w", encoding="utf-8") as f:
            json.dump(summary, f, indent=2, ensure_ascii=False)
        self.logger.info(f"Project summary saved to: {layout.video_metadata}")
        return layout.video_metadata

    def write_distribution(self, catalog: SceneCatalog, layout: OutputLayout) -> tuple[Path, Path]:
        thumbnail_path = write_text(layout.thumbnail_prompt, render_thumbnail_prompt(catalog.thumbnail))
        meta_path = write_text(
            layout.distribution_meta,
            render_distribution_meta(catalog.distribution, self.settings.max_hashtags),
        )
        self.logger.info(f"Distribution metadata saved to: {meta_path}")
        return thumbnail_path, meta_path

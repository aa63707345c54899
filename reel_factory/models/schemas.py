"""Pydantic models and schemas for the narrated video pipeline."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Scene Catalog Models
# ============================================================================


class Scene(BaseModel):
    """One narrated scene: one narration clip, one title card, one caption."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Short scene label shown on the title card")
    visual: str = Field(..., description="Human-readable description of the placeholder image")
    prompt: str = Field(..., description="Text-to-image prompt (written out, never sent to a generator)")
    narration: str = Field(..., description="Spoken line for this scene, also used verbatim as its caption")

    @field_validator("title", "narration")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class ProjectInfo(BaseModel):
    """Project summary echoed into the JSON metadata."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="Full topic line")
    uniqueness: str = Field(default="", description="Why this story is worth telling")


class ThumbnailSpec(BaseModel):
    """Thumbnail headline and image prompt."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Thumbnail headline")
    visual_prompt: str = Field(..., description="Thumbnail image prompt")


class DistributionSpec(BaseModel):
    """Upload metadata written to distribution_meta.txt."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Video title")
    description: str = Field(..., description="Video description")
    hashtags: list[str] = Field(default_factory=list, description="Hashtags, with or without leading '#'")
    tags: list[str] = Field(default_factory=list, description="Search tags")


class SceneCatalog(BaseModel):
    """Everything a run needs besides settings. Immutable for the run's lifetime."""

    model_config = ConfigDict(frozen=True)

    project: ProjectInfo
    script_title: str = Field(..., description="Heading of script.txt")
    outro: str = Field(..., description="Closing question printed at the end of script.txt")
    scenes: list[Scene] = Field(..., min_length=1, description="Ordered scenes")
    thumbnail: ThumbnailSpec
    distribution: DistributionSpec


# ============================================================================
# Timeline & Caption Models
# ============================================================================


class TimelineEntry(BaseModel):
    """Start/end offsets of one scene on the narrated timeline."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1, description="1-based scene index")
    start: float = Field(..., ge=0.0, description="Start offset in seconds")
    end: float = Field(..., ge=0.0, description="End offset in seconds")

    @property
    def duration(self) -> float:
        return self.end - self.start


class Timeline(BaseModel):
    """Contiguous, non-overlapping scene intervals covering [0, total)."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[TimelineEntry, ...] = Field(..., description="Entries in scene order")
    total: float = Field(..., ge=0.0, description="Sum of all durations (voice duration)")

    def as_pairs(self) -> list[dict[str, Any]]:
        return [{"scene": e.index, "start": e.start, "end": e.end} for e in self.entries]


class CaptionRecord(BaseModel):
    """One SubRip cue."""

    model_config = ConfigDict(frozen=True)

    sequence: int = Field(..., ge=1, description="1-based cue number (matches scene index)")
    start: float = Field(..., ge=0.0, description="Cue start in seconds")
    end: float = Field(..., ge=0.0, description="Cue end in seconds")
    text: str = Field(..., description="Caption text (scene narration, unmodified)")


class CaptionBuild(BaseModel):
    """Caption records plus the timeline they were derived from."""

    model_config = ConfigDict(frozen=True)

    records: tuple[CaptionRecord, ...]
    timeline: Timeline

    @property
    def total(self) -> float:
        return self.timeline.total

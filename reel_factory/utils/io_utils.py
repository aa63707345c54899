"""I/O utility functions for file and directory operations."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputLayout:
    """Every path the pipeline writes, derived from one output directory."""

    root: Path

    @property
    def meta_dir(self) -> Path:
        return self.root / "meta"

    @property
    def audio_dir(self) -> Path:
        return self.root / "audio"

    @property
    def images_dir(self) -> Path:
        return self.root / "images"

    @property
    def video_dir(self) -> Path:
        return self.root / "video"

    # meta/
    @property
    def script(self) -> Path:
        return self.meta_dir / "script.txt"

    @property
    def image_prompts(self) -> Path:
        return self.meta_dir / "image_prompts.txt"

    @property
    def captions(self) -> Path:
        return self.meta_dir / "captions.srt"

    @property
    def video_metadata(self) -> Path:
        return self.meta_dir / "video_metadata.json"

    @property
    def thumbnail_prompt(self) -> Path:
        return self.meta_dir / "thumbnail_prompt.txt"

    @property
    def distribution_meta(self) -> Path:
        return self.meta_dir / "distribution_meta.txt"

    # audio/
    def scene_audio(self, index: int) -> Path:
        """Narration clip for 1-based scene ``index`` (``scene1.wav``)."""
        return self.audio_dir / f"scene{index}.wav"

    @property
    def concat_list(self) -> Path:
        return self.audio_dir / "concat_list.txt"

    @property
    def voiceover(self) -> Path:
        return self.audio_dir / "voiceover.wav"

    @property
    def music(self) -> Path:
        return self.audio_dir / "music.wav"

    @property
    def final_audio(self) -> Path:
        return self.audio_dir / "final_audio.wav"

    # images/
    def scene_image(self, index: int) -> Path:
        """Title card for 1-based scene ``index`` (``scene01.png``)."""
        return self.images_dir / f"scene{index:02d}.png"

    # video/
    @property
    def temp_video(self) -> Path:
        return self.video_dir / "temp_video.mp4"

    @property
    def video_with_audio(self) -> Path:
        return self.video_dir / "video_with_audio.mp4"

    @property
    def final_video(self) -> Path:
        return self.video_dir / "final_video.mp4"


def create_output_layout(base_dir: str | Path) -> OutputLayout:
    """
    Create the output directory tree for a run.

    Args:
        base_dir: Root output directory (e.g., "assets"). Made absolute so
            paths written into concat lists resolve from any working directory.

    Returns:
        OutputLayout rooted at the created directory.
    """
    layout = OutputLayout(root=Path(base_dir).resolve())
    for directory in (layout.root, layout.images_dir, layout.audio_dir, layout.video_dir, layout.meta_dir):
        directory.mkdir(parents=True, exist_ok=True)
    return layout


def write_text(path: Path, content: str) -> Path:
    """Write UTF-8 text, creating the parent directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path

"""Error Handler - exception taxonomy and user-facing failure messages.

Every failure aborts the run. Nothing here recovers; it only classifies and
describes what went wrong.
"""

from typing import Optional


class PipelineError(Exception):
    """Base class for every error that aborts a pipeline run."""


class PreconditionError(PipelineError, ValueError):
    """A caller-side invariant was violated before any work started."""


class TimelineMismatchError(PreconditionError):
    """Scene and duration sequences are not aligned by length."""

    def __init__(self, scene_count: int, duration_count: int):
        self.scene_count = scene_count
        self.duration_count = duration_count
        super().__init__(
            f"scene/duration count mismatch: {scene_count} scenes but {duration_count} durations"
        )


class InvalidDurationError(PreconditionError):
    """A duration is negative, NaN or infinite."""


class CatalogError(PreconditionError):
    """The scene catalog could not be read or failed validation."""


class ProbeOutputError(PipelineError):
    """The duration probe returned text that is not a usable duration."""

    def __init__(self, path: str, raw_output: str, reason: str):
        self.path = path
        self.raw_output = raw_output
        super().__init__(f"unusable duration {raw_output!r} for {path}: {reason}")


class ToolNotFoundError(PipelineError):
    """A required external binary is not on PATH."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"required tools not found on PATH: {', '.join(missing)}")


class ExternalToolError(PipelineError):
    """An external process exited with a non-zero status."""

    def __init__(self, tool: str, returncode: int, stderr: str = ""):
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        message = f"{tool} exited with status {returncode}"
        if stderr:
            message += f": {stderr.strip().splitlines()[-1]}"
        super().__init__(message)


def format_error_message(
    operation: str,
    error: Exception,
    context: Optional[dict] = None,
    suggestion: Optional[str] = None,
) -> str:
    """
    Format a user-friendly error message.

    Args:
        operation: What operation was being performed (e.g., "Rendering video")
        error: The exception that occurred
        context: Additional context (e.g., {"output_dir": "assets"})
        suggestion: Optional suggestion for how to fix the issue

    Returns:
        Formatted error message
    """
    error_type = type(error).__name__
    error_msg = str(error)

    context_str = ""
    if context:
        context_parts = [f"{k}={v}" for k, v in context.items()]
        context_str = f" ({', '.join(context_parts)})"

    message = f"❌ {operation} failed{context_str}\n"
    message += f"   Error: {error_type}: {error_msg}"

    if suggestion:
        message += f"\n   💡 Suggestion: {suggestion}"

    return message


def get_fallback_suggestion(error: Exception) -> Optional[str]:
    """
    Get a suggestion for how to fix a failed run.

    Args:
        error: The exception that aborted the run

    Returns:
        Suggestion string or None
    """
    if isinstance(error, ToolNotFoundError):
        return "Install espeak, ffmpeg (with ffprobe) and ImageMagick, or point the *_BIN settings at them."

    if isinstance(error, CatalogError):
        return "Check the catalog JSON against the bundled reel_factory/data/default_catalog.json."

    if isinstance(error, (InvalidDurationError, ProbeOutputError)):
        return "A narration clip is empty or unreadable. Inspect the files under audio/ and re-run."

    if isinstance(error, ExternalToolError):
        tool = error.tool.lower()
        stderr = error.stderr.lower()
        if "espeak" in tool:
            return "espeak failed. Check that the configured ESPEAK_VOICE exists (espeak --voices)."
        if "convert" in tool or "magick" in tool:
            if "font" in stderr:
                return "ImageMagick could not find the card font. Set CARD_FONT or use IMAGE_RENDERER=pillow."
            return "ImageMagick failed. Try IMAGE_RENDERER=pillow to render title cards in-process."
        if "subtitles" in stderr or "libass" in stderr:
            return "This ffmpeg build cannot burn subtitles. Use an ffmpeg compiled with libass."
        if "ffmpeg" in tool or "ffprobe" in tool:
            return "ffmpeg failed. Re-run with --log-level DEBUG to see the full command."

    if isinstance(error, PreconditionError) and "image renderer" in str(error):
        return "Set IMAGE_RENDERER (or --image-renderer) to imagemagick or pillow."

    return None

"""Tests for error classification and messages."""

from reel_factory.utils.error_handler import (
    CatalogError,
    ExternalToolError,
    PreconditionError,
    ToolNotFoundError,
    format_error_message,
    get_fallback_suggestion,
)


def test_external_tool_error_uses_last_stderr_line():
    error = ExternalToolError("ffmpeg", 1, "ffmpeg version 6.1\nInput #0 ...\nNo such filter: 'subtitles'\n")
    assert str(error) == "ffmpeg exited with status 1: No such filter: 'subtitles'"


def test_external_tool_error_without_stderr():
    assert str(ExternalToolError("espeak", 2)) == "espeak exited with status 2"


def test_format_error_message():
    message = format_error_message(
        "Video generation",
        CatalogError("catalog file not found: x.json"),
        context={"output_dir": "assets"},
        suggestion="Check the path.",
    )
    assert message.splitlines() == [
        "❌ Video generation failed (output_dir=assets)",
        "   Error: CatalogError: catalog file not found: x.json",
        "   💡 Suggestion: Check the path.",
    ]


def test_suggestions_by_failure():
    assert "Install" in get_fallback_suggestion(ToolNotFoundError(["convert"]))
    assert "libass" in get_fallback_suggestion(ExternalToolError("ffmpeg", 1, "No such filter: 'subtitles'"))
    assert "pillow" in get_fallback_suggestion(ExternalToolError("convert", 1, "unable to read font"))
    assert "ESPEAK_VOICE" in get_fallback_suggestion(ExternalToolError("espeak", 1))
    assert get_fallback_suggestion(RuntimeError("boom")) is None


def test_unknown_renderer_suggestion():
    error = PreconditionError("Unknown image renderer 'gimp' (expected 'imagemagick' or 'pillow')")
    assert "IMAGE_RENDERER" in get_fallback_suggestion(error)

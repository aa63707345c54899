"""Tests for script and image prompt rendering."""

from reel_factory.services.text_artifacts import TextArtifactWriter, render_image_prompts, render_script


def test_render_script(sample_catalog):
    assert render_script(sample_catalog) == (
        "TITLE: TEST TITLE\n"
        "\n"
        "HOOK:\n"
        "x\n"
        "\n"
        "STORY BEATS:\n"
        "1. y\n"
        "2. z\n"
        "\n"
        "OUTRO:\n"
        '"Who did it?"'
    )


def test_single_scene_script_has_no_beats(sample_catalog):
    catalog = sample_catalog.model_copy(update={"scenes": sample_catalog.scenes[:1]})
    script = render_script(catalog)

    assert "HOOK:\nx\n\nSTORY BEATS:\n\nOUTRO:" in script


def test_render_image_prompts(sample_catalog):
    prompts = render_image_prompts(sample_catalog)

    assert prompts.startswith("Scene 1: A\nDescription: Visual A\nPrompt: Prompt A\n\nScene 2: B\n")
    assert prompts.endswith("Scene 3: C\nDescription: Visual C\nPrompt: Prompt C\n")


def test_writer_writes_both_files(settings, logger, layout, sample_catalog):
    script_path, prompts_path = TextArtifactWriter(settings, logger).write(sample_catalog, layout)

    assert script_path == layout.script
    assert prompts_path == layout.image_prompts
    assert script_path.read_text(encoding="utf-8").startswith("TITLE: TEST TITLE")
    assert "Prompt: Prompt B" in prompts_path.read_text(encoding="utf-8")

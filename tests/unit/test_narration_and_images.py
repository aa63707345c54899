"""Tests for per-scene narration and title card rendering."""

from reel_factory.services.image_renderer import ImageRenderer, card_heading
from reel_factory.services.narration import NarrationSynthesizer


def test_one_clip_per_scene_in_order(settings, logger, layout, sample_catalog, fake_toolchain):
    toolchain = fake_toolchain()

    clips = NarrationSynthesizer(settings, logger, toolchain).synthesize_all(sample_catalog.scenes, layout)

    assert clips == [layout.audio_dir / "scene1.wav", layout.audio_dir / "scene2.wav", layout.audio_dir / "scene3.wav"]
    assert [call[1] for call in toolchain.calls] == ["x", "y", "z"]
    assert all(clip.exists() for clip in clips)


def test_card_heading(sample_catalog):
    assert card_heading(2, sample_catalog.scenes[1]) == "Scene 2: B"


def test_render_all_uses_zero_padded_names(settings, logger, layout, sample_catalog, fake_toolchain):
    toolchain = fake_toolchain()

    images = ImageRenderer(settings, logger, toolchain).render_all(sample_catalog.scenes, layout)

    assert [p.name for p in images] == ["scene01.png", "scene02.png", "scene03.png"]
    assert toolchain.calls[0] == ("render_image", "Scene 1: A", "Visual A", images[0])
    assert toolchain.calls[2][1:3] == ("Scene 3: C", "Visual C")

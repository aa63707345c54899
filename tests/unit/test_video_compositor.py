"""Tests for the Video Compositor."""

import pytest

from reel_factory.services.video_compositor import (
    MIN_CLIP_SECONDS,
    VideoCompositor,
    build_filter_graph,
    build_inputs,
)
from reel_factory.utils.error_handler import PreconditionError


def test_build_inputs_loops_each_image_for_its_duration(tmp_path):
    images = [tmp_path / "scene01.png", tmp_path / "scene02.png"]

    assert build_inputs(images, [3.512, 0.0]) == [
        "-loop", "1", "-t", "3.51", "-i", str(images[0]),
        "-loop", "1", "-t", "0.00", "-i", str(images[1]),
    ]


def test_filter_graph_for_two_clips(settings):
    expected = (
        "[0:v]settb=AVTB,format=rgba,scale=1080:1920,"
        "zoompan=z='min(1.2,zoom+0.0015)':d=125:s=1080x1920:fps=30,"
        "trim=duration=1.00,setpts=PTS-STARTPTS[v0];"
        "[1:v]settb=AVTB,format=rgba,scale=1080:1920,"
        "zoompan=z='min(1.2,zoom+0.0015)':d=125:s=1080x1920:fps=30,"
        "trim=duration=2.50,setpts=PTS-STARTPTS[v1];"
        "[v0][v1]concat=n=2:v=1:a=0,format=yuv420p[v]"
    )
    assert build_filter_graph([1.0, 2.5], settings) == expected


def test_filter_graph_single_clip(settings):
    graph = build_filter_graph([4.0], settings)
    assert graph.endswith(";[v0]concat=n=1:v=1:a=0,format=yuv420p[v]")
    assert graph.count("zoompan=") == 1


def test_compose_runs_three_passes(settings, logger, layout, fake_toolchain):
    toolchain = fake_toolchain()
    images = [layout.scene_image(1), layout.scene_image(2)]

    final = VideoCompositor(settings, logger, toolchain).compose(images, [1.0, 2.5], layout)

    assert final == layout.final_video
    assert toolchain.call_names() == ["compose_video", "mux_audio", "burn_subtitles"]
    assert toolchain.calls[0] == ("compose_video", images, [1.0, 2.5], layout.temp_video)
    assert toolchain.calls[1] == ("mux_audio", layout.temp_video, layout.final_audio, layout.video_with_audio)
    assert toolchain.calls[2] == ("burn_subtitles", layout.video_with_audio, layout.captions, layout.final_video)


@pytest.mark.parametrize("image_count,duration_count", [(2, 1), (1, 3), (0, 0)])
def test_compose_rejects_misaligned_or_empty_input(settings, logger, layout, fake_toolchain, image_count, duration_count):
    toolchain = fake_toolchain()
    images = [layout.scene_image(i) for i in range(1, image_count + 1)]

    with pytest.raises(PreconditionError):
        VideoCompositor(settings, logger, toolchain).compose(images, [1.0] * duration_count, layout)
    assert toolchain.calls == []


def test_clips_shorter_than_ten_ms_are_left_out(settings, logger, layout, fake_toolchain):
    toolchain = fake_toolchain()
    images = [layout.scene_image(1), layout.scene_image(2), layout.scene_image(3)]

    VideoCompositor(settings, logger, toolchain).compose(images, [1.5, 0.0, 0.004], layout)

    assert toolchain.calls[0] == ("compose_video", [images[0]], [1.5], layout.temp_video)
    assert toolchain.call_names() == ["compose_video", "mux_audio", "burn_subtitles"]


def test_ten_ms_clip_is_kept(settings, logger, layout, fake_toolchain):
    toolchain = fake_toolchain()
    images = [layout.scene_image(1), layout.scene_image(2)]

    VideoCompositor(settings, logger, toolchain).compose(images, [MIN_CLIP_SECONDS, 2.0], layout)

    assert toolchain.calls[0][1] == images


def test_all_clips_too_short_is_rejected(settings, logger, layout, fake_toolchain):
    toolchain = fake_toolchain()

    with pytest.raises(PreconditionError):
        VideoCompositor(settings, logger, toolchain).compose([layout.scene_image(1)], [0.0], layout)
    assert toolchain.calls == []

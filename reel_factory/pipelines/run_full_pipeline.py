"""Full pipeline orchestrator - scene catalog → narration → captions → audio → images → video."""

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from reel_factory.core.config import Settings, settings
from reel_factory.core.logging_config import get_logger, setup_logging
from reel_factory.models.schemas import SceneCatalog
from reel_factory.services.audio_assembler import AudioAssembler
from reel_factory.services.catalog_loader import load_catalog
from reel_factory.services.duration_prober import DurationProber
from reel_factory.services.image_renderer import ImageRenderer
from reel_factory.services.metadata_emitter import MetadataEmitter
from reel_factory.services.narration import NarrationSynthesizer
from reel_factory.services.text_artifacts import TextArtifactWriter
from reel_factory.services.timeline import build_captions, write_captions
from reel_factory.services.toolchain import MediaToolchain, create_toolchain
from reel_factory.services.video_compositor import VideoCompositor
from reel_factory.utils.error_handler import PipelineError, format_error_message, get_fallback_suggestion
from reel_factory.utils.io_utils import OutputLayout, create_output_layout
from reel_factory.utils.text_utils import estimate_total_duration


@dataclass(frozen=True)
class PipelineResult:
    """What a completed run produced."""

    layout: OutputLayout
    durations: list[float]
    voice_duration: float
    total_duration: float
    final_video: Path


def _phase(logger: Any, title: str) -> None:
    logger.info("=" * 60)
    logger.info(title)
    logger.info("=" * 60)


def generate_video(
    catalog: SceneCatalog,
    settings: Settings,
    logger: Any,
    toolchain: Optional[MediaToolchain] = None,
) -> PipelineResult:
    """
    Run every stage in order. Any failure propagates and aborts the run.

    Args:
        catalog: Scene catalog to produce
        settings: Application settings
        logger: Logger instance
        toolchain: Media toolchain (defaults to the binary-backed FFmpegToolchain)

    Returns:
        PipelineResult with the output layout and measured durations
    """
    run_start = time.time()
    toolchain = create_toolchain(settings, logger, toolchain)
    layout = create_output_layout(settings.output_dir)
    scenes = catalog.scenes

    _phase(logger, f"Producing {len(scenes)} scenes: {catalog.script_title}")
    logger.info(f"Output directory: {layout.root}")
    toolchain.verify_available()

    logger.info("Step 1: Writing script and image prompts...")
    TextArtifactWriter(settings, logger.bind(stage="text")).write(catalog, layout)

    logger.info("Step 2: Synthesizing narration...")
    clips = NarrationSynthesizer(settings, logger.bind(stage="narration"), toolchain).synthesize_all(scenes, layout)

    logger.info("Step 3: Probing clip durations...")
    durations = DurationProber(settings, logger.bind(stage="probe"), toolchain).probe_all(clips)

    logger.info("Step 4: Building captions...")
    captions = build_captions(scenes, durations)
    write_captions(captions.records, layout.captions)
    logger.info(f"Captions saved to: {layout.captions} (voice duration {captions.total:.2f}s)")

    logger.info("Step 5: Assembling audio...")
    audio = AudioAssembler(settings, logger.bind(stage="audio"), toolchain).assemble(clips, captions.total, layout)

    logger.info("Step 6: Rendering title cards...")
    images = ImageRenderer(settings, logger.bind(stage="images"), toolchain).render_all(scenes, layout)

    logger.info("Step 7: Writing project summary...")
    metadata_emitter = MetadataEmitter(settings, logger.bind(stage="metadata"))
    metadata_emitter.write_project_summary(catalog, durations, captions.timeline, audio.total_duration, layout)

    logger.info("Step 8: Composing video...")
    final_video = VideoCompositor(settings, logger.bind(stage="video"), toolchain).compose(images, durations, layout)

    logger.info("Step 9: Writing distribution metadata...")
    metadata_emitter.write_distribution(catalog, layout)

    _phase(logger, "PIPELINE COMPLETE!")
    logger.info(f"Run time: {time.time() - run_start:.2f}s")
    logger.info(f"Narration: {captions.total:.2f}s, soundtrack: {audio.total_duration:.2f}s")
    logger.info(f"Video: {final_video}")

    return PipelineResult(
        layout=layout,
        durations=durations,
        voice_duration=captions.total,
        total_duration=audio.total_duration,
        final_video=final_video,
    )


def dry_run_catalog(catalog: SceneCatalog, settings: Settings, logger: Any) -> OutputLayout:
    """
    Write only the text artifacts and log what a full run would produce.

    Args:
        catalog: Scene catalog
        settings: Application settings
        logger: Logger instance

    Returns:
        Output layout the text artifacts were written to
    """
    layout = create_output_layout(settings.output_dir)
    _phase(logger, "DRY-RUN MODE - No media tools will be invoked")
    TextArtifactWriter(settings, logger.bind(stage="text")).write(catalog, layout)

    estimate = estimate_total_duration([scene.narration for scene in catalog.scenes], settings.espeak_speed)
    logger.info(f"  Title: {catalog.script_title}")
    logger.info(f"  Scenes: {len(catalog.scenes)}")
    logger.info(f"  Estimated narration: ~{estimate:.1f}s at {settings.espeak_speed} wpm")
    logger.info(f"  Image renderer: {settings.image_renderer}")
    return layout


def main(argv: Optional[list[str]] = None) -> int:
    """Main entrypoint for the full pipeline."""
    parser = argparse.ArgumentParser(
        description=f"{settings.app_name} - narrated vertical video from a scene catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Produce the bundled example video into ./assets
  python run_pipeline.py

  # Produce a custom catalog with the in-process title card renderer
  python run_pipeline.py --catalog story.json --output-dir out --image-renderer pillow

  # Only write script.txt and image_prompts.txt
  python run_pipeline.py --catalog story.json --dry-run
        """,
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=settings.catalog_path,
        help="Scene catalog JSON (default: bundled example catalog)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=settings.output_dir,
        help=f"Output directory (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--image-renderer",
        choices=["imagemagick", "pillow"],
        default=settings.image_renderer,
        help=f"Title card rasterizer (default: {settings.image_renderer})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=settings.log_file,
        help="Also log to this file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Write text artifacts only; do not invoke any media tool",
    )

    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level, log_file=Path(args.log_file) if args.log_file else None)
    logger = get_logger(__name__, catalog=Path(args.catalog).name if args.catalog else "default")

    run_settings = settings.model_copy(
        update={
            "output_dir": args.output_dir,
            "catalog_path": args.catalog,
            "image_renderer": args.image_renderer,
        }
    )

    try:
        catalog = load_catalog(run_settings.catalog_path, logger)
        if args.dry_run:
            dry_run_catalog(catalog, run_settings, logger)
        else:
            generate_video(catalog, run_settings, logger)
        return 0

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        return 130
    except PipelineError as e:
        logger.error(
            format_error_message(
                "Video generation",
                e,
                context={"output_dir": run_settings.output_dir},
                suggestion=get_fallback_suggestion(e),
            )
        )
        return 1
    except Exception as e:
        logger.opt(exception=e).error(f"Pipeline failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

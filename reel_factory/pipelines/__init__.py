"""Pipeline orchestrators for Reel Factory."""

from reel_factory.pipelines.run_full_pipeline import PipelineResult, dry_run_catalog, generate_video, main

__all__ = ["PipelineResult", "dry_run_catalog", "generate_video", "main"]

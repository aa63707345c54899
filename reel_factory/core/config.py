"""Application configuration using pydantic-settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Pipeline settings loaded from environment variables.

    All settings can be configured via environment variables or a .env file.
    See .env.example for a template.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # Application Settings
    # ========================================================================
    app_name: str = Field(default="Reel Factory", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_file: Optional[str] = Field(default=None, description="Optional log file path (rotated at 10 MB)")

    # ========================================================================
    # Input / Output
    # ========================================================================
    output_dir: str = Field(default="assets", description="Root directory for every generated artifact")
    catalog_path: Optional[str] = Field(
        default=None,
        description="Scene catalog JSON file. The bundled default catalog is used when unset.",
    )

    # ========================================================================
    # External Binaries
    # ========================================================================
    espeak_bin: str = Field(default="espeak", description="Speech synthesis binary")
    ffmpeg_bin: str = Field(default="ffmpeg", description="ffmpeg binary")
    ffprobe_bin: str = Field(default="ffprobe", description="ffprobe binary")
    convert_bin: str = Field(default="convert", description="ImageMagick convert binary")

    # ========================================================================
    # Narration
    # ========================================================================
    espeak_voice: str = Field(default="en-us+m3", description="espeak voice (-v)")
    espeak_speed: int = Field(default=155, description="espeak speaking rate in words per minute (-s)")

    # ========================================================================
    # Canvas & Title Cards
    # ========================================================================
    video_width: int = Field(default=1080, description="Video and title card width in pixels (vertical format)")
    video_height: int = Field(default=1920, description="Video and title card height in pixels (vertical format)")
    video_fps: int = Field(default=30, description="Output frame rate")
    image_renderer: str = Field(
        default="imagemagick",
        description="Title card rasterizer: 'imagemagick' (convert binary) or 'pillow' (in-process)",
    )
    card_gradient_top: str = Field(default="#0f172a", description="Title card gradient start colour")
    card_gradient_bottom: str = Field(default="#1f2937", description="Title card gradient end colour")
    card_title_color: str = Field(default="#e2e8f0", description="Title card heading colour")
    card_body_color: str = Field(default="#f8fafc", description="Title card body text colour")
    card_font: str = Field(default="DejaVu-Sans", description="Font name passed to ImageMagick")
    card_font_path: str = Field(
        default="/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        description="TrueType font used by the Pillow renderer (falls back to Pillow's default font)",
    )
    card_title_pointsize: int = Field(default=54, description="Heading point size")
    card_body_pointsize: int = Field(default=42, description="Body text point size")
    card_title_offset: int = Field(default=-650, description="Heading vertical offset from centre")
    card_body_offset: int = Field(default=200, description="Body text vertical offset from centre")

    # ========================================================================
    # Motion & Encoding
    # ========================================================================
    zoom_max: float = Field(default=1.2, description="Maximum zoompan zoom factor")
    zoom_step: float = Field(default=0.0015, description="Zoom increment per frame")
    zoompan_frames: int = Field(default=125, description="zoompan d= frames per input image")
    encoder_preset: str = Field(default="veryfast", description="x264 preset for the slideshow pass")

    # ========================================================================
    # Music Bed & Mix
    # ========================================================================
    noise_color: str = Field(default="pink", description="anoisesrc colour")
    noise_amplitude: float = Field(default=0.06, description="anoisesrc amplitude")
    music_lowpass_hz: int = Field(default=800, description="Low-pass cutoff applied to the noise bed")
    music_volume: float = Field(default=0.3, description="Volume applied when rendering the noise bed")
    music_padding_seconds: float = Field(
        default=2.0, description="Seconds of music bed beyond the narrated voice duration"
    )
    voice_gain: float = Field(default=1.6, description="Voiceover gain in the final mix")
    music_gain: float = Field(default=0.6, description="Music bed gain in the final mix")
    music_delay_ms: int = Field(default=500, description="Music bed delay in milliseconds")
    master_gain: float = Field(default=1.4, description="Gain applied after mixing")
    audio_sample_rate: int = Field(default=48000, description="Final audio sample rate")
    audio_bitrate: str = Field(default="192k", description="AAC bitrate when muxing audio into the video")

    # ========================================================================
    # Distribution Metadata
    # ========================================================================
    max_hashtags: int = Field(default=15, description="Maximum hashtags written to distribution metadata")


# Global settings instance
settings = Settings()

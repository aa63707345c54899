"""In-process title card rasterizer (Pillow) mirroring the ImageMagick card."""

import textwrap
from pathlib import Path

from PIL import Image, ImageColor, ImageDraw, ImageFont

from reel_factory.core.config import Settings


def _load_font(font_path: str, size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype(font_path, size)
    except OSError:
        return ImageFont.load_default()


def _vertical_gradient(width: int, height: int, top: str, bottom: str) -> Image.Image:
    top_rgb = ImageColor.getrgb(top)
    bottom_rgb = ImageColor.getrgb(bottom)
    image = Image.new("RGB", (width, height), top_rgb)
    draw = ImageDraw.Draw(image)
    span = max(height - 1, 1)
    for y in range(height):
        ratio = y / span
        color = tuple(int(a + (b - a) * ratio) for a, b in zip(top_rgb, bottom_rgb))
        draw.line([(0, y), (width, y)], fill=color)
    return image


def _draw_centered_block(
    draw: ImageDraw.ImageDraw,
    lines: list[str],
    font: ImageFont.ImageFont,
    center_y: int,
    width: int,
    fill: str,
    line_spacing: int,
) -> None:
    heights = []
    for line in lines:
        bbox = draw.textbbox((0, 0), line, font=font)
        heights.append(bbox[3] - bbox[1])
    total_height = sum(heights) + line_spacing * (len(lines) - 1)
    y = center_y - total_height // 2
    for line, line_height in zip(lines, heights):
        bbox = draw.textbbox((0, 0), line, font=font)
        x = (width - (bbox[2] - bbox[0])) // 2
        draw.text((x, y), line, fill=fill, font=font)
        y += line_height + line_spacing


def render_title_card(heading: str, body: str, output_path: Path, settings: Settings) -> Path:
    """
    Draw a gradient title card with a heading and wrapped body text.

    Args:
        heading: Heading text ("Scene 1: Hook")
        body: Body text (the scene's visual description)
        output_path: PNG path to write
        settings: Canvas size, colours, font and offsets

    Returns:
        The written path
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    width, height = settings.video_width, settings.video_height

    image = _vertical_gradient(width, height, settings.card_gradient_top, settings.card_gradient_bottom)
    draw = ImageDraw.Draw(image)

    title_font = _load_font(settings.card_font_path, settings.card_title_pointsize)
    body_font = _load_font(settings.card_font_path, settings.card_body_pointsize)

    # Roughly 0.55em per glyph for DejaVu Sans
    body_chars = max(10, int(width * 0.9 / (settings.card_body_pointsize * 0.55)))
    title_chars = max(10, int(width * 0.9 / (settings.card_title_pointsize * 0.55)))

    _draw_centered_block(
        draw,
        textwrap.wrap(heading, title_chars) or [heading],
        title_font,
        height // 2 + settings.card_title_offset,
        width,
        settings.card_title_color,
        line_spacing=settings.card_title_pointsize // 3,
    )
    _draw_centered_block(
        draw,
        textwrap.wrap(body, body_chars) or [body],
        body_font,
        height // 2 + settings.card_body_offset,
        width,
        settings.card_body_color,
        line_spacing=settings.card_body_pointsize // 3,
    )

    image.save(output_path, "PNG")
    return output_path

"""Title image for the window.

The image is read with Pillow from resources/fortune.png. When that file is
missing or unreadable a crystal-ball placeholder is drawn instead, so the
window always has something above the title.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)


def load_emblem(path, max_size: Tuple[int, int]) -> Image.Image:
    with Image.open(path) as src:
        img = src.convert("RGBA")
    # thumbnail keeps aspect ratio and never upscales
    img.thumbnail(max_size)
    return img


def render_emblem(size: Tuple[int, int]) -> Image.Image:
    w, h = size
    img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    ball = min(w, int(h * 0.8))
    left = (w - ball) // 2
    draw.ellipse((left, 0, left + ball - 1, ball - 1), fill=(124, 58, 237, 255), outline=(49, 46, 129, 255), width=max(1, ball // 40))
    # highlight
    hl = ball // 4
    draw.ellipse((left + ball // 5, ball // 6, left + ball // 5 + hl, ball // 6 + hl), fill=(237, 233, 254, 200))
    # stand
    base_top = ball
    draw.polygon(
        [(left + ball // 4, base_top - 1), (left + 3 * ball // 4, base_top - 1), (left + 7 * ball // 8, h - 1), (left + ball // 8, h - 1)],
        fill=(120, 53, 15, 255),
    )
    return img


def emblem_for(path, max_size: Tuple[int, int]) -> Image.Image:
    """Return the image at `path`, or the drawn placeholder if it can't be used."""
    path = Path(path)
    if not path.exists():
        logger.info("No image at %s, drawing placeholder", path)
        return render_emblem(max_size)
    try:
        return load_emblem(path, max_size)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        logger.warning("Could not read image %s (%s), drawing placeholder", path, exc)
        return render_emblem(max_size)

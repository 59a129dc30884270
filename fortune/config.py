"""Default settings for the Fortune Teller window."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

PACKAGE_DIR = Path(__file__).resolve().parent

WINDOW_TITLE = "Fortune Teller"
SCREEN_FRACTION = 0.75
# optional, a placeholder is drawn when absent
DEFAULT_IMAGE = PACKAGE_DIR / "resources" / "fortune.png"
IMAGE_MAX_SIZE = (256, 256)
LOG_ROWS = 10
LOG_COLUMNS = 40

FONTS = {
    "title": ("Comic Sans MS", 42, "bold"),
    "fortune": ("Comic Sans MS", 18),
    "button": ("Comic Sans MS", 20, "bold"),
}

COLORS = {
    "bg": "#f7f9fc",
    "panel": "#ffffff",
    "text": "#0f172a",
    "accent": "#6d28d9",
    "accent_active": "#5b21b6",
}


@dataclass
class AppConfig:
    title: str = WINDOW_TITLE
    screen_fraction: float = SCREEN_FRACTION
    image_path: Path = DEFAULT_IMAGE
    image_max_size: Tuple[int, int] = IMAGE_MAX_SIZE
    log_rows: int = LOG_ROWS
    log_columns: int = LOG_COLUMNS
    seed: Optional[int] = None
    fonts: dict = field(default_factory=lambda: dict(FONTS))
    colors: dict = field(default_factory=lambda: dict(COLORS))

    def __post_init__(self) -> None:
        if not 0 < self.screen_fraction <= 1:
            raise ValueError("screen_fraction must be in (0, 1]")
        self.image_path = Path(self.image_path)

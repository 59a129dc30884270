"""Tkinter desktop window for the Fortune Teller.

Title with an image on top, a scrolling log of fortunes in the middle and
the "Read My Fortune!" / "Quit" buttons at the bottom.
"""
from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

import tkinter as tk
from tkinter import ttk, messagebox, scrolledtext

from PIL import ImageTk

project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fortune.config import AppConfig
from fortune.emblem import emblem_for
from fortune.selector import Selector

logger = logging.getLogger(__name__)


def window_geometry(screen_width: int, screen_height: int, fraction: float) -> str:
    """Tk geometry string for a window `fraction` of the screen, centred."""
    width = int(screen_width * fraction)
    height = int(screen_height * fraction)
    x = (screen_width - width) // 2
    y = (screen_height - height) // 2
    return f"{width}x{height}+{x}+{y}"


class FortuneTellerApp:
    def __init__(self, config: Optional[AppConfig] = None, selector: Optional[Selector] = None,
                 root: Optional[tk.Tk] = None) -> None:
        self.config = config or AppConfig()
        if selector is None:
            selector = Selector.from_seed(self.config.seed) if self.config.seed is not None else Selector()
        self.selector = selector

        self.root = root or tk.Tk()
        self.root.title(self.config.title)
        self.root.configure(bg=self.config.colors["bg"])

        style = ttk.Style(self.root)
        style.theme_use("clam")
        style.configure("TFrame", background=self.config.colors["bg"])
        style.configure("Title.TLabel", background=self.config.colors["bg"],
                        foreground=self.config.colors["text"], font=self.config.fonts["title"])
        style.configure("Big.TButton", font=self.config.fonts["button"], padding=(20, 10),
                        background=self.config.colors["accent"], foreground="white", borderwidth=0)
        style.map("Big.TButton", background=[("active", self.config.colors["accent_active"])])

        self._build_layout()
        self._configure_window()

    def _build_layout(self) -> None:
        self._build_top_panel().pack(side="top", fill="x", pady=10)
        self._build_bottom_panel().pack(side="bottom", fill="x", pady=10)
        self._build_middle_panel().pack(side="top", fill="both", expand=True, padx=15)

    def _build_top_panel(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)
        img = emblem_for(self.config.image_path, self.config.image_max_size)
        self.title_image = ImageTk.PhotoImage(img, master=self.root)
        # text under the image
        self.title_label = ttk.Label(frame, text=self.config.title, image=self.title_image,
                                     compound="top", style="Title.TLabel", anchor="center")
        self.title_label.pack()
        return frame

    def _build_middle_panel(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)
        self.fortune_log = scrolledtext.ScrolledText(
            frame, height=self.config.log_rows, width=self.config.log_columns, wrap="word",
            state="disabled", font=self.config.fonts["fortune"],
            bg=self.config.colors["panel"], fg=self.config.colors["text"],
        )
        self.fortune_log.pack(fill="both", expand=True)
        return frame

    def _build_bottom_panel(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)
        btns = ttk.Frame(frame)
        btns.pack()
        self.read_button = ttk.Button(btns, text="Read My Fortune!", command=self.read_fortune, style="Big.TButton")
        self.read_button.pack(side="left", padx=6)
        self.quit_button = ttk.Button(btns, text="Quit", command=self.quit, style="Big.TButton")
        self.quit_button.pack(side="left", padx=6)
        return frame

    def _configure_window(self) -> None:
        geometry = window_geometry(self.root.winfo_screenwidth(), self.root.winfo_screenheight(),
                                   self.config.screen_fraction)
        self.root.geometry(geometry)
        self.root.protocol("WM_DELETE_WINDOW", self.quit)
        logger.debug("Window geometry %s", geometry)

    # --- Actions ---
    def read_fortune(self) -> Optional[str]:
        try:
            fortune = self.selector.next_fortune()
        except Exception as exc:
            traceback.print_exc()
            messagebox.showerror("Fortune error", str(exc))
            return None
        self._append(fortune + "\n")
        return fortune

    def quit(self) -> None:
        logger.info("Quitting")
        self.root.destroy()

    # --- Helpers ---
    def _append(self, text: str) -> None:
        self.fortune_log.configure(state="normal")
        self.fortune_log.insert(tk.END, text)
        self.fortune_log.configure(state="disabled")
        self.fortune_log.see(tk.END)

    def log_text(self) -> str:
        return self.fortune_log.get("1.0", "end-1c")

    def run(self) -> None:
        self.root.mainloop()


def main() -> None:
    app = FortuneTellerApp()
    app.run()


if __name__ == "__main__":
    main()

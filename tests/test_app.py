import tkinter as tk
from tkinter import ttk
import unittest

from fortune.catalog import FORTUNES
from fortune.config import AppConfig
from fortune.selector import Selector
from ui_app.app import FortuneTellerApp, window_geometry


class TestGeometry(unittest.TestCase):
    def test_three_quarters_centred(self):
        self.assertEqual(window_geometry(1920, 1080, 0.75), "1440x810+240+135")

    def test_full_screen(self):
        self.assertEqual(window_geometry(800, 600, 1.0), "800x600+0+0")


class TestFortuneTellerApp(unittest.TestCase):
    def setUp(self):
        try:
            self.root = tk.Tk()
        except tk.TclError as exc:
            self.skipTest(f"No display available: {exc}")
        self.root.withdraw()
        self.app = FortuneTellerApp(AppConfig(image_path="/nonexistent.png"),
                                    selector=Selector.from_seed(11), root=self.root)

    def tearDown(self):
        try:
            self.root.destroy()
        except tk.TclError:
            pass

    def test_read_fortune_appends_line(self):
        fortune = self.app.read_fortune()
        self.assertIn(fortune, FORTUNES)
        self.assertEqual(self.app.log_text(), fortune + "\n")

    def test_log_is_read_only(self):
        self.assertEqual(str(self.app.fortune_log.cget("state")), "disabled")

    def test_buttons(self):
        self.assertEqual(self.app.read_button.cget("text"), "Read My Fortune!")
        self.assertEqual(self.app.quit_button.cget("text"), "Quit")

    def test_buttons_use_accent_colour(self):
        style = ttk.Style(self.root)
        self.assertEqual(str(style.lookup("Big.TButton", "background")), self.app.config.colors["accent"])

    def test_successive_reads_differ(self):
        first = self.app.read_fortune()
        second = self.app.read_fortune()
        self.assertNotEqual(first, second)


if __name__ == "__main__":
    unittest.main()

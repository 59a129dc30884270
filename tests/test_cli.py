import contextlib
import io
import unittest
from pathlib import Path

from fortune.catalog import FORTUNES
from fortune.cli import build_parser, main, print_fortunes
from fortune.config import AppConfig, DEFAULT_IMAGE
from fortune.selector import Selector


class TestCli(unittest.TestCase):
    def run_cli(self, *argv):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            code = main(list(argv))
        return code, buf.getvalue()

    def test_console_prints_fortunes(self):
        code, out = self.run_cli("--console", "3", "--seed", "1")
        self.assertEqual(code, 0)
        # multi-line entry may add extra lines, so compare against a fresh selector
        expected = io.StringIO()
        print_fortunes(Selector.from_seed(1), 3, out=expected)
        self.assertEqual(out, expected.getvalue())

    def test_console_seed_reproducible(self):
        _, first = self.run_cli("--console", "10", "--seed", "42")
        _, second = self.run_cli("--console", "10", "--seed", "42")
        self.assertEqual(first, second)

    def test_console_zero(self):
        code, out = self.run_cli("--console", "0")
        self.assertEqual(code, 0)
        self.assertEqual(out, "")

    def test_negative_count_rejected(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--console", "-1"])

    def test_print_fortunes_uses_catalog(self):
        out = io.StringIO()
        print_fortunes(Selector.from_seed(8), 5, out=out)
        text = out.getvalue()
        self.assertTrue(any(f in text for f in FORTUNES))

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.console)
        self.assertIsNone(args.seed)
        self.assertEqual(args.log_level, "WARNING")


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = AppConfig()
        self.assertEqual(cfg.title, "Fortune Teller")
        self.assertEqual(cfg.screen_fraction, 0.75)

    def test_bad_fraction(self):
        with self.assertRaises(ValueError):
            AppConfig(screen_fraction=0)

    def test_default_image_lives_in_package(self):
        import fortune

        self.assertEqual(DEFAULT_IMAGE.parent.parent, Path(fortune.__file__).resolve().parent)
        self.assertEqual(AppConfig().image_path, DEFAULT_IMAGE)


if __name__ == "__main__":
    unittest.main()

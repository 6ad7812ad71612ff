import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from ribbot import cli


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = Path(self.tmp.name)
        (self.dir / "scum.txt").write_text("we ribbed him. and then some")
        (self.dir / "fraga-ribbing-2014-06-13").write_text("late night radio.")

    def run_cli(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = cli.main(["--corpus-dir", str(self.dir), *argv])
        return status, out.getvalue()

    def test_trims_to_last_sentence(self):
        status, out = self.run_cli("--prefix", "1", "--file", "scum.txt")
        self.assertEqual(status, 0)
        self.assertEqual(out, "we ribbed him.\n")

    def test_no_trim(self):
        status, out = self.run_cli("--prefix", "1", "--file", "scum.txt", "--no-trim")
        self.assertEqual(out, "we ribbed him. and then some\n")

    def test_word_limit(self):
        _, out = self.run_cli(
            "--prefix", "2", "--file", "scum.txt", "--words", "2", "--no-trim"
        )
        self.assertEqual(out, "we ribbed\n")

    def test_seed_is_reproducible(self):
        _, first = self.run_cli("--prefix", "1", "--seed", "42", "--words", "20")
        _, second = self.run_cli("--prefix", "1", "--seed", "42", "--words", "20")
        self.assertEqual(first, second)
        self.assertTrue(first.rstrip("\n").endswith("."))

    def test_missing_named_file_is_skipped(self):
        _, out = self.run_cli(
            "--prefix", "1",
            "--file", "fraga-ribbing-2014-06-13",
            "--file", "missing",
            "--seed", "3",
        )
        self.assertEqual(out, "late night radio.\n")

    def test_rejects_bad_flags(self):
        for argv in (["--prefix", "0"], ["--words", "-1"]):
            with self.subTest(argv=argv):
                with contextlib.redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit) as ctx:
                        cli.main(argv)
                self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()

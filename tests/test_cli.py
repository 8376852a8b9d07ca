import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import MagicMock

from alluxio_io.cli import format_size, main
from alluxio_io.modes import TestMode


class TestMain(unittest.TestCase):
    def test_success_prints_config(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["write", "--numFiles", "2", "--fileSize", "1MB", "--outputDir", "/tmp/x"])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("TEST ALLUXIO I/O: WRITE", text)
        self.assertIn("/tmp/x", text)
        self.assertIn("1048576 bytes (1.00 MB)", text)
        self.assertIn("MUST_CACHE", text)

    def test_custom_handler(self):
        run = MagicMock()
        code = main(["clean", "--outputDir", "/tmp/x"], run=run)
        self.assertEqual(code, 0)
        run.assert_called_once()
        config = run.call_args[0][0]
        self.assertEqual(config.mode, TestMode.CLEAN)

    def test_failure_exit_code(self):
        run = MagicMock()
        err = io.StringIO()
        with redirect_stderr(err):
            code = main([], run=run)
        self.assertEqual(code, 1)
        self.assertIn("Error: A command is required.", err.getvalue())
        run.assert_not_called()

    def test_help_exit_code(self):
        run = MagicMock()
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--help"], run=run)
        self.assertEqual(code, 0)
        self.assertIn("--numFiles", out.getvalue())
        run.assert_not_called()

    def test_version_exit_code(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--version"])
        self.assertEqual(code, 0)
        self.assertIn("Test Alluxio I/O", out.getvalue())


class TestFormatSize(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_size(128), "128.00 B")
        self.assertEqual(format_size(1536), "1.50 KB")
        self.assertEqual(format_size(2 ** 30), "1.00 GB")


if __name__ == '__main__':
    unittest.main()

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from hashassets.common.errors import CleanupError
from hashassets.generator.cleaner import clean_hashed_directories


class CleanerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.assets = Path(self.tmpdir.name) / "assets"
        self.assets.mkdir()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_missing_directory_is_tolerated(self) -> None:
        removed = clean_hashed_directories(["js"], self.assets, "hashed")
        self.assertEqual(removed, [])
        self.assertEqual(list(self.assets.iterdir()), [])

    def test_removes_only_hashed_directories(self) -> None:
        (self.assets / "js-hashed" / "nested").mkdir(parents=True)
        (self.assets / "js-hashed" / "nested" / "app.ab12cd34.js").write_text("x")
        (self.assets / "css-hashed").mkdir()
        (self.assets / "js").mkdir()
        (self.assets / "js" / "app.js").write_text("x")

        removed = clean_hashed_directories(["js", "css"], self.assets, "hashed")

        self.assertEqual(removed, [self.assets / "js-hashed", self.assets / "css-hashed"])
        self.assertFalse((self.assets / "js-hashed").exists())
        self.assertFalse((self.assets / "css-hashed").exists())
        self.assertTrue((self.assets / "js" / "app.js").exists())

    def test_other_failures_are_fatal(self) -> None:
        (self.assets / "js-hashed").mkdir()
        with mock.patch("hashassets.generator.cleaner.shutil.rmtree", side_effect=PermissionError("denied")):
            with self.assertRaises(CleanupError) as ctx:
                clean_hashed_directories(["js"], self.assets, "hashed")
        self.assertEqual(ctx.exception.path, self.assets / "js-hashed")
        self.assertIsInstance(ctx.exception.__cause__, PermissionError)

import json
import tempfile
import unittest
from pathlib import Path

from hashassets.common.errors import DuplicateAssetKeyError, ManifestWriteError
from hashassets.generator.manifest import ManifestEntry, build_manifest, render_manifest, write_manifest


class ManifestTests(unittest.TestCase):
    def test_build_manifest_keeps_order_and_is_read_only(self) -> None:
        manifest = build_manifest(
            [
                ManifestEntry("assets/js/b.js", "assets/js-hashed/b.11111111.js", Path("b.js")),
                ManifestEntry("assets/js/a.js", "assets/js-hashed/a.22222222.js", Path("a.js")),
            ]
        )
        self.assertEqual(list(manifest), ["assets/js/b.js", "assets/js/a.js"])
        with self.assertRaises(TypeError):
            manifest["assets/js/c.js"] = "x"  # type: ignore[index]

    def test_duplicate_keys_fail_fast(self) -> None:
        with self.assertRaises(DuplicateAssetKeyError):
            build_manifest(
                [
                    ManifestEntry("assets/js/a.js", "v1", Path("one/a.js")),
                    ManifestEntry("assets/js/a.js", "v2", Path("two/a.js")),
                ]
            )

    def test_render_uses_two_space_indent(self) -> None:
        rendered = render_manifest({"assets/js/app.js": "assets/js-hashed/app.ab12cd34.js"})
        self.assertEqual(rendered, '{\n  "assets/js/app.js": "assets/js-hashed/app.ab12cd34.js"\n}\n')

    def test_write_overwrites_existing_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            assets = Path(tmp_dir)
            (assets / "manifest.json").write_text('{"stale": "entry"}', encoding="utf-8")
            path = write_manifest({"assets/css/a.css": "assets/css-hashed/a.12345678.css"}, assets)
            self.assertEqual(path, assets / "manifest.json")
            self.assertEqual(
                json.loads(path.read_text(encoding="utf-8")),
                {"assets/css/a.css": "assets/css-hashed/a.12345678.css"},
            )

    def test_write_failure_is_wrapped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            missing = Path(tmp_dir) / "does-not-exist"
            with self.assertRaises(ManifestWriteError):
                write_manifest({"k": "v"}, missing)

import string
import tempfile
import unittest
from pathlib import Path

from hashassets.hasher import DIGEST_LENGTH, content_hash, hash_file


class HasherTests(unittest.TestCase):
    def test_digest_is_eight_alphanumeric_characters(self) -> None:
        for data in (b"", b"console.log(1)", bytes(range(256)) * 64):
            digest = content_hash(data)
            self.assertEqual(len(digest), DIGEST_LENGTH)
            self.assertTrue(set(digest) <= set(string.ascii_letters + string.digits))

    def test_digest_is_stable_across_calls(self) -> None:
        self.assertEqual(content_hash(b"body { color: red }"), content_hash(b"body { color: red }"))

    def test_different_contents_produce_different_digests(self) -> None:
        self.assertNotEqual(content_hash(b"console.log(1)"), content_hash(b"console.log(2)"))

    def test_hash_file_matches_in_memory_digest(self) -> None:
        payload = b"x" * 20000 + b"tail"
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "bundle.js"
            path.write_bytes(payload)
            self.assertEqual(hash_file(path), content_hash(payload))

    def test_hash_file_propagates_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(FileNotFoundError):
                hash_file(Path(tmp_dir) / "missing.js")

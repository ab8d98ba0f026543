"""
Tests for digest, file-name and file-path derivation.
"""

import os
import tempfile
import unittest

from uniqfile.hashing import get_file_hash, get_file_name, get_file_path, to_hash_bytes

HELLO = "Hello, world!"
HELLO_SHA256 = "315f5bdb76d078c43b8ac0064e4a0164612b1fce77c869345bfc94c75894edd3"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestGetFileHash(unittest.TestCase):

    def test_known_digest(self):
        self.assertEqual(get_file_hash(HELLO), HELLO_SHA256)

    def test_empty_data(self):
        self.assertEqual(get_file_hash(b""), EMPTY_SHA256)
        self.assertEqual(get_file_hash(""), EMPTY_SHA256)

    def test_deterministic(self):
        self.assertEqual(get_file_hash(b"abc"), get_file_hash(b"abc"))

    def test_different_data_different_digest(self):
        self.assertNotEqual(get_file_hash("Data 1"), get_file_hash("Data 2"))

    def test_str_hashed_as_utf8(self):
        self.assertEqual(get_file_hash("café"), get_file_hash("café".encode("utf-8")))

    def test_bytes_like_inputs_agree(self):
        raw = b"\x00\x01\xfe\xff"
        expected = get_file_hash(raw)
        self.assertEqual(get_file_hash(bytearray(raw)), expected)
        self.assertEqual(get_file_hash(memoryview(raw)), expected)

    def test_lowercase_hex_256_bit(self):
        digest = get_file_hash(b"\xff" * 1000)
        self.assertEqual(len(digest), 64)
        self.assertRegex(digest, r"^[0-9a-f]{64}$")

    def test_rejects_other_types(self):
        with self.assertRaises(TypeError):
            to_hash_bytes(12345)


class TestGetFileName(unittest.TestCase):

    def test_separator_added(self):
        self.assertEqual(get_file_name("txt", HELLO), f"{HELLO_SHA256}.txt")

    def test_leading_separator_kept_once(self):
        self.assertEqual(get_file_name(".txt", HELLO), get_file_name("txt", HELLO))

    def test_empty_extension_keeps_trailing_separator(self):
        self.assertEqual(get_file_name("", HELLO), f"{HELLO_SHA256}.")

    def test_compound_extension(self):
        self.assertEqual(get_file_name("tar.gz", b"x"), f"{get_file_hash(b'x')}.tar.gz")

    def test_starts_with_digest_ends_with_extension(self):
        name = get_file_name("test", b"payload")
        self.assertTrue(name.startswith(get_file_hash(b"payload")))
        self.assertTrue(name.endswith(".test"))


class TestGetFilePath(unittest.TestCase):

    def test_absolute_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = get_file_path(tmpdir, "txt", HELLO)
            self.assertEqual(path, os.path.join(os.path.abspath(tmpdir), f"{HELLO_SHA256}.txt"))

    def test_relative_directory_uses_cwd(self):
        path = get_file_path("out", "txt", HELLO)
        self.assertTrue(os.path.isabs(path))
        self.assertEqual(path, os.path.join(os.getcwd(), "out", f"{HELLO_SHA256}.txt"))

    def test_pathlike_directory(self):
        from pathlib import Path
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertEqual(
                get_file_path(Path(tmpdir), "bin", b"x"),
                get_file_path(tmpdir, "bin", b"x"),
            )

    def test_missing_directory_not_checked(self):
        path = get_file_path("/nonexistent/dir/for/uniqfile", "txt", HELLO)
        self.assertTrue(path.endswith(f"{HELLO_SHA256}.txt"))

    def test_path_is_normalised(self):
        path = get_file_path(os.path.join("a", "..", "b"), "txt", HELLO)
        self.assertEqual(path, os.path.join(os.getcwd(), "b", f"{HELLO_SHA256}.txt"))


if __name__ == "__main__":
    unittest.main()

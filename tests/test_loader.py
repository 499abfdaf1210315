"""Unit tests for tutorial tree construction.

Tests scanning, pruning of empty subtrees, root handling and the
failure modes of load_one/load_many.
"""

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdtutor import (
    Course,
    FilePath,
    LoaderConfig,
    Lesson,
    NoInputError,
    ReadDirError,
    ReadError,
    TopCourse,
    TutorialLoader,
    load_many,
    load_one,
)
from mdtutor.testing import make_tutorial_tree, tree_shape


BENELUX = {
    "README.md": "# Overview\nBenelux in general.",
    "01_history.md": "# History",
    "~backup.md": "stale",
    "#scratch.md": "scratch",
    ".hidden.md": "hidden",
    "notes.txt": "not markdown",
    ".git": {"config.md": "should never load"},
    "belgium": {
        "01_tintin.md": "# Tintin",
        "02_beer.md": "# Beer",
        "empty": {},
    },
    "empty": {},
    "filtered": {"a.txt": "x", "~b.md": "y"},
    "nested_empty": {"inner": {"deeper": {}}},
}


class LoaderTestCase(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = make_tutorial_tree(os.path.join(self.test_dir, "benelux"), BENELUX)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)


class TestScan(LoaderTestCase):
    """Test scan_file and scan_dir."""

    def test_scan_file(self):
        lesson = TutorialLoader().scan_file(self.root / "README.md")
        self.assertIsInstance(lesson, Lesson)
        self.assertEqual(lesson.name(), "README.md")
        self.assertEqual(lesson.content(), "# Overview\nBenelux in general.")

    def test_scan_file_read_failure(self):
        with self.assertRaises(ReadError) as ctx:
            TutorialLoader().scan_file(self.root / "belgium")
        self.assertEqual(ctx.exception.path, str(self.root / "belgium"))
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_scan_dir_builds_course(self):
        course = TutorialLoader().scan_dir(self.root / "belgium")
        self.assertIsInstance(course, Course)
        self.assertEqual(course.name(), "belgium")
        self.assertEqual([c.name() for c in course.children()],
                         ["01_tintin.md", "02_beer.md"])

    def test_scan_dir_prunes_empty_directory(self):
        self.assertIsNone(TutorialLoader().scan_dir(self.root / "empty"))

    def test_scan_dir_prunes_fully_filtered_directory(self):
        self.assertIsNone(TutorialLoader().scan_dir(self.root / "filtered"))

    def test_scan_dir_prunes_nested_empty_directories(self):
        self.assertIsNone(TutorialLoader().scan_dir(self.root / "nested_empty"))

    def test_scan_dir_listing_failure(self):
        with self.assertRaises(ReadDirError):
            TutorialLoader().scan_dir(self.root / "missing")


class TestLoadOne(LoaderTestCase):
    """Test building a tree from a single root."""

    def test_directory_root(self):
        tree = load_one(self.root)
        self.assertIsInstance(tree, TopCourse)
        self.assertEqual(tree.name(), "")
        self.assertEqual(str(tree.path()), str(self.root))
        self.assertEqual([c.name() for c in tree.children()],
                         ["01_history.md", "README.md", "belgium"])

    def test_pruned_and_filtered_entries_are_absent(self):
        tree = load_one(self.root)
        self.assertEqual(tree_shape(tree), (
            "TopCourse", "", (
                ("Lesson", "01_history.md", ()),
                ("Lesson", "README.md", ()),
                ("Course", "belgium", (
                    ("Lesson", "01_tintin.md", ()),
                    ("Lesson", "02_beer.md", ()),
                )),
            ),
        ))

    def test_file_root(self):
        tree = load_one(self.root / "README.md")
        self.assertIsInstance(tree, Lesson)
        self.assertEqual(tree.name(), "README.md")

    def test_missing_root(self):
        with self.assertRaisesRegex(NoInputError, "Cannot process"):
            load_one(self.root / "missing")

    def test_undesirable_file_root(self):
        with self.assertRaisesRegex(NoInputError, "Cannot process"):
            load_one(self.root / "notes.txt")

    def test_root_that_prunes_to_nothing(self):
        with self.assertRaisesRegex(NoInputError, "Cannot process"):
            load_one(self.root / "filtered")

    def test_idempotent_rescan(self):
        first = load_one(self.root)
        second = load_one(self.root)
        self.assertEqual(first, second)
        self.assertEqual(tree_shape(first), tree_shape(second))

    def test_rescan_sees_changes(self):
        first = load_one(self.root)
        (self.root / "belgium" / "02_beer.md").write_text("# Beer, revised")
        second = load_one(self.root)
        self.assertNotEqual(first, second)

    def test_custom_extension(self):
        (self.root / "intro.markdown").write_text("# Intro")
        tree = load_one(self.root, LoaderConfig.with_extension(".markdown"))
        self.assertEqual([c.name() for c in tree.children()], ["intro.markdown"])


class TestLoadMany(LoaderTestCase):
    """Test building a tree from several roots."""

    def test_no_paths(self):
        with self.assertRaises(NoInputError):
            load_many([])

    def test_single_path_delegates_to_load_one(self):
        self.assertEqual(load_many([self.root]), load_one(self.root))

    def test_mixed_roots(self):
        tree = load_many([self.root / "README.md", self.root / "belgium"])
        self.assertIsInstance(tree, TopCourse)
        self.assertEqual(str(tree.path()), "")
        self.assertEqual(tree.name(), "")
        kinds = [type(c) for c in tree.children()]
        self.assertEqual(kinds, [Lesson, Course])

    def test_roots_keep_given_order(self):
        tree = load_many([self.root / "belgium", self.root / "README.md"])
        self.assertEqual([c.name() for c in tree.children()], ["belgium", "README.md"])

    def test_pruned_roots_are_skipped(self):
        tree = load_many([self.root / "empty", self.root / "README.md", self.root / "missing"])
        self.assertEqual([c.name() for c in tree.children()], ["README.md"])

    def test_everything_pruned(self):
        with self.assertRaisesRegex(NoInputError, "Nothing useful found"):
            load_many([self.root / "empty", self.root / "filtered"])

    def test_listing_a_file_fails(self):
        with self.assertRaises(ReadDirError):
            TutorialLoader().scan_dir(self.root / "README.md")


class TestLoaderConfig(unittest.TestCase):
    """Test loader configuration validation."""

    def test_default_is_valid(self):
        self.assertEqual(LoaderConfig.default().validate(), [])

    def test_extension_without_dot(self):
        with self.assertRaises(ValueError):
            TutorialLoader(LoaderConfig.with_extension("md"))

    def test_empty_extension(self):
        errors = LoaderConfig.with_extension("").validate()
        self.assertIn("extension cannot be empty", errors)

    def test_unknown_decode_error_handler(self):
        errors = LoaderConfig(decode_errors="bogus").validate()
        self.assertEqual(errors, ["unknown decode error handler: 'bogus'"])
        with self.assertRaises(ValueError):
            TutorialLoader(LoaderConfig(decode_errors="bogus"))


class TestDecoding(LoaderTestCase):
    """Test lessons that are not valid in the configured encoding."""

    def setUp(self):
        super().setUp()
        (self.root / "belgium" / "caf.md").write_bytes(b"# caf\xe9\n")

    def test_non_utf8_lesson_is_loaded(self):
        tree = load_one(self.root / "belgium")
        self.assertIsInstance(tree, TopCourse)
        self.assertEqual([c.name() for c in tree.children()],
                         ["01_tintin.md", "02_beer.md", "caf.md"])
        self.assertEqual(tree.children()[2].content(), "# caf\ufffd\n")
        self.assertEqual(tree.children()[0].content(), "# Tintin")

    def test_non_utf8_lesson_in_full_tree(self):
        tree = load_many([self.root, self.root / "belgium"])
        self.assertEqual(len(tree.children()), 2)

    def test_strict_handler_fails_the_build(self):
        loader = TutorialLoader(LoaderConfig(decode_errors="strict"))
        with self.assertRaises(ReadError) as ctx:
            loader.load_one(self.root / "belgium")
        self.assertIsInstance(ctx.exception.__cause__, UnicodeDecodeError)


class TestNestedFailures(unittest.TestCase):
    """Test that a failure deep in the tree aborts the whole build."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = make_tutorial_tree(os.path.join(self.test_dir, "root"), {
            "intro.md": "# Intro",
            "a": {
                "first.md": "# First",
                "b": {"deep.md": "# Deep"},
            },
        })
        self.other = make_tutorial_tree(os.path.join(self.test_dir, "other"), {
            "extra.md": "# Extra",
        })

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _failing_read(self):
        original = FilePath.read

        def read(path, *args, **kwargs):
            if path.base() == "deep.md":
                raise ReadError(str(path))
            return original(path, *args, **kwargs)
        return read

    def _failing_read_dir(self):
        original = FilePath.read_dir

        def read_dir(path):
            if path.base() == "b":
                raise ReadDirError(str(path))
            return original(path)
        return read_dir

    def test_layout_loads_cleanly(self):
        tree = load_many([self.root, self.other])
        self.assertEqual([c.name() for c in tree.children()], ["root", "other"])

    def test_load_one_read_failure(self):
        with mock.patch.object(FilePath, "read", self._failing_read()):
            with self.assertRaises(ReadError) as ctx:
                load_one(self.root)
        self.assertTrue(ctx.exception.path.endswith(os.path.join("a", "b", "deep.md")))

    def test_load_many_read_failure(self):
        with mock.patch.object(FilePath, "read", self._failing_read()):
            with self.assertRaises(ReadError):
                load_many([self.root, self.other])

    def test_load_one_listing_failure(self):
        with mock.patch.object(FilePath, "read_dir", self._failing_read_dir()):
            with self.assertRaises(ReadDirError):
                load_one(self.root)

    def test_load_many_listing_failure(self):
        with mock.patch.object(FilePath, "read_dir", self._failing_read_dir()):
            with self.assertRaises(ReadDirError):
                load_many([self.other, self.root])


if __name__ == '__main__':
    unittest.main()

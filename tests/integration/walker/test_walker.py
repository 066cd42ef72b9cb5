"""End-to-end listing tests through ``gridls.walker.walk``.

Output goes to ``io.StringIO`` streams, which are not terminals, so the
default layout prints one name per line unless a width is configured.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path

from gridls.walker import EXIT_FAILURE, EXIT_OK, ListingConfig, walk


def _run(paths: list[str], **options) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    options.setdefault("color", "never")
    status = walk(paths, ListingConfig(**options), stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


class DefaultListingTests(unittest.TestCase):
    def test_sorted_names_hide_dot_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("b.txt", "a.txt", ".hidden"):
                (root / name).write_text("x\n", encoding="utf-8")

            status, out, err = _run([str(root)])

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(out, "a.txt\nb.txt\n")
        self.assertEqual(err, "")

    def test_include_hidden_lists_dot_files_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("b.txt", ".hidden"):
                (root / name).write_text("x\n", encoding="utf-8")

            _status, out, _err = _run([str(root)], include_hidden=True)

        self.assertEqual(out, ".hidden\nb.txt\n")

    def test_configured_width_enables_grid(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in "abcde":
                (root / name).write_text("x\n", encoding="utf-8")

            _status, grid_out, _err = _run([str(root)], width=9)
            _status, across_out, _err = _run([str(root)], width=9, horizontal=True)
            _status, single_out, _err = _run([str(root)], width=9, one_per_line=True)

        self.assertEqual(grid_out, "a  c  e\nb  d\n")
        self.assertEqual(across_out, "a  b  c\nd  e\n")
        self.assertEqual(single_out, "a\nb\nc\nd\ne\n")

    def test_forced_columns_use_fallback_width_off_terminal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a.txt", "b.txt"):
                (root / name).write_text("x\n", encoding="utf-8")

            _status, out, _err = _run([str(root)], force_columns=True)

        self.assertEqual(out, "a.txt  b.txt\n")

    def test_empty_paths_default_to_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "only.txt").write_text("x\n", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                status, out, _err = _run([])
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(out, "only.txt\n")

    def test_always_color_styles_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "sub").mkdir()

            _status, out, _err = _run([tmp], color="always")

        self.assertEqual(out, "\033[0;34msub\033[0m\n")


class LongListingTests(unittest.TestCase):
    def test_directory_gets_total_line_then_rows(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "data.bin").write_bytes(b"x" * 4096)
            os.symlink("missing-target", root / "link")

            _status, out, _err = _run([str(root)], long=True)

        lines = out.splitlines()
        self.assertTrue(lines[0].startswith("total "))
        self.assertTrue(lines[1].startswith("-rw"))
        self.assertIn(" 4096 ", lines[1])
        self.assertTrue(lines[1].endswith(" data.bin"))
        self.assertTrue(lines[2].startswith("l"))
        self.assertTrue(lines[2].endswith(" link -> missing-target"))

    def test_named_file_prints_single_row_without_total(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.txt"
            target.write_text("hello\n", encoding="utf-8")

            _status, out, _err = _run([str(target)], long=True)

        self.assertEqual(len(out.splitlines()), 1)
        self.assertTrue(out.startswith("-rw"))
        self.assertTrue(out.endswith(f" {target}\n"))


class MultipleRootTests(unittest.TestCase):
    def test_roots_get_headers_and_blank_separators(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            first = root / "first"
            second = root / "second"
            first.mkdir()
            second.mkdir()
            (first / "one.txt").write_text("1\n", encoding="utf-8")
            (second / "two.txt").write_text("2\n", encoding="utf-8")
            lone = root / "lone.txt"
            lone.write_text("x\n", encoding="utf-8")

            _status, out, _err = _run([str(lone), str(first), str(second)])

        self.assertEqual(
            out,
            f"{lone}\n\n{first}:\none.txt\n\n{second}:\ntwo.txt\n",
        )

    def test_failed_root_reports_and_siblings_continue(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            missing = root / "missing"
            good = root / "good"
            good.mkdir()
            (good / "a.txt").write_text("x\n", encoding="utf-8")

            status, out, err = _run([str(missing), str(good)])

        self.assertEqual(status, EXIT_FAILURE)
        self.assertEqual(err, f"Cannot access '{missing}': No such file or directory\n")
        self.assertEqual(out, f"{good}:\na.txt\n")


class RecursiveListingTests(unittest.TestCase):
    def test_recursion_is_depth_first_and_skips_symlinked_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a_dir" / "deep").mkdir(parents=True)
            (root / "a_dir" / "deep" / "leaf.txt").write_text("x\n", encoding="utf-8")
            (root / "b_dir").mkdir()
            (root / "top.txt").write_text("x\n", encoding="utf-8")
            os.symlink("a_dir", root / "loop")

            status, out, _err = _run([str(root)], recursive=True)

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(
            out,
            f"{root}:\na_dir\nb_dir\nloop\ntop.txt\n"
            f"\n{root}/a_dir:\ndeep\n"
            f"\n{root}/a_dir/deep:\nleaf.txt\n"
            f"\n{root}/b_dir:\n",
        )

    def test_recursion_from_current_directory_uses_bare_child_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "sub").mkdir()
            (Path(tmp) / "sub" / "inner.txt").write_text("x\n", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                _status, out, _err = _run(["."], recursive=True)
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(out, ".:\nsub\n\nsub:\ninner.txt\n")

    @unittest.skipIf(hasattr(os, "geteuid") and os.geteuid() == 0, "root bypasses permission bits")
    def test_unreadable_subdirectory_sets_failure_status(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            locked = root / "locked"
            locked.mkdir()
            locked.chmod(0)
            try:
                status, out, err = _run([str(root)], recursive=True)
            finally:
                locked.chmod(0o755)

        self.assertEqual(status, EXIT_FAILURE)
        self.assertEqual(out, f"{root}:\nlocked\n\n")
        self.assertEqual(err, f"Cannot open '{locked}': Permission denied\n")


if __name__ == "__main__":
    unittest.main()

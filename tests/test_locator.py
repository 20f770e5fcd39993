"""
Locator tests

README.md / readme.md discovery with the empty-string sentinel.
"""

import os
from pathlib import Path

from wp_readme.lib.locator import readme_find


class TestReadmeFind:
    """Test readme_find()"""

    def test_finds_sample_document(self, document_dir: Path):
        """README.md in the sample directory is found"""
        assert readme_find(str(document_dir)) == os.path.join(str(document_dir), "README.md")

    def test_finds_lowercase(self, tmp_path: Path):
        """readme.md is accepted too"""
        (tmp_path / "readme.md").write_text("# x")
        assert readme_find(str(tmp_path)) == os.path.join(str(tmp_path), "readme.md")

    def test_missing_directory(self, tmp_path: Path):
        """A directory that does not exist yields the empty sentinel"""
        assert readme_find(str(tmp_path / "not_exists")) == ""

    def test_no_readme(self, tmp_path: Path):
        """A directory without a README yields the empty sentinel"""
        (tmp_path / "notes.md").write_text("notes")
        assert readme_find(str(tmp_path)) == ""

    def test_other_casings_ignored(self, tmp_path: Path):
        """Only README.md and readme.md match, not Readme.md or README.MD"""
        (tmp_path / "Readme.md").write_text("x")
        (tmp_path / "README.MD").write_text("x")
        assert readme_find(str(tmp_path)) == ""

    def test_trailing_separator_stripped(self, tmp_path: Path):
        """A trailing slash does not appear in the returned path"""
        (tmp_path / "README.md").write_text("x")
        assert readme_find(str(tmp_path) + "/") == os.path.join(str(tmp_path), "README.md")

    def test_not_recursive(self, tmp_path: Path):
        """README.md in a subdirectory is not found"""
        nested = tmp_path / "docs"
        nested.mkdir()
        (nested / "README.md").write_text("x")
        assert readme_find(str(tmp_path)) == ""

    def test_directory_named_readme_skipped(self, tmp_path: Path):
        """Only regular files count"""
        (tmp_path / "README.md").mkdir()
        assert readme_find(str(tmp_path)) == ""

    def test_path_to_file_is_not_a_directory(self, tmp_path: Path):
        """Passing a file path yields the empty sentinel instead of raising"""
        target = tmp_path / "README.md"
        target.write_text("x")
        assert readme_find(str(target)) == ""

    def test_symlinked_readme_skipped(self, tmp_path: Path):
        """A README.md symlink is not a regular file"""
        real = tmp_path / "source.md"
        real.write_text("x")
        plugin = tmp_path / "plugin"
        plugin.mkdir()
        (plugin / "README.md").symlink_to(real)
        assert readme_find(str(plugin)) == ""

"""
Writer tests

readme.txt placement, naming and failure reporting.
"""

from pathlib import Path

import pytest

from wp_readme.lib.writer import outputPath_derive, readme_replace
from wp_readme.models.errors import (
    ReadmeError,
    ReadmeNotFoundError,
    TargetNotWritableError,
    OutputExistsNotWritableError,
    WriteFailedError,
)


@pytest.fixture
def failing_write(monkeypatch: pytest.MonkeyPatch):
    """Make Path.write_text fail for empty or non-empty data on request."""
    original = Path.write_text

    def install(fail_on_empty: bool):
        def write_text(self, data, *args, **kwargs):
            if (data == "") == fail_on_empty:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self, data, *args, **kwargs)

        monkeypatch.setattr(Path, "write_text", write_text)

    return install


class TestOutputPath:
    """Test output file naming"""

    def test_lowercased_txt(self, tmp_path: Path):
        """README.md becomes readme.txt"""
        assert outputPath_derive("README.md", tmp_path) == tmp_path / "readme.txt"

    def test_uses_base_name_only(self, tmp_path: Path):
        """Directories in the source path do not leak into the name"""
        assert outputPath_derive("docs/Plugin.MD", tmp_path) == tmp_path / "plugin.txt"

    def test_only_trailing_extension(self, tmp_path: Path):
        """Only a trailing .md is replaced"""
        assert outputPath_derive("a.md.bak", tmp_path) == tmp_path / "a.md.bak"


class TestReadmeReplace:
    """Test readme_replace()"""

    def test_writes_readme_txt(self, plugin_dir: Path, readme_expected: str):
        """Sample README converts into readme.txt next to it"""
        assert readme_replace(str(plugin_dir / "README.md")) is True

        output = plugin_dir / "readme.txt"
        assert output.read_text(encoding="utf-8") == readme_expected

    def test_environment_is_applied(self, plugin_dir: Path):
        """The environment reaches the visibility passes"""
        readme_replace(str(plugin_dir / "README.md"), "production")

        output = (plugin_dir / "readme.txt").read_text(encoding="utf-8")
        assert "only:production" not in output

    def test_overwrites_existing_output(self, plugin_dir: Path):
        """A writable readme.txt is replaced"""
        (plugin_dir / "readme.txt").write_text("stale", encoding="utf-8")
        readme_replace(str(plugin_dir / "README.md"))

        assert "stale" not in (plugin_dir / "readme.txt").read_text(encoding="utf-8")

    def test_symlink_resolved(self, tmp_path: Path, plugin_dir: Path):
        """Output lands beside the real file a symlink points to"""
        link_dir = tmp_path / "links"
        link_dir.mkdir()
        link = link_dir / "README.md"
        link.symlink_to(plugin_dir / "README.md")

        readme_replace(str(link))

        assert (plugin_dir / "readme.txt").exists()
        assert not (link_dir / "readme.txt").exists()

    def test_crlf_line_endings_kept(self, tmp_path: Path):
        """CRLF input produces CRLF output"""
        source = tmp_path / "README.md"
        source.write_bytes(b"# Title\r\nbody\r\n")

        readme_replace(str(source))

        assert (tmp_path / "readme.txt").read_bytes() == b"=== Title ===\r\nbody\r\n"

    def test_undecodable_bytes_replaced(self, tmp_path: Path):
        """Non-UTF-8 bytes are replaced instead of aborting after the probe"""
        source = tmp_path / "README.md"
        source.write_bytes(b"# Caf\xe9\n")
        (tmp_path / "readme.txt").write_text("old", encoding="utf-8")

        assert readme_replace(str(source)) is True
        assert (tmp_path / "readme.txt").read_text(encoding="utf-8") == "=== Caf\ufffd ===\n"

    def test_source_missing(self, tmp_path: Path):
        """Missing source raises ReadmeNotFoundError"""
        with pytest.raises(ReadmeNotFoundError, match="File not found."):
            readme_replace(str(tmp_path / "README.md"))

    def test_target_dir_not_directory(self, plugin_dir: Path, monkeypatch: pytest.MonkeyPatch):
        """Unusable parent directory raises TargetNotWritableError"""
        monkeypatch.setattr(Path, "is_dir", lambda self: False)
        with pytest.raises(TargetNotWritableError, match="Target directory is not writable."):
            readme_replace(str(plugin_dir / "README.md"))

    def test_existing_output_not_writable(self, plugin_dir: Path, failing_write):
        """Failed write probe raises OutputExistsNotWritableError"""
        (plugin_dir / "readme.txt").write_text("old", encoding="utf-8")
        failing_write(fail_on_empty=True)

        with pytest.raises(OutputExistsNotWritableError, match="already exists and is not writable"):
            readme_replace(str(plugin_dir / "README.md"))

    def test_write_failed(self, plugin_dir: Path, failing_write):
        """Failed final write raises WriteFailedError"""
        failing_write(fail_on_empty=False)

        with pytest.raises(WriteFailedError, match="Failed to save readme.txt"):
            readme_replace(str(plugin_dir / "README.md"))

    def test_probe_truncates_before_write(self, plugin_dir: Path, failing_write):
        """The probe empties an existing readme.txt even when the real write fails"""
        output = plugin_dir / "readme.txt"
        output.write_text("previous release notes", encoding="utf-8")
        failing_write(fail_on_empty=False)

        with pytest.raises(WriteFailedError):
            readme_replace(str(plugin_dir / "README.md"))

        assert output.read_text(encoding="utf-8") == ""

    def test_errors_share_base(self):
        """All writer failures are ReadmeErrors with readable messages"""
        for error in (
            ReadmeNotFoundError(),
            TargetNotWritableError(),
            OutputExistsNotWritableError(),
            WriteFailedError(),
        ):
            assert isinstance(error, ReadmeError)
            assert str(error)

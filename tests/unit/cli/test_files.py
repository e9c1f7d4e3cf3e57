"""Unit tests for file CLI commands.

Tests for the filetree files list, type and clean commands.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from filetree.cli.main import app
from filetree.tree.classifier import resolved_file_type
from filetree.tree.models import DeletionFailure, DeletionPolicy, DeletionReport
from typer.testing import CliRunner

runner = CliRunner()

# Wide terminal so long temporary paths are never wrapped
WIDE = {"COLUMNS": "400"}


# =============================================================================
# files list tests
# =============================================================================


class TestFilesList:
    """Tests for filetree files list command."""

    def test_list_table(self, sample_tree: Path) -> None:
        """Table output reports the file count."""
        result = runner.invoke(app, ["files", "list", str(sample_tree)], env=WIDE)

        assert result.exit_code == 0
        assert "Found 6 files" in result.stdout
        assert "b.txt" in result.stdout

    def test_list_json(self, sample_tree: Path) -> None:
        """JSON output contains one object per file."""
        result = runner.invoke(
            app, ["files", "list", str(sample_tree), "--format", "json"], env=WIDE
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 6
        by_name = {Path(item["path"]).name: item for item in data}
        assert by_name["b.txt"]["size_bytes"] == 10
        assert by_name["b.txt"]["type"] == "txt"
        assert by_name["notes.MD"]["type"] == "MD"

    def test_list_json_type_without_dot(self, tmp_path: Path) -> None:
        """A name without a dot shows the computed type, not a placeholder."""
        root = tmp_path / "root"
        root.mkdir()
        (root / "README").write_text("readme")

        result = runner.invoke(app, ["files", "list", str(root), "--format", "json"], env=WIDE)

        assert result.exit_code == 0
        [item] = json.loads(result.stdout)
        assert item["type"] != "-"
        assert item["type"] == resolved_file_type(item["path"])

    def test_list_type_filter(self, sample_tree: Path) -> None:
        """--type keeps only matching extensions, case-insensitively."""
        result = runner.invoke(
            app,
            ["files", "list", str(sample_tree), "--type", "LOG", "--format", "json"],
            env=WIDE,
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [Path(item["path"]).name for item in data] == ["d.log"]

    def test_list_canonical_paths(self, sample_tree: Path) -> None:
        """--paths prints canonical paths."""
        indirect = sample_tree / "sub" / ".."

        result = runner.invoke(
            app,
            ["files", "list", str(indirect), "--paths", "--format", "json"],
            env=WIDE,
        )

        assert result.exit_code == 0
        paths = [item["path"] for item in json.loads(result.stdout)]
        assert str(sample_tree.resolve() / "a.txt") in paths

    def test_list_limit(self, sample_tree: Path) -> None:
        """--limit truncates the display but not the count."""
        result = runner.invoke(app, ["files", "list", str(sample_tree), "-l", "2"], env=WIDE)

        assert result.exit_code == 0
        assert "showing 2 of 6" in result.stdout

    def test_list_missing_path(self, tmp_path: Path) -> None:
        """A missing path is reported as having no files."""
        result = runner.invoke(app, ["files", "list", str(tmp_path / "missing")], env=WIDE)

        assert result.exit_code == 0
        assert "No files found" in result.stdout

    def test_list_empty_type_matches_nothing(self, sample_tree: Path) -> None:
        """An empty --type is not a wildcard."""
        result = runner.invoke(app, ["files", "list", str(sample_tree), "--type", ""], env=WIDE)

        assert result.exit_code == 0
        assert "No files found" in result.stdout


# =============================================================================
# files type tests
# =============================================================================


class TestFilesType:
    """Tests for filetree files type command."""

    def test_type_output(self) -> None:
        """Each path is printed with its type."""
        result = runner.invoke(app, ["files", "type", "archive.tar.gz", "README"], env=WIDE)

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines == ["archive.tar.gz\tgz", "README\tREADME"]


# =============================================================================
# files clean tests
# =============================================================================


class TestFilesClean:
    """Tests for filetree files clean command."""

    def test_clean_all_files(self, sample_tree: Path) -> None:
        """Default policy deletes every file and keeps directories."""
        result = runner.invoke(app, ["files", "clean", str(sample_tree), "--yes"], env=WIDE)

        assert result.exit_code == 0
        assert "6 path(s) deleted" in result.stdout
        assert (sample_tree / "sub" / "deeper").is_dir()
        assert not (sample_tree / "b.txt").exists()

    def test_clean_empty_shallow(self, sample_tree: Path) -> None:
        """--empty --shallow only removes the top-level empty file."""
        result = runner.invoke(
            app, ["files", "clean", str(sample_tree), "--empty", "--shallow", "-y"], env=WIDE
        )

        assert result.exit_code == 0
        assert not (sample_tree / "a.txt").exists()
        assert (sample_tree / "b.txt").exists()
        assert (sample_tree / "sub" / "c.txt").exists()

    def test_clean_dir(self, sample_tree: Path) -> None:
        """--dir removes the root."""
        result = runner.invoke(app, ["files", "clean", str(sample_tree), "--dir", "-y"], env=WIDE)

        assert result.exit_code == 0
        assert not sample_tree.exists()

    def test_clean_dry_run(self, sample_tree: Path) -> None:
        """--dry-run deletes nothing and needs no confirmation."""
        result = runner.invoke(app, ["files", "clean", str(sample_tree), "--dry-run"], env=WIDE)

        assert result.exit_code == 0
        assert "6 path(s) would be deleted" in result.stdout
        assert (sample_tree / "b.txt").exists()

    def test_clean_dry_run_from_config(self, sample_tree: Path, isolated_config_home: Path) -> None:
        """dry_run = true in the config file applies without the flag."""
        config_dir = isolated_config_home / "filetree"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("dry_run = true\n")

        result = runner.invoke(app, ["files", "clean", str(sample_tree)], env=WIDE)

        assert result.exit_code == 0
        assert (sample_tree / "b.txt").exists()

    def test_clean_no_dry_run_overrides_config(
        self, sample_tree: Path, isolated_config_home: Path
    ) -> None:
        """--no-dry-run deletes even when the config enables dry-run."""
        config_dir = isolated_config_home / "filetree"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("dry_run = true\n")

        result = runner.invoke(
            app, ["files", "clean", str(sample_tree), "--no-dry-run", "-y"], env=WIDE
        )

        assert result.exit_code == 0
        assert not (sample_tree / "b.txt").exists()
        assert (sample_tree / "sub").is_dir()

    def test_clean_confirm_abort(self, sample_tree: Path) -> None:
        """Declining the prompt leaves everything in place."""
        result = runner.invoke(app, ["files", "clean", str(sample_tree)], input="n\n", env=WIDE)

        assert result.exit_code == 0
        assert "Aborted" in result.stdout
        assert (sample_tree / "a.txt").exists()

    def test_clean_confirm_accept(self, sample_tree: Path) -> None:
        """Accepting the prompt runs the deletion."""
        result = runner.invoke(
            app, ["files", "clean", str(sample_tree), "--empty"], input="y\n", env=WIDE
        )

        assert result.exit_code == 0
        assert not (sample_tree / "a.txt").exists()

    def test_clean_no_confirm_from_config(self, sample_tree: Path, isolated_config_home: Path) -> None:
        """confirm = false skips the prompt."""
        config_dir = isolated_config_home / "filetree"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("confirm = false\n")

        result = runner.invoke(app, ["files", "clean", str(sample_tree), "--empty"], env=WIDE)

        assert result.exit_code == 0
        assert not (sample_tree / "a.txt").exists()

    def test_clean_conflicting_flags(self, sample_tree: Path) -> None:
        """--dir cannot be combined with --empty."""
        result = runner.invoke(
            app, ["files", "clean", str(sample_tree), "--dir", "--empty", "-y"], env=WIDE
        )

        assert result.exit_code == 1
        assert sample_tree.exists()

    def test_clean_missing_path(self, tmp_path: Path) -> None:
        """A missing path is a successful no-op."""
        result = runner.invoke(app, ["files", "clean", str(tmp_path / "missing"), "-y"], env=WIDE)

        assert result.exit_code == 0
        assert "Nothing to clean" in result.stdout

    def test_clean_failure_exit_code(self, sample_tree: Path) -> None:
        """A failed deletion exits with code 1 and lists the failure."""
        report = DeletionReport(
            root=str(sample_tree),
            policy=DeletionPolicy.ALL_FILES,
            deleted=(str(sample_tree / "b.txt"),),
            failed=(DeletionFailure(path=str(sample_tree / "a.txt"), error="Permission denied"),),
        )
        with patch("filetree.cli.commands.files.TreeOperator") as mock_operator_class:
            mock_operator = MagicMock()
            mock_operator.run.return_value = report
            mock_operator_class.return_value = mock_operator

            result = runner.invoke(app, ["files", "clean", str(sample_tree), "-y"], env=WIDE)

        assert result.exit_code == 1
        assert "failed" in result.stdout
        assert "Permission denied" in result.stdout
        mock_operator.run.assert_called_once_with(sample_tree, DeletionPolicy.ALL_FILES)

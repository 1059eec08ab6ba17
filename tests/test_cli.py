"""CLI integration tests for chronicle."""

import json
from pathlib import Path

from typer.testing import CliRunner

from chronicle.cli import app


def _run(runner: CliRunner, *args: str):
    return runner.invoke(app, ["--no-color", *args])


def _run_json(runner: CliRunner, *args: str):
    return runner.invoke(app, ["--no-color", "-q", "--json", *args])


class TestVersionCommand:
    """Tests for --version flag."""

    def test_version_shows_version(self, runner: CliRunner) -> None:
        """--version should display version string."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "chronicle 0.1.0" in result.stdout

    def test_version_short_flag(self, runner: CliRunner) -> None:
        """-V should also display version."""
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "chronicle" in result.stdout


class TestHelpCommand:
    """Tests for --help flag."""

    def test_help_shows_commands(self, runner: CliRunner) -> None:
        """--help should list all available commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("init", "status", "version", "tag", "publish", "compare", "diff"):
            assert command in result.stdout

    def test_no_args_shows_help(self, runner: CliRunner) -> None:
        """Running with no args should show help (exit code 2 for no_args_is_help)."""
        result = runner.invoke(app, [])
        assert result.exit_code == 2
        assert "Usage:" in result.stdout

    def test_version_group_help(self, runner: CliRunner) -> None:
        """The version group lists its sub-commands."""
        result = runner.invoke(app, ["version", "--help"])
        assert result.exit_code == 0
        for command in ("create", "show", "list", "delete", "current"):
            assert command in result.stdout


class TestInitCommand:
    """Tests for init command."""

    def test_init_creates_workspace(self, runner: CliRunner, empty_dir: Path) -> None:
        """init should write the config template and store directory."""
        result = _run(runner, "init", "--name", "site")
        assert result.exit_code == 0
        assert "Chronicle initialized successfully" in result.stdout
        assert (empty_dir / ".chronicle" / "config.toml").exists()
        assert (empty_dir / ".chronicle" / "content").is_dir()
        assert 'name = "site"' in (empty_dir / ".chronicle" / "config.toml").read_text()

    def test_init_already_initialized(self, runner: CliRunner, workspace: Path) -> None:
        """init should keep an existing config."""
        result = _run(runner, "init")
        assert result.exit_code == 0
        assert "Config already exists" in result.stdout
        assert "test-project" in (workspace / ".chronicle" / "config.toml").read_text()

    def test_commands_require_workspace(self, runner: CliRunner, empty_dir: Path) -> None:
        """Commands outside a workspace exit with code 1."""
        result = _run(runner, "version", "list")
        assert result.exit_code == 1
        assert "not initialized" in result.stdout


class TestVersionCommands:
    """Tests for version ledger commands."""

    def test_create_and_show(self, runner: CliRunner, workspace: Path) -> None:
        """Created versions can be shown."""
        result = _run(runner, "version", "create", "--text", "Hello world", "-m", "first")
        assert result.exit_code == 0
        assert "Created version 1" in result.stdout

        result = _run(runner, "version", "show", "1")
        assert result.exit_code == 0
        assert "Hello world" in result.stdout
        assert "first" in result.stdout

    def test_create_from_file(self, runner: CliRunner, workspace: Path) -> None:
        """Content can be read from a file."""
        path = workspace / "post.md"
        path.write_text("# Title\n")
        result = _run_json(runner, "version", "create", "--file", str(path))
        assert result.exit_code == 0
        assert json.loads(result.stdout)["content"] == "# Title\n"

    def test_create_from_stdin(self, runner: CliRunner, workspace: Path) -> None:
        """'-' reads content from stdin."""
        result = runner.invoke(
            app, ["--no-color", "-q", "--json", "version", "create", "-f", "-"], input="piped"
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["content"] == "piped"

    def test_create_requires_one_source(self, runner: CliRunner, workspace: Path) -> None:
        """Exactly one of --file and --text is required."""
        result = _run(runner, "version", "create")
        assert result.exit_code == 2
        assert "exactly one" in result.stdout

    def test_create_writes_document(self, runner: CliRunner, workspace: Path) -> None:
        """The document lands in the store directory as camelCase JSON."""
        _run(runner, "version", "create", "--text", "Hello")
        data = json.loads((workspace / ".chronicle" / "content" / "default.json").read_text())
        assert data["currentVersion"] == 1
        assert data["content"] == "Hello"

    def test_show_missing_version(self, runner: CliRunner, workspace: Path) -> None:
        """Unknown versions exit with code 4."""
        result = _run(runner, "version", "show", "9")
        assert result.exit_code == 4
        assert "Version 9 not found" in result.stdout

    def test_show_invalid_id(self, runner: CliRunner, workspace: Path) -> None:
        """Non-numeric ids exit with code 2."""
        result = _run(runner, "version", "show", "abc")
        assert result.exit_code == 2

    def test_list_json(self, runner: CliRunner, workspace: Path) -> None:
        """version list --json emits summaries in creation order."""
        _run(runner, "version", "create", "-t", "a", "-m", "one")
        _run(runner, "version", "create", "-t", "b", "-m", "two")

        result = _run_json(runner, "version", "list")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [v["id"] for v in data] == [1, 2]
        assert [v["message"] for v in data] == ["one", "two"]
        assert "content" not in data[0]

    def test_list_filters_status(self, runner: CliRunner, workspace: Path) -> None:
        """--status keeps only matching versions."""
        _run(runner, "version", "create", "-t", "a")
        _run(runner, "version", "create", "-t", "b")
        _run(runner, "publish", "1")

        result = _run_json(runner, "version", "list", "--status", "published")
        assert [v["id"] for v in json.loads(result.stdout)] == [1]

    def test_list_empty(self, runner: CliRunner, workspace: Path) -> None:
        """An empty ledger prints a notice."""
        result = _run(runner, "version", "list")
        assert result.exit_code == 0
        assert "No versions found" in result.stdout

    def test_current(self, runner: CliRunner, workspace: Path) -> None:
        """version current shows the active version."""
        _run(runner, "version", "create", "-t", "a")
        _run(runner, "version", "create", "-t", "b")
        result = _run_json(runner, "version", "current")
        assert json.loads(result.stdout)["id"] == 2

    def test_delete_and_conflict(self, runner: CliRunner, workspace: Path) -> None:
        """Drafts can be deleted; published versions exit with code 5."""
        _run(runner, "version", "create", "-t", "a")
        _run(runner, "version", "create", "-t", "b")
        _run(runner, "publish", "1")

        result = _run(runner, "version", "delete", "1")
        assert result.exit_code == 5
        assert "Cannot delete published version 1" in result.stdout

        result = _run(runner, "version", "delete", "2")
        assert result.exit_code == 0
        assert "Deleted version 2" in result.stdout

    def test_revert(self, runner: CliRunner, workspace: Path) -> None:
        """revert creates a new version with the old content."""
        _run(runner, "version", "create", "-t", "A")
        _run(runner, "version", "create", "-t", "B")

        result = _run_json(runner, "revert", "1")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["id"] == 3
        assert data["content"] == "A"
        assert data["message"] == "Reverted to version 1"

    def test_content_option_selects_document(self, runner: CliRunner, workspace: Path) -> None:
        """--content operates on a separate document."""
        _run(runner, "-c", "about", "version", "create", "-t", "About us")
        result = _run_json(runner, "version", "list")
        assert json.loads(result.stdout) == []
        assert (workspace / ".chronicle" / "content" / "about.json").exists()


class TestTagCommands:
    """Tests for tag commands."""

    def test_tag_lifecycle(self, runner: CliRunner, workspace: Path) -> None:
        """Tags can be added, renamed, listed and deleted."""
        _run(runner, "version", "create", "-t", "a")

        result = _run(runner, "tag", "add", "1", "stable")
        assert result.exit_code == 0
        assert "Tagged version 1 as stable" in result.stdout

        result = _run(runner, "tag", "add", "1", "stable")
        assert result.exit_code == 5

        result = _run(runner, "tag", "rename", "stable", "release")
        assert result.exit_code == 0

        result = _run_json(runner, "tag", "list", "--version", "1")
        assert [t["name"] for t in json.loads(result.stdout)] == ["release"]

        result = _run(runner, "tag", "delete", "release")
        assert result.exit_code == 0
        assert "Tag release deleted successfully" in result.stdout

        result = _run(runner, "tag", "list")
        assert "No tags found" in result.stdout

    def test_tag_missing_version(self, runner: CliRunner, workspace: Path) -> None:
        """Tagging an unknown version exits with code 4."""
        result = _run(runner, "tag", "add", "3", "stable")
        assert result.exit_code == 4


class TestPublishCommands:
    """Tests for publish workflow commands."""

    def test_publish_uses_default_publisher(self, runner: CliRunner, workspace: Path) -> None:
        """Without --by the configured publisher is recorded."""
        _run(runner, "version", "create", "-t", "a")
        result = _run(runner, "publish", "1")
        assert result.exit_code == 0
        assert "Published version 1 by tester" in result.stdout

    def test_publish_unpublish_history(self, runner: CliRunner, workspace: Path) -> None:
        """History keeps records and stamps unpublish times."""
        _run(runner, "version", "create", "-t", "a")
        _run(runner, "version", "create", "-t", "b")
        _run(runner, "publish", "1", "--by", "alice")
        _run(runner, "publish", "2", "--by", "bob")
        result = _run(runner, "unpublish", "2")
        assert result.exit_code == 0

        result = _run_json(runner, "history")
        records = json.loads(result.stdout)
        assert [(r["versionId"], r["publishedBy"]) for r in records] == [(1, "alice"), (2, "bob")]
        assert records[1]["unpublishedAt"] is not None

    def test_publish_missing_version(self, runner: CliRunner, workspace: Path) -> None:
        """Publishing an unknown version exits with code 4 and a JSON error."""
        result = _run_json(runner, "publish", "5")
        assert result.exit_code == 4
        data = json.loads(result.stdout)
        assert data["kind"] == "not_found"
        assert "Version 5 not found" in data["error"]

    def test_status(self, runner: CliRunner, workspace: Path) -> None:
        """status summarizes the document."""
        _run(runner, "version", "create", "-t", "a")
        _run(runner, "publish", "1")
        result = _run_json(runner, "status")
        data = json.loads(result.stdout)
        assert data["current_version"] == 1
        assert data["published_version"] == 1
        assert data["versions"] == 1


class TestComparisonCommands:
    """Tests for compare and diff commands."""

    def test_compare_json(self, runner: CliRunner, workspace: Path) -> None:
        """compare emits the diff with its statistics."""
        _run(runner, "version", "create", "-t", "a\nb")
        _run(runner, "version", "create", "-t", "a\nb\nc")

        result = _run_json(runner, "compare", "1", "2")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["from"] == "Version 1"
        assert data["to"] == "Version 2"
        assert data["changes"]["additions"] == 1
        assert "+c" in data["patch"]

    def test_compare_with_previous(self, runner: CliRunner, workspace: Path) -> None:
        """A single argument compares with the preceding version."""
        _run(runner, "version", "create", "-t", "a")
        _run(runner, "version", "create", "-t", "b")
        result = _run_json(runner, "compare", "2")
        assert json.loads(result.stdout)["from"] == "Version 1"

        result = _run(runner, "compare", "1")
        assert result.exit_code == 5

    def test_diff_report(self, runner: CliRunner, workspace: Path) -> None:
        """diff prints the plain-text report."""
        _run(runner, "version", "create", "-t", "a", "-m", "first")
        _run(runner, "version", "create", "-t", "b", "-m", "second")

        result = _run(runner, "diff", "1", "2")
        assert result.exit_code == 0
        assert "Comparing Version 1 -> Version 2" in result.stdout
        assert "From: first" in result.stdout
        assert "Index: content.txt" in result.stdout
        assert "-a" in result.stdout
        assert "+b" in result.stdout

    def test_diff_missing_version(self, runner: CliRunner, workspace: Path) -> None:
        """diff against an unknown version exits with code 4."""
        _run(runner, "version", "create", "-t", "a")
        result = _run(runner, "diff", "1", "2")
        assert result.exit_code == 4

"""
Tests for the CLI.

Runs the fgraph commands against edge-list files in a temp directory.
"""

import pytest
from typer.testing import CliRunner

from cli.main import app
from tests.fixtures import BRACKETED_FILE, FRIENDS_FILE, MALFORMED_FILE

runner = CliRunner()


@pytest.fixture
def friends_file(tmp_path):
    """Write the friend groups to an edge-list file."""
    path = tmp_path / "friends.txt"
    path.write_text(FRIENDS_FILE, encoding="utf-8")
    return path


class TestSummary:
    """Tests for the summary command."""

    def test_counts(self, friends_file):
        """Test that node and edge counts are shown."""
        result = runner.invoke(app, ["summary", str(friends_file)])

        assert result.exit_code == 0
        assert "Nodes: 6" in result.output
        assert "Edges: 4" in result.output
        assert "Ada" in result.output

    def test_malformed_file(self, tmp_path):
        """Test that a malformed file is reported as an error."""
        path = tmp_path / "bad.txt"
        path.write_text(MALFORMED_FILE, encoding="utf-8")

        result = runner.invoke(app, ["summary", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_file(self, tmp_path):
        """Test that a missing file is rejected before loading."""
        result = runner.invoke(app, ["summary", str(tmp_path / "missing.txt")])

        assert result.exit_code != 0


class TestNeighbors:
    """Tests for the neighbors command."""

    def test_lists_neighbors(self, friends_file):
        """Test listing a node's neighbors."""
        result = runner.invoke(app, ["neighbors", str(friends_file), "Ada"])

        assert result.exit_code == 0
        assert "Grace" in result.output
        assert "Eve" in result.output
        assert "Mary" not in result.output

    def test_isolated_node(self, friends_file):
        """Test a node with no neighbors."""
        result = runner.invoke(app, ["neighbors", str(friends_file), "Nobody"])

        assert result.exit_code == 0
        assert "no neighbors" in result.output

    def test_unknown_node(self, friends_file):
        """Test that an unknown node is an error."""
        result = runner.invoke(app, ["neighbors", str(friends_file), "Zed"])

        assert result.exit_code == 1
        assert "Node not found" in result.output


class TestReach:
    """Tests for the reach command."""

    def test_reachable(self, friends_file):
        """Test a reachable pair."""
        result = runner.invoke(app, ["reach", str(friends_file), "Grace", "Eve"])

        assert result.exit_code == 0
        assert "is reachable" in result.output

    def test_not_reachable(self, friends_file):
        """Test that an unreachable pair is a normal outcome."""
        result = runner.invoke(app, ["reach", str(friends_file), "Ada", "Mary"])

        assert result.exit_code == 0
        assert "not reachable" in result.output

    def test_unknown_node(self, friends_file):
        """Test that an unknown endpoint is an error."""
        result = runner.invoke(app, ["reach", str(friends_file), "Ada", "Zed"])

        assert result.exit_code == 1
        assert "Zed" in result.output


class TestPath:
    """Tests for the path command."""

    def test_path_found(self, tmp_path):
        """Test showing a path along a chain."""
        path = tmp_path / "chain.txt"
        path.write_text("A B\nB C\nC D\n", encoding="utf-8")

        result = runner.invoke(app, ["path", str(path), "A", "D"])

        assert result.exit_code == 0
        assert "A → B → C → D" in result.output
        assert "Edges: 3" in result.output

    def test_no_path(self, friends_file):
        """Test that a missing path is reported without failing."""
        result = runner.invoke(app, ["path", str(friends_file), "Ada", "Lina"])

        assert result.exit_code == 0
        assert "No path" in result.output

    def test_unknown_node(self, friends_file):
        """Test that an unknown endpoint is an error."""
        result = runner.invoke(app, ["path", str(friends_file), "Zed", "Ada"])

        assert result.exit_code == 1
        assert "Node not found" in result.output


class TestBracketedNames:
    """Tests that node names are printed literally, never as markup."""

    @pytest.fixture
    def bracketed_file(self, tmp_path):
        """Write an edge list whose names contain square brackets."""
        path = tmp_path / "bracketed.txt"
        path.write_text(BRACKETED_FILE, encoding="utf-8")
        return path

    def test_closing_tag_name(self, bracketed_file):
        """Test a neighbor named like a closing tag."""
        result = runner.invoke(app, ["neighbors", str(bracketed_file), "Ada"])

        assert result.exit_code == 0
        assert "[/admin]" in result.output

    def test_tag_like_name(self, bracketed_file):
        """Test a neighbor named like an opening tag."""
        result = runner.invoke(app, ["neighbors", str(bracketed_file), "Bob"])

        assert result.exit_code == 0
        assert "[ops]" in result.output

    def test_summary_table(self, bracketed_file):
        """Test that bracketed names appear in the degree table."""
        result = runner.invoke(app, ["summary", str(bracketed_file)])

        assert result.exit_code == 0
        assert "[/admin]" in result.output
        assert "[ops]" in result.output

    def test_path_and_reach(self, bracketed_file):
        """Test bracketed names as query endpoints."""
        path_result = runner.invoke(app, ["path", str(bracketed_file), "[ops]", "Bob"])
        reach_result = runner.invoke(
            app, ["reach", str(bracketed_file), "[/admin]", "[ops]"]
        )

        assert path_result.exit_code == 0
        assert "[ops] → Bob" in path_result.output
        assert reach_result.exit_code == 0
        assert "[ops] is not reachable from [/admin]" in reach_result.output

    def test_unknown_bracketed_node(self, bracketed_file):
        """Test that an unknown bracketed name is reported as an error."""
        result = runner.invoke(app, ["neighbors", str(bracketed_file), "[/nope]"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert "[/nope]" in result.output


class TestVersion:
    """Tests for the top-level options."""

    def test_version(self):
        """Test that --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "friendgraph" in result.output
        assert "0.1.0" in result.output

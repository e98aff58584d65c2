"""
tests/test_research_cli.py - Research CLI Tests

Verifies exit codes:
  - 0: success
  - 2: fatal error (invalid vocabulary file, unreadable input)
"""

import json

import pytest
from click.testing import CliRunner

from research import everling

HEADER = "id,start,surface,base,reading,pron,pos,extra"


@pytest.fixture
def cli_runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def paths(tmp_path):
    return {
        "vocab": tmp_path / "data" / "vocabulary.json",
        "morphemes": tmp_path / "data" / "morphemes.csv",
        "results": tmp_path / "results",
    }


def _run_args(paths, *extra):
    return [
        "run",
        "--vocab", str(paths["vocab"]),
        "--morphemes", str(paths["morphemes"]),
        "--results-dir", str(paths["results"]),
        "--random-seed", "7",
        *extra,
    ]


class TestRunCommand:
    """Test the run subcommand."""

    def test_json_output(self, cli_runner, paths):
        result = cli_runner.invoke(everling, _run_args(paths, "-l", "english", "-s", "test", "-o", "json"))
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [r["config"]["mode"] for r in data["reports"]] == ["Narrative", "Dialectic"]
        assert (paths["results"] / "report_Narrative.json").exists()
        assert (paths["results"] / "report_Dialectic.json").exists()
        assert (paths["results"] / "receipts.jsonl").exists()

    def test_reproducible_with_random_seed(self, cli_runner, paths):
        args = _run_args(paths, "-l", "english", "-s", "test", "-o", "json")
        first = json.loads(cli_runner.invoke(everling, args).stdout)
        second = json.loads(cli_runner.invoke(everling, args).stdout)
        assert first["reports"] == second["reports"]

    def test_rich_output(self, cli_runner, paths):
        result = cli_runner.invoke(everling, _run_args(paths, "-l", "japanese", "-s", "静寂"))
        assert result.exit_code == 0, result.output
        assert "Narrative" in result.output
        assert "Dialectic" in result.output

    def test_prompts_for_language_and_seed(self, cli_runner, paths):
        result = cli_runner.invoke(everling, _run_args(paths, "-o", "json"), input="chinese\ntest\n")
        assert result.exit_code == 0, result.output
        report = json.loads((paths["results"] / "report_Narrative.json").read_text(encoding="utf-8"))
        assert report["config"]["seed_text"] == "test"
        assert report["generated_sentence"].endswith("。")

    def test_invalid_vocabulary_exits_2(self, cli_runner, paths):
        paths["vocab"].parent.mkdir(parents=True)
        paths["vocab"].write_text("{broken", encoding="utf-8")
        result = cli_runner.invoke(everling, _run_args(paths, "-l", "english", "-s", "test", "-o", "json"))
        assert result.exit_code == 2
        assert "error" in json.loads(result.stdout)


class TestSyncCommand:
    """Test the sync subcommand."""

    def test_merges_morphemes(self, cli_runner, paths):
        paths["morphemes"].parent.mkdir(parents=True)
        paths["morphemes"].write_text(
            HEADER + "\n" + ",".join(["0", "0", "宇宙", "b", "r", "p", "名詞", "x"]) + "\n",
            encoding="utf-8",
        )
        result = cli_runner.invoke(everling, [
            "sync", "-l", "japanese",
            "--vocab", str(paths["vocab"]),
            "--morphemes", str(paths["morphemes"]),
            "-o", "json",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["status"] == "merged"
        assert "宇宙" in paths["vocab"].read_text(encoding="utf-8")

    def test_missing_morphemes(self, cli_runner, paths):
        result = cli_runner.invoke(everling, [
            "sync", "--vocab", str(paths["vocab"]), "--morphemes", str(paths["morphemes"]),
        ])
        assert result.exit_code == 0, result.output
        assert not paths["vocab"].exists()


class TestExtractCommand:
    """Test the extract subcommand."""

    def test_json_output(self, cli_runner, tmp_path):
        path = tmp_path / "morphemes.csv"
        path.write_text(
            HEADER + "\n" + ",".join(["0", "0", "星", "b", "r", "p", "名詞", "x"]) + "\n",
            encoding="utf-8",
        )
        result = cli_runner.invoke(everling, ["extract", str(path), "-o", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["vocabulary"]["nouns"] == ["星"]

    def test_missing_file_rejected(self, cli_runner, tmp_path):
        result = cli_runner.invoke(everling, ["extract", str(tmp_path / "absent.csv")])
        assert result.exit_code != 0

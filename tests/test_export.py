"""
tests/test_export.py - Report Export Tests

Validates the JSON report layout, file writing and the text summary.
"""

import json
from dataclasses import replace

import pytest

from everling.constants import Language
from everling.cycle import run_experiment
from everling.errors import IoError, SerializationError
from everling.export import export_report, generate_summary, load_report, report_to_dict, write_report
from everling.types_config import SimulationConfig, SCENARIO_DIALECTIC, with_seed
from everling.vocabulary import default_vocabularies


@pytest.fixture
def report():
    config = SimulationConfig(steps=60, seed_text="test", random_seed=3)
    return run_experiment(config, default_vocabularies()[Language.JAPANESE], Language.JAPANESE)


class TestReportToDict:
    """Test report_to_dict function."""

    def test_has_required_keys(self, report):
        data = report_to_dict(report)
        for key in ["config", "metrics", "generated_sentence", "variance_change", "intensity_score"]:
            assert key in data, f"Missing required key '{key}'"

    def test_metrics_layout(self, report):
        data = report_to_dict(report)
        assert [m["step"] for m in data["metrics"]] == [0, 25, 50]
        assert set(data["metrics"][0]) == {"step", "variance", "structure_score"}

    def test_config_layout(self, report):
        config = report_to_dict(report)["config"]
        assert config["mode"] == "Narrative"
        assert config["seed_text"] == "test"
        assert config["active_dimensions"] == 128

    def test_is_json_serializable(self, report):
        json.loads(export_report(report))


class TestWriteReport:
    """Test write_report and load_report."""

    def test_file_named_after_mode(self, tmp_path, report):
        path = write_report(report, tmp_path / "results")
        assert path.name == "report_Narrative.json"
        assert path.exists()

    def test_round_trip(self, tmp_path, report):
        path = write_report(report, tmp_path)
        loaded = load_report(path)
        assert loaded == report_to_dict(report)
        assert loaded["generated_sentence"] in path.read_text(encoding="utf-8"), (
            "Non-ASCII text should be written unescaped"
        )

    def test_dialectic_file_name(self, tmp_path):
        config = with_seed(SCENARIO_DIALECTIC, "x", random_seed=1)
        config = replace(config, steps=10)
        report = run_experiment(config, default_vocabularies()[Language.ENGLISH], Language.ENGLISH)
        assert write_report(report, tmp_path).name == "report_Dialectic.json"

    def test_receipt_recorded(self, tmp_path, report):
        ledger = []
        write_report(report, tmp_path, ledger)
        assert ledger[0]["receipt_type"] == "report_export"
        assert ":" in ledger[0]["dual_hash"]

    def test_unwritable_directory(self, tmp_path, report):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(IoError):
            write_report(report, blocker)

    def test_load_missing(self, tmp_path):
        with pytest.raises(IoError):
            load_report(tmp_path / "absent.json")

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SerializationError):
            load_report(path)


class TestGenerateSummary:
    def test_contains_scores(self, report):
        text = generate_summary(report)
        assert f"{report.variance_change:.2f}x" in text
        assert f"{report.intensity_score:.4f}" in text
        assert report.generated_sentence in text

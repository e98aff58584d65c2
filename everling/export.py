"""
everling/export.py - Report Export

JSON report per run, plus a human-readable summary.
"""

import json
from pathlib import Path
from typing import Optional, Union

from receipts import emit_receipt, dual_hash

from .constants import RESULTS_DIR
from .errors import IoError, SerializationError
from .types_config import config_to_dict
from .types_result import ResearchReport


def report_to_dict(report: ResearchReport) -> dict:
    """JSON-ready view of a report."""
    return {
        "config": config_to_dict(report.config),
        "metrics": [
            {"step": m.step, "variance": m.variance, "structure_score": m.structure_score}
            for m in report.metrics
        ],
        "generated_sentence": report.generated_sentence,
        "variance_change": report.variance_change,
        "intensity_score": report.intensity_score,
    }


def export_report(report: ResearchReport) -> str:
    """
    Format a report as JSON.

    Args:
        report: ResearchReport to export

    Returns:
        str: Pretty-printed JSON, non-ASCII text kept as-is
    """
    return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)


def write_report(report: ResearchReport, results_dir: Union[str, Path] = RESULTS_DIR,
                 ledger: Optional[list] = None) -> Path:
    """
    Write report_<Mode>.json under results_dir, creating the directory.

    Returns:
        Path of the written file

    Raises:
        IoError: Directory or file cannot be written
    """
    out_dir = Path(results_dir)
    output_file = out_dir / f"report_{report.config.mode.value}.json"
    content = export_report(report)

    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")
    except OSError as e:
        raise IoError(f"Cannot write report {output_file}: {e}") from e

    receipt = emit_receipt("report_export", {
        "tenant_id": "simulation",
        "mode": report.config.mode.value,
        "output_path": str(output_file),
        "dual_hash": dual_hash(content),
    })
    if ledger is not None:
        ledger.append(receipt)

    return output_file


def load_report(path: Union[str, Path]) -> dict:
    """
    Read a report written by write_report.

    Raises:
        IoError: File cannot be read
        SerializationError: File is not valid JSON
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"Cannot read report {path}: {e}") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Report {path} is not valid JSON: {e}") from e


def generate_summary(report: ResearchReport) -> str:
    """
    Generate human-readable summary.

    Args:
        report: ResearchReport to summarize

    Returns:
        str: Report text
    """
    lines = [
        f"[Experiment] Mode: {report.config.mode.value}",
        f"  Seed: \"{report.config.seed_text}\"",
        f"  Crystallized Meaning: \"{report.generated_sentence}\"",
        f"  Structural Emergence Factor: {report.variance_change:.2f}x",
        f"  Mean Intensity Score: {report.intensity_score:.4f}",
    ]
    return "\n".join(lines)

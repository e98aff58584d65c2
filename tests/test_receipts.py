"""
tests/test_receipts.py - Receipt Tests
"""

import io
import json

from receipts import dual_hash, emit_receipt, write_receipt_jsonl


class TestDualHash:
    def test_format(self):
        sha, b3 = dual_hash("everling").split(":")
        assert len(sha) == 64
        assert len(b3) == 64
        assert sha != b3

    def test_str_and_bytes_agree(self):
        assert dual_hash("静寂") == dual_hash("静寂".encode("utf-8"))


class TestEmitReceipt:
    def test_fields(self):
        receipt = emit_receipt("simulation_run", {"tenant_id": "simulation", "steps": 5})
        assert receipt["receipt_type"] == "simulation_run"
        assert receipt["tenant_id"] == "simulation"
        assert receipt["steps"] == 5
        assert "ts" in receipt
        assert receipt["payload_hash"] == dual_hash(
            json.dumps({"tenant_id": "simulation", "steps": 5}, sort_keys=True)
        )

    def test_default_tenant(self):
        assert emit_receipt("x", {})["tenant_id"] == "everling"

    def test_jsonl(self):
        fh = io.StringIO()
        write_receipt_jsonl(emit_receipt("x", {"word": "宇宙"}), fh)
        line = fh.getvalue()
        assert line.endswith("\n")
        assert json.loads(line)["word"] == "宇宙"

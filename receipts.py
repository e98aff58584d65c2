"""
receipts.py - Audit Trail Foundation

Canonical emit_receipt() for every everling operation. ALL modules import from here.
Receipts are plain dicts so they can be collected in a ledger and written as JSONL.

Never single hash. Always dual_hash (SHA256:BLAKE3).
"""

import hashlib
import json
from datetime import datetime, timezone
from typing import Any, Dict, Union

import blake3

__all__ = [
    "dual_hash",
    "emit_receipt",
    "write_receipt_jsonl",
]


# =============================================================================
# CORE FUNCTION 1: dual_hash
# =============================================================================

def dual_hash(data: Union[bytes, str]) -> str:
    """
    SHA256:BLAKE3 - ALWAYS use this, never single hash.

    Args:
        data: Bytes or string to hash

    Returns:
        str: "sha256_hex:blake3_hex" format
    """
    if isinstance(data, str):
        data = data.encode()
    sha = hashlib.sha256(data).hexdigest()
    b3 = blake3.blake3(data).hexdigest()
    return f"{sha}:{b3}"


# =============================================================================
# CORE FUNCTION 2: emit_receipt
# =============================================================================

def emit_receipt(receipt_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build a receipt for one completed operation.

    Args:
        receipt_type: Type identifier for this receipt
        data: Receipt payload (must include tenant_id or defaults to 'everling')

    Returns:
        dict: Complete receipt with ts, tenant_id, payload_hash, and data fields
    """
    receipt = {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat(),
        "tenant_id": data.get("tenant_id", "everling"),
        "payload_hash": dual_hash(json.dumps(data, sort_keys=True, ensure_ascii=False)),
        **data
    }
    return receipt


# =============================================================================
# CORE FUNCTION 3: write_receipt_jsonl
# =============================================================================

def write_receipt_jsonl(receipt: Dict[str, Any], fh) -> None:
    """
    Append receipt as single JSON line to file handle.

    Args:
        receipt: Receipt dict to write
        fh: File handle (must be open for writing)
    """
    line = json.dumps(receipt, separators=(",", ":"), ensure_ascii=False)
    fh.write(line + "\n")

"""
Organizational Report — Canonical Hashing v1.0

Deterministic serialization + SHA-256 of a rendered report.
Identical documents produce byte-identical reports, so identical hashes.

Rules:
  - UTF-8
  - One row per line, "\\n" separators, trailing "\\n"
  - No platform newline
"""

from __future__ import annotations

import hashlib
from typing import Sequence


def canonical_serialize(rows: Sequence[str]) -> bytes:
    """Report rows as UTF-8 bytes, newline-terminated."""
    return "".join(f"{row}\n" for row in rows).encode("utf-8")


def report_hash(rows: Sequence[str]) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_serialize(rows)).hexdigest()

# file: backend/main.py
"""
FastAPI Backend — Organizational Report API v1.

Stateless: every request parses, resolves and sorts from scratch.
No in-memory state between requests.

Endpoints:
  POST /report        — document -> ordered rows + report hash
  POST /report.csv    — document -> text/csv body
  POST /diagnostics   — document -> diagnostic summary
  GET  /health
"""
from __future__ import annotations

import os
import sys
from typing import List

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

# Add project root to path for package imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_report.diagnostics import compute_diagnostics
from org_report.errors import (
    CyclicManagerChain,
    DanglingManagerReference,
    DuplicateId,
    MalformedRecord,
    ReportError,
    error_context,
    error_kind,
)
from org_report.hashing import canonical_serialize, report_hash
from org_report.report import generate_report

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

API_VERSION = "1.0.0"
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
MAX_DOCUMENT_CHARS = int(os.environ.get("REPORT_MAX_DOCUMENT_CHARS", "5000000"))

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="OrgReport API",
    version=API_VERSION,
    description="Department / manager report from an organization document",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        FRONTEND_URL,
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Error kind -> HTTP status
# ---------------------------------------------------------------------------

_STATUS_BY_ERROR = {
    MalformedRecord: 400,
    DuplicateId: 400,
    DanglingManagerReference: 422,
    CyclicManagerChain: 422,
}

# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------


class DocumentRequest(BaseModel):
    document: str


class ReportResponse(BaseModel):
    row_count: int
    rows: List[str]
    report_hash: str


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


def _check_size(document: str) -> None:
    if len(document) > MAX_DOCUMENT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Document too large: {len(document)} chars "
                   f"(limit {MAX_DOCUMENT_CHARS})",
        )


def _to_http_error(exc: ReportError) -> HTTPException:
    """Map a report error to an HTTPException carrying kind + context."""
    kind = error_kind(exc)
    print(f"WARN: report rejected ({kind}): {exc}")
    return HTTPException(
        status_code=_STATUS_BY_ERROR.get(type(exc), 400),
        detail={
            "error": kind,
            "message": str(exc),
            "context": error_context(exc),
        },
    )


def _build_rows(document: str) -> List[str]:
    _check_size(document)
    try:
        return generate_report(document)
    except ReportError as exc:
        raise _to_http_error(exc) from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.post("/report", response_model=ReportResponse)
def create_report(req: DocumentRequest):
    """Document -> header + sorted rows."""
    rows = _build_rows(req.document)
    return ReportResponse(
        row_count=len(rows),
        rows=rows,
        report_hash=report_hash(rows),
    )


@app.post("/report.csv", response_class=PlainTextResponse)
def create_report_csv(req: DocumentRequest):
    rows = _build_rows(req.document)
    return PlainTextResponse(
        canonical_serialize(rows).decode("utf-8"),
        media_type="text/csv",
        headers={"X-Report-Hash": report_hash(rows)},
    )


@app.post("/diagnostics")
def diagnostics(req: DocumentRequest):
    _check_size(req.document)
    try:
        return compute_diagnostics(req.document)
    except ReportError as exc:
        raise _to_http_error(exc) from exc


@app.get("/health")
def health():
    return {"status": "ok", "version": API_VERSION}

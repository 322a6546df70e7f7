"""
Organizational Report v1.0
Deterministic, in-memory transformation of an organization document
(departments + employees) into a sorted department/manager CSV report.
"""

from .domain_types import CORPORATE, Department, Employee, ReportRow
from .errors import (
    ReportError,
    MalformedRecord,
    DuplicateId,
    DanglingManagerReference,
    CyclicManagerChain,
    error_context,
    error_kind,
)
from .extractor import (
    extract_records,
    extract_departments,
    extract_employees,
    parse_document,
)
from .hierarchy import HierarchyResolver, index_employees, resolve_department
from .report import (
    REPORT_HEADER,
    build_report_rows,
    generate_report,
    render_rows,
    sort_rows,
)
from .hashing import canonical_serialize, report_hash
from .diagnostics import compute_diagnostics

__all__ = [
    "CORPORATE",
    "Department",
    "Employee",
    "ReportRow",
    "ReportError",
    "MalformedRecord",
    "DuplicateId",
    "DanglingManagerReference",
    "CyclicManagerChain",
    "error_context",
    "error_kind",
    "extract_records",
    "extract_departments",
    "extract_employees",
    "parse_document",
    "HierarchyResolver",
    "index_employees",
    "resolve_department",
    "REPORT_HEADER",
    "build_report_rows",
    "generate_report",
    "render_rows",
    "sort_rows",
    "canonical_serialize",
    "report_hash",
    "compute_diagnostics",
]

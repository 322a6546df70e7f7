"""
Organizational Report — Error Hierarchy v1.0

Every failure aborts the whole report. No partial output, no retry,
no silent defaulting. Each error carries the ids / fields needed to
locate the offending record.
"""

from __future__ import annotations

from typing import List, Optional


class ReportError(Exception):
    """Base exception for all report generation failures."""


class MalformedRecord(ReportError):
    """
    A department or employee record is missing a required field or has
    an unparsable value, or the document itself is not well formed.
    """

    def __init__(
        self,
        collection: str,
        detail: str,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        self.collection = collection
        self.index = index
        self.field = field
        self.detail = detail
        where = collection
        if index is not None:
            where += f"[{index}]"
        if field is not None:
            where += f".{field}"
        super().__init__(f"Malformed record at {where}: {detail}")


class DuplicateId(ReportError):
    """Two records of one kind share an id, or two departments share a head."""

    def __init__(self, kind: str, duplicate_id: int) -> None:
        self.kind = kind
        self.duplicate_id = duplicate_id
        super().__init__(f"Duplicate {kind}: {duplicate_id}")


class DanglingManagerReference(ReportError):
    """An employee's manager_id matches no known employee."""

    def __init__(self, employee_id: int, manager_id: int) -> None:
        self.employee_id = employee_id
        self.manager_id = manager_id
        super().__init__(
            f"Employee {employee_id} references unknown manager {manager_id}"
        )


class CyclicManagerChain(ReportError):
    """The manager chain starting at employee_id revisits an employee."""

    def __init__(self, employee_id: int, chain: List[int]) -> None:
        self.employee_id = employee_id
        self.chain = list(chain)
        chain_str = " -> ".join(str(i) for i in self.chain)
        super().__init__(
            f"Cyclic manager chain for employee {employee_id}: {chain_str}"
        )


def error_kind(exc: ReportError) -> str:
    """Stable name of the error kind, for callers presenting it."""
    return type(exc).__name__


def error_context(exc: ReportError) -> dict:
    """Identifying context of an error as a plain dict."""
    if isinstance(exc, MalformedRecord):
        return {
            "collection": exc.collection,
            "index": exc.index,
            "field": exc.field,
            "detail": exc.detail,
        }
    if isinstance(exc, DuplicateId):
        return {"kind": exc.kind, "id": exc.duplicate_id}
    if isinstance(exc, DanglingManagerReference):
        return {"employee_id": exc.employee_id, "manager_id": exc.manager_id}
    if isinstance(exc, CyclicManagerChain):
        return {"employee_id": exc.employee_id, "chain": list(exc.chain)}
    return {}

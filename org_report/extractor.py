"""
Organizational Report — Record Extractor v1.0

Structured extraction of Department and Employee records from a JSON
organization document.

Rules:
  - The document is parsed by a general JSON reader. Whitespace, key
    order and line layout are irrelevant.
  - Unknown fields are ignored. Required fields must be present.
  - Integers: JSON integers, or strings holding an integer literal.
    Floats and booleans are rejected.
  - manager_id may be null; null means "no manager".
  - Employees keep document order.
  - No mutation. No side effects. No defaults injected.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from .domain_types import Department, Employee
from .errors import DuplicateId, MalformedRecord


DEPARTMENTS: str = "departments"
EMPLOYEES: str = "employees"

# -- Required fields per collection --

_DEPARTMENT_FIELDS = ("id", "name", "department_head_id")
_EMPLOYEE_FIELDS = ("id", "name", "manager_id")


# ══════════════════════════════════════════════════════════════
# Public API
# ══════════════════════════════════════════════════════════════

def parse_document(document: str) -> Dict[str, Any]:
    """Parse the raw text into its top-level JSON object."""
    if not isinstance(document, str):
        raise MalformedRecord(
            "document",
            f"document must be str, got {type(document).__name__}",
        )
    try:
        raw = json.loads(document)
    except json.JSONDecodeError as exc:
        raise MalformedRecord("document", f"Invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise MalformedRecord(
            "document",
            f"Top-level JSON must be object, got {type(raw).__name__}",
        )
    return raw


def extract_records(
    document: str,
) -> Tuple[Dict[int, Department], List[Employee]]:
    """
    Extract (departments keyed by head employee id, employees in
    document order) from a JSON organization document.
    """
    raw = parse_document(document)
    return extract_departments(raw), extract_employees(raw)


def extract_departments(raw: Dict[str, Any]) -> Dict[int, Department]:
    """
    Build the head-id -> Department map.

    Fails on duplicate department ids and on two departments claiming
    the same head.
    """
    departments_by_head: Dict[int, Department] = {}
    seen_ids: set = set()

    for i, ddata in enumerate(_collection(raw, DEPARTMENTS)):
        _check_record(ddata, _DEPARTMENT_FIELDS, DEPARTMENTS, i)
        department = Department(
            id=_read_int(ddata, "id", DEPARTMENTS, i),
            name=_read_str(ddata, "name", DEPARTMENTS, i),
            department_head_id=_read_int(
                ddata, "department_head_id", DEPARTMENTS, i,
            ),
        )

        if department.id in seen_ids:
            raise DuplicateId("department id", department.id)
        seen_ids.add(department.id)

        if department.department_head_id in departments_by_head:
            raise DuplicateId(
                "department head id", department.department_head_id,
            )
        departments_by_head[department.department_head_id] = department

    return departments_by_head


def extract_employees(raw: Dict[str, Any]) -> List[Employee]:
    """Build the employee list in document order."""
    employees: List[Employee] = []
    for i, edata in enumerate(_collection(raw, EMPLOYEES)):
        _check_record(edata, _EMPLOYEE_FIELDS, EMPLOYEES, i)
        employees.append(Employee(
            id=_read_int(edata, "id", EMPLOYEES, i),
            name=_read_str(edata, "name", EMPLOYEES, i),
            manager_id=_read_optional_int(edata, "manager_id", EMPLOYEES, i),
        ))
    return employees


# ══════════════════════════════════════════════════════════════
# Internal Validation Helpers
# ══════════════════════════════════════════════════════════════

def _collection(raw: Dict[str, Any], name: str) -> List[Any]:
    """Return the named top-level array, failing if absent or not a list."""
    if name not in raw:
        raise MalformedRecord(name, f"Missing top-level '{name}' array")
    records = raw[name]
    if not isinstance(records, list):
        raise MalformedRecord(
            name,
            f"'{name}' must be a JSON array, got {type(records).__name__}",
        )
    return records


def _check_record(
    data: Any, required: Tuple[str, ...], collection: str, index: int,
) -> None:
    """Fail if data is not an object or lacks a required field."""
    if not isinstance(data, dict):
        raise MalformedRecord(
            collection,
            f"record must be a JSON object, got {type(data).__name__}",
            index=index,
        )
    for fname in required:
        if fname not in data:
            raise MalformedRecord(
                collection, "missing required field", index=index, field=fname,
            )


def _read_int(data: dict, fname: str, collection: str, index: int) -> int:
    value = _coerce_int(data[fname])
    if value is None:
        raise MalformedRecord(
            collection,
            f"expected integer, got {data[fname]!r}",
            index=index,
            field=fname,
        )
    return value


def _read_optional_int(
    data: dict, fname: str, collection: str, index: int,
) -> Optional[int]:
    if data[fname] is None:
        return None
    return _read_int(data, fname, collection, index)


def _read_str(data: dict, fname: str, collection: str, index: int) -> str:
    value = data[fname]
    if not isinstance(value, str):
        raise MalformedRecord(
            collection,
            f"expected string, got {type(value).__name__}",
            index=index,
            field=fname,
        )
    return value


def _coerce_int(value: Any) -> Optional[int]:
    """int for JSON integers and integer-literal strings, else None."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if digits.isascii() and digits.isdigit():
            return int(text)
    return None

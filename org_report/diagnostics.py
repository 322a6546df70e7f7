"""
Organizational Report — Diagnostics v1.0

Summarise the health of an organization document: who lands where,
how deep the management chains run, and which records look suspect.
Fails with the same errors as report generation.
"""

from __future__ import annotations

from typing import Dict, List

from .domain_types import CORPORATE
from .extractor import extract_records
from .hierarchy import HierarchyResolver, index_employees


DEEP_CHAIN_THRESHOLD: int = 8


def compute_diagnostics(document: str) -> dict:
    """Return a diagnostic dict for one organization document."""
    departments_by_head, employees = extract_records(document)
    employees_by_id = index_employees(employees)
    resolver = HierarchyResolver(departments_by_head, employees_by_id)

    headcount: Dict[str, int] = {}
    max_chain_depth = 0
    deepest = None
    for employee in employees:
        department = resolver.resolve_department(employee)
        headcount[department.name] = headcount.get(department.name, 0) + 1
        depth = resolver.chain_depth(employee)
        if deepest is None or depth > max_chain_depth:
            max_chain_depth, deepest = depth, employee

    missing_heads = sorted(
        head_id for head_id in departments_by_head if head_id not in employees_by_id
    )
    empty_departments = sorted(
        d.name for d in departments_by_head.values() if d.name not in headcount
    )
    roots = sorted(e.id for e in employees if not e.has_manager)
    unknown_managers = sorted({
        e.manager_id
        for e in employees
        if e.has_manager and e.manager_id not in employees_by_id
    })

    warnings: List[str] = []

    if missing_heads:
        warnings.append(
            f"{len(missing_heads)} department head(s) not among employees: "
            f"{', '.join(str(i) for i in missing_heads)}"
        )
    if empty_departments:
        warnings.append(
            f"{len(empty_departments)} department(s) with no members: "
            f"{', '.join(empty_departments)}"
        )
    if len(roots) > 1:
        warnings.append(
            f"{len(roots)} employees without a manager: "
            f"{', '.join(str(i) for i in roots)}"
        )
    if unknown_managers:
        # only reachable for department heads, whose walk stops early
        warnings.append(
            f"{len(unknown_managers)} unknown manager id(s): "
            f"{', '.join(str(i) for i in unknown_managers)}"
        )
    if max_chain_depth > DEEP_CHAIN_THRESHOLD:
        warnings.append(
            f"Deep management chain ({max_chain_depth} levels)"
        )

    return {
        "employee_count": len(employees),
        "department_count": len(departments_by_head),
        "headcount_by_department": dict(sorted(headcount.items())),
        "corporate_headcount": headcount.get(CORPORATE.name, 0),
        "max_chain_depth": max_chain_depth,
        "deepest_chain": resolver.management_chain(deepest) if deepest is not None else [],
        "root_employee_ids": roots,
        "missing_department_heads": missing_heads,
        "empty_departments": empty_departments,
        "warnings": warnings,
    }

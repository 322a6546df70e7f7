"""
Organizational Report — Hierarchy Resolver v1.0

Read-only walk up the manager chain to find an employee's effective
department. Iterative, with the ids visited on the current chain
tracked explicitly, so a cycle or an unknown manager fails fast
instead of recursing without bound. Resolved ids are memoized per
resolver, so no chain segment is walked twice.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple

from .domain_types import CORPORATE, Department, Employee
from .errors import CyclicManagerChain, DanglingManagerReference, DuplicateId


def index_employees(employees: Iterable[Employee]) -> Dict[int, Employee]:
    """Build id -> Employee. Duplicate ids are rejected."""
    by_id: Dict[int, Employee] = {}
    for employee in employees:
        if employee.id in by_id:
            raise DuplicateId("employee id", employee.id)
        by_id[employee.id] = employee
    return by_id


class HierarchyResolver:
    """
    Resolves departments over one extracted organization.

    Every employee on a walked chain is remembered with its department
    and depth, and later walks stop at the first remembered id, so
    resolving a whole organization is linear in its size. The memo
    belongs to the instance: build one resolver per report.
    """

    def __init__(
        self,
        departments_by_head: Dict[int, Department],
        employees_by_id: Dict[int, Employee],
    ) -> None:
        self._departments_by_head = departments_by_head
        self._employees_by_id = employees_by_id
        # id -> (department, managers walked above it)
        self._resolved: Dict[int, Tuple[Department, int]] = {}

    def resolve_department(self, employee: Employee) -> Department:
        """
        1. A department head belongs to its own department.
        2. A manager-less non-head falls back to CORPORATE.
        3. Anyone else belongs wherever their manager belongs.
        """
        return self._resolve(employee)[0]

    def chain_depth(self, employee: Employee) -> int:
        """Managers walked above employee before resolution stops."""
        return self._resolve(employee)[1]

    def _resolve(self, employee: Employee) -> Tuple[Department, int]:
        cached = self._resolved.get(employee.id)
        if cached is not None:
            return cached

        chain: List[Employee] = []
        visited: Set[int] = set()
        current = employee

        while True:
            cached = self._resolved.get(current.id)
            if cached is not None:
                department, base_depth = cached[0], cached[1] + 1
                break
            if current.id in visited:
                raise CyclicManagerChain(
                    employee.id, [e.id for e in chain] + [current.id],
                )
            visited.add(current.id)
            chain.append(current)

            if current.id in self._departments_by_head:
                department, base_depth = self._departments_by_head[current.id], 0
                break
            if not current.has_manager:
                department, base_depth = CORPORATE, 0
                break

            manager = self._employees_by_id.get(current.manager_id)
            if manager is None:
                raise DanglingManagerReference(current.id, current.manager_id)
            current = manager

        for offset, walked in enumerate(reversed(chain)):
            self._resolved[walked.id] = (department, base_depth + offset)
        return self._resolved[employee.id]

    def management_chain(self, employee: Employee) -> List[int]:
        """
        Ids walked while resolving employee, starting with employee
        and ending at the head or root where resolution stops.
        """
        return [e.id for e in self._walk(employee)]

    def _walk(self, employee: Employee) -> List[Employee]:
        chain: List[Employee] = []
        visited: Set[int] = set()
        current = employee

        while True:
            if current.id in visited:
                raise CyclicManagerChain(
                    employee.id, [e.id for e in chain] + [current.id],
                )
            visited.add(current.id)
            chain.append(current)

            if current.id in self._departments_by_head:
                return chain
            if not current.has_manager:
                return chain

            manager = self._employees_by_id.get(current.manager_id)
            if manager is None:
                raise DanglingManagerReference(current.id, current.manager_id)
            current = manager


def resolve_department(
    departments_by_head: Dict[int, Department],
    employees_by_id: Dict[int, Employee],
    employee: Employee,
) -> Department:
    """One-off resolution without keeping a resolver around."""
    return HierarchyResolver(departments_by_head, employees_by_id).resolve_department(
        employee
    )

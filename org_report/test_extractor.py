# file: org_report/test_extractor.py
"""
Organizational Report — Record Extractor Tests

12 deterministic tests:
  1-5:   Structured parsing (layout, order, null manager, coercion)
  6-12:  Malformed documents and duplicate ids

Run:  py -3 -m org_report.test_extractor
"""

from __future__ import annotations

import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_report.domain_types import Department, Employee
from org_report.errors import DuplicateId, MalformedRecord
from org_report.extractor import extract_records


# ══════════════════════════════════════════════════════════════
# Test Fixtures
# ══════════════════════════════════════════════════════════════

def _make_document(**overrides) -> dict:
    doc = {
        "employees": [
            {"id": 10, "name": "Alice", "manager_id": None},
            {"id": 11, "name": "Bob", "manager_id": 10},
            {"id": 12, "name": "Carl", "manager_id": 10},
        ],
        "departments": [
            {"id": 1, "name": "Eng", "department_head_id": 10},
        ],
    }
    doc.update(overrides)
    return doc


def _header(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def _expect_malformed(document: str) -> MalformedRecord:
    try:
        extract_records(document)
    except MalformedRecord as exc:
        print(f"  Caught: {exc}")
        return exc
    raise AssertionError("Expected MalformedRecord")


# ══════════════════════════════════════════════════════════════
# Parsing Tests (1 – 5)
# ══════════════════════════════════════════════════════════════

def test_01_compact_document() -> None:
    """Compact single-line JSON extracts every record."""
    _header("Test 01 — Compact document")
    departments, employees = extract_records(
        json.dumps(_make_document(), separators=(",", ":"))
    )
    assert departments == {10: Department(1, "Eng", 10)}
    assert employees == [
        Employee(10, "Alice", None),
        Employee(11, "Bob", 10),
        Employee(12, "Carl", 10),
    ]
    print("  [PASS]")


def test_02_layout_does_not_matter() -> None:
    """Indented, reordered and oddly spaced JSON extracts identically."""
    _header("Test 02 — Layout variation")
    compact = json.dumps(_make_document(), separators=(",", ":"))
    pretty = json.dumps(_make_document(), indent=4, sort_keys=True)
    odd = (
        '{ "departments" :[{"department_head_id"  :  10 ,\n\t"name":"Eng","id":1}],'
        '\n\n"employees":[ {"name":"Alice","manager_id":null,"id":10},'
        '{"id":11,"manager_id":10,"name":"Bob"} ,{"id" : 12,"name":"Carl",'
        '"manager_id":   10}]}'
    )
    expected = extract_records(compact)
    assert extract_records(pretty) == expected
    assert extract_records(odd) == expected
    print("  [PASS]")


def test_03_document_order_preserved() -> None:
    """Employees come back in document order."""
    _header("Test 03 — Employee order")
    doc = _make_document(employees=[
        {"id": 3, "name": "Zed", "manager_id": None},
        {"id": 1, "name": "Amy", "manager_id": 3},
        {"id": 2, "name": "Max", "manager_id": 1},
    ])
    _, employees = extract_records(json.dumps(doc))
    assert [e.id for e in employees] == [3, 1, 2]
    print("  [PASS]")


def test_04_null_manager_is_absent() -> None:
    """manager_id null becomes None, never a sentinel integer."""
    _header("Test 04 — Null manager")
    _, employees = extract_records(json.dumps(_make_document()))
    assert employees[0].manager_id is None
    assert not employees[0].has_manager
    assert employees[1].has_manager
    print("  [PASS]")


def test_05_integer_strings_and_extra_fields() -> None:
    """Integer-literal strings are read as ints; unknown fields ignored."""
    _header("Test 05 — Integer strings, extra fields")
    doc = _make_document(
        departments=[
            {"id": " 1 ", "name": "Eng", "department_head_id": "10",
             "budget": 12},
        ],
        employees=[
            {"id": "10", "name": "Alice", "manager_id": None, "title": "CEO"},
        ],
    )
    departments, employees = extract_records(json.dumps(doc))
    assert departments == {10: Department(1, "Eng", 10)}
    assert employees == [Employee(10, "Alice", None)]
    print("  [PASS]")


# ══════════════════════════════════════════════════════════════
# Failure Tests (6 – 12)
# ══════════════════════════════════════════════════════════════

def test_06_invalid_json() -> None:
    """Unterminated document fails as a malformed document."""
    _header("Test 06 — Invalid JSON")
    text = json.dumps(_make_document())[:-5]
    exc = _expect_malformed(text)
    assert exc.collection == "document"
    print("  [PASS]")


def test_07_top_level_not_object() -> None:
    _header("Test 07 — Top level array")
    exc = _expect_malformed("[1, 2, 3]")
    assert exc.collection == "document"
    print("  [PASS]")


def test_08_missing_collection() -> None:
    """Missing or non-array collection names that collection."""
    _header("Test 08 — Missing collection")
    doc = _make_document()
    del doc["departments"]
    exc = _expect_malformed(json.dumps(doc))
    assert exc.collection == "departments"
    assert exc.index is None

    exc = _expect_malformed(json.dumps(_make_document(employees={"id": 1})))
    assert exc.collection == "employees"
    print("  [PASS]")


def test_09_missing_field_reports_index() -> None:
    """A record missing a field reports collection, index and field."""
    _header("Test 09 — Missing field")
    doc = _make_document()
    del doc["employees"][2]["manager_id"]
    exc = _expect_malformed(json.dumps(doc))
    assert exc.collection == "employees"
    assert exc.index == 2
    assert exc.field == "manager_id"
    print("  [PASS]")


def test_10_unparsable_values() -> None:
    """Floats, booleans, junk strings and non-string names are rejected."""
    _header("Test 10 — Unparsable values")
    bad_records = [
        ("departments", {"id": 1.5, "name": "Eng", "department_head_id": 10}, "id"),
        ("departments", {"id": 1, "name": "Eng", "department_head_id": True}, "department_head_id"),
        ("departments", {"id": 1, "name": 7, "department_head_id": 10}, "name"),
        ("employees", {"id": "ten", "name": "Alice", "manager_id": None}, "id"),
        ("employees", {"id": 10, "name": "Alice", "manager_id": "1e3"}, "manager_id"),
        ("employees", {"id": None, "name": "Alice", "manager_id": None}, "id"),
    ]
    for collection, record, field in bad_records:
        exc = _expect_malformed(json.dumps(_make_document(**{collection: [record]})))
        assert exc.collection == collection
        assert exc.index == 0
        assert exc.field == field
    print("  [PASS]")


def test_11_record_not_object() -> None:
    _header("Test 11 — Record not an object")
    exc = _expect_malformed(json.dumps(_make_document(departments=[[1, "Eng", 10]])))
    assert exc.collection == "departments"
    assert exc.index == 0
    print("  [PASS]")


def test_12_duplicate_department_ids() -> None:
    """Duplicate department id and duplicate head id both fail."""
    _header("Test 12 — Duplicate department ids")
    same_id = _make_document(departments=[
        {"id": 1, "name": "Eng", "department_head_id": 10},
        {"id": 1, "name": "Ops", "department_head_id": 11},
    ])
    same_head = _make_document(departments=[
        {"id": 1, "name": "Eng", "department_head_id": 10},
        {"id": 2, "name": "Ops", "department_head_id": 10},
    ])
    for doc, kind in ((same_id, "department id"), (same_head, "department head id")):
        try:
            extract_records(json.dumps(doc))
        except DuplicateId as exc:
            print(f"  Caught: {exc}")
            assert exc.kind == kind
            assert exc.duplicate_id in (1, 10)
        else:
            raise AssertionError("Expected DuplicateId")
    print("  [PASS]")


# ══════════════════════════════════════════════════════════════
# Runner
# ══════════════════════════════════════════════════════════════

def main() -> None:
    tests = [
        test_01_compact_document,
        test_02_layout_does_not_matter,
        test_03_document_order_preserved,
        test_04_null_manager_is_absent,
        test_05_integer_strings_and_extra_fields,
        test_06_invalid_json,
        test_07_top_level_not_object,
        test_08_missing_collection,
        test_09_missing_field_reports_index,
        test_10_unparsable_values,
        test_11_record_not_object,
        test_12_duplicate_department_ids,
    ]
    results = []
    for fn in tests:
        try:
            fn()
            results.append(True)
        except Exception as e:
            print(f"\n[ERROR] {fn.__name__}: {e}")
            import traceback
            traceback.print_exc()
            results.append(False)

    passed = sum(results)
    total = len(results)
    print(f"\n{'='*60}")
    print(f"  RESULTS: {passed}/{total} tests passed")
    print(f"{'='*60}")
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()

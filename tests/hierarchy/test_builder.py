from __future__ import annotations

import logging

from org_hierarchy.employees.model import EmployeeRecord, SupervisorRef
from org_hierarchy.hierarchy.builder import HierarchyBuilder
from org_hierarchy.hierarchy.model import forest_structure, iter_nodes


def ids(nodes):
    return [n.id for n in nodes]


def test_empty_input_gives_empty_forest():
    assert HierarchyBuilder().build([]) == []


def test_employees_without_supervisors_are_all_roots(make_employee):
    employees = [make_employee("x"), make_employee("y"), make_employee("z")]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["x", "y", "z"]
    assert all(root.subordinates == [] for root in forest)


def test_multi_parent_employee_appears_under_each_supervisor(field_sales_team):
    forest = HierarchyBuilder().build(field_sales_team)

    assert ids(forest) == ["alice"]
    alice = forest[0]
    assert ids(alice.subordinates) == ["bob", "carol"]
    bob = alice.subordinates[0]
    assert ids(bob.subordinates) == ["carol"]
    # same attributes wherever carol appears
    assert alice.subordinates[1] == bob.subordinates[0]


def test_display_attributes_are_copied():
    employee = EmployeeRecord(
        id="e1",
        name="Asha",
        email="asha@example.com",
        role="user",
        custom_role="Area Manager",
        avatar_url="https://cdn.example.com/asha.png",
    )

    root = HierarchyBuilder().build([employee])[0]

    assert (root.name, root.email, root.role) == ("Asha", "asha@example.com", "user")
    assert root.custom_role == "Area Manager"
    assert root.avatar_url == "https://cdn.example.com/asha.png"


def test_repeated_supervisor_reference_inserts_child_once(make_employee):
    employees = [make_employee("boss"), make_employee("worker", "boss", "boss")]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest[0].subordinates) == ["worker"]


def test_duplicate_records_insert_child_once(make_employee):
    employees = [
        make_employee("boss"),
        make_employee("worker", "boss"),
        make_employee("worker", "boss"),
    ]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["boss"]
    assert ids(forest[0].subordinates) == ["worker"]


def test_dangling_supervisor_makes_employee_a_root(make_employee):
    employees = [make_employee("boss"), make_employee("orphan", "former-manager")]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["boss", "orphan"]


def test_dangling_reference_does_not_hide_a_resolvable_one(make_employee):
    employees = [make_employee("boss"), make_employee("worker", "ghost", "boss")]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["boss"]
    assert ids(forest[0].subordinates) == ["worker"]


def test_self_reference_is_ignored(make_employee):
    employees = [make_employee("solo", "solo")]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["solo"]
    assert forest[0].subordinates == []


def test_roots_follow_input_order_of_first_appearance(make_employee):
    employees = [
        make_employee("c"),
        make_employee("a"),
        make_employee("b", "a"),
        make_employee("c"),
    ]

    assert ids(HierarchyBuilder().build(employees)) == ["c", "a"]


def test_build_is_deterministic(field_sales_team):
    builder = HierarchyBuilder()

    assert forest_structure(builder.build(field_sales_team)) == forest_structure(builder.build(field_sales_team))


def test_build_is_deterministic_on_a_supervisor_cycle(make_employee):
    employees = [make_employee("a", "b"), make_employee("b", "a"), make_employee("c", "b")]
    builder = HierarchyBuilder()

    first = builder.build(employees)
    second = builder.build(employees)

    assert first == second
    assert forest_structure(first) == forest_structure(second)
    assert forest_structure(first)[0][6][0][0] == "b"


def test_build_does_not_reuse_nodes_between_calls(field_sales_team):
    builder = HierarchyBuilder()
    first = builder.build(field_sales_team)
    second = builder.build(field_sales_team)

    second[0].subordinates.clear()

    assert ids(first[0].subordinates) == ["bob", "carol"]


def test_input_records_are_left_untouched(field_sales_team):
    before = list(field_sales_team)

    HierarchyBuilder().build(field_sales_team)

    assert field_sales_team == before


def test_every_employee_is_reachable(field_sales_team, make_employee):
    employees = field_sales_team + [make_employee("eve", "nobody")]

    forest = HierarchyBuilder().build(employees)

    assert {n.id for n in iter_nodes(forest)} == {e.id for e in employees}


def test_two_person_cycle_promotes_first_member(make_employee, caplog):
    employees = [make_employee("a", "b"), make_employee("b", "a")]

    with caplog.at_level(logging.WARNING):
        forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["a"]
    assert ids(forest[0].subordinates) == ["b"]
    assert "promoting a to root" in caplog.text


def test_cycle_hanging_off_a_root_is_left_alone(make_employee):
    employees = [
        make_employee("ceo"),
        make_employee("x", "ceo", "y"),
        make_employee("y", "x"),
    ]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["ceo"]
    assert {n.id for n in iter_nodes(forest)} == {"ceo", "x", "y"}


def test_unreachable_cycle_with_a_tail_is_fully_recovered(make_employee):
    employees = [
        make_employee("root"),
        make_employee("p", "r"),
        make_employee("q", "p"),
        make_employee("r", "q"),
        make_employee("tail", "q"),
    ]

    forest = HierarchyBuilder().build(employees)

    assert ids(forest) == ["root", "p"]
    assert {n.id for n in iter_nodes(forest)} == {"root", "p", "q", "r", "tail"}


def test_subordinates_never_repeat_an_id(make_employee):
    employees = [
        make_employee("m"),
        make_employee("n", "m", "m"),
        make_employee("o", "m", "n"),
        make_employee("n", "m"),
    ]

    forest = HierarchyBuilder().build(employees)

    for node in iter_nodes(forest):
        child_ids = ids(node.subordinates)
        assert len(child_ids) == len(set(child_ids))


def test_supervisor_ref_name_does_not_affect_structure():
    employees = [
        EmployeeRecord(id="1", name="Root", email="", role="admin"),
        EmployeeRecord(
            id="2",
            name="Leaf",
            email="",
            role="user",
            supervisors=(SupervisorRef(id="1", name="stale name", role="user"),),
        ),
    ]

    forest = HierarchyBuilder().build(employees)

    assert forest[0].name == "Root"
    assert ids(forest[0].subordinates) == ["2"]

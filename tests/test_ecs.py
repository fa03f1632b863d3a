from dataclasses import dataclass

import pytest

from animstudio.ecs import ALL, Registry


@dataclass
class Position:
    x: float = 0
    y: float = 0


@dataclass
class Velocity:
    dx: float = 0
    dy: float = 0


@pytest.fixture
def registry():
    return Registry()


def test_entity_ids_start_after_all(registry):
    first = registry.create_entity("a")
    second = registry.create_entity("b")
    assert int(first) == ALL + 1
    assert int(second) == int(first) + 1


def test_entities_in_creation_order(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    assert registry.entities() == [a, b]


def test_add_returns_component_and_get_finds_it(registry):
    e = registry.create_entity("player")
    pos = e.add(Position(1, 2))
    assert e.get(Position) is pos
    assert e.get(Velocity) is None


def test_has_checks_component_type(registry):
    e = registry.create_entity("player")
    assert not e.has(Position)
    e.add(Position())
    assert e.has(Position)
    assert not e.has(Velocity)


def test_registry_accepts_int_ids(registry):
    e = registry.create_entity("x")
    pos = registry.add(e.id, Position())
    assert registry.get(e, Position) is pos


def test_collect_returns_tuple_in_order(registry):
    e = registry.create_entity("x")
    pos = e.add(Position())
    vel = e.add(Velocity())
    assert e.collect(Velocity, Position) == (vel, pos)
    assert e.collect(Position, str) == (pos, None)


def test_get_all_and_collect_all(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    pa = a.add(Position())
    pb = b.add(Position(3, 3))
    vb = b.add(Velocity())
    positions, velocities = registry.collect_all(Position, Velocity)
    assert sorted(map(id, positions)) == sorted([id(pa), id(pb)])
    assert velocities == [vb]
    assert registry.get_all(str) == []


def test_free_specific_type(registry):
    e = registry.create_entity("x")
    e.add(Position())
    vel = e.add(Velocity())
    registry.free(e, Position)
    assert e.get(Position) is None
    assert e.get(Velocity) is vel


def test_free_all_types_for_entity(registry):
    e = registry.create_entity("x")
    e.add(Position())
    e.add(Velocity())
    registry.free(e)
    assert e.collect(Position, Velocity) == (None, None)


def test_free_unknown_entity_is_harmless(registry):
    registry.free(99, Position)
    assert registry.get(99, Position) is None


def test_free_all_across_entities(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    a.add(Position())
    b.add(Position())
    vb = b.add(Velocity())
    registry.free_all(Position)
    assert registry.get_all(Position) == []
    assert registry.get_all(Velocity) == [vb]


def test_entity_free_removes_entity(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    a.add(Position())
    a.free()
    assert registry.entities() == [b]
    assert registry.get(a.id, Position) is None


def test_entity_name_and_equality(registry):
    a = registry.create_entity("hero")
    other = Registry().create_entity("villain")
    assert a.is_named("hero")
    assert not a.is_named("villain")
    assert a == other
    assert a != registry.create_entity("hero")
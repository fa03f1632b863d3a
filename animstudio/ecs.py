"""A minimal entity-component registry."""

from __future__ import annotations

from typing import Any, Optional, TypeVar, Union

T = TypeVar("T")

#: Entity ids start after this value; it never names a real entity.
ALL = 0


class Entity:
    """An object in the registry: an id, a name and the registry owning its components."""

    def __init__(self, name: str, entity_id: int, registry: Registry) -> None:
        self.id = entity_id
        self.name = name
        self.registry = registry

    def add(self, component: T) -> T:
        """Attach ``component`` to this entity and return it."""
        return self.registry.add(self, component)

    def has(self, component_type: type) -> bool:
        """Return whether this entity has a component of ``component_type``."""
        return self.registry.has(self, component_type)

    def get(self, component_type: type[T]) -> Optional[T]:
        """Return this entity's first component of ``component_type``, or None."""
        return self.registry.get(self, component_type)

    def collect(self, *args: type) -> tuple[Any, ...]:
        """Return one component (or None) per requested type."""
        return self.registry.collect(self, *args)

    def is_named(self, name: str) -> bool:
        """Return whether this entity is called ``name``."""
        return self.name == name

    def free(self, *args: type) -> None:
        """Drop components of the given types (all if none given) and remove the entity."""
        self.registry.free(self, *args)
        self.registry._forget(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __int__(self) -> int:
        return self.id

    def __index__(self) -> int:
        return self.id

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r}, id={self.id})"


EntityRef = Union[Entity, int]


class Registry:
    """Creates entities and stores their components by entity id."""

    def __init__(self) -> None:
        self._next_id = ALL
        self._entities: list[Entity] = []
        self._storage: dict[int, list[Any]] = {}

    def create_entity(self, name: str) -> Entity:
        """Create and register a new entity with the next free id."""
        self._next_id += 1
        entity = Entity(name, self._next_id, self)
        self._entities.append(entity)
        return entity

    def add(self, entity: EntityRef, component: T) -> T:
        """Attach ``component`` to ``entity`` and return it."""
        self._storage.setdefault(int(entity), []).append(component)
        return component

    def has(self, entity: EntityRef, component_type: type) -> bool:
        """Return whether ``entity`` has a component of ``component_type``."""
        return self.get(entity, component_type) is not None

    def get(self, entity: EntityRef, component_type: type[T]) -> Optional[T]:
        """Return the first component of ``component_type`` on ``entity``, or None."""
        return next(
            (c for c in self._storage.get(int(entity), ()) if isinstance(c, component_type)),
            None,
        )

    def collect(self, entity: EntityRef, *args: type) -> tuple[Any, ...]:
        """Return one component (or None) per requested type for ``entity``."""
        return tuple(self.get(entity, t) for t in args)

    def get_all(self, component_type: type[T]) -> list[T]:
        """Return every component of ``component_type`` across all entities."""
        return [
            c
            for components in self._storage.values()
            for c in components
            if isinstance(c, component_type)
        ]

    def collect_all(self, *args: type) -> tuple[list[Any], ...]:
        """Return one list of components per requested type, across all entities."""
        return tuple(self.get_all(t) for t in args)

    def entities(self) -> list[Entity]:
        """Return the registered entities in creation order."""
        return list(self._entities)

    def free(self, entity: EntityRef, *args: type) -> None:
        """Remove components of the given types from ``entity`` (all if none given)."""
        key = int(entity)
        if key not in self._storage:
            return
        if not args:
            del self._storage[key]
            return
        self._storage[key] = [c for c in self._storage[key] if not isinstance(c, args)]

    def free_all(self, *args: type) -> None:
        """Remove components of the given types from every entity (all if none given)."""
        for key in list(self._storage):
            self.free(key, *args)

    def _forget(self, entity: Entity) -> None:
        self._entities = [e for e in self._entities if e.id != entity.id]
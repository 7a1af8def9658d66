"""A small entity-component store with deterministic iteration order."""

from __future__ import annotations

from typing import Any, Iterable

Entity = int


def _instantiate(spec: Any) -> Any:
    """Turn a component class into a default instance; pass instances through."""
    return spec() if isinstance(spec, type) else spec


class World:
    """Holds entities and the components attached to them.

    Components are keyed by their exact type. Entity ids are never reused,
    and queries return entities in creation order.
    """

    def __init__(self) -> None:
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._next_id: Entity = 1

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"entity {entity} is not alive") from None

    @staticmethod
    def _build(specs: Iterable[Any], existing: dict[type, Any]) -> dict[type, Any]:
        built: dict[type, Any] = {}
        for spec in specs:
            component = _instantiate(spec)
            kind = type(component)
            if kind in existing or kind in built:
                raise ValueError(f"entity already has a {kind.__name__} component")
            built[kind] = component
        return built

    def new_entity(self, *args: Any) -> Entity:
        """Create an entity from component classes or instances."""
        components = self._build(args, {})
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = components
        return entity

    def remove_entity(self, entity: Entity) -> None:
        """Delete an entity and all its components."""
        self._components(entity)
        del self._entities[entity]

    def alive(self, entity: Entity) -> bool:
        return entity in self._entities

    def get(self, entity: Entity, component_type: type) -> Any:
        """Return the component of the given type; KeyError if absent."""
        components = self._components(entity)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__} component"
            ) from None

    def has(self, entity: Entity, component_type: type) -> bool:
        return component_type in self._components(entity)

    def add(self, entity: Entity, *args: Any) -> None:
        """Attach components (classes or instances); ValueError on duplicates."""
        components = self._components(entity)
        components.update(self._build(args, components))

    def remove(self, entity: Entity, component_type: type) -> None:
        """Detach a component; KeyError if the entity lacks it."""
        components = self._components(entity)
        if component_type not in components:
            raise KeyError(f"entity {entity} has no {component_type.__name__} component")
        del components[component_type]

    def query(self, *args: type, without: Iterable[type] = ()) -> list[Entity]:
        """Entities holding every given type and none of ``without``."""
        required = set(args)
        excluded = set(without)
        return [
            entity
            for entity, components in self._entities.items()
            if required.issubset(components) and excluded.isdisjoint(components)
        ]
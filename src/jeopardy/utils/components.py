from __future__ import annotations

from typing import Type, TypeVar

from esper import World

C = TypeVar("C")


def first_component(world: World, component_type: Type[C]) -> tuple[int, C] | None:
    """Return the first ``(entity, component)`` of the given type, or None."""
    for entry in world.get_component(component_type):
        return entry
    return None


def require_component(world: World, component_type: Type[C]) -> C:
    """Return the singleton component of the given type; raises KeyError when absent."""
    entry = first_component(world, component_type)
    if entry is None:
        raise KeyError(f"World has no {component_type.__name__} component")
    return entry[1]

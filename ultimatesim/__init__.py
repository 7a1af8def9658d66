"""Deterministic entity-component simulation: an entity store, map, noise, cluster grid and tick systems."""

__version__ = "0.1.0"

__all__ = [
    "noise",
    "hpa",
    "ecs",
    "components",
    "grid",
    "economy",
    "attrition",
    "settlement",
    "naval",
    "workplace",
    "beliefs",
]
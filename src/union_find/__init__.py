"""Union-find library initialization."""

from .structures import DisjointSet, ElementNotFoundError
from .graph import component_labels, find_cycle_edge, spanning_forest
from .pipeline import ComponentLabeler, ComponentLabelerConfig, ComponentLabelerResult, ComponentLabelerStats
from .runner import label_file

__all__ = [
    "DisjointSet",
    "ElementNotFoundError",
    "component_labels",
    "find_cycle_edge",
    "spanning_forest",
    "ComponentLabeler",
    "ComponentLabelerConfig",
    "ComponentLabelerResult",
    "ComponentLabelerStats",
    "label_file",
]

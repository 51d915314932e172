"""Per-core query surfaces."""

from __future__ import annotations

from BvbrcApi.resources.registry import CORES, CoreSpec, get_core, supported_core_names
from BvbrcApi.resources.resource import Resource

__all__ = [
    "CORES",
    "CoreSpec",
    "Resource",
    "get_core",
    "supported_core_names",
]

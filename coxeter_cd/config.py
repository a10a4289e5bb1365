"""Tolerances used by the geometry routines."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class GeometryConfig:
    # Slack used when deciding whether a mirror arrangement is spherical
    # and whether a squared circumradius is zero.
    eps: float = 1e-9


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)


def resolve_eps(eps: Optional[float]) -> float:
    return _GEOMETRY_CONFIG.eps if eps is None else float(eps)

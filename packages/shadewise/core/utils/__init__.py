"""Shared utilities for shadewise."""

from shadewise.core.utils.json import dumps, read_json, write_json
from shadewise.core.utils.math import clamp, lerp, midpoint

__all__ = [
    "clamp",
    "dumps",
    "lerp",
    "midpoint",
    "read_json",
    "write_json",
]

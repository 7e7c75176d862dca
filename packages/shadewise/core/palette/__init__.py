"""Palette utilities - expansion, contraction, and contrast audits."""

from shadewise.core.palette.audit import (
    ContrastPair,
    contrast_matrix,
    low_contrast_pairs,
    luminance_array,
)
from shadewise.core.palette.expansion import (
    GRADIENT_MESH_SIZE,
    contract,
    contract_to_solid,
    expand,
    expand_for_gradient,
    expand_to_gradient_mesh,
    generate_variations,
    linear_interpolation,
    select_primary_color,
    simple_repeat,
)

__all__ = [
    # Expansion
    "GRADIENT_MESH_SIZE",
    "contract",
    "contract_to_solid",
    "expand",
    "expand_for_gradient",
    "expand_to_gradient_mesh",
    "generate_variations",
    "linear_interpolation",
    "select_primary_color",
    "simple_repeat",
    # Audit
    "ContrastPair",
    "contrast_matrix",
    "low_contrast_pairs",
    "luminance_array",
]

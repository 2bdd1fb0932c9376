"""
elements/
---------
Element model + initial-array generation.

    from elements import Element, Visual, generate_random_array
"""

from elements.element  import Element, Visual
from elements.generate import (
    generate_random_array,
    elements_from_values,
    MIN_VALUE,
    MAX_VALUE,
)

__all__ = [
    "Element",
    "Visual",
    "generate_random_array",
    "elements_from_values",
    "MIN_VALUE",
    "MAX_VALUE",
]

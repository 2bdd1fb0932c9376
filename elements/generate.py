"""
generate.py — Initial Array Generator
======================================
Produces the randomised starting array a run is cloned from.
All states start at Visual.DEFAULT; uids follow generation order.
"""

import random
from typing import List, Optional, Sequence

from elements.element import Element, Visual


MIN_VALUE = 5
MAX_VALUE = 400


def generate_random_array(
    size: int,
    low: int = MIN_VALUE,
    high: int = MAX_VALUE,
    seed: Optional[int] = None,
) -> List[Element]:
    """
    `size` uniformly random integers in [low, high].

    Duplicates are allowed (and useful: they exercise stability).
    """
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")
    if low > high:
        raise ValueError(f"Empty value range [{low}, {high}]")

    if seed is not None:
        random.seed(seed)

    return [
        Element(random.randint(low, high), Visual.DEFAULT, uid=i)
        for i in range(size)
    ]


def elements_from_values(values: Sequence[float]) -> List[Element]:
    """Wrap plain values as DEFAULT elements, uid = position."""
    return [Element(v, Visual.DEFAULT, uid=i) for i, v in enumerate(values)]

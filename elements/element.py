"""
element.py — Element Model
===========================
The unit of mutation and rendering: a sort key plus its visual state.

Design decisions:
  - `value` is the sort key.  It is never changed once generated; engines
    move whole elements around (or copy them), they never edit a value.
  - `state` is purely presentational.  No engine reads it to decide order.
  - `uid` is a stable identity handed out by the generator.  The renderer
    uses it as a key and tests use it to observe stability.
"""

from enum import Enum
from typing import Optional, Dict, Any


# ---------------------------------------------------------------------------
# Visual State Enum — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class Visual(Enum):
    DEFAULT    = "default"     # blue — idle
    COMPARING  = "comparing"   # yellow — value is being compared right now
    SWAPPING   = "swapping"    # red — being exchanged / written into place
    SORTED     = "sorted"      # green — final position fixed (terminal)
    PIVOT      = "pivot"       # purple — partition anchor / value being inserted


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------
class Element:
    """
    Attributes:
        value : The sort key.
        state : Current Visual for the renderer.
        uid   : Generator-assigned identity (None for ad-hoc elements).
    """

    __slots__ = ("value", "state", "uid")

    def __init__(
        self,
        value: float,
        state: Visual = Visual.DEFAULT,
        uid: Optional[int] = None,
    ):
        self.value: float         = value
        self.state: Visual        = state
        self.uid:   Optional[int] = uid

    def copy(self, state: Optional[Visual] = None) -> "Element":
        """Fresh element with the same value and uid, optionally re-marked."""
        return Element(self.value, state if state is not None else self.state, self.uid)

    @property
    def is_sorted(self) -> bool:
        return self.state == Visual.SORTED

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "state": self.state.value, "uid": self.uid}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Element":
        return cls(
            value=data["value"],
            state=Visual(data.get("state", "default")),
            uid=data.get("uid"),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (self.value, self.state, self.uid) == (other.value, other.state, other.uid)

    def __repr__(self) -> str:
        return f"Element({self.value!r}, {self.state.value}, uid={self.uid})"

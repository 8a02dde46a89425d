from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class LifeRule:
    """
    Outer-totalistic binary rule for the 2-D Moore neighborhood.
    Bitstring layout (length = 2 x (neighbor_count + 1)):
        dead cell outcomes:  indices 0 .. 8   (sum = 0-8)
        alive cell outcomes: indices 9 .. 17
    The default table is Conway's B3/S23.
    """
    rule_bits: str = "000100000" "001100000"
    neighbor_count: int = 8 # Moore neighborhood

    def __post_init__(self) -> None:
        expected = 2 * (self.neighbor_count + 1)
        if len(self.rule_bits) != expected:
            raise ValueError(
                f"rule_bits length {len(self.rule_bits)} "
                f"does not match expected {expected} "
                f"(2 states × {self.neighbor_count + 1} sums)."
            )
        if not set(self.rule_bits) <= {"0", "1"}:
            raise ValueError("rule_bits must contain only '0' and '1'")

    def __call__(self, alive: bool, neighbor_sum: int) -> bool:
        """Return the next state for a cell with the given state & neighbor sum."""
        if not (0 <= neighbor_sum <= self.neighbor_count):
            raise ValueError(f"invalid neighbor sum {neighbor_sum}")

        idx = int(bool(alive)) * (self.neighbor_count + 1) + neighbor_sum
        return self.rule_bits[idx] == "1"


CONWAY = LifeRule()

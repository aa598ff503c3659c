"""Resources value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Resources:
    """Quantity triple of food, technology and gold.

    Resources are plain values: addition is component-wise and the
    fields may go negative (stock is never clamped).
    """

    food: int = 0
    technology: int = 0
    gold: int = 0

    @classmethod
    def zero(cls) -> "Resources":
        """Return the additive identity."""
        return cls(food=0, technology=0, gold=0)

    def __add__(self, other: "Resources") -> "Resources":
        if not isinstance(other, Resources):
            return NotImplemented
        return Resources(
            food=self.food + other.food,
            technology=self.technology + other.technology,
            gold=self.gold + other.gold,
        )

    def __str__(self) -> str:
        return f"food={self.food} technology={self.technology} gold={self.gold}"

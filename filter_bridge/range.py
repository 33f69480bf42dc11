"""Range value object used by range predicates."""

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class Range(BaseModel):
    """Interval with independently inclusive or exclusive bounds.

    Example:
        Range(lower_bound=30, upper_bound=2**31 - 1, lower_inclusive=False)
        # matches 30 < value <= 2**31 - 1
    """

    model_config = ConfigDict(frozen=True)

    lower_bound: int | float
    upper_bound: int | float
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.lower_bound > self.upper_bound:
            raise ValueError(
                f"lower bound {self.lower_bound} is greater than upper bound {self.upper_bound}"
            )
        return self

    def contains(self, value: int | float) -> bool:
        """Check if a value falls inside the range.

        Args:
            value: Value to test

        Returns:
            True if the value satisfies both bounds
        """
        if self.lower_inclusive:
            above = value >= self.lower_bound
        else:
            above = value > self.lower_bound
        if self.upper_inclusive:
            below = value <= self.upper_bound
        else:
            below = value < self.upper_bound
        return above and below

    def __str__(self) -> str:
        left = "[" if self.lower_inclusive else "("
        right = "]" if self.upper_inclusive else ")"
        return f"{left}{self.lower_bound}, {self.upper_bound}{right}"

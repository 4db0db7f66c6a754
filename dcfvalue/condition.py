"""Parameters for a discounted cash flow valuation."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidConditionError(ValueError):
    """Raised when valuation parameters are out of range."""


@dataclass(frozen=True, kw_only=True)
class Condition:
    """Inputs needed to value a stock with the discounted cash flow method.

    Rates are normalized, so 0.15 means 15%. ``years`` is the total horizon
    and ``growth_years`` is how many of those years use ``growth_rate``.
    """

    current_earnings: float
    growth_rate: float
    growth_years: int
    terminal_growth_rate: float
    discount_rate: float
    years: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise InvalidConditionError if any parameter is out of range."""
        problem = self._problem()
        if problem is not None:
            raise InvalidConditionError(f"invalid condition: {problem}")

    def _problem(self) -> str | None:
        if self.current_earnings <= 0:
            return (
                "current earnings must be greater than 0, "
                f"got {self.current_earnings:f}"
            )
        if not 0 <= self.growth_rate <= 1:
            return f"growth rate must be between 0 and 1, got {self.growth_rate:f}"
        if not 0 <= self.terminal_growth_rate <= 1:
            return (
                "terminal growth rate must be between 0 and 1, "
                f"got {self.terminal_growth_rate:f}"
            )
        if not 0 < self.discount_rate <= 1:
            return (
                f"discount rate must be between 0 and 1, got {self.discount_rate:f}"
            )
        if self.growth_years <= 0 or self.growth_years > self.years:
            return (
                "growth years must be greater than 0 and less than or equal "
                f"to years, got {self.growth_years}"
            )
        if self.years <= 0:
            return f"years must be greater than 0, got {self.years}"
        return None
"""Distance results and failure reporting."""

from dataclasses import dataclass
from enum import Enum

from .units import Unit

# Returned in place of a distance when a calculation fails
FAILURE = -1.0


class FailureReason(Enum):
    """Why a distance calculation produced no result."""

    DOMAIN_ERROR = "domain-error"
    NON_CONVERGENCE = "non-convergence"


class ConvergenceError(ArithmeticError):
    """Raised when Vincenty's iteration exhausts its budget without converging."""

    def __init__(self, iterations: int):
        super().__init__(f"Vincenty: no convergence after {iterations} iterations")
        self.iterations = iterations


@dataclass(frozen=True)
class DistanceResult:
    """Result of a distance calculation."""

    method: str
    unit: Unit
    distance: float | None  # None when the calculation failed
    failure: FailureReason | None = None
    iterations: int = 0  # Vincenty loop count, 0 for closed-form methods

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def value(self) -> float:
        """Distance, or FAILURE (-1) if the calculation failed."""
        if self.distance is None:
            return FAILURE
        return self.distance

    @classmethod
    def failed(
        cls, method: str, unit: Unit, reason: FailureReason, iterations: int = 0
    ) -> "DistanceResult":
        return cls(
            method=method,
            unit=unit,
            distance=None,
            failure=reason,
            iterations=iterations,
        )

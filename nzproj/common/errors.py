"""
Exception hierarchy for the projection engines.

Construction-time problems (bad ellipsoid, degenerate standard parallels,
wrong units) are reported as `InvalidParameterError`. Failure of the
iterative Lambert Conformal Conic inverse is reported as `ConvergenceError`.
Both derive from `ProjectionError` so callers can catch either with one
clause.
"""

from typing import Any, Dict, Optional


class ProjectionError(Exception):
    """
    Base exception for all projection errors.

    Attributes:
        message: Human-readable error message
        details: Technical details for logging/debugging
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', details={self.details})"


class InvalidParameterError(ProjectionError, ValueError):
    """
    Raised when a projection or ellipsoid is constructed from parameters
    that do not define a valid projection.
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if parameter is not None:
            details["parameter"] = parameter
            details["value"] = value
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value


class ConvergenceError(ProjectionError, RuntimeError):
    """
    Raised when an iterative inverse does not reach its tolerance within the
    configured number of iterations.
    """

    def __init__(self, message: str, iterations: int, residual: float, tolerance: float):
        super().__init__(
            message,
            {"iterations": iterations, "residual": residual, "tolerance": tolerance},
        )
        self.iterations = iterations
        self.residual = residual
        self.tolerance = tolerance

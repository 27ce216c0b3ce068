"""
Errors
Two tiers: caller mistakes and broken invariants.

InvalidArgumentError is raised for bad inputs (thresholds, share shapes,
out-of-range bytes). Fix the call and try again.

InvariantViolation and its subclasses signal a condition that should be
unreachable. The operation aborts immediately; recovering would risk
silently producing a wrong secret byte.
"""


class ShamirError(Exception):
    """Base class for every error raised by shamir256."""


class InvalidArgumentError(ShamirError, ValueError):
    """The caller passed arguments that violate the input contract."""


class InvariantViolation(ShamirError, RuntimeError):
    """An internal invariant was broken. Never retried."""


class FieldDivisionByZero(InvariantViolation, ZeroDivisionError):
    """Division by the zero element, usually from duplicate x-coordinates."""


class DuplicateShareError(InvariantViolation):
    """Two shares carry the same x-coordinate tag."""


class UndefinedBehaviorError(InvariantViolation):
    """A constant-time selector was neither 0 nor 1."""


class RandomSourceError(InvariantViolation):
    """The secure random source failed while drawing coefficients."""

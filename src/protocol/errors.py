"""Errors raised by the rate engine and its configuration layer."""


class RateEngineError(Exception):
    """Base error class for rate engine errors."""


class FixedPointError(RateEngineError, ArithmeticError):
    """Fixed-point arithmetic could not produce an exact result."""


class DivideByZeroError(FixedPointError, ZeroDivisionError):
    """Denominator of a fixed-point division is zero."""


class MulOverflowError(FixedPointError, OverflowError):
    """Intermediate product of a fixed-point multiply is not representable."""


class PeriodsTooHighError(FixedPointError, ValueError):
    """Requested compounding periods exceed the cap."""


class ConfigError(RateEngineError):
    """Invalid configuration update."""


class OutOfRangeError(ConfigError, ValueError):
    """Curve parameter or fee outside its admissible range."""


class UnauthorizedError(ConfigError):
    """Caller lacks the role required for a configuration change."""


class StaleSnapshotError(ConfigError, ValueError):
    """Snapshot marker did not advance."""

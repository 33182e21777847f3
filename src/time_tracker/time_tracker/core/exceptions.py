from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SequenceViolation(ValidationError):
    """Raised when a punch is out of order or duplicated.

    Carries every violation found; the message is the first one.
    """

    def __init__(self, violations: Sequence[str]):
        self.violations = list(violations)
        super().__init__(self.violations[0] if self.violations else "Invalid punch sequence")


class LockedPeriodError(DomainError):
    """Raised when an entry belongs to a payroll period under review or closed."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

"""
CaptureDesk Server - Validation Result Model

Outcome of validating one raw form field or one group of fields.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationResult:
    """
    Either an accepted (possibly normalized) value or a rejection reason

    Use Accept() / Reject() to build instances.
    """
    accepted: bool
    value: Any = None
    reason: Optional[str] = None

    @classmethod
    def Accept(cls, value: Any = None) -> "ValidationResult":
        return cls(accepted=True, value=value)

    @classmethod
    def Reject(cls, reason: str) -> "ValidationResult":
        return cls(accepted=False, reason=reason)

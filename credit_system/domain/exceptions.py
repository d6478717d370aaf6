"""Domain failure type shared by the customer and credit services."""

from __future__ import annotations


class BusinessException(Exception):
    """A business-rule violation surfaced uniformly to API callers.

    Missing records, ownership mismatches, and storage constraint failures all
    use this one type; callers tell them apart by `message` only.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

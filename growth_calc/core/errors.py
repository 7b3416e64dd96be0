"""Exceptions raised while reading calculator input."""

from typing import List


class InputValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidNumericInput(InputValidationError):
    """A required numeric field (rate or years) could not be parsed."""

    def __init__(self, fields: List[str]):
        super().__init__([f"{field} must be a number" for field in fields])
        self.fields = fields

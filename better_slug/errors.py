"""Domain exceptions for configuration and input validation."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when an option or input falls outside its recognized set or bound."""

    def __init__(
        self,
        *,
        field: str,
        value: object,
        detail: str,
        index: int | None = None,
    ) -> None:
        """Initialize a field-scoped validation error."""

        super().__init__(detail)
        self.field = field
        self.value = value
        self.detail = detail
        self.index = index

    def at_index(self, index: int) -> ValidationError:
        """Return a copy of this error scoped to one position of a batch."""

        return ValidationError(
            field=f"inputs[{index}]",
            value=self.value,
            detail=f"Invalid input at index {index}: {self.detail}",
            index=index,
        )

"""Engine layer exceptions."""


class ValidationError(ValueError):
    """Raised when position inputs fail validation.

    Attributes:
        field: Name of the offending input field.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")

"""Custom exception hierarchy for account-model."""


class AccountModelError(Exception):
    """Base exception for all account-model errors."""


class AccountValidationError(AccountModelError):
    """Raised when an account cannot be built from the supplied fields."""

    def __init__(self, message: str, country: str | None = None) -> None:
        super().__init__(message)
        self.country = country


class MissingRequiredFieldError(AccountValidationError):
    """Raised when the country, or a field the country requires, is unset."""

    def __init__(self, message: str, field: str, country: str | None = None) -> None:
        super().__init__(message, country)
        self.field = field


class UnsupportedCountryError(AccountValidationError):
    """Raised when no rule exists for the requested country."""


class LengthMismatchError(AccountValidationError):
    """Raised when a present field does not have the country's required length."""

    def __init__(
        self,
        message: str,
        country: str,
        field: str,
        expected: int,
        actual: str | None,
    ) -> None:
        super().__init__(message, country)
        self.field = field
        self.expected = expected
        self.actual = actual


class UnknownVariantError(AccountModelError, ValueError):
    """Raised when a string matches no variant of an enumeration."""

    def __init__(self, value: str, variant: str) -> None:
        super().__init__(f"{value} is not {variant} variant")
        self.value = value
        self.variant = variant


class ConfigurationError(AccountModelError):
    """Raised when configuration is invalid or missing."""

"""Validation and construction of bank accounts for payment initiation."""

from account_model.builder import AccountBuilder
from account_model.exceptions import (
    AccountModelError,
    AccountValidationError,
    ConfigurationError,
    LengthMismatchError,
    MissingRequiredFieldError,
    UnknownVariantError,
    UnsupportedCountryError,
)
from account_model.models import (
    Account,
    Classification,
    CopAccount,
    Country,
    Currency,
    KnownBankIdCode,
    PrivateIdentification,
    SepaAccount,
)
from account_model.rules import RULES, Rule, get_rule

__all__ = [
    "RULES",
    "Account",
    "AccountBuilder",
    "AccountModelError",
    "AccountValidationError",
    "Classification",
    "ConfigurationError",
    "CopAccount",
    "Country",
    "Currency",
    "KnownBankIdCode",
    "LengthMismatchError",
    "MissingRequiredFieldError",
    "PrivateIdentification",
    "Rule",
    "SepaAccount",
    "UnknownVariantError",
    "UnsupportedCountryError",
    "get_rule",
]

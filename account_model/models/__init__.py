"""Domain models for bank accounts."""

from account_model.models.account import (
    Account,
    CopAccount,
    PrivateIdentification,
    SepaAccount,
)
from account_model.models.enums import (
    Classification,
    Country,
    Currency,
    KnownBankIdCode,
    bank_id_code_from_str,
    bank_id_code_to_str,
    classification_from_str,
    classification_to_str,
)

__all__ = [
    "Account",
    "Classification",
    "CopAccount",
    "Country",
    "Currency",
    "KnownBankIdCode",
    "PrivateIdentification",
    "SepaAccount",
    "bank_id_code_from_str",
    "bank_id_code_to_str",
    "classification_from_str",
    "classification_to_str",
]

"""Account model and the payment-scheme records built around it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from account_model.models.enums import Classification, Country, Currency

if TYPE_CHECKING:
    from account_model.builder import AccountBuilder


@dataclass(frozen=True)
class Account:
    """Validated bank account, ready to be used as a payment party.

    Instances are produced by ``AccountBuilder.build``:
    - ``currency`` always comes from the country's rule
    - ``bank_id_code`` is the country's canonical scheme code
    - ``number``, ``iban`` and ``title`` are ``None`` when not provided
    """

    id: UUID
    organisation_id: UUID
    country: Country
    currency: Currency
    bank_id: str
    bank_id_code: str
    bic: str
    number: str | None = None
    iban: str | None = None
    title: str | None = None
    classification: Classification = Classification.PERSONAL

    @staticmethod
    def builder() -> AccountBuilder:
        """Start building a new account."""
        from account_model.builder import AccountBuilder

        return AccountBuilder()


@dataclass(frozen=True)
class PrivateIdentification:
    """Identity of a private account holder, required by SEPA schemes."""

    name: str
    surname: str
    birth_date: str  # ISO 8601 date
    birth_country: Country
    document_number: str
    address_line: str
    city: str
    country: Country


@dataclass(frozen=True)
class CopAccount:
    """Account registered for Confirmation of Payee name matching."""

    account: Account
    first_name: str
    bank_account_names: tuple[str, ...]
    bank_account_classification: Classification
    is_joint_account: bool = False
    is_matching_opt_out: bool = False
    secondary_identification: str = ""


@dataclass(frozen=True)
class SepaAccount:
    account: Account
    identification: PrivateIdentification

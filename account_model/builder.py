"""Fluent builder that validates and assembles accounts per country."""

from __future__ import annotations

from typing import Callable
from uuid import UUID

from account_model.exceptions import (
    LengthMismatchError,
    MissingRequiredFieldError,
    UnsupportedCountryError,
)
from account_model.identity import new_id
from account_model.logging import get_logger
from account_model.models.account import Account
from account_model.models.enums import Classification, Country
from account_model.rules import Rule, get_rule

logger = get_logger(__name__)


class AccountBuilder:
    """Accumulate account fields and turn them into a validated ``Account``.

    Setters store values as given and return the builder, so calls chain::

        account = (
            AccountBuilder()
            .with_country(Country.GBR)
            .with_bank_id("400300")
            .with_bic("NWBKGB22")
            .mark_business()
            .build()
        )

    All checks happen in ``build``, which raises the first violated
    restriction. A bank id code that does not match the country's scheme is
    corrected on the builder instead of being rejected.

    Parameters
    ----------
    id_factory : Callable[[], UUID]
        Source of identifiers for an unset account or organisation id
        (default ``new_id``, a random UUID).
    """

    def __init__(self, id_factory: Callable[[], UUID] = new_id) -> None:
        self._id_factory = id_factory
        self._id: UUID | None = None
        self._organisation_id: UUID | None = None
        self._country: Country | str | None = None
        self._bank_id: str | None = None
        self._bank_id_code: str | None = None
        self._bic: str | None = None
        self._number: str | None = None
        self._iban: str | None = None
        self._title: str | None = None
        self._classification = Classification.PERSONAL

    def with_account_id(self, account_id: UUID) -> AccountBuilder:
        self._id = account_id
        return self

    def with_organisation_id(self, organisation_id: UUID) -> AccountBuilder:
        self._organisation_id = organisation_id
        return self

    def with_country(self, country: Country | str) -> AccountBuilder:
        self._country = country
        return self

    def with_bank_id(self, bank_id: str) -> AccountBuilder:
        self._bank_id = bank_id
        return self

    def with_bank_id_code(self, code: str) -> AccountBuilder:
        self._bank_id_code = code
        return self

    def with_number(self, number: str) -> AccountBuilder:
        self._number = number
        return self

    def with_iban(self, iban: str) -> AccountBuilder:
        self._iban = iban
        return self

    def with_bic(self, bic: str) -> AccountBuilder:
        self._bic = bic
        return self

    def with_title(self, title: str) -> AccountBuilder:
        self._title = title
        return self

    def mark_personal(self) -> AccountBuilder:
        self._classification = Classification.PERSONAL
        return self

    def mark_business(self) -> AccountBuilder:
        self._classification = Classification.BUSINESS
        return self

    def build(self) -> Account:
        """Validate the accumulated fields and create the account.

        Returns
        -------
        Account
            Immutable account with generated ids where none were given.

        Raises
        ------
        MissingRequiredFieldError
            If the country, or an identifier the country requires, is unset.
        UnsupportedCountryError
            If the country has no rule.
        LengthMismatchError
            If the account number or bank id has the wrong length.
        """
        if self._country is None:
            raise MissingRequiredFieldError("Country is required", field="country")

        rule = get_rule(self._country)
        if rule is None:
            code = _country_code(self._country)
            raise UnsupportedCountryError(f"Unsupported country {code}", country=code)

        return self._create_account(rule)

    def _create_account(self, rule: Rule) -> Account:
        code = rule.country.value
        if rule.bic_required and self._bic is None:
            raise MissingRequiredFieldError(f"{code} requires Bic", field="bic", country=code)

        self.validate_restrictions(rule)

        return Account(
            id=self._id if self._id is not None else self._id_factory(),
            organisation_id=(
                self._organisation_id
                if self._organisation_id is not None
                else self._id_factory()
            ),
            country=rule.country,
            currency=rule.currency,
            bank_id=self._bank_id,
            bank_id_code=self._bank_id_code,
            bic=self._bic,
            number=self._number,
            iban=self._iban,
            title=self._title,
            classification=self._classification,
        )

    def validate_restrictions(self, rule: Rule) -> None:
        """Check field lengths against ``rule`` and normalize the bank id code.

        The account number is optional and only checked when present; the
        bank id is mandatory.
        """
        code = rule.country.value

        if self._number is not None and len(self._number) != rule.account_number_length:
            raise LengthMismatchError(
                f"{code} requires {rule.account_number_length}-character long Account Number",
                country=code,
                field="number",
                expected=rule.account_number_length,
                actual=self._number,
            )

        if self._bank_id is None or len(self._bank_id) != rule.bank_id_length:
            got = "absent" if self._bank_id is None else f"'{self._bank_id}'"
            raise LengthMismatchError(
                f"{code} requires {rule.bank_id_length}-character BankId, got {got}",
                country=code,
                field="bank_id",
                expected=rule.bank_id_length,
                actual=self._bank_id,
            )

        self.normalize_bank_id_code(rule)

    def normalize_bank_id_code(self, rule: Rule) -> bool:
        """Replace a missing or foreign bank id code with the country's scheme.

        Returns
        -------
        bool
            True if the held value was replaced.
        """
        expected = rule.bank_id_code.value
        if self._bank_id_code == expected:
            return False

        logger.debug(
            "%s requires BankIdCode %s, got invalid %r",
            rule.country.value,
            expected,
            self._bank_id_code,
            extra={
                "extra": {
                    "country": rule.country.value,
                    "expected_bank_id_code": expected,
                    "rejected_bank_id_code": self._bank_id_code,
                }
            },
        )
        self._bank_id_code = expected
        return True


def _country_code(country: Country | str) -> str:
    if isinstance(country, Country):
        return country.value
    return str(country)

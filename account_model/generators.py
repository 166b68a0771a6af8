"""Sample account generation for fixtures, demos and load tests."""

from __future__ import annotations

import random
from typing import Iterator
from uuid import UUID

from faker import Faker

from account_model.builder import AccountBuilder
from account_model.models.account import Account
from account_model.models.enums import Country
from account_model.rules import get_rule


class AccountBuilderGenerator:
    """Generate builders populated with realistic, valid account details.

    Only countries with a rule can be generated. Values follow the rule's
    lengths: for GBR a 6-digit sort code and an 8-digit account number.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_GB``).
    country : Country
        Country of the generated accounts (default ``GBR``).
    business_ratio : float
        Share of accounts marked as business accounts.
    include_number : bool
        Whether to set an account number.
    include_iban : bool
        Whether to set an IBAN.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_GB",
        country: Country = Country.GBR,
        business_ratio: float = 0.3,
        include_number: bool = True,
        include_iban: bool = True,
    ) -> None:
        rule = get_rule(country)
        if rule is None:
            raise ValueError(f"Cannot generate accounts for unsupported country {country.value}")
        self.rule = rule
        self.business_ratio = business_ratio
        self.include_number = include_number
        self.include_iban = include_iban
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def _new_id(self) -> UUID:
        return self.fake.uuid4(cast_to=None)

    def builder(self) -> AccountBuilder:
        """Return a builder that will build successfully."""
        builder = (
            AccountBuilder(id_factory=self._new_id)
            .with_country(self.rule.country)
            .with_bank_id(self.fake.numerify("#" * self.rule.bank_id_length))
            .with_bic(self.fake.swift8())
        )

        if random.random() < self.business_ratio:
            builder.mark_business().with_title(self.fake.company())
        else:
            builder.mark_personal().with_title(self.fake.name())

        if self.include_number:
            builder.with_number(self.fake.numerify("#" * self.rule.account_number_length))
        if self.include_iban:
            builder.with_iban(self.fake.iban())
        return builder

    def generate(self) -> Account:
        """Generate a single account."""
        return self.builder().build()

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate ``count`` accounts."""
        for _ in range(count):
            yield self.generate()

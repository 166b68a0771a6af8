"""Tests for the per-country rule table."""

import dataclasses

import pytest

from account_model.models.enums import Country, Currency, KnownBankIdCode
from account_model.rules import RULES, Rule, get_rule, supported_countries


class TestRuleTable:
    """Tests for RULES."""

    def test_gbr_rule(self) -> None:
        rule = RULES[Country.GBR]

        assert rule.country == Country.GBR
        assert rule.currency == Currency.GBP
        assert rule.account_number_length == 8
        assert rule.bank_id_length == 6
        assert rule.bank_id_code == KnownBankIdCode.GB_BANK_ID_CODE
        assert rule.bic_required is True

    def test_rules_keyed_by_their_country(self) -> None:
        for country, rule in RULES.items():
            assert rule.country == country

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            RULES[Country.FRA] = RULES[Country.GBR]  # type: ignore[index]

    def test_rule_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RULES[Country.GBR].bank_id_length = 4  # type: ignore[misc]

    def test_supported_countries(self) -> None:
        assert supported_countries() == [Country.GBR]


class TestGetRule:
    """Tests for get_rule."""

    def test_by_enum(self) -> None:
        assert isinstance(get_rule(Country.GBR), Rule)

    def test_by_alpha3_string(self) -> None:
        assert get_rule("GBR") is RULES[Country.GBR]

    def test_known_country_without_rule(self) -> None:
        assert get_rule(Country.FRA) is None

    def test_unknown_code(self) -> None:
        assert get_rule("GB") is None

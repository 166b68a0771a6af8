"""Per-country account restrictions.

Each supported country has exactly one ``Rule``. A country without a rule
cannot hold accounts yet; adding support means adding an entry to ``RULES``.
"""

from dataclasses import dataclass
from types import MappingProxyType

from account_model.models.enums import Country, Currency, KnownBankIdCode


@dataclass(frozen=True)
class Rule:
    """Structural requirements for accounts held in one country."""

    country: Country
    currency: Currency
    account_number_length: int
    bank_id_length: int
    bank_id_code: KnownBankIdCode
    bic_required: bool = True


RULES: MappingProxyType[Country, Rule] = MappingProxyType(
    {
        # UK: 6-digit sort code, 8-digit account number
        Country.GBR: Rule(
            country=Country.GBR,
            currency=Currency.GBP,
            account_number_length=8,
            bank_id_length=6,
            bank_id_code=KnownBankIdCode.GB_BANK_ID_CODE,
        ),
    }
)


def get_rule(country: Country | str) -> Rule | None:
    """Return the rule for ``country`` (enum member or alpha-3 code), if any."""
    try:
        return RULES.get(Country(country))
    except ValueError:
        return None


def supported_countries() -> list[Country]:
    return list(RULES)

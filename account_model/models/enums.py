"""Enumeration types and string codecs for account entities."""

from enum import Enum

from account_model.exceptions import UnknownVariantError


class Country(str, Enum):
    """ISO 3166-1 alpha-3 codes of the countries accounts can be held in."""

    AUS = "AUS"
    BEL = "BEL"
    CAN = "CAN"
    CHE = "CHE"
    DEU = "DEU"
    ESP = "ESP"
    FRA = "FRA"
    GBR = "GBR"
    GRC = "GRC"
    HKG = "HKG"
    ITA = "ITA"
    LUX = "LUX"
    NLD = "NLD"
    POL = "POL"
    PRT = "PRT"
    USA = "USA"


class Currency(str, Enum):
    AUD = "AUD"
    CAD = "CAD"
    CHF = "CHF"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    PLN = "PLN"
    USD = "USD"


class Classification(str, Enum):
    PERSONAL = "Personal"
    BUSINESS = "Business"


class KnownBankIdCode(str, Enum):
    """National bank identifier schemes.

    The value is the code a payment API expects in ``bank_id_code``;
    e.g. ``GBDSC`` is the UK sort code scheme.
    """

    AU_BANK_ID_CODE = "AUBSB"
    BE_BANK_ID_CODE = "BE"
    CA_BANK_ID_CODE = "CACPA"
    CH_BANK_ID_CODE = "CHBCC"
    DE_BANK_ID_CODE = "DEBLZ"
    ES_BANK_ID_CODE = "ESNCC"
    FR_BANK_ID_CODE = "FR"
    GB_BANK_ID_CODE = "GBDSC"
    GR_BANK_ID_CODE = "GRBIC"
    HK_BANK_ID_CODE = "HKNCC"
    IT_BANK_ID_CODE = "ITNCC"
    LU_BANK_ID_CODE = "LULUX"
    PL_BANK_ID_CODE = "PLKNR"
    PT_BANK_ID_CODE = "PTNCC"
    US_BANK_ID_CODE = "USABA"


_CLASSIFICATIONS = {c.value: c for c in Classification}
_BANK_ID_CODES = {c.value: c for c in KnownBankIdCode}


def classification_to_str(classification: Classification) -> str:
    return classification.value


def classification_from_str(value: str) -> Classification:
    """Parse ``"Personal"`` or ``"Business"`` (case-sensitive).

    Raises
    ------
    UnknownVariantError
        If ``value`` names no classification.
    """
    try:
        return _CLASSIFICATIONS[value]
    except KeyError:
        raise UnknownVariantError(value, "classification") from None


def bank_id_code_to_str(code: KnownBankIdCode) -> str:
    return code.value


def bank_id_code_from_str(value: str) -> KnownBankIdCode:
    """Parse a bank identifier scheme code such as ``"GBDSC"``.

    Raises
    ------
    UnknownVariantError
        If ``value`` names no known scheme.
    """
    try:
        return _BANK_ID_CODES[value]
    except KeyError:
        raise UnknownVariantError(value, "bank id code") from None

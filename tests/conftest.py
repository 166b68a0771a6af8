"""Pytest configuration and fixtures."""

import uuid

import pytest

from account_model import AccountBuilder, Country


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def account_id() -> uuid.UUID:
    """Sample account ID."""
    return uuid.UUID("6f3c2b9e-4a1d-4c8e-9b2f-1d7a5e0c3b41")


@pytest.fixture
def organisation_id() -> uuid.UUID:
    """Sample organisation ID."""
    return uuid.UUID("0b8e6d1a-2f4c-4e7b-8a9d-3c5f7e1b2d60")


@pytest.fixture
def gb_builder() -> AccountBuilder:
    """Builder holding the minimal valid GBR account."""
    return (
        AccountBuilder()
        .with_country(Country.GBR)
        .with_bank_id("400300")
        .with_bic("NWBKGB22")
    )

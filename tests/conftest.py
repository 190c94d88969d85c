"""Shared fixtures for geography tests."""

import pytest

from geography.domain import Country, Division, DivisionKind, Urban, UrbanKind


@pytest.fixture
def thailand() -> Country:
    return Country(
        764,
        iso="TH",
        calling_code=66,
        name="Thailand",
        native="ไทย",
        population=69950850,
    )


@pytest.fixture
def make_division():
    def _make(id=None, kind=DivisionKind.PROVINCE, **overrides):
        fields = dict(
            country_id=764,
            iso="BKK",
            name="Bangkok",
            native="กรุงเทพมหานคร",
            population=5494932,
            kind=kind,
        )
        fields.update(overrides)
        return Division(id, **fields)

    return _make


@pytest.fixture
def make_urban():
    def _make(id=None, kind=UrbanKind.CITY, **overrides):
        fields = dict(
            division_id=1,
            name="Bangkok",
            native="กรุงเทพมหานคร",
            iso="BKK",
            kind=kind,
        )
        fields.update(overrides)
        return Urban(id, **fields)

    return _make

"""Tests for the bundled seed datasets.

Covers: dataset contents and order, lookup by family and variant,
unknown datasets, build-once semantics and concurrent readers.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from geography.domain import (
    Country,
    Division,
    DivisionKind,
    SeedDatasetNotFoundException,
    Urban,
    UrbanKind,
    cities,
    countries,
    get_seed_dataset,
    list_seed_datasets,
    provinces,
)
from geography.domain import seeds


@pytest.fixture
def fresh_seeds(monkeypatch):
    """Force the datasets to be rebuilt on next access."""
    monkeypatch.setattr(seeds, "_datasets", None)


class TestCountrySeed:
    def test_non_empty_and_contains_thailand(self) -> None:
        data = countries()
        assert len(data) > 0
        thailand = [c for c in data if c.iso == "TH"]
        assert len(thailand) == 1
        assert thailand[0].id == 764
        assert thailand[0].native == "ไทย"

    def test_is_read_only_tuple(self) -> None:
        assert isinstance(countries(), tuple)

    def test_entries_are_countries(self) -> None:
        assert all(isinstance(c, Country) for c in countries())

    def test_entries_are_persisted(self) -> None:
        assert not any(c.is_transient() for c in countries())


class TestProvinceSeed:
    def test_bangkok_references_thailand(self) -> None:
        thailand = next(c for c in countries() if c.iso == "TH")
        bangkok = next(p for p in provinces() if p.iso == "BKK")
        assert bangkok.country_id == thailand.id
        assert bangkok.kind is DivisionKind.PROVINCE

    def test_entries_are_provinces(self) -> None:
        assert all(isinstance(p, Division) and p.is_kind("Province") for p in provinces())


class TestCitySeed:
    def test_cities_reference_seeded_divisions(self) -> None:
        division_ids = {p.id for p in provinces()}
        assert cities()
        for city in cities():
            assert isinstance(city, Urban)
            assert city.kind is UrbanKind.CITY
            assert city.division_id in division_ids


class TestLookup:
    def test_get_by_family_and_variant(self) -> None:
        assert get_seed_dataset("Division", "Province") == provinces()
        assert get_seed_dataset("Country", "Country") == countries()

    def test_lookup_is_case_insensitive(self) -> None:
        assert get_seed_dataset("division", "PROVINCE") is provinces()

    def test_known_variant_without_data_is_empty(self) -> None:
        assert get_seed_dataset("Division", "Banat") == ()
        assert get_seed_dataset("Urban", "Hamlet") == ()

    def test_unknown_family_raises(self) -> None:
        with pytest.raises(SeedDatasetNotFoundException):
            get_seed_dataset("Planet", "Earth")

    def test_variant_of_other_family_raises(self) -> None:
        with pytest.raises(SeedDatasetNotFoundException):
            get_seed_dataset("Division", "City")

    def test_list_in_hierarchy_order(self) -> None:
        assert list_seed_datasets() == [
            ("Country", "Country"),
            ("Division", "Province"),
            ("Urban", "City"),
        ]


class TestLoadOnce:
    def test_repeated_access_returns_same_objects(self, fresh_seeds) -> None:
        first = countries()
        second = countries()
        assert first is second
        assert first[0] is second[0]

    def test_concurrent_readers_see_identical_contents(self, fresh_seeds) -> None:
        def read(_):
            return countries(), provinces(), cities()

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(read, range(200)))

        reference = results[0]
        for result in results:
            for dataset, expected in zip(result, reference):
                assert dataset is expected
        thailand = reference[0][0]
        assert (thailand.id, thailand.iso, thailand.population) == (764, "TH", 69950850)

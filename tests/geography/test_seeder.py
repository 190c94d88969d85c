"""Tests for loading the seed datasets into the store."""

import pytest

from core.domain import EntityNotFoundException
from geography.domain import Division, DivisionKind, countries, provinces
from geography.infrastructure import seeder as seeder_module
from geography.infrastructure.factory import GeographyInfrastructureFactory
from geography.infrastructure.models import (
    Country as CountryModel,
    Division as DivisionModel,
    Urban as UrbanModel,
)
from geography.infrastructure.seeder import GeographySeeder

pytestmark = pytest.mark.django_db


@pytest.fixture
def factory() -> GeographyInfrastructureFactory:
    return GeographyInfrastructureFactory()


class TestSeed:
    def test_loads_every_dataset(self, factory) -> None:
        report = factory.create_seeder().seed()
        assert report.counts == {
            ("Country", "Country"): 1,
            ("Division", "Province"): 1,
            ("Urban", "City"): 1,
        }
        assert report.total == 3
        assert CountryModel.objects.get(iso="TH").id == 764
        assert DivisionModel.objects.get(iso="BKK").country_id == 764
        assert UrbanModel.objects.filter(division_id=1, type="City").count() == 1

    def test_round_trips_through_store(self, factory) -> None:
        factory.create_seeder().seed()
        stored = factory.create_country_repository().get_by_iso("TH")
        assert stored == countries()[0]
        assert stored.native == "ไทย"
        bangkok = factory.create_division_repository().list_by_country(764, kind=DivisionKind.PROVINCE)
        assert bangkok == list(provinces())

    def test_is_idempotent(self, factory) -> None:
        factory.create_seeder().seed()
        factory.create_seeder().seed()
        assert CountryModel.objects.count() == 1
        assert DivisionModel.objects.count() == 1
        assert UrbanModel.objects.count() == 1

    def test_seed_data_is_not_mutated(self, factory) -> None:
        before = [c.to_dict() for c in countries()]
        factory.create_seeder().seed()
        assert [c.to_dict() for c in countries()] == before


class TestReferenceVerification:
    @pytest.fixture
    def orphan_datasets(self, monkeypatch):
        orphan = Division(
            50, country_id=4, iso="ZZ", name="Nowhere", native="Nowhere", population=0,
            kind=DivisionKind.STATE,
        )
        datasets = {
            ("Country", "Country"): countries(),
            ("Division", "State"): (orphan,),
        }
        monkeypatch.setattr(seeder_module, "list_seed_datasets", lambda: list(datasets))
        monkeypatch.setattr(seeder_module, "get_seed_dataset", lambda f, v: datasets[(f, v)])

    def test_unresolved_country_raises(self, factory, orphan_datasets) -> None:
        with pytest.raises(EntityNotFoundException) as exc_info:
            factory.create_seeder().seed()
        assert exc_info.value.entity_id == 4
        assert CountryModel.objects.count() == 0

    def test_reference_to_stored_country_accepted(self, factory, orphan_datasets) -> None:
        CountryModel.objects.create(
            id=4, iso="AF", calling_code=93, name="Afghanistan", native="افغانستان", population=0
        )
        report = factory.create_seeder().seed()
        assert report.counts[("Division", "State")] == 1

    def test_verification_can_be_disabled(self, factory, orphan_datasets) -> None:
        seeder = GeographySeeder(
            factory.create_country_repository(),
            factory.create_division_repository(),
            factory.create_urban_repository(),
            verify_references=False,
        )
        assert seeder.verify_references is False
        seeder._verify = lambda datasets: pytest.fail("verification should be skipped")
        CountryModel.objects.create(
            id=4, iso="AF", calling_code=93, name="Afghanistan", native="افغانستان", population=0
        )
        assert seeder.seed().total == 2

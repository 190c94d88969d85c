"""Tests for the persistence-boundary builder and ORM row mapping."""

import pytest

from core.domain import ValidationException
from geography.domain import Country, Division, DivisionKind, Urban, UrbanKind
from geography.infrastructure.mapping import EntityBuilder, to_domain, to_model_fields
from geography.infrastructure.models import (
    Country as CountryModel,
    Division as DivisionModel,
    Urban as UrbanModel,
)


class TestEntityBuilder:
    def test_two_phase_build(self) -> None:
        builder = EntityBuilder(Country)
        for name, value in [
            ("id", 764), ("iso", "TH"), ("calling_code", 66),
            ("name", "Thailand"), ("native", "ไทย"), ("population", 69950850),
        ]:
            builder.set_field(name, value)
        country = builder.build()
        assert isinstance(country, Country)
        assert country.id == 764
        assert country.native == "ไทย"

    def test_without_id_builds_transient(self) -> None:
        urban = (
            EntityBuilder(Urban)
            .set_field("division_id", 1)
            .set_field("name", "Nonthaburi")
            .set_field("native", "นนทบุรี")
            .set_field("iso", "NBI")
            .set_field("kind", "City")
            .build()
        )
        assert urban.is_transient()
        assert urban.kind is UrbanKind.CITY

    def test_missing_field_rejected(self) -> None:
        builder = EntityBuilder(Country).set_field("iso", "TH")
        with pytest.raises(ValidationException) as exc_info:
            builder.build()
        assert exc_info.value.field_name == "calling_code"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationException):
            EntityBuilder(Country).set_field("kind", "Province")

    def test_invalid_value_rejected_on_build(self) -> None:
        builder = (
            EntityBuilder(Division)
            .set_field("country_id", 764)
            .set_field("iso", "BKK")
            .set_field("name", "n" * 101)
            .set_field("native", "กรุงเทพมหานคร")
            .set_field("population", 1)
            .set_field("kind", DivisionKind.PROVINCE)
        )
        with pytest.raises(ValidationException):
            builder.build()

    def test_unsupported_class_rejected(self) -> None:
        with pytest.raises(ValidationException):
            EntityBuilder(object)


class TestRowMapping:
    def test_country_row_to_domain(self) -> None:
        row = CountryModel(
            id=764, iso="TH", calling_code=66, name="Thailand", native="ไทย", population=69950850
        )
        assert to_domain(row) == Country(
            764, iso="TH", calling_code=66, name="Thailand", native="ไทย", population=69950850
        )

    def test_division_discriminator_becomes_kind(self) -> None:
        row = DivisionModel(
            id=3, type="State", country_id=840, iso="CA", name="California",
            native="California", population=39000000,
        )
        division = to_domain(row)
        assert division.kind is DivisionKind.STATE
        assert division.country_id == 840

    def test_urban_row_to_domain(self) -> None:
        row = UrbanModel(id=9, type="Ward", division_id=3, name="Ward 1", native="Ward 1", iso="W1")
        urban = to_domain(row)
        assert urban.kind is UrbanKind.WARD
        assert urban.division_id == 3

    def test_unsupported_model_rejected(self) -> None:
        with pytest.raises(ValidationException):
            to_domain(object())

    def test_model_fields_for_persisted_entity(self, make_division) -> None:
        fields = to_model_fields(make_division(1))
        assert fields["id"] == 1
        assert fields["type"] == "Province"
        assert fields["country_id"] == 764

    def test_model_fields_omit_transient_id(self, make_urban) -> None:
        fields = to_model_fields(make_urban())
        assert "id" not in fields
        assert fields["type"] == "City"

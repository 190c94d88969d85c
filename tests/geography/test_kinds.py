"""Tests for the division and urban classification labels."""

import pytest

from core.domain import ValidationException
from geography.domain import DivisionKind, UrbanKind
from geography.domain.kinds import KIND_MAX_LENGTH


class TestDivisionKind:
    def test_member_count(self) -> None:
        assert len(DivisionKind) == 27

    def test_values_are_discriminator_strings(self) -> None:
        assert DivisionKind.PROVINCE == "Province"
        assert DivisionKind.VOIVODESHIP.value == "Voivodeship"
        assert str(DivisionKind.BANAT) == "Banat"

    def test_parse_member(self) -> None:
        assert DivisionKind.parse(DivisionKind.STATE) is DivisionKind.STATE

    def test_parse_is_case_insensitive(self) -> None:
        assert DivisionKind.parse("province") is DivisionKind.PROVINCE
        assert DivisionKind.parse(" OBLAST ") is DivisionKind.OBLAST

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValidationException):
            DivisionKind.parse("Galaxy")

    def test_parse_rejects_other_family_label(self) -> None:
        with pytest.raises(ValidationException):
            DivisionKind.parse(UrbanKind.CITY.value)

    def test_choices_cover_all_members(self) -> None:
        assert [value for value, _ in DivisionKind.choices()] == [k.value for k in DivisionKind]


class TestUrbanKind:
    def test_members(self) -> None:
        assert [k.value for k in UrbanKind] == [
            "City", "Town", "Ward", "Shire", "Amphor", "Village", "Hamlet",
        ]

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValidationException):
            UrbanKind.parse(None)


def test_labels_fit_discriminator_column() -> None:
    for kind in list(DivisionKind) + list(UrbanKind):
        assert len(kind.value) <= KIND_MAX_LENGTH


def test_families_do_not_share_labels() -> None:
    assert not {k.value for k in DivisionKind} & {k.value for k in UrbanKind}

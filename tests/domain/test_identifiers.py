"""Tests for the FleetId, UserId, and PlateNumber value types."""

import pytest

from fleetctl.domain.errors import InvalidIdentifierError
from fleetctl.domain.ids import FleetId, PlateNumber, UserId

ID_TYPES = [FleetId, UserId, PlateNumber]


class TestMake:
    @pytest.mark.parametrize("id_type", ID_TYPES)
    @pytest.mark.parametrize("raw", ["abc", "AB-123-CD", " padded ", "ü-ñ-日本", "0"])
    def test_accepts_non_empty(self, id_type: type[FleetId], raw: str) -> None:
        value = id_type.make(raw)
        assert value == raw
        assert isinstance(value, id_type)

    @pytest.mark.parametrize("id_type", ID_TYPES)
    @pytest.mark.parametrize("raw", ["", " ", "\t\n", "   "])
    def test_rejects_empty_or_whitespace(self, id_type: type[FleetId], raw: str) -> None:
        with pytest.raises(InvalidIdentifierError, match="empty"):
            id_type.make(raw)

    def test_constructor_validates_too(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            PlateNumber("")

    def test_no_normalization(self) -> None:
        """The stored value keeps case and surrounding whitespace."""
        assert PlateNumber.make(" ab-12 ") == " ab-12 "

    @pytest.mark.parametrize(
        ("id_type", "kind"),
        [(FleetId, "fleet ID"), (UserId, "user ID"), (PlateNumber, "plate number")],
    )
    def test_error_names_kind(self, id_type: type[FleetId], kind: str) -> None:
        with pytest.raises(InvalidIdentifierError) as excinfo:
            id_type.make("")
        assert str(excinfo.value) == f"Invalid {kind}: empty"
        assert excinfo.value.code == "INVALID_IDENTIFIER"


class TestIsValid:
    def test_true_for_non_empty(self) -> None:
        assert FleetId.is_valid("f-1") is True
        assert UserId.is_valid("user") is True
        assert PlateNumber.is_valid("X") is True

    @pytest.mark.parametrize("raw", ["", "  "])
    def test_false_for_empty(self, raw: str) -> None:
        assert FleetId.is_valid(raw) is False
        assert UserId.is_valid(raw) is False
        assert PlateNumber.is_valid(raw) is False


class TestNominalTypes:
    def test_kinds_are_distinct_types(self) -> None:
        fleet_id = FleetId.make("same")
        user_id = UserId.make("same")
        assert not isinstance(fleet_id, UserId)
        assert not isinstance(user_id, FleetId)
        assert not issubclass(PlateNumber, FleetId)

    def test_usable_as_dict_key_with_raw_string(self) -> None:
        registry = {PlateNumber.make("AB-1"): "car"}
        assert registry["AB-1"] == "car"

    def test_repr_shows_type(self) -> None:
        assert repr(UserId.make("u1")) == "UserId('u1')"

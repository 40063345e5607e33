"""Unit tests for the GTIN value object."""

import pytest

from warehouse.domain.exceptions import InvalidGtin, ValidationError
from warehouse.domain.model.value_objects import Gtin, is_gtin


class TestIsGtin:

    @pytest.mark.parametrize(
        "value",
        ["1300000000000", "14000000000003", "96385074", "036000291452", "4006381333931"],
    )
    def test_valid_codes(self, value):
        assert is_gtin(value)

    def test_wrong_check_digit(self):
        assert not is_gtin("1300000000001")

    @pytest.mark.parametrize("value", ["13000000000", "130000000000000", "1234567"])
    def test_wrong_length(self, value):
        assert not is_gtin(value)

    @pytest.mark.parametrize("value", [None, "", "13000000000O0", "1300000000000 ", 1300000000000])
    def test_not_a_digit_string(self, value):
        assert not is_gtin(value)

    def test_non_ascii_digits_rejected(self):
        assert not is_gtin("١٣٠٠٠٠٠٠٠٠٠٠٠")


class TestGtin:

    def test_creation(self):
        assert str(Gtin("1300000000000")) == "1300000000000"

    def test_invalid_value_raises(self):
        with pytest.raises(InvalidGtin, match="The given data was invalid."):
            Gtin("abc")

    def test_invalid_gtin_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Gtin(None)  # type: ignore[arg-type]

    def test_equality_by_value(self):
        assert Gtin("1300000000000") == Gtin("1300000000000")

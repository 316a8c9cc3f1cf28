import pytest

from services.flight.domain.value_object import FlightNumber


class TestFlightNumber:
    """FlightNumber のテスト"""

    def test_valid_flight_number(self):
        """フライト番号を生成できる"""
        assert FlightNumber("BA100").value == "BA100"

    @pytest.mark.parametrize("value", ["flight-1", "ba200", "NH 001"])
    def test_free_form_key_is_kept_as_is(self, value):
        """形式を問わず、大文字化もせずにキーをそのまま保持する"""
        assert str(FlightNumber(value)) == value

    def test_empty_value_raises_error(self):
        """空のフライト番号は例外になる"""
        with pytest.raises(ValueError, match="FlightNumber cannot be empty"):
            FlightNumber("")

    def test_non_string_raises_error(self):
        with pytest.raises(TypeError):
            FlightNumber(100)

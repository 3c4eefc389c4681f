"""
Tests de utilidades numéricas y de formato.
"""

import math

import pytest

from recargos.shared import (
    redondear,
    format_decimal_hour,
    parse_hour,
    format_cop,
    format_number_with_comma,
    format_planilla_number,
    to_number,
    get_days_in_month,
    get_month_name,
    get_month_short_name,
    get_estado_label,
)


class TestRedondear:
    """Redondeo a dos decimales con la mitad hacia arriba."""

    @pytest.mark.parametrize("value, expected", [
        (0.125, 0.13),
        (2.5, 2.5),
        (1.005001, 1.01),
        (10.1 - 10, 0.1),
        (3, 3.0),
    ])
    def test_two_decimals(self, value, expected):
        assert redondear(value) == expected

    def test_custom_decimals(self):
        assert redondear(2.5, 0) == 3
        assert redondear(0.5, 0) == 1


class TestHours:
    """Conversión entre horas decimales y HH:MM."""

    @pytest.mark.parametrize("value, expected", [
        (21.5, "21:30"),
        (6, "06:00"),
        (0.25, "00:15"),
        (7.9999, "08:00"),
    ])
    def test_format_decimal_hour(self, value, expected):
        assert format_decimal_hour(value) == expected

    @pytest.mark.parametrize("value, expected", [
        ("21:30", 21.5),
        (" 6:15 ", 6.25),
        ("00:00", 0.0),
        (8, 8.0),
        (22.5, 22.5),
    ])
    def test_parse_hour(self, value, expected):
        assert parse_hour(value) == expected

    def test_parse_hour_minutes(self):
        assert math.isclose(parse_hour("8:05"), 8 + 5 / 60)

    @pytest.mark.parametrize("value", ["21h", "10:75", "", "8:5", True])
    def test_parse_hour_invalid(self, value):
        with pytest.raises(ValueError):
            parse_hour(value)


class TestFormatting:
    """Formatos de valores y planillas."""

    def test_format_cop(self):
        assert format_cop(1234567) == "$ 1.234.567"
        assert format_cop(0) == "$ 0"
        assert format_cop(999.6) == "$ 1.000"
        assert format_cop(-1500) == "-$ 1.500"

    @pytest.mark.parametrize("value, expected", [
        (8, "8"),
        (8.0, "8"),
        (8.5, "8,5"),
        ("2.25", "2,25"),
        (None, ""),
        ("", ""),
        ("-", "-"),
        ("abc", "abc"),
    ])
    def test_format_number_with_comma(self, value, expected):
        assert format_number_with_comma(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (123, "TM-123"),
        ("456", "TM-456"),
        ("TM-5", "TM-5"),
        ("AB-1", "AB-1"),
        (None, ""),
        ("", ""),
        (0, ""),
    ])
    def test_format_planilla_number(self, value, expected):
        assert format_planilla_number(value) == expected

    def test_to_number(self):
        assert to_number("3.5") == 3.5
        assert to_number(None) == 0
        assert to_number("x") == 0
        assert to_number(float("nan")) == 0


class TestCalendarHelpers:
    """Nombres de mes, días del mes y estados."""

    def test_days_in_month(self):
        assert get_days_in_month(2, 2024) == 29
        assert get_days_in_month(2, 2025) == 28
        assert get_days_in_month(4, 2025) == 30

    def test_month_names(self):
        assert get_month_name(1) == "Enero"
        assert get_month_name(12) == "Diciembre"
        assert get_month_name(13) == ""
        assert get_month_short_name(8) == "Ago"

    def test_estado_label(self):
        assert get_estado_label("LIQUIDADA") == "Liquidada"
        assert get_estado_label("no_esta") == "No está"
        assert get_estado_label("otro") == "otro"
        assert get_estado_label(None) == "Desconocido"

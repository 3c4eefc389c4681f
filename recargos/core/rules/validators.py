"""
Validadores de entradas del cálculo de recargos.

Este módulo verifica fechas, horas y conjuntos de festivos antes de
cualquier cálculo, lanzando el error de dominio correspondiente.
"""

import calendar
import math
from datetime import MINYEAR, MAXYEAR
from numbers import Real
from typing import FrozenSet, Iterable, Optional

from ..exceptions import InvalidDateError, InvalidHourRangeError, UnsupportedShiftSpanError
from ...infrastructure.config.constants import HORAS_DIA


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_year(year: int) -> None:
    """
    Valida que el año sea un entero dentro del calendario gregoriano soportado.

    Raises:
        InvalidDateError: Si el año no es entero o está fuera de [1, 9999]
    """
    if not _is_integer(year):
        raise InvalidDateError(f"El año debe ser un entero: {year!r}")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(f"Año fuera de rango ({MINYEAR}-{MAXYEAR}): {year}")


def validate_month(month: int) -> None:
    """Valida que el mes sea un entero entre 1 y 12."""
    if not _is_integer(month) or not 1 <= month <= 12:
        raise InvalidDateError(f"El mes debe estar entre 1 y 12: {month!r}")


def validate_date(day: int, month: int, year: int) -> None:
    """
    Valida que (día, mes, año) sea una fecha existente.

    Raises:
        InvalidDateError: Si algún componente está fuera de rango o el día
            no existe en el mes (ej. 31 de abril, 29 de febrero en año no bisiesto)
    """
    validate_year(year)
    validate_month(month)

    if not _is_integer(day):
        raise InvalidDateError(f"El día debe ser un entero: {day!r}")

    _, last_day = calendar.monthrange(year, month)
    if not 1 <= day <= last_day:
        raise InvalidDateError(f"El día {day} no existe en {month:02d}/{year} (máximo {last_day})")


def validate_hour(value: float, label: str = "hora") -> float:
    """
    Valida que una hora sea un número real finito y no negativo.

    Args:
        value: Hora en formato decimal
        label: Nombre del campo para el mensaje de error

    Returns:
        float: La hora como float

    Raises:
        InvalidHourRangeError: Si no es numérica, es NaN/infinita o negativa
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidHourRangeError(f"La {label} debe ser numérica: {value!r}")

    hour = float(value)
    if not math.isfinite(hour):
        raise InvalidHourRangeError(f"La {label} debe ser un número finito: {value!r}")
    if hour < 0:
        raise InvalidHourRangeError(f"La {label} no puede ser negativa: {value!r}")
    return hour


def validate_single_day_hours(start_hour: float, end_hour: float) -> None:
    """
    Valida una jornada con a lo sumo un cruce de medianoche.

    Ambas horas deben estar en [0, 24). Una hora de fin >= 24 expresa una
    jornada de varios días que no se puede clasificar como un solo día.

    Raises:
        InvalidHourRangeError: Si alguna hora es inválida o el inicio es >= 24
        UnsupportedShiftSpanError: Si la hora de fin es >= 24
    """
    start = validate_hour(start_hour, "hora de inicio")
    end = validate_hour(end_hour, "hora de fin")

    if start >= HORAS_DIA:
        raise InvalidHourRangeError(f"La hora de inicio debe ser menor que {HORAS_DIA}: {start_hour!r}")
    if end >= HORAS_DIA:
        raise UnsupportedShiftSpanError(
            f"La hora de fin {end_hour!r} supera la siguiente medianoche; "
            f"use classify_extended_shift para jornadas de varios días"
        )


def validate_extended_hours(start_hour: float, end_hour: float) -> None:
    """
    Valida una jornada expresada en horas absolutas desde la medianoche del día de inicio.

    Raises:
        InvalidHourRangeError: Si alguna hora es inválida, el inicio es >= 24
            o el fin es anterior al inicio
    """
    start = validate_hour(start_hour, "hora de inicio")
    end = validate_hour(end_hour, "hora de fin")

    if start >= HORAS_DIA:
        raise InvalidHourRangeError(f"La hora de inicio debe ser menor que {HORAS_DIA}: {start_hour!r}")
    if end < start:
        raise InvalidHourRangeError(
            f"En horas absolutas la hora de fin ({end_hour!r}) no puede ser anterior al inicio ({start_hour!r})"
        )


def normalize_holiday_days(holiday_days: Optional[Iterable[int]]) -> FrozenSet[int]:
    """
    Convierte los días festivos del mes a un frozenset validado.

    Args:
        holiday_days: Días del mes que son festivos (o None)

    Returns:
        FrozenSet[int]: Días festivos

    Raises:
        InvalidDateError: Si algún día no es un entero entre 1 y 31
    """
    if holiday_days is None:
        return frozenset()

    days = frozenset(holiday_days)
    for day in days:
        if not _is_integer(day) or not 1 <= day <= 31:
            raise InvalidDateError(f"Día festivo inválido: {day!r}")
    return days

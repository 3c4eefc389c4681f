"""
Reglas de recargos laborales.

Cada función calcula una sola categoría para la jornada de un día. Las
categorías son particiones excluyentes: HED/HEN solo aplican en días
ordinarios y HEFD/HEFN/RD solo en domingos o festivos. La corrección de
doble conteo (restar la parte nocturna de la extra) se aplica al combinar
las reglas en classify_shift.
"""

from datetime import date
from typing import Collection

from .validators import validate_date
from ...infrastructure.config.constants import (
    JORNADA_NORMAL,
    INICIO_NOCTURNO,
    FIN_NOCTURNO,
    HORAS_DIA
)
from ...shared.utils import redondear


def compute_worked_hours(start_hour: float, end_hour: float) -> float:
    """
    Calcula el total de horas trabajadas.

    Si la hora de fin es menor que la de inicio, la jornada cruzó la
    medianoche una vez (22 -> 6 son 8 horas).
    """
    total_hours = end_hour - start_hour
    if total_hours < 0:
        total_hours += HORAS_DIA
    return redondear(total_hours)


def is_sunday(day: int, month: int, year: int) -> bool:
    """Verifica si la fecha es domingo."""
    validate_date(day, month, year)
    return date(year, month, day).weekday() == 6


def is_holiday_day(day: int, holiday_days: Collection[int] = ()) -> bool:
    """Verifica si el día del mes está en el conjunto de festivos."""
    return day in holiday_days


def is_sunday_or_holiday(day: int, month: int, year: int,
                         holiday_days: Collection[int] = ()) -> bool:
    """Verifica si la fecha es domingo o festivo."""
    return is_sunday(day, month, year) or is_holiday_day(day, holiday_days)


def calculate_hed(day: int, month: int, year: int, total_hours: float,
                  holiday_days: Collection[int] = ()) -> float:
    """
    Hora extra diurna (sin descontar HEN).

    0 en domingo o festivo; en día ordinario, las horas que superan la
    jornada normal.
    """
    if is_sunday_or_holiday(day, month, year, holiday_days):
        return 0.0

    if total_hours > JORNADA_NORMAL:
        return redondear(total_hours - JORNADA_NORMAL)
    return 0.0


def calculate_hen(day: int, month: int, year: int, end_hour: float, total_hours: float,
                  holiday_days: Collection[int] = ()) -> float:
    """
    Hora extra nocturna.

    0 en domingo o festivo; en día ordinario, si se superó la jornada normal
    y se terminó después de las 21:00, las horas posteriores a las 21:00.
    """
    if is_sunday_or_holiday(day, month, year, holiday_days):
        return 0.0

    if total_hours > JORNADA_NORMAL and end_hour > INICIO_NOCTURNO:
        return redondear(end_hour - INICIO_NOCTURNO)
    return 0.0


def calculate_hefd(day: int, month: int, year: int, total_hours: float,
                   holiday_days: Collection[int] = ()) -> float:
    """Hora extra festiva diurna (sin descontar HEFN)."""
    if not is_sunday_or_holiday(day, month, year, holiday_days):
        return 0.0

    if total_hours > JORNADA_NORMAL:
        return redondear(total_hours - JORNADA_NORMAL)
    return 0.0


def calculate_hefn(day: int, month: int, year: int, end_hour: float, total_hours: float,
                   holiday_days: Collection[int] = ()) -> float:
    """Hora extra festiva nocturna."""
    if not is_sunday_or_holiday(day, month, year, holiday_days):
        return 0.0

    if total_hours > JORNADA_NORMAL and end_hour > INICIO_NOCTURNO:
        return redondear(end_hour - INICIO_NOCTURNO)
    return 0.0


def calculate_night_surcharge(start_hour: float, end_hour: float) -> float:
    """
    Recargo nocturno sobre toda la jornada, sin importar el tipo de día.

    Suma dos aportes que no se solapan:
    - Inicio antes de las 06:00: 6 - inicio
    - Fin después de las 21:00: fin - inicio si también inició después de
      las 21:00 el mismo día, o fin - 21 en otro caso. Si inició después de
      las 21:00 y terminó al día siguiente después de las 21:00, cuenta
      hasta la medianoche más fin - 21.
    """
    night_hours = 0.0

    if start_hour < FIN_NOCTURNO:
        night_hours += FIN_NOCTURNO - start_hour

    if end_hour > INICIO_NOCTURNO:
        if start_hour > INICIO_NOCTURNO and end_hour >= start_hour:
            night_hours += end_hour - start_hour
        elif start_hour > INICIO_NOCTURNO:
            night_hours += (HORAS_DIA - start_hour) + (end_hour - INICIO_NOCTURNO)
        else:
            night_hours += end_hour - INICIO_NOCTURNO

    return redondear(night_hours)


def calculate_sunday_surcharge(day: int, month: int, year: int, total_hours: float,
                               holiday_days: Collection[int] = ()) -> float:
    """
    Recargo dominical/festivo, limitado a la jornada normal.

    Las horas que superan la jornada se pagan como HEFD/HEFN.
    """
    if not is_sunday_or_holiday(day, month, year, holiday_days):
        return 0.0
    return redondear(min(total_hours, JORNADA_NORMAL))

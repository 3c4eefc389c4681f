"""
Servicio de clasificación de jornadas.

Este módulo combina las reglas de recargo para clasificar la jornada de un
día en horas extra diurnas/nocturnas, ordinarias/festivas, recargo nocturno
y recargo dominical, sin contar dos veces las mismas horas.
"""

from typing import Iterable, List, Optional, Tuple

from ..models import RecargosCalculados, WorkInterval
from ..rules.interfaces import HolidayProvider
from ..rules.surcharges import (
    compute_worked_hours,
    is_sunday,
    is_holiday_day,
    calculate_hed,
    calculate_hen,
    calculate_hefd,
    calculate_hefn,
    calculate_night_surcharge,
    calculate_sunday_surcharge
)
from ..rules.validators import normalize_holiday_days
from ...shared.utils import redondear


def classify_interval(interval: WorkInterval,
                      holiday_days: Optional[Iterable[int]] = None) -> RecargosCalculados:
    """
    Clasifica una jornada ya validada.

    Args:
        interval: Jornada del día
        holiday_days: Días festivos del mes de la jornada

    Returns:
        RecargosCalculados: Horas por categoría de recargo
    """
    holidays = normalize_holiday_days(holiday_days)
    day, month, year = interval.day, interval.month, interval.year
    start_hour, end_hour = interval.start_hour, interval.end_hour

    total_hours = compute_worked_hours(start_hour, end_hour)

    # La parte nocturna se descuenta primero de la extra para no contarla dos veces
    hen = calculate_hen(day, month, year, end_hour, total_hours, holidays)
    hed = max(0.0, redondear(calculate_hed(day, month, year, total_hours, holidays) - hen))
    hefn = calculate_hefn(day, month, year, end_hour, total_hours, holidays)
    hefd = max(0.0, redondear(calculate_hefd(day, month, year, total_hours, holidays) - hefn))

    sunday = is_sunday(day, month, year)
    holiday = is_holiday_day(day, holidays)

    return RecargosCalculados(
        total_horas=total_hours,
        hora_extra_diurna=hed,
        hora_extra_nocturna=hen,
        hora_extra_festiva_diurna=hefd,
        hora_extra_festiva_nocturna=hefn,
        recargo_nocturno=calculate_night_surcharge(start_hour, end_hour),
        recargo_dominical=calculate_sunday_surcharge(day, month, year, total_hours, holidays),
        es_domingo=sunday,
        es_festivo=holiday,
        es_domingo_o_festivo=sunday or holiday
    )


def classify_shift(day: int, month: int, year: int, start_hour: float, end_hour: float,
                   holiday_days: Optional[Iterable[int]] = None) -> RecargosCalculados:
    """
    Clasifica la jornada de un día en categorías de recargo.

    Args:
        day: Día del mes
        month: Mes (1-12)
        year: Año
        start_hour: Hora de inicio en decimal, en [0, 24)
        end_hour: Hora de fin en decimal, en [0, 24); menor que el inicio si
            la jornada termina al día siguiente
        holiday_days: Días festivos del mes (ver get_holiday_days)

    Returns:
        RecargosCalculados: Horas por categoría de recargo

    Raises:
        InvalidDateError: Si la fecha no existe
        InvalidHourRangeError: Si alguna hora es inválida
        UnsupportedShiftSpanError: Si la hora de fin supera la siguiente medianoche
    """
    interval = WorkInterval(day=day, month=month, year=year,
                            start_hour=start_hour, end_hour=end_hour)
    return classify_interval(interval, holiday_days)


class ShiftClassifier:
    """
    Clasificador de jornadas que obtiene los festivos de un proveedor.

    No guarda estado entre llamadas; puede compartirse entre hilos.
    """

    def __init__(self, holiday_provider: HolidayProvider):
        """
        Inicializa el clasificador.

        Args:
            holiday_provider: Fuente de los festivos de cada mes
        """
        self.holiday_provider = holiday_provider

    def classify(self, interval: WorkInterval,
                 extra_holiday_days: Iterable[int] = ()) -> RecargosCalculados:
        """
        Clasifica una jornada con los festivos del proveedor.

        Args:
            interval: Jornada del día
            extra_holiday_days: Días marcados como festivos además del calendario

        Returns:
            RecargosCalculados: Horas por categoría de recargo
        """
        holiday_days = self.holiday_provider.get_holiday_days(interval.month, interval.year)
        return classify_interval(interval, holiday_days | frozenset(extra_holiday_days))

    def classify_many(self, intervals: Iterable[WorkInterval]) -> List[Tuple[WorkInterval, RecargosCalculados]]:
        """Clasifica varias jornadas; el orden del resultado sigue al de la entrada."""
        return [(interval, self.classify(interval)) for interval in intervals]

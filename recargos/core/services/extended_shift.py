"""
Clasificación de jornadas de varios días.

Las horas se expresan en forma absoluta desde la medianoche del día de
inicio (0 -> 48 son dos días completos). La jornada se descompone así:

- RN: horas dentro de la franja nocturna (21:00-06:00, que se repite cada
  día) en las primeras JORNADA_NORMAL horas.
- Horas después de la jornada normal: la parte nocturna es HEFN (o HEN en
  día ordinario) y el resto HEFD (o HED).
- RD: en domingo o festivo, min(total, JORNADA_NORMAL).

El carácter dominical/festivo del día de inicio aplica a toda la jornada.
Estos resultados no coinciden con classify_shift para las mismas horas:
classify_shift solo conoce un cruce de medianoche y calcula RN con sus
dos reglas de inicio y fin.
"""

import math
from typing import Iterable, Optional

from ..models import RecargosCalculados
from ..rules.surcharges import is_sunday, is_holiday_day
from ..rules.validators import validate_date, validate_extended_hours, normalize_holiday_days
from ...infrastructure.config.constants import (
    JORNADA_NORMAL,
    INICIO_NOCTURNO,
    FIN_NOCTURNO,
    HORAS_DIA
)
from ...shared.utils import redondear


def night_overlap(start: float, end: float) -> float:
    """
    Horas de [start, end) que caen en la franja nocturna.

    La franja k va de las 21:00 del día k-1 a las 06:00 del día k, en horas
    absolutas [24k - 3, 24k + 6).
    """
    if end <= start:
        return 0.0

    total = 0.0
    for k in range(math.floor(start / HORAS_DIA), math.floor(end / HORAS_DIA) + 2):
        window_start = HORAS_DIA * (k - 1) + INICIO_NOCTURNO
        window_end = HORAS_DIA * k + FIN_NOCTURNO
        total += max(0.0, min(end, window_end) - max(start, window_start))
    return total


def classify_extended_shift(day: int, month: int, year: int, start_hour: float, end_hour: float,
                            holiday_days: Optional[Iterable[int]] = None) -> RecargosCalculados:
    """
    Clasifica una jornada que puede durar más de 24 horas.

    Args:
        day: Día del mes en que inicia la jornada
        month: Mes (1-12)
        year: Año
        start_hour: Hora de inicio, en [0, 24)
        end_hour: Hora de fin absoluta desde la medianoche del día de inicio
        holiday_days: Días festivos del mes de inicio

    Returns:
        RecargosCalculados: Horas por categoría de recargo

    Raises:
        InvalidDateError: Si la fecha no existe
        InvalidHourRangeError: Si alguna hora es inválida o el fin es anterior al inicio
    """
    validate_date(day, month, year)
    validate_extended_hours(start_hour, end_hour)
    holidays = normalize_holiday_days(holiday_days)

    start, end = float(start_hour), float(end_hour)
    total_hours = end - start
    ordinary_end = min(end, start + JORNADA_NORMAL)

    night_hours = night_overlap(start, ordinary_end)
    extra_hours = max(0.0, total_hours - JORNADA_NORMAL)
    night_extra = night_overlap(ordinary_end, end) if extra_hours > 0 else 0.0

    sunday = is_sunday(day, month, year)
    holiday = is_holiday_day(day, holidays)
    special_day = sunday or holiday

    if special_day:
        hed = hen = 0.0
        hefn = redondear(night_extra)
        hefd = redondear(extra_hours - night_extra)
        rd = redondear(min(total_hours, JORNADA_NORMAL))
    else:
        hen = redondear(night_extra)
        hed = redondear(extra_hours - night_extra)
        hefd = hefn = rd = 0.0

    return RecargosCalculados(
        total_horas=redondear(total_hours),
        hora_extra_diurna=hed,
        hora_extra_nocturna=hen,
        hora_extra_festiva_diurna=hefd,
        hora_extra_festiva_nocturna=hefn,
        recargo_nocturno=redondear(night_hours),
        recargo_dominical=rd,
        es_domingo=sunday,
        es_festivo=holiday,
        es_domingo_o_festivo=special_day
    )

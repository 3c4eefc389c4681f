"""
Servicio de calendario de festivos colombianos.

Este módulo deriva, para cualquier año, la lista completa de festivos:
fijos, de Semana Santa (calculados desde la Pascua) y los que la Ley
Emiliani traslada al lunes siguiente. Todas las funciones son puras.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from typing import Dict, FrozenSet, List, Tuple

from ..models import HolidayCategory, HolidayRecord
from ..rules.interfaces import HolidayProvider
from ..rules.validators import validate_date, validate_month, validate_year
from ...infrastructure.config.constants import (
    FIXED_HOLIDAYS,
    MOVABLE_HOLIDAYS,
    PALM_SUNDAY_OFFSET,
    HOLY_THURSDAY_OFFSET,
    GOOD_FRIDAY_OFFSET,
    HOLY_THURSDAY_NAME,
    GOOD_FRIDAY_NAME,
    CACHE_CONFIG
)


@dataclass(frozen=True)
class HolyWeek:
    """Fechas de Semana Santa de un año."""
    palm_sunday: date
    holy_thursday: date
    good_friday: date
    easter_sunday: date


# =====================================================================
# Cálculo de fechas
# =====================================================================

def compute_easter_sunday(year: int) -> date:
    """
    Calcula el Domingo de Pascua con el algoritmo de Meeus/Jones/Butcher.

    Args:
        year: Año gregoriano

    Returns:
        date: Fecha del Domingo de Pascua
    """
    validate_year(year)

    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1

    return date(year, month, day)


def compute_holy_week(year: int) -> HolyWeek:
    """Calcula Domingo de Ramos, Jueves Santo, Viernes Santo y Domingo de Pascua."""
    easter = compute_easter_sunday(year)
    return HolyWeek(
        palm_sunday=easter + timedelta(days=PALM_SUNDAY_OFFSET),
        holy_thursday=easter + timedelta(days=HOLY_THURSDAY_OFFSET),
        good_friday=easter + timedelta(days=GOOD_FRIDAY_OFFSET),
        easter_sunday=easter
    )


def next_monday(day: date) -> date:
    """
    Retorna la misma fecha si es lunes, o el lunes siguiente.

    Con domingo=0 ... sábado=6 se suma 1 día al domingo y 8 - día_semana al
    resto, que equivale a (7 - weekday()) % 7 con lunes=0.
    """
    return day + timedelta(days=(7 - day.weekday()) % 7)


# =====================================================================
# Festivos por categoría
# =====================================================================

def get_fixed_holidays(year: int) -> List[HolidayRecord]:
    """Festivos que caen en la misma fecha todos los años."""
    validate_year(year)
    return [
        HolidayRecord(year=year, month=month, day=day, name=name,
                      category=HolidayCategory.FIXED)
        for month, day, name in FIXED_HOLIDAYS
    ]


def get_religious_holidays(year: int) -> List[HolidayRecord]:
    """
    Jueves y Viernes Santo.

    Domingo de Ramos y de Pascua no se agregan: ya son domingos.
    """
    holy_week = compute_holy_week(year)
    return [
        HolidayRecord(year=year, month=holiday.month, day=holiday.day, name=name,
                      category=HolidayCategory.RELIGIOUS)
        for holiday, name in (
            (holy_week.holy_thursday, HOLY_THURSDAY_NAME),
            (holy_week.good_friday, GOOD_FRIDAY_NAME),
        )
    ]


def compute_moved_to_monday_holidays(year: int) -> List[HolidayRecord]:
    """
    Festivos de la Ley Emiliani, trasladados al lunes siguiente.

    Solo se reporta la fecha trasladada; la fecha legal queda en original_date.
    """
    validate_year(year)

    holidays = []
    for month, day, name in MOVABLE_HOLIDAYS:
        original = date(year, month, day)
        moved = next_monday(original)
        holidays.append(HolidayRecord(
            year=moved.year, month=moved.month, day=moved.day, name=name,
            category=HolidayCategory.MOVED_TO_MONDAY, original_date=original
        ))
    return holidays


# =====================================================================
# Consultas
# =====================================================================

def get_holidays(year: int) -> List[HolidayRecord]:
    """
    Obtiene todos los festivos del año en Colombia.

    Args:
        year: Año a consultar

    Returns:
        List[HolidayRecord]: Festivos ordenados por fecha, sin fechas repetidas
    """
    candidates = (
        get_fixed_holidays(year)
        + get_religious_holidays(year)
        + compute_moved_to_monday_holidays(year)
    )

    holidays: Dict[date, HolidayRecord] = {}
    for holiday in sorted(candidates):
        holidays.setdefault(holiday.date, holiday)
    return list(holidays.values())


def is_holiday(day: int, month: int, year: int) -> bool:
    """Verifica si un día específico es festivo en Colombia."""
    validate_date(day, month, year)
    return any(h.day == day and h.month == month for h in get_holidays(year))


def get_holidays_in_month(month: int, year: int) -> List[HolidayRecord]:
    """Obtiene los festivos de un mes específico."""
    validate_month(month)
    return [h for h in get_holidays(year) if h.month == month]


def get_holiday_days(month: int, year: int) -> FrozenSet[int]:
    """Días del mes que son festivos, listos para classify_shift."""
    return frozenset(h.day for h in get_holidays_in_month(month, year))


# =====================================================================
# Proveedor con memoria por año
# =====================================================================

@lru_cache(maxsize=CACHE_CONFIG["max_cached_years"])
def _cached_holidays(year: int) -> Tuple[HolidayRecord, ...]:
    return tuple(get_holidays(year))


class ColombianHolidayProvider(HolidayProvider):
    """
    Proveedor de festivos colombianos.

    Con use_cache=True memoriza la lista de cada año; los registros son
    inmutables, así que el caché es de solo lectura y seguro entre hilos.
    """

    def __init__(self, use_cache: bool = True):
        """
        Inicializa el proveedor.

        Args:
            use_cache: Si se memorizan los festivos por año
        """
        self.use_cache = use_cache

    def get_holidays(self, year: int) -> List[HolidayRecord]:
        if self.use_cache:
            validate_year(year)
            return list(_cached_holidays(year))
        return get_holidays(year)

    def is_holiday(self, day: date) -> bool:
        return any(h.date == day for h in self.get_holidays(day.year))

    def get_holidays_in_range(self, start_date: date, end_date: date) -> List[HolidayRecord]:
        if end_date < start_date:
            return []

        holidays = []
        for year in range(start_date.year, end_date.year + 1):
            holidays.extend(h for h in self.get_holidays(year) if start_date <= h.date <= end_date)
        return holidays

    def get_holiday_days(self, month: int, year: int) -> FrozenSet[int]:
        validate_month(month)
        return frozenset(h.day for h in self.get_holidays(year) if h.month == month)

    @staticmethod
    def clear_cache():
        """Vacía la memoria de festivos por año."""
        _cached_holidays.cache_clear()

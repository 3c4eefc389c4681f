"""
Recargos - Cálculo de recargos laborales colombianos para conductores.

Calendario de festivos de Colombia (fijos, Semana Santa y Ley Emiliani) y
clasificación de jornadas en horas extra, recargo nocturno y recargo
dominical/festivo.
"""

from .core import (
    HolidayCategory,
    HolidayRecord,
    WorkInterval,
    SurchargeType,
    RecargosCalculados,
    RecargosPeriodo,
    ValorRecargos,
    RecargoError,
    InvalidDateError,
    InvalidHourRangeError,
    UnsupportedShiftSpanError,
    compute_easter_sunday,
    compute_moved_to_monday_holidays,
    get_holidays,
    is_holiday,
    get_holidays_in_month,
    get_holiday_days,
    ColombianHolidayProvider,
    classify_shift,
    classify_interval,
    ShiftClassifier,
    classify_extended_shift,
    aggregate_recargos,
    value_recargos
)

__version__ = "1.0.0"

__all__ = [
    'HolidayCategory',
    'HolidayRecord',
    'WorkInterval',
    'SurchargeType',
    'RecargosCalculados',
    'RecargosPeriodo',
    'ValorRecargos',
    'RecargoError',
    'InvalidDateError',
    'InvalidHourRangeError',
    'UnsupportedShiftSpanError',
    'compute_easter_sunday',
    'compute_moved_to_monday_holidays',
    'get_holidays',
    'is_holiday',
    'get_holidays_in_month',
    'get_holiday_days',
    'ColombianHolidayProvider',
    'classify_shift',
    'classify_interval',
    'ShiftClassifier',
    'classify_extended_shift',
    'aggregate_recargos',
    'value_recargos',
]

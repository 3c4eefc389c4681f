"""
Core Services - Servicios de dominio para el cálculo de recargos.

Este paquete contiene los servicios que orquestan la lógica de dominio,
incluyendo el calendario de festivos, la clasificación de jornadas y los
totales del período.
"""

# Holiday calendar
from .holiday_calendar import (
    HolyWeek,
    compute_easter_sunday,
    compute_holy_week,
    next_monday,
    get_fixed_holidays,
    get_religious_holidays,
    compute_moved_to_monday_holidays,
    get_holidays,
    is_holiday,
    get_holidays_in_month,
    get_holiday_days,
    ColombianHolidayProvider
)

# Shift classifier
from .shift_classifier import (
    classify_interval,
    classify_shift,
    ShiftClassifier
)

# Extended shifts
from .extended_shift import (
    night_overlap,
    classify_extended_shift
)

# Aggregator
from .aggregator import (
    aggregate_recargos,
    value_recargos
)

__all__ = [
    # Holiday calendar
    'HolyWeek',
    'compute_easter_sunday',
    'compute_holy_week',
    'next_monday',
    'get_fixed_holidays',
    'get_religious_holidays',
    'compute_moved_to_monday_holidays',
    'get_holidays',
    'is_holiday',
    'get_holidays_in_month',
    'get_holiday_days',
    'ColombianHolidayProvider',

    # Shift classifier
    'classify_interval',
    'classify_shift',
    'ShiftClassifier',

    # Extended shifts
    'night_overlap',
    'classify_extended_shift',

    # Aggregator
    'aggregate_recargos',
    'value_recargos',
]

"""
Core Domain - Dominio puro del cálculo de recargos.

Este paquete contiene toda la lógica de dominio pura del sistema,
incluyendo modelos, reglas de negocio y servicios de dominio. No hace
I/O, no registra logs y no guarda estado entre llamadas.
"""

# Models - Entidades y objetos de valor
from .models import (
    HolidayCategory,
    HolidayRecord,
    WorkInterval,
    SurchargeType,
    RecargosCalculados,
    RecargosPeriodo,
    ValorRecargos
)

# Errors
from .exceptions import (
    RecargoError,
    InvalidDateError,
    InvalidHourRangeError,
    UnsupportedShiftSpanError
)

# Rules - Reglas de negocio y validadores
from .rules import (
    HolidayProvider,
    compute_worked_hours,
    is_sunday,
    is_sunday_or_holiday,
    calculate_hed,
    calculate_hen,
    calculate_hefd,
    calculate_hefn,
    calculate_night_surcharge,
    calculate_sunday_surcharge
)

# Services - Servicios de dominio
from .services import (
    compute_easter_sunday,
    compute_holy_week,
    compute_moved_to_monday_holidays,
    get_holidays,
    is_holiday,
    get_holidays_in_month,
    get_holiday_days,
    ColombianHolidayProvider,
    classify_interval,
    classify_shift,
    ShiftClassifier,
    classify_extended_shift,
    aggregate_recargos,
    value_recargos
)

__all__ = [
    # Models
    'HolidayCategory',
    'HolidayRecord',
    'WorkInterval',
    'SurchargeType',
    'RecargosCalculados',
    'RecargosPeriodo',
    'ValorRecargos',

    # Errors
    'RecargoError',
    'InvalidDateError',
    'InvalidHourRangeError',
    'UnsupportedShiftSpanError',

    # Rules
    'HolidayProvider',
    'compute_worked_hours',
    'is_sunday',
    'is_sunday_or_holiday',
    'calculate_hed',
    'calculate_hen',
    'calculate_hefd',
    'calculate_hefn',
    'calculate_night_surcharge',
    'calculate_sunday_surcharge',

    # Services
    'compute_easter_sunday',
    'compute_holy_week',
    'compute_moved_to_monday_holidays',
    'get_holidays',
    'is_holiday',
    'get_holidays_in_month',
    'get_holiday_days',
    'ColombianHolidayProvider',
    'classify_interval',
    'classify_shift',
    'ShiftClassifier',
    'classify_extended_shift',
    'aggregate_recargos',
    'value_recargos',
]

"""
Core Rules - Reglas de dominio para el cálculo de recargos.

Este paquete contiene las reglas de negocio de cada categoría de recargo,
los validadores de entradas y las interfaces de los proveedores externos.
"""

# Interfaces
from .interfaces import HolidayProvider

# Reglas de recargo
from .surcharges import (
    compute_worked_hours,
    is_sunday,
    is_holiday_day,
    is_sunday_or_holiday,
    calculate_hed,
    calculate_hen,
    calculate_hefd,
    calculate_hefn,
    calculate_night_surcharge,
    calculate_sunday_surcharge
)

# Validadores
from .validators import (
    validate_year,
    validate_month,
    validate_date,
    validate_hour,
    validate_single_day_hours,
    validate_extended_hours,
    normalize_holiday_days
)

__all__ = [
    # Interfaces
    'HolidayProvider',

    # Surcharge rules
    'compute_worked_hours',
    'is_sunday',
    'is_holiday_day',
    'is_sunday_or_holiday',
    'calculate_hed',
    'calculate_hen',
    'calculate_hefd',
    'calculate_hefn',
    'calculate_night_surcharge',
    'calculate_sunday_surcharge',

    # Validators
    'validate_year',
    'validate_month',
    'validate_date',
    'validate_hour',
    'validate_single_day_hours',
    'validate_extended_hours',
    'normalize_holiday_days',
]

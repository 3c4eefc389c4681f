"""
Shared - Utilidades compartidas entre capas.
"""

from .utils import (
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
    get_estado_label
)

__all__ = [
    'redondear',
    'format_decimal_hour',
    'parse_hour',
    'format_cop',
    'format_number_with_comma',
    'format_planilla_number',
    'to_number',
    'get_days_in_month',
    'get_month_name',
    'get_month_short_name',
    'get_estado_label',
]

"""
Infrastructure Config - Configuración del sistema.

Este paquete contiene toda la configuración del sistema,
incluyendo constantes, configuraciones y utilidades.
"""

from .constants import (
    JORNADA_NORMAL,
    INICIO_NOCTURNO,
    FIN_NOCTURNO,
    HORAS_DIA,
    DECIMALES_REDONDEO,
    PORCENTAJES_RECARGO,
    FIXED_HOLIDAYS,
    MOVABLE_HOLIDAYS,
    CACHE_CONFIG,
    LOGGING_CONFIG,
    WORKDAY_COLUMNS
)

from .settings import (
    Settings,
    settings,
    get_surcharge_percentages,
    get_default_valor_hora,
    get_log_level,
    is_debug_mode,
    is_holiday_cache_enabled,
    get_supported_surcharge_codes
)

__all__ = [
    # Constants
    'JORNADA_NORMAL',
    'INICIO_NOCTURNO',
    'FIN_NOCTURNO',
    'HORAS_DIA',
    'DECIMALES_REDONDEO',
    'PORCENTAJES_RECARGO',
    'FIXED_HOLIDAYS',
    'MOVABLE_HOLIDAYS',
    'CACHE_CONFIG',
    'LOGGING_CONFIG',
    'WORKDAY_COLUMNS',

    # Settings
    'Settings',
    'settings',
    'get_surcharge_percentages',
    'get_default_valor_hora',
    'get_log_level',
    'is_debug_mode',
    'is_holiday_cache_enabled',
    'get_supported_surcharge_codes',
]

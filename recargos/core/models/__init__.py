"""
Core Models - Modelos de dominio puro para el cálculo de recargos.

Este paquete contiene todas las entidades y objetos de valor del dominio,
sin dependencias externas ni lógica de infraestructura.
"""

from .holiday import HolidayCategory, HolidayRecord
from .work_interval import WorkInterval
from .recargos import (
    SurchargeType,
    RecargosCalculados,
    RecargosPeriodo,
    ValorRecargos
)

__all__ = [
    # Holiday models
    'HolidayCategory',
    'HolidayRecord',

    # Work interval
    'WorkInterval',

    # Surcharge models
    'SurchargeType',
    'RecargosCalculados',
    'RecargosPeriodo',
    'ValorRecargos',
]

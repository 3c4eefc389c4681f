"""
Servicio de totales y liquidación de recargos.

Suma los recargos diarios de un período y calcula su valor en pesos con
los porcentajes de ley.
"""

import math
from typing import Dict, Iterable, Optional, Union

from ..models import RecargosCalculados, RecargosPeriodo, SurchargeType, ValorRecargos
from ...infrastructure.config.constants import PORCENTAJES_RECARGO
from ...shared.utils import redondear


def aggregate_recargos(results: Iterable[RecargosCalculados]) -> RecargosPeriodo:
    """
    Suma los recargos de los días trabajados de un período.

    El resultado no depende del orden de los días.

    Args:
        results: Recargos de cada día trabajado

    Returns:
        RecargosPeriodo: Totales del período (ceros si no hay días)
    """
    results = list(results)

    def total(attribute: str) -> float:
        return redondear(sum(getattr(result, attribute) for result in results))

    return RecargosPeriodo(
        total_dias=len(results),
        total_horas_trabajadas=total("total_horas"),
        total_hed=total("hora_extra_diurna"),
        total_hen=total("hora_extra_nocturna"),
        total_hefd=total("hora_extra_festiva_diurna"),
        total_hefn=total("hora_extra_festiva_nocturna"),
        total_rn=total("recargo_nocturno"),
        total_rd=total("recargo_dominical")
    )


def value_recargos(recargos: Union[RecargosCalculados, RecargosPeriodo], valor_hora: float,
                   percentages: Optional[Dict[str, float]] = None) -> ValorRecargos:
    """
    Calcula el valor en pesos de cada categoría de recargo.

    Cada categoría vale horas x valor_hora x porcentaje / 100.

    Args:
        recargos: Recargos de un día o totales de un período
        valor_hora: Valor de la hora ordinaria del trabajador
        percentages: Porcentajes por código (HED, HEN, ...); por defecto los de ley

    Returns:
        ValorRecargos: Valor de cada categoría

    Raises:
        ValueError: Si el valor hora no es un número positivo finito
    """
    if isinstance(valor_hora, bool) or not isinstance(valor_hora, (int, float)) \
            or not math.isfinite(valor_hora) or valor_hora <= 0:
        raise ValueError(f"El valor hora debe ser un número positivo: {valor_hora!r}")

    rates = dict(PORCENTAJES_RECARGO)
    if percentages:
        rates.update(percentages)

    values = {
        surcharge_type.value.lower(): redondear(
            recargos.get_hours(surcharge_type) * valor_hora * rates[surcharge_type.value] / 100
        )
        for surcharge_type in SurchargeType
    }
    return ValorRecargos(valor_hora=float(valor_hora), **values)

"""
Utilidades numéricas y de formato compartidas.
"""

import calendar
import math
import re
from typing import Any, Optional, Union

from ..infrastructure.config.constants import (
    DECIMALES_REDONDEO,
    ESTADO_LABELS,
    MONTH_NAMES,
    MONTH_SHORT_NAMES,
    PLANILLA_PREFIX
)

Number = Union[int, float]

_HOUR_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def redondear(numero: Number, decimales: int = DECIMALES_REDONDEO) -> float:
    """
    Redondea un número a los decimales indicados, con la mitad hacia arriba.

    A diferencia de round(), no usa redondeo bancario: redondear(0.125) == 0.13.
    """
    factor = 10 ** decimales
    return math.floor(numero * factor + 0.5) / factor


def format_decimal_hour(hora: Number) -> str:
    """Formatea una hora decimal como HH:MM (21.5 -> "21:30")."""
    horas = math.floor(hora)
    minutos = round((hora - horas) * 60)
    if minutos == 60:
        horas, minutos = horas + 1, 0
    return f"{horas:02d}:{minutos:02d}"


def parse_hour(hora: Union[str, Number]) -> float:
    """
    Convierte una hora HH:MM (o un número) a horas decimales.

    Args:
        hora: "21:30", "6:05" o un valor numérico

    Returns:
        float: Hora decimal (21.5 para "21:30")

    Raises:
        ValueError: Si el texto no tiene formato HH:MM o los minutos no son válidos
    """
    if isinstance(hora, bool):
        raise ValueError(f"Hora inválida: {hora!r}")
    if isinstance(hora, (int, float)):
        return float(hora)

    match = _HOUR_PATTERN.match(str(hora))
    if not match:
        raise ValueError(f"Formato de hora inválido, se esperaba HH:MM: {hora!r}")

    horas, minutos = int(match.group(1)), int(match.group(2))
    if minutos >= 60:
        raise ValueError(f"Minutos inválidos en la hora: {hora!r}")
    return horas + minutos / 60


def format_cop(valor: Number) -> str:
    """Formatea un valor en pesos colombianos sin decimales ("$ 1.234.567")."""
    signo = "-" if valor < 0 else ""
    entero = f"{round(abs(valor)):,}".replace(",", ".")
    return f"{signo}$ {entero}"


def format_number_with_comma(value: Any) -> str:
    """Convierte un número a texto con coma decimal (para hojas de cálculo)."""
    if value is None or value == "" or value == "-":
        return "" if value is None else str(value)

    try:
        num_value = float(value)
    except (TypeError, ValueError):
        return str(value)

    if math.isnan(num_value):
        return str(value)
    if num_value.is_integer():
        return str(int(num_value))
    return str(num_value).replace(".", ",")


def format_planilla_number(numero: Optional[Union[str, int]]) -> str:
    """Formatea el número de planilla con el prefijo TM-."""
    if numero is None or numero == "" or numero == 0:
        return ""

    num_str = str(numero)
    if num_str.startswith(PLANILLA_PREFIX):
        return num_str
    if num_str.isdigit():
        return f"{PLANILLA_PREFIX}{num_str}"
    return num_str


def to_number(value: Any) -> float:
    """Convierte un valor a número; devuelve 0 si no es convertible."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def get_days_in_month(month: int, year: int) -> int:
    """Retorna la cantidad de días del mes."""
    return calendar.monthrange(year, month)[1]


def get_month_name(month: int) -> str:
    """Nombre del mes en español; cadena vacía si el mes no existe."""
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return ""


def get_month_short_name(month: int) -> str:
    """Nombre corto del mes en español."""
    if 1 <= month <= 12:
        return MONTH_SHORT_NAMES[month - 1]
    return ""


def get_estado_label(estado: Optional[str]) -> str:
    """Etiqueta legible del estado de una planilla."""
    if not estado:
        return "Desconocido"
    return ESTADO_LABELS.get(estado.lower(), estado)

"""
Errores del dominio de recargos.

Todos son violaciones de precondiciones detectables antes de calcular,
por lo que heredan de ValueError.
"""


class RecargoError(ValueError):
    """Error base para entradas inválidas del cálculo de recargos."""


class InvalidDateError(RecargoError):
    """Día, mes o año fuera de rango, o día inexistente en el mes (ej. 31 de abril)."""


class InvalidHourRangeError(RecargoError):
    """Hora de inicio o fin no numérica, NaN, infinita, negativa o fuera de [0, 24)."""


class UnsupportedShiftSpanError(RecargoError):
    """
    La jornada no se puede representar con un solo cruce de medianoche.

    Se lanza cuando la hora de fin se expresa como hora absoluta posterior
    a la siguiente medianoche (ej. 0 -> 48).
    """

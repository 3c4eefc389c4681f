"""
WorkInterval model - Dominio puro para representar la jornada de un día.

Las horas se expresan en decimal (21.5 = 21:30). Si la hora de fin es menor
que la de inicio, la jornada termina al día calendario siguiente.
"""

from dataclasses import dataclass
from datetime import date

from ...shared.utils import format_decimal_hour


@dataclass(frozen=True)
class WorkInterval:
    """Jornada trabajada en un día (inmutable, validada al construirse)."""
    day: int
    month: int
    year: int
    start_hour: float
    end_hour: float

    def __post_init__(self):
        """Validación post-inicialización."""
        from ..rules.validators import validate_date, validate_single_day_hours

        validate_date(self.day, self.month, self.year)
        validate_single_day_hours(self.start_hour, self.end_hour)

    @property
    def date(self) -> date:
        """Fecha en que inicia la jornada."""
        return date(self.year, self.month, self.day)

    @property
    def crosses_midnight(self) -> bool:
        """Verifica si la jornada cruza medianoche."""
        return self.end_hour < self.start_hour

    def format_range(self) -> str:
        """Formatea el rango horario como string."""
        return f"{format_decimal_hour(self.start_hour)}-{format_decimal_hour(self.end_hour)}"

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.format_range()}"

"""
Holiday model - Festivos colombianos como objetos de valor inmutables.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class HolidayCategory(Enum):
    """Origen legal de un festivo."""
    FIXED = "fijo"                  # Misma fecha todos los años
    RELIGIOUS = "religioso"         # Semana Santa, depende de la Pascua
    MOVED_TO_MONDAY = "trasladado"  # Ley Emiliani: se corre al lunes siguiente

    @classmethod
    def from_string(cls, category_str: str) -> 'HolidayCategory':
        """Convierte string a HolidayCategory."""
        for category in cls:
            if category.value == category_str:
                return category
        raise ValueError(f"Tipo de festivo inválido: {category_str}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Retorna todos los valores como strings."""
        return [category.value for category in cls]


@dataclass(frozen=True, order=True)
class HolidayRecord:
    """
    Festivo de un año concreto (inmutable).

    El orden natural es cronológico; original_date conserva la fecha legal
    antes del traslado al lunes y no participa en la comparación.
    """
    year: int
    month: int
    day: int
    name: str = field(compare=False)
    category: HolidayCategory = field(compare=False)
    original_date: Optional[date] = field(default=None, compare=False)

    def __post_init__(self):
        """Completa la fecha original con la fecha del festivo si no se indicó."""
        if self.original_date is None:
            object.__setattr__(self, 'original_date', self.date)

    @property
    def date(self) -> date:
        """Fecha del festivo."""
        return date(self.year, self.month, self.day)

    @property
    def full_date(self) -> str:
        """Fecha en formato ISO (YYYY-MM-DD)."""
        return self.date.isoformat()

    @property
    def was_moved(self) -> bool:
        """Verifica si el festivo fue trasladado de su fecha original."""
        return self.original_date != self.date

    def __str__(self) -> str:
        return f"{self.full_date} {self.name} ({self.category.value})"

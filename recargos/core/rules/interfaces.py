"""
Interfaces y contratos para las reglas de dominio.

Este módulo define las interfaces abstractas que deben implementar
los proveedores de información usados por el cálculo de recargos.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import FrozenSet, List

from ..models import HolidayRecord


class HolidayProvider(ABC):
    """
    Interfaz para proveedores de información de festivos.

    Abstrae la fuente de información sobre días festivos.
    """

    @abstractmethod
    def get_holidays(self, year: int) -> List[HolidayRecord]:
        """
        Obtiene los festivos de un año, ordenados por fecha.

        Args:
            year: Año a consultar

        Returns:
            List[HolidayRecord]: Festivos del año
        """
        pass

    @abstractmethod
    def is_holiday(self, day: date) -> bool:
        """
        Determina si una fecha es festivo.

        Args:
            day: Fecha a verificar

        Returns:
            bool: True si es festivo
        """
        pass

    @abstractmethod
    def get_holidays_in_range(self, start_date: date, end_date: date) -> List[HolidayRecord]:
        """
        Obtiene todos los festivos en un rango de fechas (inclusivo).

        Args:
            start_date: Fecha de inicio
            end_date: Fecha de fin

        Returns:
            List[HolidayRecord]: Festivos del rango
        """
        pass

    @abstractmethod
    def get_holiday_days(self, month: int, year: int) -> FrozenSet[int]:
        """
        Obtiene los días del mes que son festivos.

        Args:
            month: Mes (1-12)
            year: Año

        Returns:
            FrozenSet[int]: Días del mes festivos
        """
        pass

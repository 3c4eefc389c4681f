"""
Interfaces y contratos para la capa de aplicación.

Este módulo define las interfaces que la capa de aplicación necesita
para interactuar con la infraestructura y servicios externos.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from ...core.models import RecargosPeriodo


# =====================================================================
# Service Interfaces
# =====================================================================

class LoggingService(ABC):
    """Interfaz para el servicio de logging."""

    @abstractmethod
    def log_liquidation_started(self, month: int, year: int, workdays_count: int) -> None:
        """Registra el inicio de la liquidación de una planilla."""
        pass

    @abstractmethod
    def log_liquidation_completed(self, month: int, year: int, totals: RecargosPeriodo,
                                  elapsed_seconds: float) -> None:
        """Registra la finalización de la liquidación de una planilla."""
        pass

    @abstractmethod
    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Registra información general."""
        pass

    @abstractmethod
    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Registra una advertencia."""
        pass

    @abstractmethod
    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        """Registra un error."""
        pass

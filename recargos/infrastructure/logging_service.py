"""
Servicio de logging basado en el módulo logging estándar.
"""

import logging
from typing import Dict, Any, Optional

from ..application.ports import LoggingService
from ..core.models import RecargosPeriodo
from .config.settings import Settings, settings as default_settings


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Configura el logger raíz con el formato y nivel de LOGGING_CONFIG.

    Args:
        config: Configuración (por defecto, la instancia global)

    Returns:
        logging.Logger: Logger del sistema de recargos
    """
    logging_config = (config or default_settings).get_logging_config()
    logging.basicConfig(
        level=str(logging_config["level"]).upper(),
        format=logging_config["log_format"],
        datefmt=logging_config["date_format"]
    )
    return logging.getLogger(logging_config["logger_name"])


class StandardLoggingService(LoggingService):
    """Implementación de LoggingService sobre logging estándar."""

    def __init__(self, logger: Optional[logging.Logger] = None, config: Optional[Settings] = None):
        """
        Inicializa el servicio.

        Args:
            logger: Logger a usar (por defecto, el configurado en LOGGING_CONFIG)
            config: Configuración (por defecto, la instancia global)
        """
        self.config = config or default_settings
        self.logger = logger or logging.getLogger(self.config.get_logging_config()["logger_name"])

    def log_liquidation_started(self, month: int, year: int, workdays_count: int) -> None:
        self.logger.info("Liquidando planilla %02d/%d con %d días trabajados", month, year, workdays_count)

    def log_liquidation_completed(self, month: int, year: int, totals: RecargosPeriodo,
                                  elapsed_seconds: float) -> None:
        self.logger.info(
            "Planilla %02d/%d liquidada en %.3fs: %s horas, HED=%s HEN=%s HEFD=%s HEFN=%s RN=%s RD=%s",
            month, year, elapsed_seconds, totals.total_horas_trabajadas,
            totals.total_hed, totals.total_hen, totals.total_hefd,
            totals.total_hefn, totals.total_rn, totals.total_rd
        )

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.logger.info(self._with_context(message, context))

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.logger.warning(self._with_context(message, context))

    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        self.logger.error(
            self._with_context(f"Error en {operation}: {error}", context),
            exc_info=error if self.config.is_debug_enabled() else None
        )

    @staticmethod
    def _with_context(message: str, context: Optional[Dict[str, Any]]) -> str:
        if not context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} ({details})"

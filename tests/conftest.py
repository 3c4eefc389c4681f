"""Pytest configuration and shared fixtures."""

import pytest

from recargos.core import ColombianHolidayProvider, get_holiday_days
from recargos.infrastructure.config import Settings


# Fechas de referencia de 2025:
# - 4 de marzo: martes ordinario
# - 2 de marzo: domingo
# - 24 de marzo: lunes festivo (San José trasladado)
# - 1 de mayo: jueves festivo (Día del Trabajo)


@pytest.fixture
def march_2025_holidays():
    """Días festivos de marzo de 2025."""
    return get_holiday_days(3, 2025)


@pytest.fixture
def may_2025_holidays():
    """Días festivos de mayo de 2025."""
    return get_holiday_days(5, 2025)


@pytest.fixture
def provider():
    """Proveedor de festivos sin caché, independiente entre pruebas."""
    return ColombianHolidayProvider(use_cache=False)


@pytest.fixture
def fresh_settings(monkeypatch):
    """Configuración por defecto, sin variables de entorno del sistema."""
    for env_var in ("RECARGOS_DEBUG", "RECARGOS_LOG_LEVEL",
                    "RECARGOS_VALOR_HORA", "RECARGOS_CACHE_HOLIDAYS"):
        monkeypatch.delenv(env_var, raising=False)
    return Settings()

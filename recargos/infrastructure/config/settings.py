"""
Configuración del sistema de recargos.

Este módulo proporciona una interfaz unificada para acceder a toda la configuración
del sistema, incluyendo valores por defecto y validaciones.
"""

import copy
import json
import os
from typing import Dict, Any, Optional, List
from pathlib import Path

from .constants import *


class Settings:
    """
    Clase principal de configuración del sistema.

    Maneja la carga de configuración desde múltiples fuentes:
    - Variables de entorno
    - Archivos de configuración
    - Valores por defecto
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Inicializa la configuración.

        Args:
            config_file: Ruta al archivo de configuración personalizado (opcional)
        """
        self._config_data = {}
        self._config_file = config_file
        self._load_configuration()

    def _load_configuration(self):
        """Carga la configuración desde todas las fuentes disponibles."""
        # 1. Cargar valores por defecto
        self._load_defaults()

        # 2. Cargar desde archivo de configuración si existe
        if self._config_file and Path(self._config_file).exists():
            self._load_from_file(self._config_file)

        # 3. Cargar desde variables de entorno
        self._load_from_environment()

        # 4. Validar configuración
        self._validate_configuration()

    def _load_defaults(self):
        """Carga los valores por defecto desde constants.py."""
        self._config_data = copy.deepcopy({
            "surcharges": {
                "percentages": PORCENTAJES_RECARGO
            },
            "liquidation": LIQUIDATION_CONFIG,
            "cache": CACHE_CONFIG,
            "logging": LOGGING_CONFIG,
            "messages": {
                "success": SUCCESS_MESSAGES,
                "error": ERROR_MESSAGES,
                "warning": WARNING_MESSAGES
            },
            "debug": DEBUG_CONFIG
        })

    def _load_from_file(self, config_file: str):
        """Carga configuración desde archivo JSON."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"No se pudo cargar el archivo de configuración {config_file}: {e}")

        # Merge de configuración usando deep update
        self._deep_update(self._config_data, file_config)

    def _load_from_environment(self):
        """Carga configuración desde variables de entorno."""
        # Mapeo de variables de entorno a configuración
        env_mappings = {
            "RECARGOS_DEBUG": ("debug", "enable_debug", bool),
            "RECARGOS_LOG_LEVEL": ("logging", "level", str),
            "RECARGOS_VALOR_HORA": ("liquidation", "default_valor_hora", float),
            "RECARGOS_CACHE_HOLIDAYS": ("cache", "cache_holidays", bool)
        }

        for env_var, (section, key, var_type) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    if var_type == bool:
                        value = env_value.lower() in ('true', '1', 'yes', 'on')
                    elif var_type == float:
                        value = float(env_value)
                    else:
                        value = env_value
                except ValueError:
                    raise ValueError(f"Valor inválido para {env_var}: {env_value}")

                if section not in self._config_data:
                    self._config_data[section] = {}
                self._config_data[section][key] = value

    def _validate_configuration(self):
        """Valida que la configuración sea coherente."""
        errors = []

        # Validar porcentajes
        percentages = self._config_data["surcharges"]["percentages"]
        for code in PORCENTAJES_RECARGO:
            if code not in percentages:
                errors.append(f"Falta el porcentaje del recargo {code}")
            elif percentages[code] < 0:
                errors.append(f"El porcentaje del recargo {code} no puede ser negativo")

        # Validar liquidación
        valor_hora = self._config_data["liquidation"].get("default_valor_hora")
        if valor_hora is not None and valor_hora <= 0:
            errors.append("El valor hora por defecto debe ser mayor que cero")

        # Validar logging
        level = str(self._config_data["logging"].get("level", "")).upper()
        if level not in LOG_LEVELS:
            errors.append(f"Nivel de log inválido: {level}")

        if errors:
            raise ValueError("Errores en la configuración: " + "; ".join(errors))

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Actualiza recursivamente un diccionario."""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    # =====================================================================
    # Métodos de acceso a configuración específica
    # =====================================================================

    def get_surcharge_percentages(self) -> Dict[str, float]:
        """Obtiene los porcentajes de recargo por código."""
        return self._config_data["surcharges"]["percentages"]

    def get_liquidation_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de liquidación."""
        return self._config_data["liquidation"]

    def get_cache_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de caché."""
        return self._config_data["cache"]

    def get_logging_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de logging."""
        return self._config_data["logging"]

    # =====================================================================
    # Métodos de utilidad
    # =====================================================================

    def is_debug_enabled(self) -> bool:
        """Verifica si el modo debug está habilitado."""
        return self._config_data["debug"]["enable_debug"]

    def is_holiday_cache_enabled(self) -> bool:
        """Verifica si se memorizan los festivos por año."""
        return self._config_data["cache"]["cache_holidays"]

    def get_default_valor_hora(self) -> Optional[float]:
        """Obtiene el valor hora por defecto para liquidar, si existe."""
        return self._config_data["liquidation"].get("default_valor_hora")

    def get_message(self, category: str, key: str) -> str:
        """Obtiene un mensaje del sistema."""
        return self._config_data["messages"].get(category, {}).get(key, f"Mensaje no encontrado: {category}.{key}")

    # =====================================================================
    # Métodos de configuración dinámica
    # =====================================================================

    def update_setting(self, path: str, value: Any):
        """
        Actualiza un valor de configuración dinámicamente.

        Args:
            path: Ruta del setting en formato "section.key" o "section.subsection.key"
            value: Nuevo valor
        """
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get_setting(self, path: str, default: Any = None) -> Any:
        """
        Obtiene un valor de configuración por ruta.

        Args:
            path: Ruta del setting en formato "section.key"
            default: Valor por defecto si no se encuentra

        Returns:
            Valor de configuración o default
        """
        keys = path.split('.')
        current = self._config_data

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def save_to_file(self, filename: str):
        """
        Guarda la configuración actual a un archivo.

        Args:
            filename: Nombre del archivo donde guardar
        """
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(self._config_data, f, indent=2, ensure_ascii=False)

    def reset_to_defaults(self):
        """Resetea la configuración a los valores por defecto."""
        self._load_defaults()

    def get_all_config(self) -> Dict[str, Any]:
        """Obtiene toda la configuración como diccionario."""
        return copy.deepcopy(self._config_data)


# =====================================================================
# Instancia global de configuración
# =====================================================================

# Instancia global que puede ser importada y usada en toda la aplicación
settings = Settings()

# Funciones de conveniencia para acceso rápido
def get_surcharge_percentages() -> Dict[str, float]:
    """Obtiene los porcentajes de recargo por código."""
    return settings.get_surcharge_percentages()

def get_default_valor_hora() -> Optional[float]:
    """Obtiene el valor hora por defecto para liquidar."""
    return settings.get_default_valor_hora()

def get_log_level() -> str:
    """Obtiene el nivel de log configurado."""
    return str(settings.get_logging_config()["level"]).upper()

def is_debug_mode() -> bool:
    """Verifica si está en modo debug."""
    return settings.is_debug_enabled()

def is_holiday_cache_enabled() -> bool:
    """Verifica si se memorizan los festivos por año."""
    return settings.is_holiday_cache_enabled()

def get_supported_surcharge_codes() -> List[str]:
    """Obtiene los códigos de recargo soportados."""
    return list(PORCENTAJES_RECARGO.keys())

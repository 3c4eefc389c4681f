"""
Tests de la configuración del sistema.
"""

import json

import pytest

from recargos.infrastructure.config import (
    PORCENTAJES_RECARGO,
    Settings,
    get_supported_surcharge_codes,
)


class TestDefaults:
    """Valores por defecto."""

    def test_only_tunable_sections(self, fresh_settings):
        # Jornada y festivos son constantes del cálculo, no configuración
        assert set(fresh_settings.get_all_config()) == {
            "surcharges", "liquidation", "cache", "logging", "messages", "debug"
        }
        assert fresh_settings.get_setting("jornada") is None

    def test_percentages(self, fresh_settings):
        assert fresh_settings.get_surcharge_percentages() == PORCENTAJES_RECARGO

    def test_defaults_are_copies(self, fresh_settings):
        fresh_settings.get_surcharge_percentages()["HED"] = 99
        assert PORCENTAJES_RECARGO["HED"] == 25

    def test_flags(self, fresh_settings):
        assert not fresh_settings.is_debug_enabled()
        assert fresh_settings.is_holiday_cache_enabled()
        assert fresh_settings.get_default_valor_hora() is None

    def test_messages(self, fresh_settings):
        assert fresh_settings.get_message("success", "sheet_liquidated") == "Planilla liquidada exitosamente"
        assert fresh_settings.get_message("error", "missing") == "Mensaje no encontrado: error.missing"

    def test_supported_codes(self):
        assert get_supported_surcharge_codes() == ["HED", "HEN", "HEFD", "HEFN", "RN", "RD"]


class TestEnvironment:
    """Variables de entorno RECARGOS_*."""

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("RECARGOS_DEBUG", "yes")
        monkeypatch.setenv("RECARGOS_LOG_LEVEL", "debug")
        monkeypatch.setenv("RECARGOS_VALOR_HORA", "8500.5")
        monkeypatch.setenv("RECARGOS_CACHE_HOLIDAYS", "0")

        config = Settings()
        assert config.is_debug_enabled()
        assert config.get_logging_config()["level"] == "debug"
        assert config.get_default_valor_hora() == 8500.5
        assert not config.is_holiday_cache_enabled()

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("RECARGOS_VALOR_HORA", "mucho")
        with pytest.raises(ValueError, match="RECARGOS_VALOR_HORA"):
            Settings()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("RECARGOS_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Nivel de log inválido"):
            Settings()

    def test_non_positive_valor_hora(self, monkeypatch):
        monkeypatch.setenv("RECARGOS_VALOR_HORA", "0")
        with pytest.raises(ValueError, match="valor hora"):
            Settings()


class TestConfigFile:
    """Archivo JSON de configuración."""

    def test_deep_merge(self, tmp_path, fresh_settings):
        config_file = tmp_path / "recargos.json"
        config_file.write_text(json.dumps({
            "surcharges": {"percentages": {"HED": 30}},
            "liquidation": {"default_valor_hora": 9000}
        }), encoding="utf-8")

        config = Settings(str(config_file))
        percentages = config.get_surcharge_percentages()
        assert percentages["HED"] == 30
        assert percentages["RD"] == 75
        assert config.get_default_valor_hora() == 9000

    def test_missing_file_uses_defaults(self, tmp_path, fresh_settings):
        config = Settings(str(tmp_path / "no_existe.json"))
        assert config.get_all_config() == fresh_settings.get_all_config()

    def test_malformed_file(self, tmp_path, fresh_settings):
        config_file = tmp_path / "roto.json"
        config_file.write_text("{no es json", encoding="utf-8")
        with pytest.raises(ValueError, match="No se pudo cargar"):
            Settings(str(config_file))

    def test_invalid_values_are_reported_together(self, tmp_path, fresh_settings):
        config_file = tmp_path / "invalido.json"
        config_file.write_text(json.dumps({
            "liquidation": {"default_valor_hora": -5},
            "logging": {"level": "verbose"},
            "surcharges": {"percentages": {"RN": -1}}
        }), encoding="utf-8")

        with pytest.raises(ValueError) as exc_info:
            Settings(str(config_file))
        message = str(exc_info.value)
        assert "valor hora" in message
        assert "Nivel de log inválido: VERBOSE" in message
        assert "RN" in message

    def test_save_and_reload(self, tmp_path, fresh_settings):
        fresh_settings.update_setting("liquidation.default_valor_hora", 7000)
        config_file = tmp_path / "guardado.json"
        fresh_settings.save_to_file(str(config_file))

        reloaded = Settings(str(config_file))
        assert reloaded.get_default_valor_hora() == 7000


class TestDynamicSettings:
    """Lectura y escritura por ruta."""

    def test_get_and_update(self, fresh_settings):
        assert fresh_settings.get_setting("surcharges.percentages.RD") == 75
        assert fresh_settings.get_setting("surcharges.missing", "x") == "x"
        assert fresh_settings.get_setting("surcharges.percentages.RD.deep") is None

        fresh_settings.update_setting("custom.section.value", 1)
        assert fresh_settings.get_setting("custom.section.value") == 1

    def test_reset(self, fresh_settings):
        fresh_settings.update_setting("debug.enable_debug", True)
        fresh_settings.reset_to_defaults()
        assert not fresh_settings.is_debug_enabled()

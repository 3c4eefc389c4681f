"""
Tests del caso de uso de liquidación de planillas.
"""

from typing import Any, Dict, List, Optional

import pytest

from recargos.application import (
    LiquidatePayrollSheetUseCase,
    PayrollSheetRequest,
    WorkdayEntry,
    recargos_to_dataframe,
)
from recargos.application.ports import LoggingService
from recargos.core import ColombianHolidayProvider
from recargos.core.models import RecargosPeriodo
from recargos.infrastructure.config import WORKDAY_COLUMNS


class RecordingLoggingService(LoggingService):
    """LoggingService que guarda las llamadas recibidas."""

    def __init__(self):
        self.calls: List[tuple] = []

    def log_liquidation_started(self, month: int, year: int, workdays_count: int) -> None:
        self.calls.append(("started", month, year, workdays_count))

    def log_liquidation_completed(self, month: int, year: int, totals: RecargosPeriodo,
                                  elapsed_seconds: float) -> None:
        self.calls.append(("completed", month, year, totals))

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.calls.append(("info", message, context))

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.calls.append(("warning", message, context))

    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        self.calls.append(("error", operation, error, context))

    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]


class FailingHolidayProvider(ColombianHolidayProvider):
    """Proveedor que falla al consultar festivos."""

    def get_holiday_days(self, month, year):
        raise RuntimeError("calendario no disponible")


@pytest.fixture
def logging_service():
    return RecordingLoggingService()


@pytest.fixture
def use_case(provider, logging_service, fresh_settings):
    return LiquidatePayrollSheetUseCase(provider, logging_service, fresh_settings)


@pytest.fixture
def march_request():
    """Planilla de marzo de 2025: domingo 2, martes 4, día 5 sin horas y lunes festivo 24."""
    return PayrollSheetRequest(
        month=3,
        year=2025,
        workdays=[
            WorkdayEntry(day=24, start_hour="08:00", end_hour="18:00"),
            WorkdayEntry(day=2, start_hour=0, end_hour=14),
            WorkdayEntry(day=4, start_hour="08:00", end_hour="20:00"),
            WorkdayEntry(day=5, observaciones="Descanso"),
        ],
        valor_hora=10000,
        numero_planilla=321
    )


class TestLiquidation:
    """Liquidación exitosa."""

    def test_totals_and_valuation(self, use_case, march_request):
        result = use_case.execute(march_request)

        assert result.success
        assert result.message == "Planilla liquidada exitosamente"
        assert result.numero_planilla == "TM-321"
        assert [day.day for day in result.days] == [2, 4, 24]

        totals = result.totals
        assert totals.total_dias == 3
        assert totals.total_horas_trabajadas == 36
        assert totals.total_hed == 2
        assert totals.total_hefd == 4
        assert totals.total_rn == 6
        assert totals.total_rd == 20
        assert result.valuation.total == 216000
        assert result.warnings == []

    def test_dataframe(self, use_case, march_request):
        df = use_case.execute(march_request).to_dataframe()
        assert list(df.columns) == WORKDAY_COLUMNS
        assert df["dia"].tolist() == [2, 4, 24]
        assert df["rd"].sum() == 20
        assert df["es_domingo"].tolist() == [True, False, False]
        assert df["es_festivo"].tolist() == [False, False, True]

    def test_empty_dataframe_keeps_columns(self):
        df = recargos_to_dataframe([])
        assert df.empty
        assert list(df.columns) == WORKDAY_COLUMNS

    def test_manual_holiday(self, use_case):
        request = PayrollSheetRequest(month=3, year=2025, workdays=[
            WorkdayEntry(day=4, start_hour=8, end_hour=20, es_festivo=True),
        ])
        result = use_case.execute(request)
        day = result.days[0].recargos
        assert day.es_festivo
        assert day.hed == 0
        assert day.hefd == 2
        assert day.rd == 10

    def test_without_valor_hora(self, use_case):
        request = PayrollSheetRequest(month=3, year=2025, workdays=[
            WorkdayEntry(day=4, start_hour=8, end_hour=20),
        ])
        result = use_case.execute(request)
        assert result.success
        assert result.valuation is None

    def test_default_valor_hora_from_config(self, provider, fresh_settings):
        fresh_settings.update_setting("liquidation.default_valor_hora", 8000)
        use_case = LiquidatePayrollSheetUseCase(provider, config=fresh_settings)
        request = PayrollSheetRequest(month=3, year=2025, workdays=[
            WorkdayEntry(day=4, start_hour=8, end_hour=20),
        ])
        assert use_case.execute(request).valuation.hed == 4000

    def test_configured_percentages(self, provider, fresh_settings):
        fresh_settings.update_setting("surcharges.percentages.HED", 50)
        use_case = LiquidatePayrollSheetUseCase(provider, config=fresh_settings)
        request = PayrollSheetRequest(month=3, year=2025, valor_hora=10000, workdays=[
            WorkdayEntry(day=4, start_hour=8, end_hour=20),
        ])
        assert use_case.execute(request).valuation.hed == 10000

    def test_no_worked_days(self, use_case, logging_service):
        request = PayrollSheetRequest(month=3, year=2025, workdays=[WorkdayEntry(day=5)])
        result = use_case.execute(request)
        assert result.success
        assert result.totals.total_dias == 0
        assert result.warnings == ["La planilla no tiene días trabajados"]
        assert logging_service.calls[0] == ("started", 3, 2025, 0)

    def test_logging_calls(self, use_case, logging_service, march_request):
        use_case.execute(march_request)
        assert logging_service.kinds() == ["started", "completed"]
        assert logging_service.calls[0] == ("started", 3, 2025, 3)
        assert logging_service.calls[1][3].total_dias == 3


class TestFailures:
    """Solicitudes o días inválidos."""

    def test_invalid_request(self, use_case, logging_service):
        request = PayrollSheetRequest(month=13, year=2025, valor_hora=-1, workdays=[
            WorkdayEntry(day=1, start_hour=8, end_hour=17),
            WorkdayEntry(day=1, start_hour=8, end_hour=17),
        ])
        result = use_case.execute(request)
        assert not result.success
        assert result.message.startswith("Solicitud inválida: ")
        assert len(result.errors) == 3
        assert "Días repetidos en la planilla: 1" in result.errors
        assert logging_service.calls == []

    def test_invalid_days_are_all_reported(self, use_case, logging_service):
        request = PayrollSheetRequest(month=4, year=2025, workdays=[
            WorkdayEntry(day=1, start_hour=8, end_hour=17),
            WorkdayEntry(day=2, start_hour="8h", end_hour=17),
            WorkdayEntry(day=3, start_hour=8, end_hour=30),
        ])
        result = use_case.execute(request)

        assert not result.success
        assert result.message == "Se encontraron días con datos inválidos"
        assert [error.split(":")[0] for error in result.errors] == ["Día 2", "Día 3"]
        assert result.days == []
        assert logging_service.kinds() == ["started", "warning"]

    def test_day_outside_month_is_a_request_error(self, use_case, logging_service):
        request = PayrollSheetRequest(month=4, year=2025, workdays=[
            WorkdayEntry(day=1, start_hour=8, end_hour=17),
            WorkdayEntry(day=31, start_hour=8, end_hour=17),
        ])
        result = use_case.execute(request)

        assert not result.success
        assert result.errors == ["Día 31: no existe en 04/2025"]
        assert logging_service.calls == []

    def test_invalid_holiday_mark_blames_its_own_row(self, use_case):
        request = PayrollSheetRequest(month=3, year=2025, workdays=[
            WorkdayEntry(day=4, start_hour="08:00", end_hour="18:00"),
            WorkdayEntry(day=40, es_festivo=True),
        ])
        result = use_case.execute(request)

        assert not result.success
        assert result.message.startswith("Solicitud inválida: ")
        assert result.errors == ["Día 40: no existe en 03/2025"]
        assert not any(error.startswith("Día 4:") for error in result.errors)

    def test_unexpected_error(self, logging_service, fresh_settings, march_request):
        use_case = LiquidatePayrollSheetUseCase(FailingHolidayProvider(use_cache=False),
                                                logging_service, fresh_settings)
        result = use_case.execute(march_request)

        assert not result.success
        assert result.message == "Error inesperado durante la liquidación: calendario no disponible"
        assert logging_service.kinds() == ["started", "error"]
        assert isinstance(logging_service.calls[-1][2], RuntimeError)

    def test_failure_without_logging_service(self, provider, fresh_settings):
        use_case = LiquidatePayrollSheetUseCase(provider, config=fresh_settings)
        request = PayrollSheetRequest(month=2, year=2025, workdays=[
            WorkdayEntry(day=29, start_hour=8, end_hour=17),
        ])
        result = use_case.execute(request)
        assert not result.success
        assert result.errors[0].startswith("Día 29: ")

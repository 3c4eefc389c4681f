"""
Caso de uso: Liquidar los recargos de una planilla.

Este módulo clasifica cada día trabajado de la planilla mensual de un
conductor, suma los totales del período y, si se conoce el valor hora,
calcula el valor en pesos de cada recargo.
"""

from datetime import datetime
from typing import List, Dict, Any, Optional, Union, Iterable
from dataclasses import dataclass, field

import pandas as pd

from ...core.models import RecargosCalculados, RecargosPeriodo, ValorRecargos
from ...core.services import (
    ColombianHolidayProvider,
    classify_shift,
    aggregate_recargos,
    value_recargos
)
from ...infrastructure.config.constants import WORKDAY_COLUMNS
from ...infrastructure.config.settings import Settings, settings as default_settings
from ...shared.utils import parse_hour, format_planilla_number, get_days_in_month
from ..ports import HolidayProvider, LoggingService

Hour = Union[float, int, str]


@dataclass
class WorkdayEntry:
    """Fila de la planilla: un día del mes con sus horas de inicio y fin."""
    day: int
    start_hour: Optional[Hour] = None
    end_hour: Optional[Hour] = None
    es_festivo: bool = False  # Festivo marcado a mano además del calendario
    observaciones: Optional[str] = None

    @property
    def is_worked(self) -> bool:
        """Un día sin hora de inicio o de fin no se trabajó."""
        return self.start_hour is not None and self.end_hour is not None


@dataclass
class PayrollSheetRequest:
    """Solicitud de liquidación de una planilla mensual."""
    month: int
    year: int
    workdays: List[WorkdayEntry]
    valor_hora: Optional[float] = None
    numero_planilla: Optional[Union[str, int]] = None

    def validate(self) -> List[str]:
        """Valida la solicitud de liquidación."""
        errors = []

        if isinstance(self.month, bool) or not isinstance(self.month, int) or not 1 <= self.month <= 12:
            errors.append("El mes debe estar entre 1 y 12")

        if isinstance(self.year, bool) or not isinstance(self.year, int) or not 1 <= self.year <= 9999:
            errors.append("El año no es válido")

        if not errors:
            last_day = get_days_in_month(self.month, self.year)
            for entry in self.workdays:
                if isinstance(entry.day, bool) or not isinstance(entry.day, int) \
                        or not 1 <= entry.day <= last_day:
                    errors.append(f"Día {entry.day}: no existe en {self.month:02d}/{self.year}")

        days = [entry.day for entry in self.workdays]
        duplicated = sorted({day for day in days if days.count(day) > 1})
        if duplicated:
            errors.append(f"Días repetidos en la planilla: {', '.join(str(d) for d in duplicated)}")

        if self.valor_hora is not None and (isinstance(self.valor_hora, bool) or self.valor_hora <= 0):
            errors.append("El valor hora debe ser mayor que cero")

        return errors

    @property
    def planilla_label(self) -> str:
        """Número de planilla formateado (TM-...)."""
        return format_planilla_number(self.numero_planilla)


@dataclass
class DayResult:
    """Recargos calculados para un día de la planilla."""
    day: int
    start_hour: float
    end_hour: float
    recargos: RecargosCalculados

    def to_row(self) -> Dict[str, Any]:
        """Fila con las columnas persistidas de un día laboral."""
        return {
            "dia": self.day,
            "hora_inicio": self.start_hour,
            "hora_fin": self.end_hour,
            "total_horas": self.recargos.total_horas,
            "hed": self.recargos.hed,
            "hen": self.recargos.hen,
            "hefd": self.recargos.hefd,
            "hefn": self.recargos.hefn,
            "rn": self.recargos.rn,
            "rd": self.recargos.rd,
            "es_domingo": self.recargos.es_domingo,
            "es_festivo": self.recargos.es_festivo
        }


def recargos_to_dataframe(days: Iterable[DayResult]) -> pd.DataFrame:
    """
    Tabula los recargos diarios de un período.

    Args:
        days: Resultados por día

    Returns:
        pd.DataFrame: Una fila por día, ordenada por día, con WORKDAY_COLUMNS
    """
    rows = [day.to_row() for day in days]
    df = pd.DataFrame(rows, columns=WORKDAY_COLUMNS)
    return df.sort_values("dia").reset_index(drop=True)


@dataclass
class PayrollSheetResult:
    """Resultado de la liquidación de una planilla."""
    success: bool
    month: int
    year: int
    numero_planilla: str
    days: List[DayResult]
    totals: Optional[RecargosPeriodo]
    valuation: Optional[ValorRecargos]
    processing_time: float
    message: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Tabla de los días liquidados."""
        return recargos_to_dataframe(self.days)

    @classmethod
    def success_result(cls, request: PayrollSheetRequest, days: List[DayResult],
                       totals: RecargosPeriodo, valuation: Optional[ValorRecargos],
                       processing_time: float, message: str,
                       warnings: List[str] = None) -> 'PayrollSheetResult':
        """Crea un resultado exitoso."""
        return cls(
            success=True,
            month=request.month,
            year=request.year,
            numero_planilla=request.planilla_label,
            days=days,
            totals=totals,
            valuation=valuation,
            processing_time=processing_time,
            message=message,
            warnings=warnings or []
        )

    @classmethod
    def failure_result(cls, request: PayrollSheetRequest, message: str,
                       errors: List[str] = None) -> 'PayrollSheetResult':
        """Crea un resultado de fallo."""
        return cls(
            success=False,
            month=request.month,
            year=request.year,
            numero_planilla=request.planilla_label,
            days=[],
            totals=None,
            valuation=None,
            processing_time=0.0,
            message=message,
            errors=errors or []
        )


class LiquidatePayrollSheetUseCase:
    """
    Caso de uso para liquidar los recargos de una planilla mensual.

    Coordina el calendario de festivos, la clasificación de cada día y los
    totales del período. Los errores de datos de un día no detienen la
    revisión de los demás: se reportan todos juntos en el resultado.
    """

    def __init__(self,
                 holiday_provider: Optional[HolidayProvider] = None,
                 logging_service: Optional[LoggingService] = None,
                 config: Optional[Settings] = None):
        """
        Inicializa el caso de uso.

        Args:
            holiday_provider: Proveedor de festivos (por defecto, el colombiano)
            logging_service: Servicio de logging (opcional)
            config: Configuración (por defecto, la instancia global)
        """
        self.config = config or default_settings
        self.holiday_provider = holiday_provider or ColombianHolidayProvider(
            use_cache=self.config.is_holiday_cache_enabled()
        )
        self.logging_service = logging_service

    def execute(self, request: PayrollSheetRequest) -> PayrollSheetResult:
        """
        Ejecuta la liquidación de la planilla.

        Args:
            request: Solicitud de liquidación

        Returns:
            PayrollSheetResult: Resultado de la liquidación
        """
        start_time = datetime.now()

        try:
            # 1. Validar solicitud
            validation_errors = request.validate()
            if validation_errors:
                return PayrollSheetResult.failure_result(
                    request,
                    f"{self.config.get_message('error', 'invalid_request')}: " + "; ".join(validation_errors),
                    validation_errors
                )

            worked_days = sorted((entry for entry in request.workdays if entry.is_worked),
                                 key=lambda entry: entry.day)

            if self.logging_service:
                self.logging_service.log_liquidation_started(request.month, request.year, len(worked_days))

            # 2. Festivos del mes más los marcados en la planilla
            holiday_days = self.holiday_provider.get_holiday_days(request.month, request.year)
            holiday_days = holiday_days | {entry.day for entry in request.workdays if entry.es_festivo}

            # 3. Clasificar cada día trabajado
            days, day_errors = self._classify_days(request, worked_days, holiday_days)
            if day_errors:
                if self.logging_service:
                    self.logging_service.log_warning(
                        self.config.get_message('error', 'invalid_workdays'),
                        {"month": request.month, "year": request.year, "errors": day_errors}
                    )
                return PayrollSheetResult.failure_result(
                    request, self.config.get_message('error', 'invalid_workdays'), day_errors
                )

            # 4. Totales y liquidación
            totals = aggregate_recargos(day.recargos for day in days)
            valuation = self._value_totals(request, totals)

            warnings = []
            if not days:
                warnings.append(self.config.get_message('warning', 'no_workdays'))

            processing_time = (datetime.now() - start_time).total_seconds()
            if self.logging_service:
                self.logging_service.log_liquidation_completed(
                    request.month, request.year, totals, processing_time
                )

            return PayrollSheetResult.success_result(
                request, days, totals, valuation, processing_time,
                self.config.get_message('success', 'sheet_liquidated'), warnings
            )

        except Exception as e:
            if self.logging_service:
                self.logging_service.log_error("payroll_sheet_liquidation", e, {
                    "month": request.month,
                    "year": request.year
                })

            return PayrollSheetResult.failure_result(
                request,
                f"{self.config.get_message('error', 'unexpected_error')}: {str(e)}"
            )

    def _classify_days(self, request: PayrollSheetRequest, worked_days: List[WorkdayEntry],
                       holiday_days: frozenset):
        """Clasifica los días trabajados y acumula los errores por día."""
        days = []
        errors = []

        for entry in worked_days:
            try:
                start_hour = parse_hour(entry.start_hour)
                end_hour = parse_hour(entry.end_hour)
                recargos = classify_shift(entry.day, request.month, request.year,
                                          start_hour, end_hour, holiday_days)
            except ValueError as e:
                errors.append(f"Día {entry.day}: {e}")
                continue

            days.append(DayResult(day=entry.day, start_hour=start_hour,
                                  end_hour=end_hour, recargos=recargos))

        return days, errors

    def _value_totals(self, request: PayrollSheetRequest,
                      totals: RecargosPeriodo) -> Optional[ValorRecargos]:
        """Valor en pesos de los totales, si hay valor hora disponible."""
        valor_hora = request.valor_hora
        if valor_hora is None:
            valor_hora = self.config.get_default_valor_hora()
        if valor_hora is None:
            return None
        return value_recargos(totals, valor_hora, self.config.get_surcharge_percentages())

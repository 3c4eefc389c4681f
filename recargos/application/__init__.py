"""
Application Use Cases - Casos de uso de la capa de aplicación.

Este paquete contiene los casos de uso que orquestan la lógica de
negocio del cálculo de recargos.
"""

from .use_cases.liquidate_payroll_sheet import (
    LiquidatePayrollSheetUseCase,
    PayrollSheetRequest,
    PayrollSheetResult,
    WorkdayEntry,
    DayResult,
    recargos_to_dataframe
)

__all__ = [
    # Liquidate payroll sheet
    'LiquidatePayrollSheetUseCase',
    'PayrollSheetRequest',
    'PayrollSheetResult',
    'WorkdayEntry',
    'DayResult',
    'recargos_to_dataframe',
]

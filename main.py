#!/usr/bin/env python3
"""
Festivos y recargos de una jornada

Uso:
    python main.py <mes> <año> [<día> <inicio> <fin>]

Ejemplo:
    python main.py 4 2025
    python main.py 4 2025 20 08:00 23:30
"""

import sys
from datetime import date

from recargos.core import ColombianHolidayProvider, RecargoError, WorkInterval, ShiftClassifier
from recargos.infrastructure.config import settings
from recargos.infrastructure.logging_service import configure_logging
from recargos.shared import get_days_in_month, get_month_name, parse_hour, format_decimal_hour


def main():
    """Función principal."""
    if len(sys.argv) not in (3, 6):
        print("Uso: python main.py <mes> <año> [<día> <inicio> <fin>]")
        print("Ejemplo: python main.py 4 2025 20 08:00 23:30")
        sys.exit(1)

    logger = configure_logging(settings)
    provider = ColombianHolidayProvider(use_cache=settings.is_holiday_cache_enabled())

    # Procesar argumentos
    try:
        month = int(sys.argv[1])
        year = int(sys.argv[2])
        holidays = provider.get_holidays_in_range(date(year, month, 1),
                                                  date(year, month, get_days_in_month(month, year)))
    except (ValueError, RecargoError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Festivos de {get_month_name(month)} {year}:")
    if holidays:
        for holiday in holidays:
            moved = f" (trasladado desde {holiday.original_date.isoformat()})" if holiday.was_moved else ""
            print(f"  {holiday.day:2d} - {holiday.name}{moved}")
    else:
        print("  Sin festivos")

    if len(sys.argv) == 6:
        try:
            interval = WorkInterval(day=int(sys.argv[3]), month=month, year=year,
                                    start_hour=parse_hour(sys.argv[4]),
                                    end_hour=parse_hour(sys.argv[5]))
            result = ShiftClassifier(provider).classify(interval)
        except ValueError as e:
            logger.error("Jornada inválida: %s", e)
            sys.exit(1)

        print(f"\nJornada {interval.date.isoformat()} "
              f"{format_decimal_hour(interval.start_hour)}-{format_decimal_hour(interval.end_hour)}:")
        print(f"  Total horas: {result.total_horas}")
        print(f"  Domingo: {'sí' if result.es_domingo else 'no'}, "
              f"Festivo: {'sí' if result.es_festivo else 'no'}")
        for surcharge_type, hours in result.by_type().items():
            print(f"  {surcharge_type.value:<5} {surcharge_type.description:<28} {hours:>6.2f}")


if __name__ == "__main__":
    main()

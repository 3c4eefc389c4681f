"""
Constantes del sistema de recargos.

Este módulo contiene todas las constantes utilizadas a lo largo del sistema,
organizadas por categorías para facilitar el mantenimiento.
"""

from typing import Dict, List, Tuple

# =====================================================================
# Límites de Jornada
# =====================================================================

# Jornada ordinaria (10 horas, no 8, según el acuerdo laboral aplicable)
JORNADA_NORMAL = 10

# Franja nocturna: desde las 21:00 hasta las 06:00
INICIO_NOCTURNO = 21
FIN_NOCTURNO = 6

# Horas de un día
HORAS_DIA = 24

# Decimales usados al redondear horas y valores
DECIMALES_REDONDEO = 2

# =====================================================================
# Porcentajes de Recargo
# =====================================================================

PORCENTAJES_RECARGO = {
    "HED": 25,    # Hora extra diurna
    "HEN": 75,    # Hora extra nocturna
    "HEFD": 100,  # Hora extra festiva diurna
    "HEFN": 150,  # Hora extra festiva nocturna
    "RN": 35,     # Recargo nocturno
    "RD": 75      # Recargo dominical/festivo
}

# =====================================================================
# Festivos Colombia
# =====================================================================

# Festivos fijos: (mes, día, nombre)
FIXED_HOLIDAYS: List[Tuple[int, int, str]] = [
    (1, 1, "Año Nuevo"),
    (5, 1, "Día del Trabajo"),
    (7, 20, "Día de la Independencia"),
    (8, 7, "Batalla de Boyacá"),
    (12, 8, "Inmaculada Concepción"),
    (12, 25, "Navidad")
]

# Festivos que se trasladan al lunes siguiente (Ley Emiliani)
MOVABLE_HOLIDAYS: List[Tuple[int, int, str]] = [
    (1, 6, "Reyes Magos"),
    (3, 19, "San José"),
    (6, 29, "San Pedro y San Pablo"),
    (8, 15, "Asunción de la Virgen"),
    (10, 12, "Día de la Raza"),
    (11, 1, "Todos los Santos"),
    (11, 11, "Independencia de Cartagena")
]

# Días relativos al Domingo de Pascua
PALM_SUNDAY_OFFSET = -7
HOLY_THURSDAY_OFFSET = -3
GOOD_FRIDAY_OFFSET = -2

HOLY_THURSDAY_NAME = "Jueves Santo"
GOOD_FRIDAY_NAME = "Viernes Santo"

# =====================================================================
# Planillas
# =====================================================================

PLANILLA_PREFIX = "TM-"

ESTADO_LABELS: Dict[str, str] = {
    "pendiente": "Pendiente",
    "liquidada": "Liquidada",
    "facturada": "Facturada",
    "encontrada": "Encontrada",
    "no_esta": "No está",
    "noesta": "No está",
    "no-esta": "No está"
}

MONTH_NAMES = [
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre"
]

MONTH_SHORT_NAMES = [
    "Ene", "Feb", "Mar", "Abr", "May", "Jun",
    "Jul", "Ago", "Sep", "Oct", "Nov", "Dic"
]

# Columnas de la tabla de días laborales
WORKDAY_COLUMNS = [
    "dia", "hora_inicio", "hora_fin", "total_horas",
    "hed", "hen", "hefd", "hefn", "rn", "rd",
    "es_domingo", "es_festivo"
]

# =====================================================================
# Caché
# =====================================================================

CACHE_CONFIG = {
    "cache_holidays": True,
    "max_cached_years": 64
}

# =====================================================================
# Configuración de Logging
# =====================================================================

LOG_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50
}

LOGGING_CONFIG = {
    "logger_name": "recargos",
    "level": "INFO",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S"
}

# =====================================================================
# Liquidación
# =====================================================================

LIQUIDATION_CONFIG = {
    "default_valor_hora": None,  # Sin valor por defecto: la liquidación es opcional
    "currency": "COP"
}

# =====================================================================
# Mensajes del Sistema
# =====================================================================

SUCCESS_MESSAGES = {
    "sheet_liquidated": "Planilla liquidada exitosamente"
}

ERROR_MESSAGES = {
    "invalid_request": "Solicitud inválida",
    "invalid_workdays": "Se encontraron días con datos inválidos",
    "unexpected_error": "Error inesperado durante la liquidación"
}

WARNING_MESSAGES = {
    "no_workdays": "La planilla no tiene días trabajados"
}

# =====================================================================
# Configuración de Desarrollo y Debug
# =====================================================================

DEBUG_CONFIG = {
    "enable_debug": False
}

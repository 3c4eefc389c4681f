"""
Recargos model - Resultados del cálculo de recargos por día y por período.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, List

from ...shared.utils import redondear


class SurchargeType(Enum):
    """Categorías de recargo y hora extra."""
    HED = "HED"    # Hora extra diurna
    HEN = "HEN"    # Hora extra nocturna
    HEFD = "HEFD"  # Hora extra festiva diurna
    HEFN = "HEFN"  # Hora extra festiva nocturna
    RN = "RN"      # Recargo nocturno
    RD = "RD"      # Recargo dominical/festivo

    @property
    def description(self) -> str:
        """Nombre legible de la categoría."""
        return _SURCHARGE_DESCRIPTIONS[self]

    @classmethod
    def from_string(cls, code: str) -> 'SurchargeType':
        """Convierte un código (hed, HED) a SurchargeType."""
        for surcharge_type in cls:
            if surcharge_type.value == code.upper():
                return surcharge_type
        raise ValueError(f"Tipo de recargo inválido: {code}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Retorna todos los códigos como strings."""
        return [surcharge_type.value for surcharge_type in cls]


_SURCHARGE_DESCRIPTIONS = {
    SurchargeType.HED: "Hora extra diurna",
    SurchargeType.HEN: "Hora extra nocturna",
    SurchargeType.HEFD: "Hora extra festiva diurna",
    SurchargeType.HEFN: "Hora extra festiva nocturna",
    SurchargeType.RN: "Recargo nocturno",
    SurchargeType.RD: "Recargo dominical",
}


@dataclass(frozen=True)
class RecargosCalculados:
    """
    Recargos de un día trabajado (inmutable).

    HED y HEN solo se llenan en días ordinarios; HEFD, HEFN y RD solo en
    domingos o festivos. RN es independiente del tipo de día.
    """
    total_horas: float
    hora_extra_diurna: float
    hora_extra_nocturna: float
    hora_extra_festiva_diurna: float
    hora_extra_festiva_nocturna: float
    recargo_nocturno: float
    recargo_dominical: float
    es_domingo: bool
    es_festivo: bool
    es_domingo_o_festivo: bool

    @property
    def hed(self) -> float:
        return self.hora_extra_diurna

    @property
    def hen(self) -> float:
        return self.hora_extra_nocturna

    @property
    def hefd(self) -> float:
        return self.hora_extra_festiva_diurna

    @property
    def hefn(self) -> float:
        return self.hora_extra_festiva_nocturna

    @property
    def rn(self) -> float:
        return self.recargo_nocturno

    @property
    def rd(self) -> float:
        return self.recargo_dominical

    def get_hours(self, surcharge_type: SurchargeType) -> float:
        """Horas de una categoría de recargo."""
        return getattr(self, surcharge_type.value.lower())

    def by_type(self) -> Dict[SurchargeType, float]:
        """Horas por categoría de recargo."""
        return {surcharge_type: self.get_hours(surcharge_type) for surcharge_type in SurchargeType}

    def to_dict(self) -> Dict[str, Any]:
        """Convierte el resultado a diccionario."""
        return asdict(self)


@dataclass(frozen=True)
class RecargosPeriodo:
    """Totales de una planilla (suma de los días trabajados del período)."""
    total_dias: int
    total_horas_trabajadas: float
    total_hed: float
    total_hen: float
    total_hefd: float
    total_hefn: float
    total_rn: float
    total_rd: float

    def get_hours(self, surcharge_type: SurchargeType) -> float:
        """Horas totales de una categoría de recargo."""
        return getattr(self, f"total_{surcharge_type.value.lower()}")

    def to_dict(self) -> Dict[str, Any]:
        """Convierte los totales a diccionario (columnas persistidas)."""
        return asdict(self)


@dataclass(frozen=True)
class ValorRecargos:
    """Valor en pesos de cada categoría de recargo."""
    valor_hora: float
    hed: float
    hen: float
    hefd: float
    hefn: float
    rn: float
    rd: float

    @property
    def total(self) -> float:
        """Valor total de los recargos."""
        return redondear(self.hed + self.hen + self.hefd + self.hefn + self.rn + self.rd)

    def get_value(self, surcharge_type: SurchargeType) -> float:
        """Valor de una categoría de recargo."""
        return getattr(self, surcharge_type.value.lower())

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la liquidación a diccionario, incluido el total."""
        data = asdict(self)
        data["total"] = self.total
        return data

"""
Modelo de dominio: Línea visual reconstruida.

La fatura de Santander se imprime a DOS columnas. Una línea reconstruida
es el resultado de juntar los fragmentos que comparten página, columna y
franja vertical (Y cuantizada).
"""

from dataclasses import dataclass
from enum import Enum


class Column(str, Enum):
    """Columna horizontal de la página."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ReconstructedLine:
    """Una línea de texto ya reconstruida a partir de fragmentos."""

    text: str
    """Texto de la línea: fragmentos ordenados por X, unidos con un espacio."""

    x: float
    """X del fragmento más a la izquierda de la línea."""

    y: float
    """Y cuantizada a la franja vertical (ver StatementLayout.y_bucket)."""

    page: int
    """Número de página (1-indexed)."""

    column: Column
    """Columna a la que pertenece la línea."""

    @property
    def position(self) -> str:
        """Descripción corta de la posición, para la bitácora."""
        return f"pág {self.page}, col {self.column.value}, y={self.y:g}"

"""
Servicio de dominio: Orden de lectura de las líneas.

Ordena las líneas reconstruidas en el orden en que las leería una persona:
1. Página ascendente.
2. Columna IZQUIERDA completa antes que la DERECHA.
3. Dentro de la columna, de arriba hacia abajo (Y descendente).

Este orden es el que permite al scanner arrastrar el contexto de la tarjeta
desde la columna izquierda a la derecha de la misma página, y de una página
a la siguiente, sin mezclar líneas de dos columnas con la misma Y.
"""

from collections.abc import Iterable

from fatura_parser.domain.models.reconstructed_line import Column, ReconstructedLine

_COLUMN_ORDER: dict[Column, int] = {
    Column.LEFT: 0,
    Column.RIGHT: 1,
}


def reading_order_key(line: ReconstructedLine) -> tuple[int, int, float]:
    """Clave de orden: (página, columna, -Y)."""
    return (line.page, _COLUMN_ORDER[line.column], -line.y)


def sequence_lines(lines: Iterable[ReconstructedLine]) -> list[ReconstructedLine]:
    """Devuelve una lista nueva con las líneas en orden de lectura.

    El orden es estable: líneas con la misma clave conservan su orden
    de entrada. La entrada no se modifica.
    """
    return sorted(lines, key=reading_order_key)

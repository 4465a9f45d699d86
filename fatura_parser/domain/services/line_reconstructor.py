"""
Servicio de dominio: Reconstrucción de líneas visuales.

El decodificador del PDF entrega fragmentos sueltos. Una misma línea de la
fatura ("15/03 SUPERMERCADO XYZ 123,45") llega partida en varios fragmentos
con X distintas y Y casi iguales, y además la página está impresa a dos
columnas: dos líneas distintas (una de cada columna) comparten la misma Y.

Algoritmo:
1. Columna: x < column_threshold → IZQUIERDA, si no → DERECHA.
   Un fragmento exactamente en el umbral va a la DERECHA.
2. Franja vertical: índice floor(y / y_bucket + 0.5); la Y de la línea es
   ese índice por y_bucket (múltiplo más cercano, "half up").
3. Se agrupa por (página, columna, franja).
4. En cada grupo: orden por X ascendente, unión con un espacio,
   colapso de espacios. La X de la línea es la menor X del grupo.
5. Grupos con texto vacío se descartan.

El orden de las líneas devueltas no es relevante: lo decide el
LineSequencer.
"""

import math
from collections.abc import Iterable

from fatura_parser.domain.models.reconstructed_line import Column, ReconstructedLine
from fatura_parser.domain.models.statement_layout import DEFAULT_LAYOUT, StatementLayout
from fatura_parser.domain.models.text_fragment import TextFragment
from fatura_parser.domain.shared.text_cleaner import clean_fragment_text, clean_whitespace


def column_for(x: float, threshold: float) -> Column:
    """Columna de un fragmento según su X."""
    return Column.LEFT if x < threshold else Column.RIGHT


def bucket_index(y: float, bucket: float) -> int:
    """Índice de la franja vertical de Y: floor(y / bucket + 0.5)."""
    return math.floor(y / bucket + 0.5)


def quantize_y(y: float, bucket: float) -> float:
    """Redondea Y al múltiplo más cercano de `bucket`.

    Usa redondeo "half up" (0.5 sube), no el redondeo bancario de round():
    con bucket=3, y=4.5 → 6 y y=1.5 → 3.

    Ejemplos:
        >>> quantize_y(700.4, 3)
        699
        >>> quantize_y(701.0, 3)
        702
        >>> quantize_y(100.8, 0.5)
        101.0
    """
    return bucket_index(y, bucket) * bucket


def reconstruct_lines(
    fragments: Iterable[TextFragment],
    layout: StatementLayout = DEFAULT_LAYOUT,
) -> list[ReconstructedLine]:
    """Agrupa fragmentos en líneas visuales por página, columna y franja Y.

    Args:
        fragments: Fragmentos de todo el documento, en cualquier orden.
        layout: Umbral de columnas y tamaño de franja.

    Returns:
        Lista de ReconstructedLine (sin orden garantizado).
    """
    # Se agrupa por índice de franja (entero) y no por la Y redondeada:
    # con franjas fraccionarias dos franjas distintas no deben colapsar.
    groups: dict[tuple[int, Column, int], list[TextFragment]] = {}

    for fragment in fragments:
        column = column_for(fragment.x, layout.column_threshold)
        index = bucket_index(fragment.y, layout.y_bucket)
        key = (fragment.page, column, index)
        if key not in groups:
            groups[key] = []
        groups[key].append(fragment)

    lines: list[ReconstructedLine] = []

    for (page, column, index), group in groups.items():
        group_sorted = sorted(group, key=lambda f: f.x)
        text = clean_whitespace(" ".join(clean_fragment_text(f.text) for f in group_sorted))
        if not text:
            continue

        lines.append(
            ReconstructedLine(
                text=text,
                x=min(f.x for f in group_sorted),
                y=index * layout.y_bucket,
                page=page,
                column=column,
            )
        )

    return lines

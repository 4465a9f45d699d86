"""
Modelo de dominio: Fragmento de texto con posición.

Es la unidad cruda que entrega el decodificador del documento (pdfplumber
en el adaptador incluido). Un fragmento NO es una línea: una misma línea
visual de la fatura suele llegar partida en varios fragmentos (fecha,
descripción, valor) con posiciones X distintas y Y casi iguales.

Sistema de coordenadas esperado por el núcleo:
- Origen en la esquina INFERIOR izquierda de la página.
- X crece hacia la derecha.
- Y crece hacia ARRIBA (Y mayor = más arriba en la página).

El adaptador de pdfplumber convierte su sistema (origen arriba) a este.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextFragment:
    """Un fragmento de texto posicionado en una página."""

    text: str
    """Texto del fragmento, tal como lo reporta el decodificador."""

    x: float
    """Coordenada X del borde izquierdo. Decide la columna (izquierda/derecha)."""

    y: float
    """Coordenada Y de la línea base. Fragmentos con Y cercana
    pertenecen a la misma línea visual."""

    page: int
    """Número de página (1-indexed)."""

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("El texto del fragmento no puede estar vacío")
        if self.page < 1:
            raise ValueError(f"Página fuera de rango: {self.page}. Debe ser >= 1.")

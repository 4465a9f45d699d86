"""
Puerto de entrada: Extractor de fragmentos posicionados.

Define el contrato para obtener, de un documento, la lista de fragmentos
de texto con su posición X/Y y número de página:

    FragmentExtractor (interfaz)
    └── PdfplumberExtractor     → PDFs nativos (texto embebido)

El núcleo no sabe nada del formato del documento: recibe una lista de
TextFragment y devuelve un StatementResult.

Contrato de coordenadas: todas las páginas de un mismo documento deben
reportarse en el mismo sistema (origen abajo a la izquierda, Y hacia
arriba), sin que el núcleo tenga que renormalizar página por página.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from fatura_parser.domain.models.text_fragment import TextFragment


class FragmentExtractor(ABC):
    """Interfaz para extraer fragmentos posicionados de un documento."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        El StatementProcessor usa el primer extractor cuyo can_handle
        devuelva True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[TextFragment]:
        """Extrae todos los fragmentos del documento.

        Args:
            file_path: Ruta al documento.

        Returns:
            Lista de TextFragment de todas las páginas. El orden entre
            fragmentos de una misma página no está especificado.

        Raises:
            ExtractionError: Si el documento no se puede decodificar
                            (corrupto, cifrado, librería no disponible).
            FormatoInvalidoError: Si el archivo no existe o no es del
                                  tipo esperado.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Para la bitácora."""
        ...

"""
Adaptador de entrada: Extractor de fragmentos usando pdfplumber.

pdfplumber lee PDFs nativos (con texto embebido) y entrega cada palabra
con su caja delimitadora. Este adaptador:
1. Abre el PDF con pdfplumber.
2. Extrae las palabras de cada página (extract_words).
3. Convierte cada palabra en un TextFragment del dominio, con el eje Y
   invertido: pdfplumber mide `bottom` desde el borde SUPERIOR de la
   página, el dominio espera Y creciendo hacia arriba.

El núcleo no sabe que existe pdfplumber. Recibe TextFragment y opera
sobre posiciones y texto.
"""

from pathlib import Path

from fatura_parser.domain.exceptions import ExtractionError, FormatoInvalidoError
from fatura_parser.domain.models.text_fragment import TextFragment
from fatura_parser.domain.ports.fragment_extractor import FragmentExtractor
from fatura_parser.domain.shared.text_cleaner import clean_fragment_text

# Import lazy: pdfplumber es pesado, solo se importa cuando se usa.
try:
    import pdfplumber
except ImportError:
    pdfplumber = None  # type: ignore[assignment]


class PdfplumberExtractor(FragmentExtractor):
    """Extrae fragmentos posicionados de PDFs nativos usando pdfplumber."""

    def __init__(self, x_tolerance: float = 3.0, y_tolerance: float = 3.0) -> None:
        """
        Args:
            x_tolerance: Distancia horizontal máxima entre caracteres para
                         que pdfplumber los una en una misma palabra.
            y_tolerance: Distancia vertical máxima para lo mismo.
        """
        self._x_tolerance = x_tolerance
        self._y_tolerance = y_tolerance

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        """Puede manejar archivos con extensión .pdf.

        No verifica si el PDF tiene texto embebido: un PDF escaneado se
        detecta después, cuando la extracción no devuelve fragmentos.
        """
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[TextFragment]:
        """Extrae los fragmentos de todas las páginas del PDF.

        Returns:
            Lista de TextFragment, en el orden en que pdfplumber los entrega.
            Las páginas se numeran desde 1. Los fragmentos vacíos tras la
            limpieza se omiten.

        Raises:
            ExtractionError: Si pdfplumber no puede abrir el PDF
                            (corrupto, protegido con contraseña, sin páginas).
            FormatoInvalidoError: Si el archivo no existe o no es PDF.
        """
        if pdfplumber is None:
            raise ExtractionError(
                str(file_path),
                "pdfplumber no está instalado. Instalar con: pip install pdfplumber",
            )

        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "PDF", "El archivo no existe")

        if file_path.suffix.lower() != ".pdf":
            raise FormatoInvalidoError(
                str(file_path),
                "PDF",
                f"Extensión inesperada: {file_path.suffix}",
            )

        fragments: list[TextFragment] = []

        try:
            with pdfplumber.open(file_path) as pdf:
                if len(pdf.pages) == 0:
                    raise ExtractionError(str(file_path), "El PDF no tiene páginas")

                for page_num, page in enumerate(pdf.pages, start=1):
                    fragments.extend(self._page_fragments(page, page_num))

        except ExtractionError:
            raise
        except Exception as e:
            # pdfminer lanza excepciones propias para PDFs cifrados o rotos
            if "password" in str(e).lower() or "encrypt" in str(e).lower():
                raise ExtractionError(
                    str(file_path),
                    "El PDF está protegido con contraseña",
                ) from e
            raise ExtractionError(str(file_path), f"PDF corrupto o inválido: {e}") from e

        return fragments

    def _page_fragments(self, page, page_num: int) -> list[TextFragment]:
        """Convierte las palabras de una página en TextFragment."""
        height = float(page.height)
        words = page.extract_words(
            x_tolerance=self._x_tolerance,
            y_tolerance=self._y_tolerance,
        ) or []

        fragments: list[TextFragment] = []
        for word in words:
            text = clean_fragment_text(word["text"])
            if not text:
                continue
            fragments.append(
                TextFragment(
                    text=text,
                    x=float(word["x0"]),
                    y=height - float(word["bottom"]),
                    page=page_num,
                )
            )
        return fragments

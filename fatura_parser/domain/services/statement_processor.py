"""
Servicio de dominio: Procesador de faturas.

Orquesta el procesamiento de un archivo:
1. Recibe una ruta a un archivo PDF.
2. Selecciona el FragmentExtractor adecuado (can_handle).
3. Extrae los fragmentos posicionados de todas las páginas.
4. Parsea los fragmentos (parse_statement) y devuelve el StatementResult.

Un error de decodificación (PDF corrupto o cifrado) es fatal para ese
archivo: se registra en la bitácora y no se devuelve ningún resultado
parcial. Las líneas que no se pueden parsear NO son errores.
"""

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from fatura_parser.domain.exceptions import ParseError, ParserBaseError
from fatura_parser.domain.models.statement_layout import DEFAULT_LAYOUT, StatementLayout
from fatura_parser.domain.models.statement_result import StatementResult
from fatura_parser.domain.models.text_fragment import TextFragment
from fatura_parser.domain.ports.fragment_extractor import FragmentExtractor
from fatura_parser.domain.ports.process_logger import ProcessLogger
from fatura_parser.domain.services.statement_parser import parse_statement


class StatementProcessor:
    """Procesa un archivo y produce un StatementResult.

    Recibe sus dependencias por constructor. No sabe qué FragmentExtractor
    concreto se está usando, solo conoce los puertos.
    """

    def __init__(
        self,
        fragment_extractors: Sequence[FragmentExtractor],
        logger: ProcessLogger,
        layout: StatementLayout = DEFAULT_LAYOUT,
    ) -> None:
        """
        Args:
            fragment_extractors: Extractores disponibles, en orden de
                                 prioridad. Se usa el primero cuyo
                                 can_handle devuelva True.
            logger: Bitácora de procesamiento.
            layout: Parámetros del layout de la fatura.
        """
        self._extractors = fragment_extractors
        self._logger = logger
        self._layout = layout

    def process_file(self, file_path: Path, today: date | None = None) -> StatementResult | None:
        """Procesa un archivo y devuelve el resultado.

        Returns:
            StatementResult si el procesamiento fue exitoso.
            None si el archivo fue descartado o hubo un error fatal.
        """
        self._logger.log_file_received(file_path, file_path.suffix)

        extractor = self._find_extractor(file_path)
        if extractor is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        try:
            fragments = self._extract(extractor, file_path)
            result = parse_statement(
                fragments,
                layout=self._layout,
                logger=self._logger,
                today=today,
                source_file=file_path.name,
            )
        except ParserBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        self._logger.log_statement_parsed(file_path, result)
        return result

    def process_directory(self, dir_path: Path, today: date | None = None) -> list[StatementResult]:
        """Procesa todos los PDFs de un directorio (recursivo).

        Returns:
            Lista de StatementResult (solo los exitosos).
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(dir_path.glob("**/*.pdf"))

        resultados: list[StatementResult] = []
        for archivo in archivos:
            resultado = self.process_file(archivo, today=today)
            if resultado is not None:
                resultados.append(resultado)

        return resultados

    def _find_extractor(self, file_path: Path) -> FragmentExtractor | None:
        """Primer extractor que pueda manejar el archivo."""
        for extractor in self._extractors:
            if extractor.can_handle(file_path):
                return extractor
        return None

    def _extract(self, extractor: FragmentExtractor, file_path: Path) -> list[TextFragment]:
        """Extrae los fragmentos y valida que el documento tenga texto.

        Raises:
            ExtractionError: Si el extractor no pudo decodificar el documento.
            ParseError: Si el documento no tiene ningún fragmento de texto
                        (PDF escaneado, solo imagen).
        """
        self._logger.log_extraction_start(file_path, extractor.name)

        fragments = extractor.extract(file_path)
        if not fragments:
            raise ParseError(
                file_path.name,
                "El documento no tiene texto extraíble (¿PDF escaneado?)",
            )

        num_pages = len({f.page for f in fragments})
        self._logger.log_extraction_complete(file_path, num_pages, len(fragments))
        return fragments


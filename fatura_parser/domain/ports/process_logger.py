"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio que ocurren al procesar una fatura:
- "Se recibió un archivo"
- "Se encontró el encabezado de una tarjeta"
- "Se descartó una línea (y por qué)"

La bitácora de líneas descartadas es un canal lateral de diagnóstico: no
forma parte del resultado funcional, pero permite ver por qué una compra
no aparece en el StatementResult.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from fatura_parser.domain.models.card_context import CardContext
from fatura_parser.domain.models.reconstructed_line import ReconstructedLine
from fatura_parser.domain.models.statement_result import StatementResult


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .docx no soportada"
        """
        ...

    # --- Extracción ---

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        """Registra el inicio de la extracción de fragmentos."""
        ...

    @abstractmethod
    def log_extraction_complete(
        self, file_path: Path, num_pages: int, num_fragments: int
    ) -> None:
        """Registra el fin exitoso de la extracción de fragmentos."""
        ...

    # --- Scanner ---

    @abstractmethod
    def log_card_found(self, context: CardContext, line: ReconstructedLine) -> None:
        """Registra un encabezado de tarjeta reconocido."""
        ...

    @abstractmethod
    def log_line_rejected(self, line: ReconstructedLine, reason: str) -> None:
        """Registra una línea descartada por el scanner.

        Args:
            line: Línea descartada.
            reason: Motivo corto. Ejemplo: "sin valor", "tarjeta no incluida".
        """
        ...

    @abstractmethod
    def log_due_date(self, due_date_text: str) -> None:
        """Registra el vencimiento encontrado ('DD/MM/YYYY')."""
        ...

    # --- Resultado ---

    @abstractmethod
    def log_statement_parsed(self, file_path: Path, result: StatementResult) -> None:
        """Registra el fin exitoso del parseo de una fatura."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error fatal al procesar un archivo."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_transacciones': int,
                'lineas_descartadas': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...

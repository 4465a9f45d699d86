"""
Puerto de salida: Escritor de resultados.

Define el contrato para persistir un StatementResult (JSON, Excel, etc.).
El dominio solo produce el StatementResult; el formato lo decide el
adaptador.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from fatura_parser.domain.models.statement_result import StatementResult


class OutputWriter(ABC):
    """Interfaz para escribir el resultado de una fatura."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """Extensión de los archivos generados, con punto. Ejemplo: '.json'."""
        ...

    @abstractmethod
    def write(self, result: StatementResult, output_path: Path) -> Path:
        """Escribe el resultado de una fatura.

        Args:
            result: Resultado del parseo.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y un resumen final.

Con audit=True imprime también cada línea descartada por el scanner con
su posición y motivo: es la forma de averiguar por qué una compra no
aparece en el resultado.
"""

from pathlib import Path

from fatura_parser.domain.models.card_context import CardContext
from fatura_parser.domain.models.reconstructed_line import ReconstructedLine
from fatura_parser.domain.models.statement_result import StatementResult
from fatura_parser.domain.ports.process_logger import ProcessLogger
from fatura_parser.domain.shared.money import format_money


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, audit: bool = False) -> None:
        self._audit = audit
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._total_transacciones: int = 0
        self._lineas_descartadas: int = 0
        self._errores: list[dict] = []
        self._resultados: list[StatementResult] = []

    # --- Archivos ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name} ({reason})")

    # --- Extracción ---

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        print(f"  🔍 Extrayendo fragmentos ({extractor_name}): {file_path.name}")

    def log_extraction_complete(
        self, file_path: Path, num_pages: int, num_fragments: int
    ) -> None:
        print(f"  📑 {num_pages} páginas, {num_fragments} fragmentos")

    # --- Scanner ---

    def log_card_found(self, context: CardContext, line: ReconstructedLine) -> None:
        estado = "incluida" if context.include_flag else "no incluida"
        print(f"  💳 Tarjeta: {context.card_label} ({estado}) en {line.position}")

    def log_line_rejected(self, line: ReconstructedLine, reason: str) -> None:
        self._lineas_descartadas += 1
        if self._audit:
            print(f"    ✗ [{line.position}] {reason}: {line.text}")

    def log_due_date(self, due_date_text: str) -> None:
        print(f"  📅 Vencimiento: {due_date_text}")

    # --- Resultado ---

    def log_statement_parsed(self, file_path: Path, result: StatementResult) -> None:
        self._archivos_procesados += 1
        self._total_transacciones += result.num_transactions
        self._resultados.append(result)
        print(
            f"  ✅ Completado: {file_path.name}: "
            f"{result.month_label}, {result.num_transactions} transacciones, "
            f"total {format_money(result.total)}"
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name}: {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "total_transacciones": self._total_transacciones,
            "lineas_descartadas": self._lineas_descartadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos procesados:  {self._archivos_procesados}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  Total transacciones:  {self._total_transacciones}")
        print(f"  Líneas descartadas:   {self._lineas_descartadas}")

        for resultado in self._resultados:
            print(f"\n  {resultado.source_file or '(sin nombre)'}: {resultado.month_label}")
            conteos = resultado.count_by_card
            for card_label, total in resultado.totals_by_card.items():
                print(
                    f"    {card_label}: {conteos.get(card_label, 0)} transacciones, "
                    f"{format_money(total)}"
                )
            print(f"    Total fatura: {format_money(resultado.total)}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)

"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Resumo): Una fila por tarjeta con su titular, cantidad de
  transacciones y total, más una fila final con el total de la fatura.
- Hoja 2 (Transacoes): Detalle de cada transacción.

Motor: xlsxwriter, vía pandas.
"""

from pathlib import Path

import pandas as pd

from fatura_parser.domain.exceptions import OutputError
from fatura_parser.domain.models.statement_result import StatementResult
from fatura_parser.domain.ports.output_writer import OutputWriter

SHEET_SUMMARY = "Resumo"
SHEET_TRANSACTIONS = "Transacoes"

TRANSACTION_COLUMNS = ["Mes", "Fecha", "Descripcion", "Valor", "Tarjeta", "Titular", "Tipo"]
SUMMARY_COLUMNS = ["Mes", "Vencimiento", "Tarjeta", "Titular", "Num Transacciones", "Total"]


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    @property
    def extension(self) -> str:
        return ".xlsx"

    def write(self, result: StatementResult, output_path: Path) -> Path:
        """Escribe una fatura a Excel.

        Args:
            result: Resultado del parseo de una fatura.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(result, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    # =================================================================
    # Construcción de las hojas
    # =================================================================

    @staticmethod
    def transactions_frame(result: StatementResult) -> pd.DataFrame:
        """Hoja de transacciones, una fila por TransactionRecord."""
        filas = [
            {
                "Mes": result.month_label,
                "Fecha": t.date,
                "Descripcion": t.description,
                "Valor": float(t.amount),
                "Tarjeta": t.card_label,
                "Titular": t.owner_label,
                "Tipo": t.category.value,
            }
            for t in result.transactions
        ]
        return pd.DataFrame(filas, columns=TRANSACTION_COLUMNS)

    @staticmethod
    def summary_frame(result: StatementResult) -> pd.DataFrame:
        """Hoja de resumen: una fila por tarjeta más la fila de total."""
        owners: dict[str, str] = {}
        for t in result.transactions:
            owners.setdefault(t.card_label, t.owner_label)

        conteos = result.count_by_card
        filas = [
            {
                "Mes": result.month_label,
                "Vencimiento": result.due_date_text,
                "Tarjeta": card_label,
                "Titular": owners.get(card_label, ""),
                "Num Transacciones": conteos.get(card_label, 0),
                "Total": float(total),
            }
            for card_label, total in result.totals_by_card.items()
        ]
        filas.append(
            {
                "Mes": result.month_label,
                "Vencimiento": result.due_date_text,
                "Tarjeta": "TOTAL",
                "Titular": "",
                "Num Transacciones": result.num_transactions,
                "Total": float(result.total),
            }
        )
        return pd.DataFrame(filas, columns=SUMMARY_COLUMNS)

    def _escribir_excel(self, result: StatementResult, output_path: Path) -> None:
        df_resumen = self.summary_frame(result)
        df_transacciones = self.transactions_frame(result)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name=SHEET_SUMMARY)
            df_transacciones.to_excel(writer, index=False, sheet_name=SHEET_TRANSACTIONS)

            workbook = writer.book
            ws_resumen = writer.sheets[SHEET_SUMMARY]
            ws_transacciones = writer.sheets[SHEET_TRANSACTIONS]

            # Montos: 2 decimales con separador de miles
            money_format = workbook.add_format({"num_format": "#,##0.00"})
            # Fechas DD/MM como texto, para que Excel no las convierta
            text_format = workbook.add_format({"num_format": "@"})

            ws_resumen.set_column("A:A", 14)  # Mes
            ws_resumen.set_column("B:B", 12, text_format)  # Vencimiento
            ws_resumen.set_column("C:C", 32)  # Tarjeta
            ws_resumen.set_column("D:D", 14)  # Titular
            ws_resumen.set_column("E:E", 18)  # Num Transacciones
            ws_resumen.set_column("F:F", 16, money_format)  # Total

            ws_transacciones.set_column("A:A", 14)  # Mes
            ws_transacciones.set_column("B:B", 8, text_format)  # Fecha
            ws_transacciones.set_column("C:C", 45)  # Descripcion
            ws_transacciones.set_column("D:D", 14, money_format)  # Valor
            ws_transacciones.set_column("E:E", 32)  # Tarjeta
            ws_transacciones.set_column("F:F", 14)  # Titular
            ws_transacciones.set_column("G:G", 14)  # Tipo

"""
Tests para el ExcelWriter.

Los DataFrames de cada hoja se prueban directamente; la escritura a disco
solo verifica que el archivo se crea (leerlo de vuelta requeriría openpyxl).
"""

from decimal import Decimal

import pytest

from fatura_parser.adapters.output.writers.excel_writer import (
    SHEET_SUMMARY,
    SHEET_TRANSACTIONS,
    SUMMARY_COLUMNS,
    TRANSACTION_COLUMNS,
    ExcelWriter,
)
from fatura_parser.domain.exceptions import OutputError
from fatura_parser.domain.models.transaction_record import Category, TransactionRecord
from fatura_parser.domain.services.aggregator import aggregate

CARD_R = "RODRIGO S SILVA – 1234"
CARD_L = "LUANA M SILVA – 9876"


@pytest.fixture
def result():
    records = [
        TransactionRecord("15/03", "SUPERMARKET XYZ", Decimal("123.45"), CARD_R, "Rodrigo", Category.CASH),
        TransactionRecord("02/03", "STORE ABC (01/06)", Decimal("89.90"), CARD_R, "Rodrigo", Category.INSTALLMENT),
        TransactionRecord("18/03", "FARMACIA POPULAR", Decimal("31.90"), CARD_L, "Luana", Category.CASH),
    ]
    return aggregate(records, due_date_text="10/04/2024")


class TestFrames:
    def test_hoja_de_transacciones(self, result):
        df = ExcelWriter.transactions_frame(result)

        assert list(df.columns) == TRANSACTION_COLUMNS
        assert len(df) == 3
        assert df.iloc[1]["Descripcion"] == "STORE ABC (01/06)"
        assert df.iloc[1]["Tipo"] == "Parcelamento"
        assert df.iloc[2]["Titular"] == "Luana"

    def test_hoja_de_resumen_por_tarjeta(self, result):
        df = ExcelWriter.summary_frame(result)

        assert list(df.columns) == SUMMARY_COLUMNS
        assert list(df["Tarjeta"]) == [CARD_R, CARD_L, "TOTAL"]
        assert list(df["Num Transacciones"]) == [2, 1, 3]
        assert df.iloc[0]["Total"] == pytest.approx(213.35)
        assert df.iloc[2]["Total"] == pytest.approx(245.25)
        assert df.iloc[0]["Titular"] == "Rodrigo"

    def test_fatura_vacia(self):
        empty = aggregate([], due_date_text="10/04/2024")

        assert len(ExcelWriter.transactions_frame(empty)) == 0
        assert list(ExcelWriter.summary_frame(empty)["Tarjeta"]) == ["TOTAL"]


class TestExcelWriter:
    def test_agrega_extension(self, result, tmp_path):
        path = ExcelWriter().write(result, tmp_path / "fatura")

        assert path.suffix == ".xlsx"
        assert path.exists()
        assert path.stat().st_size > 0

    def test_nombres_de_hojas(self):
        assert SHEET_SUMMARY == "Resumo"
        assert SHEET_TRANSACTIONS == "Transacoes"

    def test_error_de_escritura(self, result, tmp_path):
        destino = tmp_path / "fatura.xlsx"
        destino.mkdir()

        with pytest.raises(OutputError):
            ExcelWriter().write(result, destino)

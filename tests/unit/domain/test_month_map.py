"""Tests para los nombres de meses y la etiqueta del mes de referencia."""

import pytest

from fatura_parser.domain.shared.month_map import month_label, month_name, unknown_month_label


class TestMonthName:
    def test_portugues_por_defecto(self):
        assert month_name(3) == "Março"

    def test_ingles(self):
        assert month_name(3, "en") == "March"

    def test_extremos(self):
        assert month_name(1) == "Janeiro"
        assert month_name(12) == "Dezembro"

    @pytest.mark.parametrize("mes", [0, 13, -1])
    def test_mes_fuera_de_rango(self, mes):
        with pytest.raises(ValueError, match="fuera de rango"):
            month_name(mes)

    def test_idioma_no_soportado(self):
        with pytest.raises(ValueError, match="Idioma no soportado"):
            month_name(3, "es")


class TestMonthLabel:
    def test_etiqueta_portugues(self):
        assert month_label(2024, 3) == "Março/24"

    def test_etiqueta_ingles(self):
        assert month_label(2024, 3, "en") == "March/24"

    def test_anio_con_cero_inicial(self):
        assert month_label(2005, 7) == "Julho/05"


class TestUnknownMonthLabel:
    def test_portugues(self):
        assert unknown_month_label() == "Mês Desconhecido"

    def test_ingles(self):
        assert unknown_month_label("en") == "Unknown month"

    def test_idioma_no_soportado(self):
        with pytest.raises(ValueError):
            unknown_month_label("fr")

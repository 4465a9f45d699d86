"""
Modelo de dominio: Parámetros del layout de la fatura.

Reúne las constantes empíricas del formato de Santander (umbral de columnas,
tamaño de franja vertical, vocabulario de ruido, etc.) en un solo objeto
inmutable. El núcleo recibe un StatementLayout; si no se le pasa ninguno,
usa DEFAULT_LAYOUT.

Los valores por defecto se obtuvieron analizando faturas reales. Si el banco
cambia el formato, o se quiere procesar otro banco con un layout similar a
dos columnas, basta con construir otro StatementLayout.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

_LANGUAGES = ("pt", "en")


@dataclass(frozen=True)
class HolderRule:
    """Titular incluido: si el encabezado de la tarjeta contiene `pattern`
    (sin distinguir mayúsculas), sus transacciones se extraen con `label`
    como etiqueta de titular."""

    pattern: str
    """Token del nombre a buscar. Ejemplo: 'RODRIGO'."""

    label: str
    """Etiqueta de titular para las transacciones. Ejemplo: 'Rodrigo'."""

    def matches(self, text: str) -> bool:
        return self.pattern.upper() in text.upper()

    def __post_init__(self) -> None:
        if not self.pattern.strip():
            raise ValueError("El patrón del titular no puede estar vacío")
        if not self.label.strip():
            raise ValueError(f"La etiqueta del titular '{self.pattern}' no puede estar vacía")


DEFAULT_HOLDERS: tuple[HolderRule, ...] = (
    HolderRule("RODRIGO", "Rodrigo"),
    HolderRule("LUANA", "Luana"),
)

# Vocabulario de líneas de resumen, totales, tasas y encabezados de tabla.
# Se busca en cualquier parte de la línea, sin distinguir mayúsculas.
DEFAULT_NOISE_PATTERNS: tuple[str, ...] = (
    # --- Fatura Santander (portugués) ---
    r"COTAÇÃO",
    r"IOF",
    r"VALOR TOTAL",
    r"Compra\s+Data",
    r"SUPERCRÉDITO",
    r"Total a pagar",
    r"Pagamento",
    r"Resumo",
    r"Saldo",
    r"CET",
    r"Juros",
    r"ANUIDADE",
    r"Esfera",
    r"Central",
    r"DEMONSTRATIVO",
    r"Detalhamento",
    r"Parcela\s+R\$",
    r"Descrição",
)

# Vocabulario para faturas en inglés, anclado a palabra completa ("Balance" no
# debe descartar "BALANCEAMENTO"). No forma parte del default; se activa con
# StatementLayout(noise_patterns=DEFAULT_NOISE_PATTERNS + ENGLISH_NOISE_PATTERNS).
ENGLISH_NOISE_PATTERNS: tuple[str, ...] = (
    r"\bExchange rate\b",
    r"\bTotal due\b",
    r"\bAmount due\b",
    r"\bPayments?\b",
    r"\bSummary\b",
    r"\bBalance\b",
    r"\bInterest\b",
    r"\bAnnual fee\b",
    r"\bPurchase\s+Date\b",
    r"\bDescription\b",
)

DEFAULT_INSTALLMENT_MARKERS: tuple[str, ...] = (
    r"Parcelamentos?",
    r"Installments?",
)

DEFAULT_CASH_MARKERS: tuple[str, ...] = (
    r"Despesas?",
    r"Purchases(?:\s*/\s*Cash)?",
    r"Cash",
)

DEFAULT_DUE_DATE_PATTERN = r"(?:[Vv]encimento|[Dd]ue\s+[Dd]ate)[:\s]+(\d{2}/\d{2}/\d{4})"


@dataclass(frozen=True)
class StatementLayout:
    """Configuración del layout de una fatura a dos columnas."""

    column_threshold: float = 300.0
    """Fragmentos con x < umbral van a la columna IZQUIERDA;
    x >= umbral va a la DERECHA."""

    y_bucket: float = 3.0
    """Tamaño de la franja vertical (en puntos) para agrupar fragmentos
    de la misma línea. Absorbe el jitter de fuentes proporcionales."""

    holders: tuple[HolderRule, ...] = DEFAULT_HOLDERS
    """Titulares incluidos, en orden de prioridad."""

    unknown_holder: str = "DESCONHECIDO"
    """Nombre que se usa cuando el encabezado no permite extraer el titular."""

    noise_patterns: tuple[str, ...] = DEFAULT_NOISE_PATTERNS
    """Regex de líneas de resumen/ruido que se descartan siempre."""

    installment_markers: tuple[str, ...] = DEFAULT_INSTALLMENT_MARKERS
    """Etiquetas (línea completa) que abren la sección de Parcelamento."""

    cash_markers: tuple[str, ...] = DEFAULT_CASH_MARKERS
    """Etiquetas (línea completa) que abren la sección À Vista."""

    due_date_pattern: str = DEFAULT_DUE_DATE_PATTERN
    """Regex de la línea de vencimiento. El grupo 1 es 'DD/MM/YYYY'."""

    language: str = "pt"
    """Idioma de la etiqueta del mes de referencia: 'pt' o 'en'."""

    def __post_init__(self) -> None:
        if self.column_threshold <= 0:
            raise ValueError(f"column_threshold debe ser positivo: {self.column_threshold}")
        if self.y_bucket <= 0:
            raise ValueError(f"y_bucket debe ser positivo: {self.y_bucket}")
        if not self.holders:
            raise ValueError("Se requiere al menos un titular incluido")
        if self.language not in _LANGUAGES:
            raise ValueError(
                f"Idioma no soportado: '{self.language}'. Esperado: {', '.join(_LANGUAGES)}"
            )

    # --- Regex compiladas (cacheadas por contenido) ---

    @property
    def noise_regexes(self) -> tuple[re.Pattern[str], ...]:
        return _compile_all(self.noise_patterns)

    @property
    def installment_regex(self) -> re.Pattern[str]:
        return _compile_whole_line(self.installment_markers)

    @property
    def cash_regex(self) -> re.Pattern[str]:
        return _compile_whole_line(self.cash_markers)

    @property
    def due_date_regex(self) -> re.Pattern[str]:
        return _compile_one(self.due_date_pattern)

    # --- Titulares ---

    def holder_rule_for(self, text: str) -> HolderRule | None:
        """Primer titular incluido cuyo patrón aparece en el texto."""
        for rule in self.holders:
            if rule.matches(text):
                return rule
        return None

    def is_included(self, text: str) -> bool:
        return self.holder_rule_for(text) is not None

    def owner_label_for(self, holder_name: str) -> str:
        """Etiqueta de titular para un nombre. Vacía si no está incluido."""
        rule = self.holder_rule_for(holder_name)
        return rule.label if rule is not None else ""


@lru_cache(maxsize=32)
def _compile_all(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


@lru_cache(maxsize=32)
def _compile_whole_line(patterns: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"^(?:" + "|".join(patterns) + r")$", re.IGNORECASE)


@lru_cache(maxsize=32)
def _compile_one(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


DEFAULT_LAYOUT = StatementLayout()

"""
Nombres de meses para la etiqueta del mes de referencia.

La fatura se muestra al usuario como "Março/24". El idioma por defecto es
portugués (idioma de la fatura); también se soporta inglés ("March/24").
"""

_MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "pt": (
        "Janeiro",
        "Fevereiro",
        "Março",
        "Abril",
        "Maio",
        "Junho",
        "Julho",
        "Agosto",
        "Setembro",
        "Outubro",
        "Novembro",
        "Dezembro",
    ),
    "en": (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
}

_UNKNOWN_MONTH: dict[str, str] = {
    "pt": "Mês Desconhecido",
    "en": "Unknown month",
}


def month_name(month: int, language: str = "pt") -> str:
    """Devuelve el nombre del mes (1-12) en el idioma pedido.

    Raises:
        ValueError: Si el mes está fuera de rango o el idioma no existe.

    Ejemplos:
        >>> month_name(3)
        'Março'
        >>> month_name(3, "en")
        'March'
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    names = _MONTH_NAMES.get(language)
    if names is None:
        raise ValueError(
            f"Idioma no soportado: '{language}'. Valores válidos: {sorted(_MONTH_NAMES)}"
        )
    return names[month - 1]


def month_label(year: int, month: int, language: str = "pt") -> str:
    """Etiqueta 'Mes/AA' del periodo.

    Ejemplos:
        >>> month_label(2024, 3)
        'Março/24'
        >>> month_label(2023, 12, "en")
        'December/23'
    """
    return f"{month_name(month, language)}/{year % 100:02d}"


def unknown_month_label(language: str = "pt") -> str:
    """Etiqueta que se usa cuando no se encontró el vencimiento."""
    label = _UNKNOWN_MONTH.get(language)
    if label is None:
        raise ValueError(
            f"Idioma no soportado: '{language}'. Valores válidos: {sorted(_UNKNOWN_MONTH)}"
        )
    return label

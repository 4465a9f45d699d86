"""
Utilidades para manejo de montos monetarios en reales (BRL).

La fatura usa la notación brasileña: punto como separador de miles y coma
como separador decimal ("1.234,56"). Todas las funciones trabajan con
`Decimal`; nunca con float.
"""

from decimal import Decimal, InvalidOperation


def parse_money(text: str) -> Decimal:
    """Convierte un texto con formato monetario brasileño a Decimal.

    Formatos soportados:
    - Simple: "123,45"
    - Con miles: "1.234,56", "1.234.567,89"
    - Con símbolo: "R$ 1.234,56"
    - Negativo: "-1.234,56" (pagos, estornos)

    Args:
        text: Texto que representa un monto monetario.

    Returns:
        Decimal con el valor numérico.

    Raises:
        TypeError: Si no se recibe un str.
        ValueError: Si el texto no se puede convertir a un monto válido.

    Ejemplos:
        >>> parse_money("1.234,56")
        Decimal('1234.56')
        >>> parse_money("-89,90")
        Decimal('-89.90')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_money espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    cleaned = text.strip().replace("R$", "").replace(" ", "")

    # Miles con punto, decimales con coma
    cleaned = cleaned.replace(".", "").replace(",", ".")

    if not cleaned or cleaned in ("-", "."):
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")


def format_money(amount: Decimal) -> str:
    """Formatea un Decimal como monto en reales.

    Ejemplos:
        >>> format_money(Decimal("1234567.89"))
        'R$ 1.234.567,89'
        >>> format_money(Decimal("-5"))
        '-R$ 5,00'
    """
    amount = amount.quantize(Decimal("0.01"))
    # Formato inglés y luego intercambio de separadores
    texto = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    if amount < 0:
        return f"-R$ {texto}"
    return f"R$ {texto}"


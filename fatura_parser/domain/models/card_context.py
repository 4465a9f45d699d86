"""
Modelo de dominio: Contexto de la tarjeta actual.

El scanner recorre las líneas en orden de lectura y, cada vez que encuentra
el encabezado de una tarjeta ("RODRIGO S SILVA - 4321 XXXX XXXX 1234"),
crea un CardContext nuevo. Todas las transacciones siguientes pertenecen a
esa tarjeta hasta el próximo encabezado, aunque estén en la otra columna o
en la página siguiente.

El contexto es inmutable: un marcador de sección produce un contexto nuevo
con `with_section()`, nunca se modifica el existente.
"""

from dataclasses import dataclass, replace

from fatura_parser.domain.models.transaction_record import Category


@dataclass(frozen=True)
class CardContext:
    """Tarjeta activa mientras se recorren las líneas."""

    holder_name: str
    """Nombre del titular extraído del encabezado, o el placeholder
    de titular desconocido."""

    card_suffix: str
    """Últimos 4 dígitos de la tarjeta. '0000' si no se encontraron."""

    include_flag: bool
    """True si el titular está en la lista de titulares incluidos.
    Las transacciones de tarjetas no incluidas se descartan."""

    current_section: Category = Category.CASH
    """Sección vigente. Cada encabezado nuevo arranca en À Vista."""

    owner_label: str = ""
    """Etiqueta del titular para las transacciones. Vacía si no se incluye."""

    @property
    def card_label(self) -> str:
        return f"{self.holder_name} – {self.card_suffix}"

    def with_section(self, section: Category) -> "CardContext":
        """Devuelve una copia con la sección cambiada."""
        return replace(self, current_section=section)

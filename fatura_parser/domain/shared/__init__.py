"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa. Solo operan sobre
tipos nativos de Python.

Uso:
    from fatura_parser.domain.shared.money import format_money, parse_money
    from fatura_parser.domain.shared.month_map import month_label
    from fatura_parser.domain.shared.date_parser import parse_full_date, previous_month
    from fatura_parser.domain.shared.text_cleaner import clean_whitespace, clean_fragment_text
"""

"""
Quantities as the Zureo UI writes them: "." groups thousands and ","
separates decimals ("1.234,5" is one thousand two hundred thirty-four
and a half).
"""
import re
from decimal import Decimal, InvalidOperation

from .errors import InvalidQuantityError

QUANTITY_RE = re.compile(r"^-?[\d.]+(,\d+)?$")


def parse_quantity(text) -> Decimal:
    if text is None:
        raise InvalidQuantityError("Cantidad vacía.")
    raw = str(text).strip().replace(" ", "")
    if not raw:
        raise InvalidQuantityError("Cantidad vacía.")
    if not QUANTITY_RE.match(raw):
        raise InvalidQuantityError(f"Cantidad inválida: {text!r}")
    try:
        return Decimal(raw.replace(".", "").replace(",", "."))
    except InvalidOperation:
        raise InvalidQuantityError(f"Cantidad inválida: {text!r}") from None


def same_quantity(field_value, requested) -> bool:
    try:
        return parse_quantity(field_value) == parse_quantity(requested)
    except InvalidQuantityError:
        return False

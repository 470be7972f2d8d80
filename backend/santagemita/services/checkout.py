# santagemita/services/checkout.py
"""
WhatsApp quote hand-off. There is no payment: the customer is sent to a chat
with a pre-filled message describing the product and its price.
"""
from typing import Optional
from urllib.parse import quote

from santagemita.config import settings
from santagemita.schemas.pricing import PricedProduct

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_clp(amount: float) -> str:
    """es-CL number format: '.' for thousands, ',' for decimals, up to 3 decimals."""
    text = f"{amount:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def quote_message(product: PricedProduct) -> str:
    lines = [f"Hola! Me interesa cotizar: *{product.name}*"]
    if product.category:
        lines.append(f"Categoría: {product.category}")
    if product.description:
        lines.append(f"Descripción: {product.description}")
    lines.append(f"Precio: ${format_clp(product.pricing.originalPrice)}")
    if product.pricing.hasDiscount:
        lines.append(f"*Con descuento: ${format_clp(product.pricing.finalPrice)}*")
    return "\n".join(lines) + "\n\n¿Me das más información?"


def whatsapp_url(message: str, phone: Optional[str] = None) -> str:
    phone = phone or settings.whatsapp_phone
    return f"{settings.whatsapp_base_url}?phone={phone}&text={quote(message, safe=_URI_COMPONENT_SAFE)}"

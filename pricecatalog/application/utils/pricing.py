from __future__ import annotations

from pricecatalog.domain.entities.service import Service

ON_REQUEST_LABEL = "По запросу"
RUB_SYMBOL = "₽"


def _fmt(amount: int) -> str:
    return f"{amount:,}".replace(",", " ")


def currency_symbol(currency: str) -> str:
    return RUB_SYMBOL if currency == "RUB" else currency


def format_price(service: Service) -> str:
    """
    Build the price label shown next to a service.
    Inactive and zero-priced services are always "on request", so no number leaks for them.
    """
    if not service.is_active or (service.price == 0 and not service.price_max):
        return ON_REQUEST_LABEL

    if service.price_note:
        return service.price_note

    if service.price_unit:
        return f"{_fmt(service.price)} {service.price_unit}"

    symbol = currency_symbol(service.currency)
    if service.price_max and service.price_max > service.price:
        return f"{_fmt(service.price)} – {_fmt(service.price_max)} {symbol}"

    return f"{_fmt(service.price)} {symbol}"

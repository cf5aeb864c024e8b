from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from command_center.core.providers.base import ProviderClient, UpstreamResult

PAGE_SIZE = 100


def to_minor_units(amount: Union[int, float, str, Decimal]) -> int:
    """
    Convert a decimal currency amount to integer minor units (cents).

    Rounds half away from zero on the decimal text of the amount, so
    29.99 -> 2999 and 10.005 -> 1001 regardless of float representation.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class StripeClient(ProviderClient):
    """Stripe only accepts form-encoded bodies; nested fields use bracketed keys."""

    provider = "stripe"

    def encode_body(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return {"data": {k: _form_value(v) for k, v in body.items() if v is not None}}

    async def list_products(self) -> UpstreamResult:
        return await self.call("/products", params={"limit": PAGE_SIZE})

    async def list_customers(self) -> UpstreamResult:
        return await self.call("/customers", params={"limit": PAGE_SIZE})

    async def create_product(self, *, name: str, description: str = "") -> UpstreamResult:
        body: Dict[str, Any] = {"name": name}
        # Stripe rejects an empty description
        if description:
            body["description"] = description
        return await self.call("/products", "POST", body)

    async def create_price(
        self,
        *,
        product_id: str,
        unit_amount: int,
        currency: str = "usd",
        recurring: Optional[str] = None,
    ) -> UpstreamResult:
        body: Dict[str, Any] = {"product": product_id, "unit_amount": unit_amount, "currency": currency}
        if recurring:
            body["recurring[interval]"] = recurring
        return await self.call("/prices", "POST", body)

    async def create_payment_link(self, line_items: Sequence[Tuple[str, int]]) -> UpstreamResult:
        body: Dict[str, Any] = {}
        for idx, (price_id, quantity) in enumerate(line_items):
            body[f"line_items[{idx}][price]"] = price_id
            body[f"line_items[{idx}][quantity]"] = quantity
        return await self.call("/payment_links", "POST", body)

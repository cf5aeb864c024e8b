import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from command_center.api.deps import get_providers
from command_center.api.fallback import add_catch_all, scoped_not_found
from command_center.core.providers import Providers, UpstreamError, to_minor_units
from command_center.schemas.stripe import (
    CustomerOut,
    PriceRef,
    ProductCreate,
    ProductCreated,
    ProductOut,
    ProductRef,
)

router = APIRouter(prefix="/stripe", tags=["stripe"])
logger = logging.getLogger(__name__)

unknown_stripe_route = scoped_not_found("Stripe", ["/stripe/products", "/stripe/product", "/stripe/customers"])


def _data_list(body: Dict[str, Any]) -> List[Dict[str, Any]]:
    data = body.get("data")
    if not isinstance(data, list):
        raise UpstreamError("stripe", 200, "Unexpected stripe response shape")
    return [item for item in data if isinstance(item, dict)]


@router.get("/products", response_model=List[ProductOut])
async def list_products(providers: Providers = Depends(get_providers)):
    body = (await providers.stripe.list_products()).expect_dict()
    return [
        ProductOut(id=p.get("id"), name=p.get("name"), description=p.get("description"), active=p.get("active"))
        for p in _data_list(body)
    ]


@router.post("/product", response_model=ProductCreated)
async def create_product(payload: ProductCreate, providers: Providers = Depends(get_providers)):
    """
    Product -> price -> payment link, strictly in that order.

    There is no compensation: if the price or the link fails, whatever was
    already created stays in Stripe and the error is returned.
    """
    stripe = providers.stripe
    unit_amount = to_minor_units(payload.price)

    product = (await stripe.create_product(name=payload.name, description=payload.description)).expect_dict()

    price = (
        await stripe.create_price(
            product_id=product.get("id"),
            unit_amount=unit_amount,
            currency=payload.currency,
            recurring=payload.recurring,
        )
    ).expect_dict()

    link = (await stripe.create_payment_link([(price.get("id"), 1)])).expect_dict()

    logger.info("created stripe product=%s price=%s", product.get("id"), price.get("id"))
    return ProductCreated(
        product=ProductRef(id=product.get("id"), name=product.get("name")),
        price=PriceRef(id=price.get("id"), amount=payload.price, currency=payload.currency),
        payment_link=link.get("url"),
    )


@router.get("/customers", response_model=List[CustomerOut])
async def list_customers(providers: Providers = Depends(get_providers)):
    body = (await providers.stripe.list_customers()).expect_dict()
    return [CustomerOut(id=c.get("id"), email=c.get("email"), name=c.get("name")) for c in _data_list(body)]


add_catch_all(router, unknown_stripe_route)

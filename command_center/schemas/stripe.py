from typing import Optional

from pydantic import BaseModel, Field


class ProductOut(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None


class CustomerOut(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None


class ProductCreate(BaseModel):
    name: str
    description: str = ""
    price: float = Field(allow_inf_nan=False)
    currency: str = "usd"
    recurring: Optional[str] = None  # day/week/month/year


class ProductRef(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class PriceRef(BaseModel):
    id: Optional[str] = None
    amount: float
    currency: str


class ProductCreated(BaseModel):
    product: ProductRef
    price: PriceRef
    payment_link: Optional[str] = None

from typing import Optional

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    stock: int = 0
    image: Optional[str] = None


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    stock: int
    image: Optional[str] = None

    class Config:
        from_attributes = True

from pydantic import BaseModel, ConfigDict, Field

from beerstock.app.db.models.core_types import BeerType


class BeerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    brand: str = Field(min_length=1, max_length=200)
    max_capacity: int = Field(ge=0, le=500)
    quantity: int = Field(ge=0, le=100)
    type: BeerType


class BeerRead(BaseModel):
    id: int
    name: str
    brand: str
    max_capacity: int
    quantity: int
    type: BeerType

    model_config = ConfigDict(from_attributes=True)


class QuantityUpdate(BaseModel):
    quantity: int = Field(gt=0, le=100)

from datetime import datetime
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator


'''
The schemas (Pydantic models) give information about the structure and type of data the API will process.
FastAPI uses schemas to:
- validate incoming requests by ensuring the incoming JSON data matches the schema. If not, it sends back a 422 error.
- parse the incoming JSON data into the Python types defined in the schema.
'''


# --- Request body chapter ---
class Item(BaseModel):
    name: str
    description: Optional[str] = None
    price: float
    tax: Optional[float] = None


# --- Multiple body parameters chapter ---
class User(BaseModel):
    username: str
    full_name: Optional[str] = None


# --- Body fields chapter ---
class FieldItem(BaseModel):
    name: str
    description: Optional[str] = Field(None, title="The description of the item", max_length=300)
    price: float = Field(..., gt=0, description="The price must be greater than zero")
    tax: Optional[float] = None


# --- Nested models chapter ---
class Image(BaseModel):
    url: HttpUrl
    name: str


class NestedItem(BaseModel):
    name: str
    description: Optional[str] = None
    price: float
    tax: Optional[float] = None
    tags: Set[str] = set()
    images: Optional[List[Image]] = None


class Offer(BaseModel):
    name: str
    description: Optional[str] = None
    price: float
    items: List[NestedItem]


# --- Persistence chapter ---
def _clean_name(v: Optional[str]) -> str:
    if v is None or not v.strip():
        raise ValueError("name must be a non-empty string")
    return v.strip()


class ItemBase(BaseModel):
    name: str = Field(..., max_length=100)
    description: Optional[str] = None
    price: float = Field(..., gt=0)
    tax: Optional[float] = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str):
        return _clean_name(v)


class ItemCreate(ItemBase):
    pass


class ItemUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    tax: Optional[float] = Field(None, ge=0)

    # fields may be omitted, but name and price are NOT NULL columns
    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: Optional[str]):
        return _clean_name(v)

    @field_validator("price")
    @classmethod
    def price_must_not_be_null(cls, v: Optional[float]):
        if v is None:
            raise ValueError("price may not be null")
        return v


class ItemOut(ItemBase):
    id: int
    owner_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Security chapter ---
class Token(BaseModel):
    access_token: str
    token_type: str


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    full_name: Optional[str] = None
    password: str = Field(..., min_length=8)


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    full_name: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

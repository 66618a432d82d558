# records_api/models.py
import math
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

T = TypeVar("T")

# --- CUSTOMER ---
class Customer(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

class CustomerSQL(SQLModel, table=True):
    __tablename__ = "customers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

# --- SUPPLIER ---
class Supplier(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

class SupplierSQL(SQLModel, table=True):
    __tablename__ = "suppliers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

# --- PAGE ---
class Page(BaseModel, Generic[T]):
    """One slice of a result set plus the totals needed to walk the rest.

    Serialises with camelCase keys (``totalElements``, ``numberOfElements``...)
    so clients written against the paged supplier listing keep working.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: List[T]
    total_elements: int
    total_pages: int
    size: int
    number: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def of(cls, content: List[T], page: int, size: int, total: int) -> "Page[T]":
        total_pages = math.ceil(total / size)
        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            size=size,
            number=page,
            number_of_elements=len(content),
            first=page == 0,
            last=page + 1 >= total_pages,
            empty=not content,
        )

# records_api/repository.py
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, func, select

from records_api.models import Customer, CustomerSQL, Page, Supplier, SupplierSQL

# ==============================================================================
# --- REPOSITORY INTERFACES ---
# ==============================================================================

class BaseCustomerRepository(ABC):
    @abstractmethod
    def find_all(self) -> List[Customer]:
        pass

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Insert when ``customer.id`` is None, otherwise overwrite the stored row."""

    @abstractmethod
    def delete(self, customer: Customer) -> None:
        pass

class BaseSupplierRepository(ABC):
    @abstractmethod
    def find_all(self) -> List[Supplier]:
        pass

    @abstractmethod
    def find_page(self, page: int, size: int) -> Page[Supplier]:
        pass

    @abstractmethod
    def find_by_id(self, supplier_id: int) -> Optional[Supplier]:
        pass

    @abstractmethod
    def save(self, supplier: Supplier) -> Supplier:
        """Insert when ``supplier.id`` is None, otherwise overwrite the stored row."""

    @abstractmethod
    def delete(self, supplier: Supplier) -> None:
        pass

# ==============================================================================
# --- IN-MEMORY REPOSITORIES ---
# ==============================================================================

class InMemoryRepository:
    """Dict-backed storage keyed by id.

    Records are copied on the way in and out, so callers holding a returned
    record cannot change stored state without calling ``save`` again.
    """

    def __init__(self):
        self.records: Dict[int, BaseModel] = {}
        self.next_id = 1

    def find_all(self):
        return [record.model_copy() for record in self.records.values()]

    def find_page(self, page: int, size: int):
        ordered = [self.records[key] for key in sorted(self.records)]
        content = [record.model_copy() for record in ordered[page * size:(page + 1) * size]]
        return Page.of(content, page, size, len(ordered))

    def find_by_id(self, record_id: int):
        record = self.records.get(record_id)
        return record.model_copy() if record is not None else None

    def save(self, record):
        stored = record.model_copy()
        if stored.id is None:
            stored.id = self.next_id
        self.next_id = max(self.next_id, stored.id + 1)
        self.records[stored.id] = stored
        return stored.model_copy()

    def delete(self, record) -> None:
        self.records.pop(record.id, None)

class InMemoryCustomerRepository(InMemoryRepository, BaseCustomerRepository):
    pass

class InMemorySupplierRepository(InMemoryRepository, BaseSupplierRepository):
    pass

# ==============================================================================
# --- SQLMODEL REPOSITORIES ---
# ==============================================================================

class SQLModelRepository:
    """Maps API records onto a SQLModel table, one session per call."""

    table_model: Type[SQLModel]
    schema: Type[BaseModel]

    def __init__(self, engine: Engine):
        self.engine = engine

    def _to_schema(self, row):
        return self.schema(**row.model_dump())

    def find_all(self):
        with Session(self.engine) as session:
            results = session.exec(select(self.table_model).order_by(self.table_model.id)).all()
            return [self._to_schema(row) for row in results]

    def find_page(self, page: int, size: int):
        with Session(self.engine) as session:
            total = session.exec(select(func.count(self.table_model.id))).one()
            statement = (
                select(self.table_model)
                .order_by(self.table_model.id)
                .offset(page * size)
                .limit(size)
            )
            content = [self._to_schema(row) for row in session.exec(statement).all()]
        return Page[self.schema].of(content, page, size, total)

    def find_by_id(self, record_id: int):
        with Session(self.engine) as session:
            row = session.get(self.table_model, record_id)
            if row:
                return self._to_schema(row)
        return None

    def save(self, record):
        with Session(self.engine) as session:
            row = session.merge(self.table_model(**record.model_dump()))
            session.commit()
            session.refresh(row)
            return self._to_schema(row)

    def delete(self, record) -> None:
        with Session(self.engine) as session:
            row = session.get(self.table_model, record.id)
            if row:
                session.delete(row)
                session.commit()

class SQLModelCustomerRepository(SQLModelRepository, BaseCustomerRepository):
    table_model = CustomerSQL
    schema = Customer

class SQLModelSupplierRepository(SQLModelRepository, BaseSupplierRepository):
    table_model = SupplierSQL
    schema = Supplier

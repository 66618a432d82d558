# records_api/database.py
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel

# Table models must be imported before create_all so they register on the metadata.
from records_api.models import CustomerSQL, SupplierSQL  # noqa: F401


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, echo=echo)

    # Requests are served from a threadpool, so SQLite connections must cross threads.
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # A private in-memory database per connection would lose every table.
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=echo, **kwargs)


def create_db_and_tables(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)

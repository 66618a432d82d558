# records_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from records_api import routes
from records_api.config import Settings, get_settings
from records_api.database import create_db_and_tables, create_db_engine
from records_api.logging_config import configure_logging
from records_api.middleware import PathScopedCORSMiddleware
from records_api.repository import SQLModelCustomerRepository, SQLModelSupplierRepository
from records_api.services import CustomerService, SupplierService

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Wire engine, repositories, services and routers into one FastAPI app.

    Pass ``engine`` to reuse an existing database (tests hand in an
    in-memory SQLite engine); otherwise one is built from ``settings``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    engine = engine or create_db_engine(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_db_and_tables(engine)
        log.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        yield
        engine.dispose()

    app = FastAPI(title="Customer and Supplier Records API", lifespan=lifespan)

    app.state.settings = settings
    app.state.customer_service = CustomerService(SQLModelCustomerRepository(engine))
    app.state.supplier_service = SupplierService(SQLModelSupplierRepository(engine))

    app.add_middleware(
        PathScopedCORSMiddleware,
        policies={
            routes.CUSTOMERS_PREFIX: {
                "allow_origins": [settings.customers_allowed_origin],
                "allow_methods": ["GET", "POST", "PUT", "DELETE"],
                "allow_headers": ["*"],
            },
            routes.SUPPLIERS_PREFIX: {
                "allow_origins": ["*"],
                "allow_methods": ["*"],
                "allow_headers": ["*"],
            },
        },
    )

    app.include_router(routes.customer_router)
    app.include_router(routes.supplier_router)

    @app.get("/")
    def read_root():
        return {"message": "Hello, welcome to the customer and supplier records API!"}

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)

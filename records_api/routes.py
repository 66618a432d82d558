# records_api/routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import PlainTextResponse

from records_api.exceptions import RecordNotFoundError
from records_api.models import Customer, Page, Supplier
from records_api.services import CustomerService, SupplierService

log = logging.getLogger(__name__)

CUSTOMERS_PREFIX = "/api/customers"
SUPPLIERS_PREFIX = "/api/suppliers"

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 2000

customer_router = APIRouter(prefix=CUSTOMERS_PREFIX, tags=["Customers"])
supplier_router = APIRouter(prefix=SUPPLIERS_PREFIX, tags=["Suppliers"])

# Services are built once in create_app() and parked on app.state
def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service

def get_supplier_service(request: Request) -> SupplierService:
    return request.app.state.supplier_service

# ==============================================================================
# --- CUSTOMER ENDPOINTS ---
# ==============================================================================

@customer_router.get("", response_model=List[Customer])
def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    try:
        log.info("Fetching all customers")
        return service.get_all_customers()
    except Exception as e:
        log.exception("Error fetching customers")
        return PlainTextResponse(f"Error fetching customers: {e}", status_code=500)

@customer_router.get("/{customer_id}", response_model=Customer)
def get_customer_by_id(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    try:
        log.info("Fetching customer with id: %s", customer_id)
        customer = service.get_customer_by_id(customer_id)
        if customer is None:
            return Response(status_code=404)
        return customer
    except Exception as e:
        log.exception("Error fetching customer with id %s", customer_id)
        return PlainTextResponse(f"Error fetching customer: {e}", status_code=500)

@customer_router.post("", response_model=Customer)
def create_customer(customer: Customer, service: CustomerService = Depends(get_customer_service)):
    try:
        log.info("Creating new customer: %s", customer.name)
        return service.create_customer(customer)
    except Exception as e:
        log.exception("Error creating customer")
        return PlainTextResponse(f"Error creating customer: {e}", status_code=500)

@customer_router.put("/{customer_id}", response_model=Customer)
def update_customer(customer_id: int, customer: Customer, service: CustomerService = Depends(get_customer_service)):
    try:
        log.info("Updating customer with id: %s", customer_id)
        return service.update_customer(customer_id, customer)
    except RecordNotFoundError as e:
        log.error("Error updating customer with id %s: %s", customer_id, e)
        return Response(status_code=404)
    except Exception as e:
        log.exception("Error updating customer with id %s", customer_id)
        return PlainTextResponse(f"Error updating customer: {e}", status_code=500)

@customer_router.delete("/{customer_id}")
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    try:
        log.info("Deleting customer with id: %s", customer_id)
        service.delete_customer(customer_id)
        return Response(status_code=200)
    except RecordNotFoundError as e:
        log.error("Error deleting customer with id %s: %s", customer_id, e)
        return Response(status_code=404)
    except Exception as e:
        log.exception("Error deleting customer with id %s", customer_id)
        return PlainTextResponse(f"Error deleting customer: {e}", status_code=500)

# ==============================================================================
# --- SUPPLIER ENDPOINTS ---
# ==============================================================================

@supplier_router.get("", response_model=List[Supplier])
def get_all_suppliers(service: SupplierService = Depends(get_supplier_service)):
    return service.get_all_suppliers()

def _parse_paging_value(value: Optional[str], default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default

@supplier_router.get("/paged", response_model=Page[Supplier])
def get_suppliers_paged(
    page: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    service: SupplierService = Depends(get_supplier_service),
):
    # Paging input never fails: blanks and junk fall back to the defaults, the rest is clamped.
    page_number = max(_parse_paging_value(page, 0), 0)
    page_size = _parse_paging_value(size, DEFAULT_PAGE_SIZE)
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    page_size = min(page_size, MAX_PAGE_SIZE)
    return service.get_suppliers_page(page_number, page_size)

async def read_raw_body(request: Request) -> bytes:
    return await request.body()

@supplier_router.post(
    "",
    response_class=PlainTextResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Supplier"}}},
        }
    },
)
def create_supplier(body: bytes = Depends(read_raw_body), service: SupplierService = Depends(get_supplier_service)):
    # The body is parsed here rather than by FastAPI so a malformed payload is a 400, not a 422.
    try:
        supplier = Supplier.model_validate_json(body)
        created = service.create_supplier(supplier)
        return f"Supplier created successfully with ID: {created.id}"
    except Exception as e:
        log.warning("Error creating supplier: %s", e)
        return PlainTextResponse(f"Error creating supplier: {e}", status_code=400)

@supplier_router.get("/{supplier_id}", response_model=Supplier)
def get_supplier(supplier_id: int, service: SupplierService = Depends(get_supplier_service)):
    supplier = service.get_supplier(supplier_id)
    if supplier is None:
        return Response(status_code=404)
    return supplier

@supplier_router.put("/{supplier_id}", response_model=Supplier)
def update_supplier(supplier_id: int, supplier: Supplier, service: SupplierService = Depends(get_supplier_service)):
    try:
        return service.update_supplier(supplier_id, supplier)
    except RecordNotFoundError:
        return Response(status_code=404)

@supplier_router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, service: SupplierService = Depends(get_supplier_service)):
    try:
        service.delete_supplier(supplier_id)
    except RecordNotFoundError:
        return Response(status_code=404)
    return Response(status_code=200)

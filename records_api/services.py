# records_api/services.py
from typing import List, Optional

from records_api.exceptions import CustomerNotFoundError, SupplierNotFoundError
from records_api.models import Customer, Page, Supplier
from records_api.repository import BaseCustomerRepository, BaseSupplierRepository


class CustomerService:
    def __init__(self, repository: BaseCustomerRepository):
        self.repository = repository

    def get_all_customers(self) -> List[Customer]:
        return self.repository.find_all()

    def get_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.repository.find_by_id(customer_id)

    def create_customer(self, customer: Customer) -> Customer:
        # The repository assigns identity; a client-supplied id is ignored.
        return self.repository.save(customer.model_copy(update={"id": None}))

    def update_customer(self, customer_id: int, customer_details: Customer) -> Customer:
        """Overwrite every mutable field of an existing customer.

        Raises ``CustomerNotFoundError`` before touching storage if the id is unknown.
        """
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        customer.name = customer_details.name
        customer.email = customer_details.email
        customer.phone = customer_details.phone
        customer.address = customer_details.address

        return self.repository.save(customer)

    def delete_customer(self, customer_id: int) -> None:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        self.repository.delete(customer)


class SupplierService:
    def __init__(self, repository: BaseSupplierRepository):
        self.repository = repository

    def get_all_suppliers(self) -> List[Supplier]:
        return self.repository.find_all()

    def get_suppliers_page(self, page: int, size: int) -> Page[Supplier]:
        return self.repository.find_page(page, size)

    def get_supplier(self, supplier_id: int) -> Optional[Supplier]:
        return self.repository.find_by_id(supplier_id)

    def create_supplier(self, supplier: Supplier) -> Supplier:
        return self.repository.save(supplier.model_copy(update={"id": None}))

    def update_supplier(self, supplier_id: int, supplier_details: Supplier) -> Supplier:
        supplier = self.repository.find_by_id(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(supplier_id)

        supplier.name = supplier_details.name
        supplier.contact_person = supplier_details.contact_person
        supplier.email = supplier_details.email
        supplier.phone = supplier_details.phone
        supplier.address = supplier_details.address

        return self.repository.save(supplier)

    def delete_supplier(self, supplier_id: int) -> None:
        supplier = self.repository.find_by_id(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(supplier_id)
        self.repository.delete(supplier)

# records_api/exceptions.py
"""Errors raised by the service layer.

Routers translate ``RecordNotFoundError`` into a 404 with an empty body.
Anything else that escapes a service is treated as an internal failure.
"""


class RecordNotFoundError(Exception):
    """No record exists with the requested id."""

    entity = "Record"

    def __init__(self, record_id: int):
        self.record_id = record_id
        super().__init__(f"{self.entity} not found with id: {record_id}")


class CustomerNotFoundError(RecordNotFoundError):
    entity = "Customer"


class SupplierNotFoundError(RecordNotFoundError):
    entity = "Supplier"

"""Customer and supplier records REST API."""

"""REST API for document validation."""

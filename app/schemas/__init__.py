"""
Schemas module - Request/Response schemas for API endpoints.

Request schemas carry the field bounds the API enforces before any
service is called; response schemas fix the camelCase JSON contract.
"""

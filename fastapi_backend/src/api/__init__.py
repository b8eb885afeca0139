"""
API package for the FastAPI backend.

Modules:
- config: environment settings and fixed lookup tables
- db: PostgreSQL connection pooling + query helpers
- auth_utils: password hashing and verification
- errors: error taxonomy + exception handlers
- schemas: Pydantic models for the REST API
- services: forecast, lottery, comparison and person validation logic
"""

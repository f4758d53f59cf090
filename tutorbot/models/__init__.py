"""
API request/response schemas.

Pydantic models for the HTTP contracts, grouped by domain.
"""

"""
UCSB Resources API — Pydantic Request/Response Schemas
=======================================================

API contracts, separate from the SQLAlchemy models. JSON keys are camelCase
and follow each entity's declared field order.
"""

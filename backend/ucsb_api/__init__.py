"""
UCSB Resources API — Application Package Initializer
=====================================================

What: Marks the `ucsb_api` directory as a Python package.
Who:  Used by Alembic, pytest, and uvicorn (`uvicorn ucsb_api.main:app`).

Architecture Note:
    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← role guard, binding, JSON
    ├─────────────────────────────────────┤
    │        Repositories                 │  ← find_all / find_by_id / save
    ├─────────────────────────────────────┤
    │    Models & Schemas (Data)          │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │    Database (Persistence)           │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Each resource (menu item reviews, recommendation requests, student
    organizations) is an independent vertical slice through these layers.
"""

__version__ = "1.0.0"

"""
Blog API: Application Package Initializer
===========================================

What: Marks the `blog_api` directory as a Python package.
Who:  Used by uvicorn (`blog_api.main:app`), pytest, and the route/service modules.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, result → response
    ├─────────────────────────────────────┤
    │   Guards & Validation (Preconditions)│  ← id format, request body shape
    ├─────────────────────────────────────┤
    │         Services (Post Handlers)    │  ← one store call, returns Result
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Mongo documents + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← pymongo async client
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

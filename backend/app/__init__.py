"""
Noteful Backend — Application Package Initializer
===================================================

Folders and the notes filed under them, served as a JSON REST API behind a
single shared bearer token.

Architecture Note:

    ┌─────────────────────────────────────┐
    │  Middleware (CORS, request ID,      │  ← every request, token check last
    │  access log, bearer token)          │
    ├─────────────────────────────────────┤
    │  Routes + dependencies              │  ← item resolution, status codes
    ├─────────────────────────────────────┤
    │  Services (stores, validation,      │  ← CRUD contract, field checks,
    │  sanitizer)                         │    output escaping
    ├─────────────────────────────────────┤
    │  Models & Schemas                   │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │  Database                           │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

"""
Book Records API Package

A small REST service managing book records addressed by ISBN.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and session management
- main.py: FastAPI application factory
- dependencies.py: Dependency injection (session, book store, update payload)
- errors.py: Error taxonomy and HTTP exception handlers
- store.py: Book store protocol and SQL implementation
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Rate limiting
"""

__version__ = "0.1.0"

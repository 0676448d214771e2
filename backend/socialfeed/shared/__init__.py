"""
Shared Module

Contains the domain code used by the API:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: Image storage

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← Image storage
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Security, username generation

Usage:
======
    from socialfeed.shared.models import User, Post
    from socialfeed.shared.repositories import PostRepository
    from socialfeed.shared.services import FeedService
    from socialfeed.shared.schemas import SignupRequest, AuthResponse
    from socialfeed.shared.core import logger, SocialFeedException
"""

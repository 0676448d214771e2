"""
SocialFeed Backend

Social feed API: users, follows, posts, likes and comments.

Package Structure:
==================
    socialfeed/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server (from backend/)
    uvicorn socialfeed.api.main:app --reload

    # Database migrations (from the repository root)
    alembic upgrade head
"""

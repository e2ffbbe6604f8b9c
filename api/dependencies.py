"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Query
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


class Pagination:
    """page/limit query parameters (1-based page)"""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(
            settings.default_page_size, ge=1, description="Maximum number of items"
        ),
    ):
        self.page = page
        self.limit = limit

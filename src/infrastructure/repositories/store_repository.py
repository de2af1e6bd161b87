"""Store repository for website resolution"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from domain.exceptions import NoSuchEntityError
from domain.quote.ports import WebsiteResolverPort
from models.store import Store, Website


class StoreRepository(WebsiteResolverPort):
    """Repository for store and website lookups."""

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def get_website_code_by_store_id(self, store_id: int) -> str:
        """Get website code of the website a store belongs to.

        Args:
            store_id: Store identifier

        Returns:
            Website code

        Raises:
            NoSuchEntityError: If the store does not exist
        """
        query = (
            select(Website.code)
            .join(Store, Store.website_id == Website.website_id)
            .where(Store.store_id == store_id)
        )
        website_code: Optional[str] = self.db.execute(query).scalar_one_or_none()

        if website_code is None:
            raise NoSuchEntityError("Store", store_id)

        return website_code

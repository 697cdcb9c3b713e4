from typing import Optional

from sqlalchemy import select

from brokerage.models.property_listing import PropertyListing
from brokerage.repositories.base import BaseRepository


class ListingRepository(BaseRepository):
    """Encapsulates queries against ``property_listings``."""

    async def get_status(self, property_id: int) -> Optional[str]:
        """Return the listing status for *property_id*, or ``None`` if unlisted.

        Selects the column rather than loading a ``PropertyListing``: the
        status hook writes with a Core ``UPDATE`` that bypasses the identity
        map, so an entity already loaded in this session keeps its old
        ``status`` (``expire_on_commit=False``) until refreshed.  The column
        query always reads the current row, including the hook's
        uncommitted update.
        """
        result = await self._db.execute(
            select(PropertyListing.status).where(
                PropertyListing.property_id == property_id
            )
        )
        return result.scalar_one_or_none()

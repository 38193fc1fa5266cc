import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.product import Product
from app.schemas.product import ProductSeed

logger = logging.getLogger(__name__)

_seed_adapter = TypeAdapter(List[ProductSeed])


class SeedError(Exception):
    """Raised when the seed dataset cannot be fetched or understood."""
    pass


class DatabaseSeeder:
    """
    DatabaseSeeder replaces the whole product table with a remote JSON dataset.

    The dataset is fetched and validated first; the delete and the inserts then
    run in one transaction, so a failed fetch leaves the table untouched.
    """
    def __init__(
        self,
        db: Session,
        source_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.db = db
        self.source_url = source_url or settings.SEED_DATA_URL
        self.timeout = timeout or settings.SEED_TIMEOUT_SECONDS
        self.transport = transport

    async def fetch(self) -> List[ProductSeed]:
        """
        Download and validate the seed dataset.

        Returns:
            List[ProductSeed]: The records in the order they were served

        Raises:
            SeedError: If the download fails or the payload is not a list of products
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.source_url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise SeedError(f"Failed to fetch seed data from {self.source_url}: {str(e)}") from e
        except ValueError as e:
            raise SeedError(f"Seed data from {self.source_url} is not valid JSON") from e

        try:
            records = _seed_adapter.validate_python(payload)
        except ValidationError as e:
            raise SeedError(f"Seed data has an unexpected shape: {e.error_count()} errors") from e

        logger.info(f"Fetched {len(records)} seed records from {self.source_url}")
        return records

    def replace_all(self, records: List[ProductSeed]) -> int:
        """Delete every product and insert ``records`` in order."""
        try:
            deleted = self.db.query(Product).delete()
            self.db.add_all([Product(**record.model_dump()) for record in records])
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Replaced {deleted} products with {len(records)} seed records")
        return len(records)

    async def initialize(self) -> int:
        """Fetch the dataset and overwrite the product table with it."""
        records = await self.fetch()
        return self.replace_all(records)

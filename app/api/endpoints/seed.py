import logging
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_seeder
from app.core.errors import AnalyticsError
from app.services.seeding.loader import DatabaseSeeder

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/initialize", response_class=PlainTextResponse)
async def initialize_database(
    seeder: DatabaseSeeder = Depends(get_seeder)
):
    """Replace every product with the remote seed dataset."""
    try:
        await seeder.initialize()
    except Exception as e:
        logger.exception(f"Error initializing database: {str(e)}")
        raise AnalyticsError("Error initializing database", e)

    return "Database initialized with seed data"

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.services.analytics.engine import TransactionAnalytics
from app.services.seeding.loader import DatabaseSeeder


def get_analytics(db: Session = Depends(get_db)) -> TransactionAnalytics:
    """Analytics bound to the request's database session."""
    return TransactionAnalytics(db)


def get_seeder(db: Session = Depends(get_db)) -> DatabaseSeeder:
    """Seeder bound to the request's database session."""
    return DatabaseSeeder(db)

from fastapi import APIRouter

from app.api.endpoints import seed, transactions, charts, combined

api_router = APIRouter()

# Include all API endpoint routers
api_router.include_router(seed.router, tags=["Seed"])
api_router.include_router(transactions.router, tags=["Transactions"])
api_router.include_router(charts.router, tags=["Charts"])
api_router.include_router(combined.router, tags=["Combined"])

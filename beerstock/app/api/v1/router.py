from fastapi import APIRouter

from beerstock.app.api.v1.endpoints.health import router as health_router
from beerstock.app.api.v1.endpoints.beers import router as beers_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(beers_router, tags=["beers"])

from fastapi import APIRouter

from app.api.v1.endpoints.connectivity import router as connectivity_router
from app.api.v1.endpoints.weather import router as weather_router


api_v1_router = APIRouter()
api_v1_router.include_router(weather_router, prefix="/weather", tags=["weather"])
api_v1_router.include_router(connectivity_router, prefix="/connectivity", tags=["connectivity"])

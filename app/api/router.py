from fastapi import APIRouter

from app.api.routes import cities, health, history, weather

api_router = APIRouter(prefix="/api")
api_router.include_router(weather.router, tags=["weather"])
api_router.include_router(history.router, tags=["history"])
api_router.include_router(cities.router, tags=["cities"])

meta_router = APIRouter()
meta_router.include_router(health.router, tags=["meta"])

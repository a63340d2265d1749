from fastapi import APIRouter

from app.api.routers import claims, clients, policies

api_router = APIRouter()

api_router.include_router(clients.router)
api_router.include_router(policies.router)
api_router.include_router(claims.router)

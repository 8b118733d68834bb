"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from app.api.v1.routes import chat, courses, plan

api_router = APIRouter()

api_router.include_router(courses.router, prefix="/courses", tags=["Courses"])
api_router.include_router(plan.router, prefix="/plan", tags=["Race plan"])
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])

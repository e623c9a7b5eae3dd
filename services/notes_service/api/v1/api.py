from fastapi import APIRouter

from services.notes_service.api.v1.endpoints import folders, notes, tags

api_router = APIRouter()

api_router.include_router(notes.router, prefix="/notes", tags=["Notes"])
api_router.include_router(folders.router, prefix="/folders", tags=["Folders"])
api_router.include_router(tags.router, prefix="/tags", tags=["Tags"])

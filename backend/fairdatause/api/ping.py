from __future__ import annotations

from fastapi import APIRouter, Request


router = APIRouter()


@router.get("/ping")
def ping(request: Request) -> dict[str, str]:
    return {"message": request.app.state.settings.ping_message}

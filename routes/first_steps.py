from fastapi import APIRouter

import settings

router = APIRouter(tags=["First steps"])


@router.get("/")
def root():
    return {"message": "Hello World"}


@router.get("/health", summary="Health check")
async def health_check():
    return {"status": "ok", "version": settings.APP_VERSION}

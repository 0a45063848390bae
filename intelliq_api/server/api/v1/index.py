"""
Root of the versioned API.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/", summary="Hello", description="Smoke-test endpoint of the v1 API.")
async def hello():
    return {"message": "Hello, world!"}

# api/routes/shelves.py

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from shelves.errors import InvalidShelfType, StoreUnavailable
from shelves.sa.database import get_database
from shelves.smart import SmartShelfService
from api.schemas.shelf import ShelfListSchema, ShelfPageSchema

router = APIRouter(prefix="/user/{user_id}/smart-shelves", tags=["smart-shelves"])

def get_shelf_service() -> SmartShelfService:
    """FastAPI dependency returning a service bound to the app database."""
    return SmartShelfService.from_database(get_database())

@router.get("", response_model=ShelfListSchema)
def list_smart_shelves(
    user_id: int,
    service: SmartShelfService = Depends(get_shelf_service)
):
    """
    Get every smart shelf for a user with its item count.
    The recent shelf carries a sample book instead of a count.
    """
    try:
        shelves = service.list_shelves(user_id)
    except StoreUnavailable as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return ShelfListSchema.model_validate(shelves)

@router.get("/{shelf_type}", response_model=ShelfPageSchema)
def get_smart_shelf(
    user_id: int,
    shelf_type: str,
    page: Optional[int] = Query(default=None, description="Page number (values below 1 are treated as 1)"),
    limit: Optional[int] = Query(default=None, description="Items per page (default 20, max 100)"),
    service: SmartShelfService = Depends(get_shelf_service)
):
    """
    Get a paginated page of one smart shelf:
    finished, reading, to-read, favorites, top-rated or recent.
    """
    try:
        shelf_page = service.get_shelf(user_id, shelf_type, page=page, limit=limit)
    except InvalidShelfType as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreUnavailable as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return ShelfPageSchema.model_validate(shelf_page)

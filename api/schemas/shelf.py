# api/schemas/shelf.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict

from shelves.smart import ItemSource, ShelfType
from .book import BookSchema

class ShelfItemSchema(BaseModel):
    """A book on a smart shelf plus the fields of the record it came from."""
    source: ItemSource
    added_at: datetime
    book: BookSchema

    reading_id: Optional[int] = None
    status: Optional[str] = None
    progress: Optional[int] = None
    updated_at: Optional[datetime] = None

    favorite_id: Optional[int] = None
    note: Optional[str] = None

    review_id: Optional[int] = None
    rating: Optional[float] = None
    text: Optional[str] = None
    created_at: Optional[datetime] = None
    
    model_config = ConfigDict(from_attributes=True)

class ShelfPageSchema(BaseModel):
    page: int
    limit: int
    total: int
    items: List[ShelfItemSchema]
    
    model_config = ConfigDict(from_attributes=True)

class ShelfSummarySchema(BaseModel):
    key: ShelfType
    title: str
    count: Optional[int] = None
    sample_book: Optional[BookSchema] = None
    
    model_config = ConfigDict(from_attributes=True)

class ShelfListSchema(BaseModel):
    shelves: List[ShelfSummarySchema]
    
    model_config = ConfigDict(from_attributes=True)

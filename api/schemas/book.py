# api/schemas/book.py
from typing import Optional, List
from pydantic import BaseModel, ConfigDict

class BookSchema(BaseModel):
    id: int
    external_id: str
    title: str
    authors: List[str] = []
    cover: Optional[str] = None
    
    model_config = ConfigDict(from_attributes=True)

"""
Word list status schema
"""

from pydantic import BaseModel
from typing import Optional


class WordListStatus(BaseModel):
    """Load outcome of one configured word list"""
    name: str
    size: int
    source: Optional[str] = None
    error: Optional[str] = None

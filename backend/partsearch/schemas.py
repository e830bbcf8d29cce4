from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


TITLE_MAX_LENGTH = 150
DESCRIPTION_MAX_LENGTH = 250


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    part_name: Optional[str] = Field(default=None, alias="partName")
    part_number: Optional[str] = Field(default=None, alias="partNumber")
    websites: Optional[List[str]] = None


class SearchResult(BaseModel):
    """One normalized hit from a vendor search page."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(max_length=TITLE_MAX_LENGTH)
    url: str
    description: str = Field(max_length=DESCRIPTION_MAX_LENGTH)
    source: str


class SearchResponse(BaseModel):
    results: List[SearchResult] = []
    count: int = 0

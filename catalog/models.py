"""
Pydantic models for the upstream book catalog and the projected books
returned to our callers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, validator


class UpstreamBookRecord(BaseModel):
    """
    A single record from the upstream ``docs`` list.

    Only ``name`` is read. Every other field (``_id``, ``author``, ``year``...)
    is ignored during decoding.
    """
    name: Optional[str] = Field(None, description="Title of the book")

    class Config:
        """Pydantic configuration."""
        extra = "ignore"

    @validator('name', pre=True)
    def coerce_name(cls, v):
        """Numeric titles become strings. Any other non-string counts as missing."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return None


class UpstreamEnvelope(BaseModel):
    """
    Top-level JSON object returned by the upstream API.
    """
    docs: List[UpstreamBookRecord] = Field(default_factory=list, description="Book records in upstream order")

    class Config:
        """Pydantic configuration."""
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "docs": [
                    {"_id": "5cf5805fb53e011a64671582", "name": "The Fellowship Of The Ring"},
                    {"_id": "5cf58077b53e011a64671583", "name": "The Two Towers"},
                ],
                "total": 2,
                "limit": 100,
                "offset": 0,
                "page": 1,
                "pages": 1
            }
        }

    @validator('docs', pre=True)
    def normalize_docs(cls, v):
        """
        Treat an explicit ``null`` the same as an absent ``docs`` field, and an
        entry that is not an object as a record without a name.
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [item if isinstance(item, (dict, UpstreamBookRecord)) else {} for item in v]
        return v

    @classmethod
    def from_payload(cls, payload) -> "UpstreamEnvelope":
        """
        Decode a parsed JSON body into an envelope.

        Raises:
            pydantic.ValidationError: if the payload is not an object or
                ``docs`` is not a list
        """
        return cls.parse_obj(payload)


class ProjectedBook(BaseModel):
    """Book as exposed by ``GET /api/books``: the title and nothing else."""
    name: str = Field(..., description="Book title")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {"name": "The Return Of The King"}
        }

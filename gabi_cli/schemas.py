"""
Wire schemas for the Gabi query endpoint.

Request:  {"query": "select 1;"}
Response: {"result": [["?column?"], ["1"]], "error": ""}
"""

from pydantic import BaseModel, Field, field_validator


class QueryRequest(BaseModel):
    """Body of POST <base>/query."""

    query: str


class QueryResponse(BaseModel):
    """Decoded response. Either ``error`` is set or ``result`` holds the rows."""

    result: list[list[str]] = Field(default_factory=list)
    error: str = ""

    @field_validator("result", mode="before")
    @classmethod
    def _null_cells_as_empty(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            return [
                [("" if cell is None else cell) for cell in row] if isinstance(row, list) else row
                for row in value
            ]
        return value

    @field_validator("error", mode="before")
    @classmethod
    def _null_error_as_empty(cls, value):
        return "" if value is None else value

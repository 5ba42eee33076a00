"""Value objects handed to the presentation layer.

Immutable (frozen) pydantic models describing a ranked search outcome.
They are built from raw features by the service layer; the search engine
itself only ever returns the features.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProjectSummary(BaseModel):
    """Display-ready view of one matching project."""

    model_config = ConfigDict(frozen=True)

    name: str
    city: str = ""
    infrastructure_type: str = ""
    category: str = ""
    disaster_focus: str = ""
    status: str | None = None
    score: int = Field(ge=0)


class ProjectSearchResponse(BaseModel):
    """Ranked results for one query plus how many projects matched in total."""

    model_config = ConfigDict(frozen=True)

    query: str
    results: list[ProjectSummary] = Field(default_factory=list)
    total_matches: int = 0
    truncated: bool = False

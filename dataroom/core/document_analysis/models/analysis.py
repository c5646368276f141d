"""
Analysis result models.

ChunkAnalysis is the strict structured-output contract returned by the
completion service for one chunk. MergedAnalysis is the bounded canonical
record folded from all chunk results.

Wire format uses camelCase keys (keyInsights, toneAndStyle, ...); Python
attributes are snake_case. Serialize with model_dump(by_alias=True).

Dependencies: pydantic
System role: Schema-validated LLM output and persisted analysis shape
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_KEYWORDS = 7
MAX_CATEGORIES = 3
MAX_TAGS = 7
MAX_KEY_INSIGHTS = 5
MAX_POTENTIAL_APPLICATIONS = 3


class Keyword(BaseModel):
    """Keyword or phrase with a short explanation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    word: str
    explanation: str


class ChunkAnalysis(BaseModel):
    """Structured analysis of one chunk; every field required, no extras."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    summary: str
    keywords: list[Keyword]
    categories: list[str]
    tags: list[str]
    key_insights: list[str]
    tone_and_style: str
    target_audience: str
    potential_applications: list[str]


class MergedAnalysis(BaseModel):
    """Canonical analysis record with bounded, deduplicated collections."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    summary: str = ""
    keywords: list[Keyword] = Field(default_factory=list, max_length=MAX_KEYWORDS)
    categories: list[str] = Field(default_factory=list, max_length=MAX_CATEGORIES)
    tags: list[str] = Field(default_factory=list, max_length=MAX_TAGS)
    key_insights: list[str] = Field(default_factory=list, max_length=MAX_KEY_INSIGHTS)
    tone_and_style: str = ""
    target_audience: str = ""
    potential_applications: list[str] = Field(
        default_factory=list,
        max_length=MAX_POTENTIAL_APPLICATIONS,
    )

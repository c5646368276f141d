"""
Result merging task.

Folds ordered per-chunk analyses into one bounded canonical record.

Merge rules, applied in chunk order:
- summary: last analyzed chunk wins
- keywords, key_insights: concatenated, duplicates kept
- categories, tags, potential_applications: union, first occurrence keeps its position
- tone_and_style, target_audience: joined with a space
Collections are then cut to their maxima (first N in accumulated order).

Dependencies: pydantic (analysis models)
System role: Fourth stage of the analysis pipeline (pure function)
"""

from collections.abc import Iterable, Sequence

from ..models import ChunkAnalysis, Keyword, MergedAnalysis
from ..models.analysis import (
    MAX_CATEGORIES,
    MAX_KEY_INSIGHTS,
    MAX_KEYWORDS,
    MAX_POTENTIAL_APPLICATIONS,
    MAX_TAGS,
)


def _extend_unique(target: list[str], seen: set[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in seen:
            seen.add(value)
            target.append(value)


class MergingTask:
    """Merge chunk-level analyses into a MergedAnalysis."""

    def merge(self, results: Sequence[ChunkAnalysis]) -> MergedAnalysis:
        """
        Fold analyses into one record.

        Args:
            results: Successful chunk analyses in chunk order

        Returns:
            MergedAnalysis: Bounded record (all fields empty for no results)
        """
        summary = ""
        keywords: list[Keyword] = []
        key_insights: list[str] = []
        categories: list[str] = []
        tags: list[str] = []
        applications: list[str] = []
        seen_categories: set[str] = set()
        seen_tags: set[str] = set()
        seen_applications: set[str] = set()
        tones: list[str] = []
        audiences: list[str] = []

        for result in results:
            summary = result.summary
            keywords.extend(result.keywords)
            key_insights.extend(result.key_insights)
            _extend_unique(categories, seen_categories, result.categories)
            _extend_unique(tags, seen_tags, result.tags)
            _extend_unique(applications, seen_applications, result.potential_applications)
            tones.append(result.tone_and_style)
            audiences.append(result.target_audience)

        return MergedAnalysis(
            summary=summary.strip(),
            keywords=keywords[:MAX_KEYWORDS],
            categories=categories[:MAX_CATEGORIES],
            tags=tags[:MAX_TAGS],
            key_insights=key_insights[:MAX_KEY_INSIGHTS],
            tone_and_style=" ".join(tones).strip(),
            target_audience=" ".join(audiences).strip(),
            potential_applications=applications[:MAX_POTENTIAL_APPLICATIONS],
        )

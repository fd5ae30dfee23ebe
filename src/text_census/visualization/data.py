"""
Data shaping utilities for visualization.
"""

from typing import Optional, Sequence

import pandas as pd

from text_census.metrics import CategoryCounts, category_percentages
from text_census.visualization.constants import (
    CATEGORY_LABELS,
    CATEGORY_LABELS_ZH,
    PAGE_CHART_CATEGORIES,
)

COUNT_COLUMNS = ["field", "category", "category_zh", "count", "percent"]


def counts_to_dataframe(counts: Optional[CategoryCounts]) -> pd.DataFrame:
    """Convert a census record into one row per category."""
    if counts is None:
        return pd.DataFrame(columns=COUNT_COLUMNS)

    percentages = category_percentages(counts)
    rows = []
    for field_name, label in CATEGORY_LABELS.items():
        rows.append(
            {
                "field": field_name,
                "category": label,
                "category_zh": CATEGORY_LABELS_ZH[field_name],
                "count": getattr(counts, field_name),
                "percent": percentages.get(field_name),
            }
        )

    return pd.DataFrame(rows, columns=COUNT_COLUMNS)


def page_counts_to_dataframe(page_counts: Sequence[CategoryCounts]) -> pd.DataFrame:
    """Convert per-page census records into a long-format DataFrame."""
    rows = []
    for page_number, counts in enumerate(page_counts, 1):
        for field_name in PAGE_CHART_CATEGORIES:
            rows.append(
                {
                    "page": page_number,
                    "category": CATEGORY_LABELS[field_name],
                    "count": getattr(counts, field_name),
                }
            )

    return pd.DataFrame(rows, columns=["page", "category", "count"])


def page_counts_to_wide_dataframe(
    page_counts: Sequence[CategoryCounts],
) -> pd.DataFrame:
    """One row per page, one column per census field (for the raw data tab)."""
    df = pd.DataFrame([counts.to_dict() for counts in page_counts])
    if df.empty:
        return df
    df.insert(0, "page", range(1, len(df) + 1))
    return df

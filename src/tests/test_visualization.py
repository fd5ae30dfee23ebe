"""
Tests for dashboard data shaping and charts.
"""

import plotly.graph_objects as go
import pytest
from text_census.metrics import calculate_category_counts, calculate_page_counts
from text_census.visualization.charts import create_category_chart, create_page_chart
from text_census.visualization.constants import (
    CATEGORY_LABELS,
    CHART_CATEGORIES,
    PAGE_CHART_CATEGORIES,
)
from text_census.visualization.data import (
    COUNT_COLUMNS,
    counts_to_dataframe,
    page_counts_to_dataframe,
    page_counts_to_wide_dataframe,
)


@pytest.fixture
def counts():
    return calculate_category_counts("中文，English 123!\n")


@pytest.fixture
def page_counts():
    return calculate_page_counts(["中文 abc", "", "12，34"])


def test_counts_to_dataframe(counts):
    df = counts_to_dataframe(counts)

    assert list(df.columns) == COUNT_COLUMNS
    assert len(df) == len(CATEGORY_LABELS)
    row = df.set_index("field").loc["ideograph_count"]
    assert row["count"] == 2
    assert row["category_zh"] == "中文字符"
    assert row["percent"] == pytest.approx(2 / 14 * 100)


def test_counts_to_dataframe_without_statistics():
    df = counts_to_dataframe(None)

    assert df.empty
    assert list(df.columns) == COUNT_COLUMNS


def test_page_counts_to_dataframe(page_counts):
    df = page_counts_to_dataframe(page_counts)

    assert len(df) == len(page_counts) * len(PAGE_CHART_CATEGORIES)
    assert sorted(df["page"].unique()) == [1, 2, 3]
    page_three = df[df["page"] == 3].set_index("category")["count"]
    assert page_three["Digits"] == 4
    assert page_three["Chinese punctuation"] == 1


def test_page_counts_to_wide_dataframe(page_counts):
    df = page_counts_to_wide_dataframe(page_counts)

    assert list(df["page"]) == [1, 2, 3]
    assert list(df["ideographCount"]) == [2, 0, 0]


def test_page_counts_to_wide_dataframe_empty():
    assert page_counts_to_wide_dataframe([]).empty


def test_create_category_chart(counts):
    fig = create_category_chart(counts_to_dataframe(counts))

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == len(CHART_CATEGORIES)


def test_create_page_chart(page_counts):
    fig = create_page_chart(page_counts_to_dataframe(page_counts))

    assert isinstance(fig, go.Figure)
    assert fig.layout.barmode == "stack"

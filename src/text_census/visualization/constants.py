"""
Constants and configuration for the visualization module.
"""

from text_census.extraction import DEFAULT_MAX_FILE_SIZE_MB

# Streamlit entry script, relative to the project root
APP_SCRIPT = "cli/visualize.py"

# Upload configuration
ACCEPTED_UPLOAD_TYPES = ["pdf"]
MAX_UPLOAD_SIZE_MB = DEFAULT_MAX_FILE_SIZE_MB

# Chart configuration
CHART_HEIGHT = 500
LEGEND_CONFIG = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)

# Display labels for each census field
CATEGORY_LABELS = {
    "ideograph_count": "Chinese characters",
    "latin_word_count": "English words",
    "latin_letter_count": "English letters",
    "digit_count": "Digits",
    "chinese_punctuation_count": "Chinese punctuation",
    "english_punctuation_count": "English punctuation",
    "whitespace_count": "Whitespace",
    "line_break_count": "Line breaks",
    "total_count": "Total characters",
    "total_count_no_whitespace": "Total (no whitespace)",
}

CATEGORY_LABELS_ZH = {
    "ideograph_count": "中文字符",
    "latin_word_count": "英文单词",
    "latin_letter_count": "英文字母",
    "digit_count": "数字",
    "chinese_punctuation_count": "中文标点",
    "english_punctuation_count": "英文标点",
    "whitespace_count": "空白字符",
    "line_break_count": "换行",
    "total_count": "总字符数",
    "total_count_no_whitespace": "总字符数（不含空白）",
}

# Character categories plotted side by side (totals are shown as metrics)
CHART_CATEGORIES = [
    "ideograph_count",
    "latin_word_count",
    "latin_letter_count",
    "digit_count",
    "chinese_punctuation_count",
    "english_punctuation_count",
    "whitespace_count",
    "line_break_count",
]

# Disjoint categories, safe to stack per page
PAGE_CHART_CATEGORIES = [
    "ideograph_count",
    "latin_letter_count",
    "digit_count",
    "chinese_punctuation_count",
    "english_punctuation_count",
]

CATEGORY_COLORS = {
    "Chinese characters": "#d62728",
    "English words": "#1f77b4",
    "English letters": "#aec7e8",
    "Digits": "#2ca02c",
    "Chinese punctuation": "#ff7f0e",
    "English punctuation": "#ffbb78",
    "Whitespace": "#7f7f7f",
    "Line breaks": "#c7c7c7",
}

#!/usr/bin/env python3
"""CLI for running a text census on a PDF."""

import json
import sys
from pathlib import Path

from omegaconf import OmegaConf

from text_census.extraction import DEFAULT_MAX_FILE_SIZE_MB
from text_census.metrics import category_percentages
from text_census.session import DocumentSession

# Default configuration constants
DEFAULT_FORMAT = "table"
DEFAULT_MAX_SIZE_MB = DEFAULT_MAX_FILE_SIZE_MB
SUPPORTED_FORMATS = ("table", "json")

# Output formatting constants
TABLE_WIDTH = 60
LABEL_COLUMN_WIDTH = 34
VALUE_COLUMN_WIDTH = 12
PAGE_COLUMN_WIDTH = 6
PAGE_VALUE_WIDTH = 9

# Row labels in display order
SUMMARY_ROWS = [
    ("ideograph_count", "Chinese characters (汉字)"),
    ("latin_word_count", "English words"),
    ("latin_letter_count", "English letters"),
    ("digit_count", "Digits"),
    ("chinese_punctuation_count", "Chinese punctuation"),
    ("english_punctuation_count", "English punctuation"),
    ("whitespace_count", "Whitespace"),
    ("line_break_count", "Line breaks"),
    ("total_count", "Total characters"),
    ("total_count_no_whitespace", "Total characters (no whitespace)"),
]


def print_summary(snapshot):
    """Print the census table for a loaded document."""
    if snapshot is None:
        print("⚠️  No statistics available")
        return

    counts = snapshot.counts
    print(f"📊 Census for {snapshot.file_name} ({snapshot.page_count:,} pages):")
    print("─" * TABLE_WIDTH)
    for field_name, label in SUMMARY_ROWS:
        value = getattr(counts, field_name)
        print(f"  {label:<{LABEL_COLUMN_WIDTH}} {value:>{VALUE_COLUMN_WIDTH},d}")
    print("─" * TABLE_WIDTH)

    percentages = category_percentages(counts)
    if counts.total_count_no_whitespace > 0:
        print("\nShare of non-whitespace characters:")
        for field_name, label in SUMMARY_ROWS:
            if field_name in percentages:
                print(
                    f"  {label:<{LABEL_COLUMN_WIDTH}} {percentages[field_name]:>{VALUE_COLUMN_WIDTH - 1}.1f}%"
                )


def print_page_table(snapshot):
    """Print a compact per-page breakdown."""
    if snapshot is None or not snapshot.page_counts:
        print("⚠️  No page statistics available")
        return

    print("\n📄 Per-page breakdown:")
    print(
        f"{'Page':>{PAGE_COLUMN_WIDTH}} {'汉字':>{PAGE_VALUE_WIDTH - 2}} {'Words':>{PAGE_VALUE_WIDTH}} {'Digits':>{PAGE_VALUE_WIDTH}} {'Total':>{PAGE_VALUE_WIDTH}}"
    )
    print("─" * TABLE_WIDTH)
    for page_number, page in enumerate(snapshot.page_counts, 1):
        print(
            f"{page_number:>{PAGE_COLUMN_WIDTH}} {page.ideograph_count:>{PAGE_VALUE_WIDTH},d} {page.latin_word_count:>{PAGE_VALUE_WIDTH},d} {page.digit_count:>{PAGE_VALUE_WIDTH},d} {page.total_count:>{PAGE_VALUE_WIDTH},d}"
        )


def snapshot_to_json(snapshot):
    """Serialize a snapshot (without the text blob) to a JSON-ready dict."""
    return {
        "file_name": snapshot.file_name,
        "page_count": snapshot.page_count,
        "counts": snapshot.counts.to_dict(),
        "pages": [page.to_dict() for page in snapshot.page_counts],
    }


def parse_config(args=None):
    """Parse CLI configuration, merging an optional YAML file underneath."""
    try:
        cli_config = (
            OmegaConf.from_cli() if args is None else OmegaConf.from_dotlist(args)
        )
    except Exception as e:
        raise RuntimeError(f"Failed to parse CLI arguments: {e}") from e

    config = OmegaConf.create(
        {
            "file": None,
            "format": DEFAULT_FORMAT,
            "pages": False,
            "output": None,
            "max_size_mb": DEFAULT_MAX_SIZE_MB,
        }
    )
    config_path = cli_config.get("config")
    if config_path:
        try:
            config = OmegaConf.merge(config, OmegaConf.load(config_path))
        except FileNotFoundError:
            raise
        except Exception as e:
            raise ValueError(f"Invalid config file '{config_path}': {e}") from e
    config = OmegaConf.merge(config, cli_config)

    return {
        "file": config.get("file"),
        "format": str(config.get("format", DEFAULT_FORMAT)).lower(),
        "pages": bool(config.get("pages", False)),
        "output": config.get("output"),
        "max_size_mb": float(config.get("max_size_mb", DEFAULT_MAX_SIZE_MB)),
    }


def _print_usage_error(message=None):
    """Print usage error and examples."""
    if message:
        print(f"❌ Error: {message}")
    else:
        print("❌ Error: file is required")
    print("Examples:")
    print("  Table:    uv run census file=report.pdf")
    print("  Pages:    uv run census file=report.pdf pages=true")
    print("  JSON:     uv run census file=report.pdf format=json output=counts.json")
    sys.exit(1)


def write_output(payload, output_path, verbose=True):
    """Write the JSON payload to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    if verbose:
        print(f"💾 Saved results to {path}")


def main(args=None):
    """Main CLI function."""
    try:
        config = parse_config(args)

        if not config["file"]:
            _print_usage_error()
        if config["format"] not in SUPPORTED_FORMATS:
            _print_usage_error(
                f"Unsupported format '{config['format']}' (choose from {', '.join(SUPPORTED_FORMATS)})"
            )

        quiet = config["format"] == "json"
        session = DocumentSession(
            max_size_bytes=int(config["max_size_mb"] * 1024 * 1024),
            verbose=not quiet,
        )
        if not quiet:
            print("🚀 Starting text census")
            print(f"File: {config['file']}")
            print("-" * 50)

        snapshot = session.load_path(config["file"])
        payload = snapshot_to_json(snapshot)

        if quiet:
            print(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            print_summary(snapshot)
            if config["pages"]:
                print_page_table(snapshot)

        if config["output"]:
            write_output(payload, config["output"], verbose=not quiet)

        if not quiet:
            print("\n✅ Census completed successfully!")

    except KeyboardInterrupt:
        print("\n❌ Interrupted by user")
        sys.exit(1)
    except (ValueError, RuntimeError, FileNotFoundError, ImportError) as e:
        print(f"❌ Error running census: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        print("Please report this issue with the full error message.")
        sys.exit(1)


if __name__ == "__main__":
    main()

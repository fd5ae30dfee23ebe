"""
Dashboard launcher with pre-flight checks.
"""

import subprocess
import sys
from pathlib import Path

from text_census.visualization.constants import APP_SCRIPT


def launch_dashboard():
    """Launch the Streamlit dashboard with checks - entry point for dashboard command."""
    print("🚀 Launching Text Census Dashboard...")

    app_path = Path(APP_SCRIPT)
    if not app_path.is_file():
        print(f"❌ Dashboard script not found: {app_path}")
        print("Run the dashboard from the project root:")
        print("  uv run dashboard")
        sys.exit(1)

    print("\n🌐 Starting dashboard server...")
    print("👉 Dashboard will open in your browser automatically")
    print("👉 Press Ctrl+C to stop the server")

    try:
        subprocess.run(
            [
                sys.executable,
                "-m",
                "streamlit",
                "run",
                str(app_path),
                "--browser.gatherUsageStats",
                "false",
            ],
            check=True,
        )
    except KeyboardInterrupt:
        print("\n✅ Dashboard stopped")
    except subprocess.CalledProcessError as e:
        print(f"❌ Error launching dashboard: {e}")
        sys.exit(1)

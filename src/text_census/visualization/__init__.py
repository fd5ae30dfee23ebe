"""
Text census visualization package.

This package provides a Streamlit-based dashboard for uploading a PDF and
inspecting its character census.
"""

from text_census.visualization.dashboard import launch_dashboard
from text_census.visualization.app import main

__all__ = ["launch_dashboard", "main"]

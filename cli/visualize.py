#!/usr/bin/env python3
"""
Streamlit app for the text census dashboard.

Run with: streamlit run cli/visualize.py
"""

from text_census.visualization.app import main

main()

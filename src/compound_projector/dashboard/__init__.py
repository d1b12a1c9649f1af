"""Streamlit calculator dashboard."""

"""Data models for the dashboard."""

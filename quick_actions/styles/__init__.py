"""Styles for Quick Actions."""

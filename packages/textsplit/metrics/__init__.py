"""Metrics for text splitting."""

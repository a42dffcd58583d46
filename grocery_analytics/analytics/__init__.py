"""Aggregations over normalized receipt records."""

"""Presentation-independent helpers for listing views."""

from __future__ import annotations

from .sorting import SortDirection, SortField, sort_items

__all__ = ["SortField", "SortDirection", "sort_items"]

"""Pagers and the adapters they page over."""

from __future__ import annotations

from .adapters import PaginationAdapter, SelectAdapter, SequenceAdapter
from .pager import Pager
from .schemas import PageSnapshot

__all__ = [
    "PageSnapshot",
    "Pager",
    "PaginationAdapter",
    "SelectAdapter",
    "SequenceAdapter",
]

"""Queryable collections of parsed NOTAMs."""

from notam_briefing.collections.queryable_collection import QueryableCollection
from notam_briefing.collections.notam_collection import NotamCollection

__all__ = [
    'QueryableCollection',
    'NotamCollection',
]

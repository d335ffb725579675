"""
GraphQL request context helpers
"""

from typing import Any

import strawberry

from ..repository import Repository
from .loaders import Loaders

# Keys are 32-bit Integer columns starting at 1
MIN_ID = 1
MAX_ID = 2**31 - 1


def build_context(repository: Repository, **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one request."""
    return {
        "repository": repository,
        "loaders": Loaders(repository),
        **extra,
    }


def get_repository(info: strawberry.Info) -> Repository:
    return info.context["repository"]


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]


def parse_id(value: str | int | None) -> int | None:
    """Convert a GraphQL ID to a database key.

    IDs that are not integers, or that fall outside the range of the
    Integer key columns, cannot match any row, so they map to None.
    """
    if value is None:
        return None
    try:
        key = int(value)
    except (TypeError, ValueError):
        return None
    if not MIN_ID <= key <= MAX_ID:
        return None
    return key

"""Mapping of feed element names to semantic contexts."""

from typing import Optional

from ..config.constants import DUBLIN_CORE_NS
from .schema import Context

_DUBLIN_CORE_CONTEXTS = {
    "date": Context.DC_DATE,
    "creator": Context.DC_CREATOR,
}

_PLAIN_CONTEXTS = {
    "item": Context.ITEM,
    "title": Context.TITLE,
    "link": Context.LINK,
    "description": Context.DESCRIPTION,
}


def resolve(name: str, namespace: Optional[str] = None) -> Optional[Context]:
    """
    Resolve an element to the context it plays in a feed.

    Args:
        name: Local element name
        namespace: Namespace URI, if any

    Returns:
        Matching Context, or None when the element carries no meaning
    """
    if namespace == DUBLIN_CORE_NS:
        return _DUBLIN_CORE_CONTEXTS.get(name)
    return _PLAIN_CONTEXTS.get(name)


__all__ = ["resolve"]

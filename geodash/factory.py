"""Registry that builds level objects from their level-file symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config import TypeObject

_creators = {}


@dataclass
class ObjectConfig:
    """Everything a creator needs to build an object."""

    location: Any
    images: Any
    player_type: TypeObject = TypeObject.PLAYER


def register(symbol):
    """Decorator registering a creator for ``symbol``; a later registration replaces it."""

    def decorator(creator):
        _creators[symbol] = creator
        return creator

    return decorator


def create(symbol, config):
    """Build the object for ``symbol``, or return ``None`` if no creator is registered."""
    creator = _creators.get(symbol)
    if creator is None:
        return None
    return creator(config)
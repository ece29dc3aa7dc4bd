"""
Identifier Generation: Opaque unique strings for block and action ids.

The builder depends only on an ``IdGenerator``: a zero-argument callable
returning a string that will not collide with any other generated string in
the running process. Generators are stateless; uniqueness comes from the UUID
source, not from checking prior values.
"""

from typing import Callable, Optional
import uuid

from .config import get_settings
from .errors import InvalidSettingsError

IdGenerator = Callable[[], str]


def uuid1_generator() -> str:
    """Time-based UUID (host + clock sequence)."""
    return str(uuid.uuid1())


def uuid4_generator() -> str:
    """Random UUID."""
    return str(uuid.uuid4())


ID_GENERATORS = {
    1: uuid1_generator,
    4: uuid4_generator,
}


def make_id_generator(version: Optional[int] = None) -> IdGenerator:
    """
    Return the UUID-backed generator for a UUID version.

    Args:
        version: UUID version (1 or 4). Defaults to ``BuilderSettings.id_version``.

    Returns:
        A zero-argument callable producing fresh identifiers

    Raises:
        InvalidSettingsError: If no generator exists for the version
    """
    if version is None:
        version = get_settings().id_version
    try:
        return ID_GENERATORS[version]
    except KeyError:
        raise InvalidSettingsError(f"Unsupported UUID version for ids: {version}") from None

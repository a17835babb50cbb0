"""
Discover the HTTP verbs an endpoint implements.

Verbs are methods whose upper-cased name is in the configured whitelist.
Methods are reported subclass first, each class in declaration order.
"""

import inspect
import logging
from typing import AbstractSet, Callable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


def iter_operations(handler_cls: type) -> Iterator[Tuple[str, Callable]]:
    """
    Iterate over the methods of a class and its bases.

    Args:
        handler_cls: Endpoint class

    Yields:
        (name, method) pairs, the most derived definition of each name only
    """
    seen = set()
    for klass in handler_cls.__mro__:
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if name in seen:
                continue
            # Any attribute hides the same name further up the hierarchy
            seen.add(name)
            if not inspect.isroutine(member):
                continue
            yield name, getattr(handler_cls, name)


def list_verbs(handler: object, whitelist: AbstractSet[str]) -> List[str]:
    """
    List the whitelisted verbs a handler implements.

    Args:
        handler: Endpoint instance
        whitelist: Upper-case HTTP verb names

    Returns:
        Upper-cased verb names in declaration order
    """
    verbs = [
        name.upper()
        for name, _ in iter_operations(type(handler))
        if name.upper() in whitelist
    ]
    logger.debug(f"{type(handler).__name__} implements verbs: {verbs}")
    return verbs


def get_operation(handler_cls: type, verb: str) -> Optional[Callable]:
    """Return the method implementing a verb, or None."""
    for name, method in iter_operations(handler_cls):
        if name.upper() == verb:
            return method
    return None


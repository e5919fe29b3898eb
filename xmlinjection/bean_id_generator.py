"""
BeanIdGenerator

Synthesizes identifiers for anonymous (inline) bean declarations.
"""

import itertools
import threading
from typing import Callable, Optional

from .options import DEFAULT_ID_PREFIX


class BeanIdGenerator:
    """Thread-safe generator of unique anonymous bean identifiers.

    Identifiers are ``<prefix><n>`` with ``n`` taken from a monotonic
    counter, so two ids generated in the same instant never collide.
    An optional ``is_taken`` callback skips ids already declared in
    the documents.

    Example::

        ids = BeanIdGenerator()
        ids.next_id()  # 'Bean#1'
        ids.next_id()  # 'Bean#2'
    """

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX):
        self._prefix = prefix
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self, is_taken: Optional[Callable[[str], bool]] = None) -> str:
        with self._lock:
            while True:
                bean_id = f"{self._prefix}{next(self._counter)}"
                if is_taken is None or not is_taken(bean_id):
                    return bean_id

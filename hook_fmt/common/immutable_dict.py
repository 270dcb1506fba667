"""Read-only mapping used for the lookup tables.

The :class:`ImmutableDict` keeps :class:`dict` lookup and iteration order but
rejects every mutation, so tables built at import time stay as declared.
"""

from functools import cached_property
from typing import Any, TypeVar


K = TypeVar("K")
V = TypeVar("V")


class ImmutableDict(dict[K, V]):
    """A hashable mapping that raises :class:`TypeError` on mutation."""

    @cached_property
    def _hash(self) -> int:
        return hash(frozenset(self.items()))

    def __hash__(self) -> int:  # type: ignore[override]
        return self._hash

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({super().__repr__()})"

    def _blocked(self, *args: Any, **kwargs: Any) -> Any:
        raise TypeError(f"{self.__class__.__name__!r} is immutable")

    __setitem__ = _blocked
    __delitem__ = _blocked
    __ior__ = _blocked  # type: ignore[assignment]
    clear = _blocked
    pop = _blocked  # type: ignore[assignment]
    popitem = _blocked
    setdefault = _blocked  # type: ignore[assignment]
    update = _blocked  # type: ignore[assignment]

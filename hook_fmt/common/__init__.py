"""Common utilities shared by the hook modules."""

from .immutable_dict import ImmutableDict
from .logging import configure_logging


__all__ = [
    "ImmutableDict",
    "configure_logging",
]

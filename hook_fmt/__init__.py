"""Post-write formatting hook.

Routes an edited file to the formatter its project (or the host) provides.
"""

__version__ = "0.1.0"

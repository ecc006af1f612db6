"""Port interfaces for external dependencies.

The codec only talks to its logger through :class:`LoggerPort`, so library
callers can pass a silent logger and the CLI a console one.
"""

from .services import LoggerPort

__all__ = ["LoggerPort"]

"""benchledger.console -- terminal output for the CLI.

Usage (any file)::

    from benchledger.console import console

    console.info("Parsing raw results...")
    console.kv({"Records": "12"}, title="Summary")

Configuration (call once in ``cli.py:main()``)::

    from benchledger.console import configure

    configure(backend="auto")  # "rich" | "plain" | "auto"
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from benchledger.console._plain import PlainBackend

if TYPE_CHECKING:
    from benchledger.console._protocol import ConsoleProtocol

# ---------------------------------------------------------------------------
# Global singleton -- plain until configure() is called
# ---------------------------------------------------------------------------

_backend: ConsoleProtocol = PlainBackend()

_BACKENDS = ("auto", "rich", "plain")


def configure(*, backend: str = "auto") -> None:
    """Select the console backend.

    Args:
        backend: ``"rich"`` -- always use Rich.
                 ``"plain"`` -- always use plain text.
                 ``"auto"`` (default) -- Rich when stdout is a TTY,
                 plain otherwise.
    """
    global _backend  # noqa: PLW0603

    if backend not in _BACKENDS:
        msg = f"Unknown console backend: {backend}"
        raise ValueError(msg)

    if backend == "auto":
        backend = "rich" if sys.stdout.isatty() else "plain"

    if backend == "plain":
        _backend = PlainBackend()
    else:
        from benchledger.console._rich import RichBackend

        _backend = RichBackend()


def get_console() -> ConsoleProtocol:
    """Return the current backend instance."""
    return _backend


# ---------------------------------------------------------------------------
# Proxy object -- ``from benchledger.console import console``
# ---------------------------------------------------------------------------


class _ConsoleProxy:
    """Transparent proxy that delegates to the current ``_backend``.

    Callers import ``console`` once at module level and still pick up any
    later ``configure()`` call.
    """

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]

"""benchledger.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol; no external dependencies in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """Terminal output protocol.

    **General messages**::

        console.info("Parsing raw results from raw/")
        console.success("Wrote 12 records")
        console.warning("Skipped 1 malformed entry")
        console.error("cannot read results directory raw/")

    **Structured output**::

        console.table(["Parameter set", "Records"], [["PARAM_...", "12"]])
        console.kv({"Ledger": "tfhe/wasm_pk_gen.csv"}, title="Summary")
    """

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message, written to stderr."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

"""Registry of the parameter sets raw benchmark names may refer to.

The registry is a fixed lookup table kept in step with the measurement
harness. Lookups are case-insensitive against the canonical lowercase name.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from benchledger.domain.models import ParameterSet
from benchledger.errors import UnknownParameterSetError

PARAM_MESSAGE_2_CARRY_2_COMPACT_PK = ParameterSet(
    name="param_message_2_carry_2_compact_pk",
    label="PARAM_MESSAGE_2_CARRY_2_COMPACT_PK",
    message_modulus=4,
    carry_modulus=4,
)

PARAM_SMALL_MESSAGE_2_CARRY_2_COMPACT_PK = ParameterSet(
    name="param_small_message_2_carry_2_compact_pk",
    label="PARAM_SMALL_MESSAGE_2_CARRY_2_COMPACT_PK",
    message_modulus=4,
    carry_modulus=4,
)


class ParameterRegistry:
    """Immutable name -> ParameterSet table."""

    def __init__(self, parameter_sets: Iterable[ParameterSet]) -> None:
        entries: dict[str, ParameterSet] = {}
        for params in parameter_sets:
            key = params.name.lower()
            if key in entries:
                msg = f"Duplicate parameter set name: {params.name}"
                raise ValueError(msg)
            entries[key] = params
        self._entries = entries

    def resolve(self, name: str) -> ParameterSet:
        """Return the parameter set registered under *name*, ignoring case.

        Raises UnknownParameterSetError if nothing matches.
        """
        try:
            return self._entries[name.lower()]
        except KeyError:
            msg = f"failed to get parameters for name '{name}'"
            raise UnknownParameterSetError(msg) from None

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __iter__(self) -> Iterator[ParameterSet]:
        return iter(self._entries[key] for key in sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_REGISTRY = ParameterRegistry(
    [
        PARAM_MESSAGE_2_CARRY_2_COMPACT_PK,
        PARAM_SMALL_MESSAGE_2_CARRY_2_COMPACT_PK,
    ]
)

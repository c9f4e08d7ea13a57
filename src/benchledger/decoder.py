"""Decode encoded metric names into (benchmark, parameter set) pairs.

The measurement harness names each timing
``<benchmark-name><SEPARATOR><parameter-set-name>``. Benchmark names may be
compound (``add_scalar``) but never contain the separator itself, so the
first occurrence is the split point.
"""

from __future__ import annotations

from benchledger.domain.models import DecodedName
from benchledger.errors import MalformedMetricNameError
from benchledger.registry import DEFAULT_REGISTRY, ParameterRegistry

SEPARATOR = "_mean_"


def split_metric_name(name: str, separator: str = SEPARATOR) -> tuple[str, str]:
    """Split *name* on the first *separator* into (benchmark, parameter-set name).

    Raises MalformedMetricNameError when the separator is missing or either
    side of it is empty.
    """
    benchmark, found, remainder = name.partition(separator)
    if not found:
        msg = f"metric name '{name}' does not contain separator '{separator}'"
        raise MalformedMetricNameError(msg)
    if not benchmark:
        msg = f"metric name '{name}' has an empty benchmark name"
        raise MalformedMetricNameError(msg)
    if not remainder:
        msg = f"metric name '{name}' has an empty parameter set name"
        raise MalformedMetricNameError(msg)
    return benchmark, remainder


def decode_metric_name(
    name: str,
    registry: ParameterRegistry = DEFAULT_REGISTRY,
    separator: str = SEPARATOR,
) -> DecodedName:
    """Split *name* and resolve its parameter set against *registry*."""
    benchmark, params_name = split_metric_name(name, separator)
    params = registry.resolve(params_name)
    return DecodedName(
        benchmark=benchmark,
        parameter_set_name=params_name,
        parameter_set=params,
    )

# Author: gadwant
from __future__ import annotations

import logging
import threading

from nameforge.errors import InvalidArgument
from nameforge.naming.names import (
    DEFAULT_NAMESPACE,
    SEPARATOR,
    GeneratedName,
    capitalize,
    clean_feature_name,
    normalize_target,
    split_name,
)

logger = logging.getLogger(__name__)


class _Sequence:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def get_and_increment(self) -> int:
        with self._lock:
            value = self._value
            self._value += 1
            return value


class NameGenerator:
    """Generate unique names from an optional target and a feature name.

    The generator is stateful: share one instance across every caller of a
    generation session so repeated requests get a numeric suffix. A
    ``com.example.Demo`` target with an ``Initializer`` feature yields
    ``com.example.Demo__Initializer``, then ``com.example.Demo__Initializer1``.
    Without a target the name lands in the ``__`` namespace.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sequences: dict[str, _Sequence] = {}

    def generate_name(self, target: str | type | None, feature_name: str) -> GeneratedName:
        if not feature_name:
            raise InvalidArgument("'feature_name' must not be empty")

        cleaned = clean_feature_name(feature_name)
        if target is not None:
            base = f"{normalize_target(target)}{SEPARATOR}{capitalize(cleaned)}"
        else:
            base = f"{DEFAULT_NAMESPACE}{cleaned}"

        return split_name(self._add_sequence(base))

    def _add_sequence(self, name: str) -> str:
        with self._lock:
            sequence = self._sequences.get(name)
            if sequence is None:
                sequence = self._sequences[name] = _Sequence()

        value = sequence.get_and_increment()
        logger.debug("Generated name for %s (sequence %d)", name, value)
        return f"{name}{value}" if value > 0 else name

# Author: gadwant
from __future__ import annotations

import importlib
import json
from collections.abc import Iterable
from dataclasses import dataclass
from importlib.util import find_spec
from typing import Any, TextIO

from nameforge.errors import InvalidArgument

orjson: Any | None = importlib.import_module("orjson") if find_spec("orjson") is not None else None

_JSON_START = ("{", "[")


@dataclass(frozen=True)
class NameRequest:
    target: str | None
    feature_name: str


def _loads(raw: str) -> Any:
    if orjson is not None:
        return orjson.loads(raw)
    return json.loads(raw)


def _request_from_data(data: Any) -> NameRequest:
    if not isinstance(data, dict):
        raise InvalidArgument(f"Expected a JSON object for a name request, got: {data!r}")

    target = data.get("target")
    feature = data.get("feature")
    if target is not None and not isinstance(target, str):
        raise InvalidArgument(f"'target' must be a string, got: {target!r}")
    if not isinstance(feature, str) or not feature:
        raise InvalidArgument(f"Name request has no 'feature': {data!r}")

    return NameRequest(target=target or None, feature_name=feature)


def parse_request(raw: str) -> NameRequest:
    """Parse a ``feature`` or ``target:feature`` request, stripping both parts."""
    target, _, feature = (part.strip() for part in raw.rpartition(":"))
    if not feature:
        raise InvalidArgument(f"Name request has no feature: {raw!r}")
    return NameRequest(target=target or None, feature_name=feature)


def iter_requests(stream: TextIO) -> Iterable[NameRequest]:
    for line in stream:
        stripped = line.strip()
        if not stripped:
            continue

        if not stripped.startswith(_JSON_START):
            yield parse_request(stripped)
            continue

        item = _loads(stripped)
        if isinstance(item, list):
            yield from (_request_from_data(entry) for entry in item)
        else:
            yield _request_from_data(item)

# Author: gadwant
from __future__ import annotations

import io

import pytest

from nameforge.errors import InvalidArgument
from nameforge.io.stream import NameRequest, iter_requests, parse_request


def test_parse_request_splits_target_on_last_colon() -> None:
    assert parse_request("Initializer") == NameRequest(target=None, feature_name="Initializer")
    assert parse_request("com.example.Demo:init") == NameRequest(
        target="com.example.Demo", feature_name="init"
    )
    assert parse_request(":init") == NameRequest(target=None, feature_name="init")


def test_parse_request_strips_around_separator() -> None:
    assert parse_request("com.example.Demo : init") == NameRequest(
        target="com.example.Demo", feature_name="init"
    )
    assert parse_request(" : init") == NameRequest(target=None, feature_name="init")


def test_parse_request_requires_feature() -> None:
    with pytest.raises(InvalidArgument):
        parse_request("com.example.Demo:")


def test_iter_requests_reads_plain_and_json_lines() -> None:
    stream = io.StringIO(
        "\n".join(
            [
                "Initializer",
                "",
                '{"target": "com.example.Demo", "feature": "init"}',
                '[{"feature": "a"}, {"target": null, "feature": "b"}]',
            ]
        )
    )

    requests = list(iter_requests(stream))

    assert requests == [
        NameRequest(target=None, feature_name="Initializer"),
        NameRequest(target="com.example.Demo", feature_name="init"),
        NameRequest(target=None, feature_name="a"),
        NameRequest(target=None, feature_name="b"),
    ]


def test_iter_requests_rejects_json_without_feature() -> None:
    with pytest.raises(InvalidArgument):
        list(iter_requests(io.StringIO('{"target": "com.example.Demo"}\n')))


def test_iter_requests_propagates_json_errors() -> None:
    with pytest.raises(ValueError):
        list(iter_requests(io.StringIO('{"feature":\n')))

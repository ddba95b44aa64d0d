# Author: gadwant
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, cast

from nameforge.io.stream import NameRequest, iter_requests, parse_request
from nameforge.naming.generator import NameGenerator

EXIT_OK = 0

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _write_text_output(text: str, *, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    print(f"Wrote names to {output}")


def _generate_payload(
    generator: NameGenerator, requests: Iterable[NameRequest]
) -> list[dict[str, Any]]:
    payload: list[dict[str, Any]] = []
    for request in requests:
        name = generator.generate_name(request.target, request.feature_name)
        payload.append(
            {
                "target": request.target,
                "feature": request.feature_name,
                "namespace": name.namespace,
                "short_name": name.short_name,
                "full_name": name.full_name,
            }
        )
    return payload


def _cmd_generate(args: argparse.Namespace) -> int:
    _configure_logging(args.verbose)

    requests: list[NameRequest]
    if args.request:
        requests = [parse_request(raw) for raw in args.request]
    elif args.input == "stdin":
        requests = list(iter_requests(sys.stdin))
    else:
        raise ValueError("Only --input stdin is currently supported.")

    if not requests:
        raise ValueError("No name requests found.")

    generator = NameGenerator()
    payload = _generate_payload(generator, requests)
    logger.info("Generated %d name(s)", len(payload))

    if args.format == "json":
        text = json.dumps(payload, indent=2, sort_keys=True)
    else:
        text = "\n".join(entry["full_name"] for entry in payload)

    _write_text_output(text, output=args.output)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nameforge",
        description="Generate unique names for generated code artifacts.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate",
        help="Generate a unique name per request, sharing one generator.",
    )
    generate.add_argument(
        "--request",
        action="append",
        default=[],
        help="Name request as FEATURE or TARGET:FEATURE. Repeat for multiple requests.",
    )
    generate.add_argument(
        "--input",
        default="stdin",
        help="Request source when no --request is given; only 'stdin' is supported.",
    )
    generate.add_argument("--output", type=Path, default=None)
    generate.add_argument("--format", choices=("text", "json"), default="text")
    generate.add_argument("--verbose", action="store_true")
    generate.set_defaults(_handler=_cmd_generate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = args._handler
    if not callable(handler):
        raise TypeError("Invalid command handler")
    typed_handler = handler
    return cast(Callable[[argparse.Namespace], int], typed_handler)(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

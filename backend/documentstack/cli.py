"""
DocumentStack CLI: generate a PDF from a template.

  documentstack generate TEMPLATE_ID [--data JSON | --data-file PATH]
                [--filename NAME] [--output PATH] [--header NAME=VALUE ...]

The API key is read from DOCUMENTSTACK_API_KEY (a .env file is honoured).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from documentstack.api.client import DocumentStackClient
from documentstack.core.config import load_config
from documentstack.errors import ConfigurationError, DocumentStackError
from documentstack.models.generate import GenerateOptions, GenerateRequest
from documentstack.utils.logging import configure_logging, logger, step_timer


def _parse_header(value: str) -> tuple[str, str]:
    name, sep, header_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name.strip(), header_value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="documentstack",
        description="Generate PDFs with the DocumentStack API.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Render a template to PDF.")
    g.add_argument("template_id", help="Template ID to render.")
    data = g.add_mutually_exclusive_group()
    data.add_argument("--data", help="Template data as a JSON object.")
    data.add_argument("--data-file", type=Path, help="Path to a JSON file with template data.")
    g.add_argument("--filename", help="Output filename requested from the API (without .pdf).")
    g.add_argument("--output", "-o", type=Path, help="Where to write the PDF (default: server filename).")
    g.add_argument("--base-url", help="Override DOCUMENTSTACK_BASE_URL.")
    g.add_argument("--timeout", type=int, help="Request timeout in seconds.")
    g.add_argument(
        "--header", type=_parse_header, action="append", default=[],
        help="Extra request header, NAME=VALUE. Repeatable.",
    )
    g.add_argument("--env-file", type=Path, help="Path to a .env file.")
    g.add_argument("--debug", action="store_true", default=None, help="Log request and response traces.")
    return p


def _load_data(args: argparse.Namespace) -> dict[str, Any] | None:
    if args.data_file is not None:
        raw = args.data_file.read_text(encoding="utf-8")
    elif args.data is not None:
        raw = args.data
    else:
        return None
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("template data must be a JSON object")
    return data


async def _generate(args: argparse.Namespace) -> Path:
    config = load_config(
        args.env_file,
        base_url=args.base_url,
        timeout=args.timeout,
        headers=dict(args.header),
        debug=args.debug,
    )
    request = GenerateRequest(
        data=_load_data(args),
        options=GenerateOptions(filename=args.filename) if args.filename else None,
    )

    async with DocumentStackClient(config) as client:
        with step_timer(f"Generate {args.template_id}"):
            result = await client.generate(args.template_id, request)

    path = result.save(args.output)
    logger.info("Wrote %d bytes to %s", len(result.pdf), path)
    return path


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(logging.INFO)

    try:
        path = asyncio.run(_generate(args))
    except ConfigurationError as exc:
        print(
            f"\n  ERROR: {exc}\n"
            f"  Set DOCUMENTSTACK_API_KEY in the environment or in a .env file.\n",
            file=sys.stderr,
        )
        return 1
    except DocumentStackError as exc:
        print(f"  ERROR: {exc}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as exc:
        print(f"  ERROR: {exc}", file=sys.stderr)
        return 2

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())

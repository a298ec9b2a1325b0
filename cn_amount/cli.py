# -*- coding: utf-8 -*-
"""Amount CLI.

Local entry for trying the two library entry points from a shell:
- `extract --text ...`   free text -> amount (digits first, then Chinese numerals)
- `format --amount ...`  amount -> Chinese uppercase text
- `demo`                 run the classic examples through both

Output is one JSON object per invocation on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal
from typing import Any

from cn_amount import config
from cn_amount.formatter import amount_to_chinese
from cn_amount.parser import AmountError, extract_amount_text, parse_match


_DEMO_TEXTS = (
    "10000",
    "10000元",
    "1万",
    "1万元",
    "我有1元",
    "我有元",
    "我有1万元哈哈",
    "已履行行政处罚决定,罚款10000元哈哈",
    "定给予当事人处以罚款人民币陆拾贰万贰仟玖佰壹拾玖元肆角的行政处罚",
    "壹万伍仟肆佰壹拾圆叁角伍分肆厘",
    "捌万陆仟肆佰壹拾圆整",
    "壹万伍仟肆佰壹拾元贰角捌分肆厘",
    "拾壹亿壹仟万伍仟肆佰壹拾元贰角捌分肆厘",
)

_DEMO_AMOUNTS = (
    "10000",
    "100000000001.1",
    "10001.1034",
    "10000.2345",
    "10000.200",
    "10000.0",
    "86410",
    "0.00",
)


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _extract_payload(text: str) -> dict[str, Any]:
    match = extract_amount_text(text)
    if match is None:
        return {"status": "ok", "text": text, "match": None, "kind": None, "amount": "0"}
    amount = parse_match(match)
    return {
        "status": "ok",
        "text": text,
        "match": match.text,
        "kind": match.kind.value,
        "amount": str(amount),
    }


def _error_payload(e: AmountError) -> dict[str, Any]:
    return {"status": "error", "error": {"code": e.code.value, "message": e.message}}


def cmd_extract(args: argparse.Namespace) -> int:
    _print_json(_extract_payload(args.text))
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    try:
        chinese = amount_to_chinese(args.amount)
    except AmountError as e:
        _print_json(_error_payload(e))
        return 1

    _print_json({"status": "ok", "amount": args.amount, "chinese": chinese})
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    extracted = [_extract_payload(text) for text in _DEMO_TEXTS]
    formatted = [
        {"amount": value, "chinese": amount_to_chinese(Decimal(value))}
        for value in _DEMO_AMOUNTS
    ]
    _print_json({"status": "ok", "extract": extracted, "format": formatted})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cn-amount", description="Chinese uppercase amount helper")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default from CN_AMOUNT_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Extract an amount from free text")
    extract.add_argument("--text", required=True)
    extract.set_defaults(func=cmd_extract)

    fmt = sub.add_parser("format", help="Format an amount as Chinese uppercase text")
    fmt.add_argument("--amount", required=True)
    fmt.set_defaults(func=cmd_format)

    demo = sub.add_parser("demo", help="Run the built-in examples")
    demo.set_defaults(func=cmd_demo)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

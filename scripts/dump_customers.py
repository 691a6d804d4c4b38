#!/usr/bin/env python3
"""
Write a generated customer dataset (with full order detail) to JSON.

Useful as a frontend fixture. The same --seed reproduces the same data.

Usage:
    python scripts/dump_customers.py --count 100 --seed 42 --out customers.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.crm.modules.customers.mock_data import generate_customers  # noqa: E402
from app.crm.modules.customers.service import customer_summary, order_detail  # noqa: E402


def build_dataset(count: int, seed: int | None) -> list[dict]:
    rows = []
    for c in generate_customers(count, seed=seed):
        row = customer_summary(c)
        row["orders"] = [order_detail(o) for o in c.orders]
        rows.append(row)
    return rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump mock customers to JSON.")
    parser.add_argument("--count", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out", type=Path, default=None, help="Output file (stdout if omitted)")
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must be >= 0")

    data = json.dumps(build_dataset(args.count, args.seed), indent=2)
    if args.out:
        args.out.write_text(data + "\n", encoding="utf-8")
        print(f"Wrote {args.count} customers to {args.out}")
    else:
        print(data)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI entry point for the sample data generator.

Usage:
    python -m generators.cli accounts --count 20 --seed 42
    python -m generators.cli accounts --config configs/accounts.yaml --output file --output-file out.csv
"""

import argparse
import json
import sys
from pathlib import Path

import pandas as pd
import yaml

from src.config import settings
from src.shared.logging import setup_logging

from .account_generator import SAMPLE_HEADERS, AccountGenerator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Account fraud scorer sample data generator")
    parser.add_argument("generator", choices=["accounts"], help="Which generator to run")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=20, help="Number of rows to generate")
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output CSV path")

    args = parser.parse_args(argv)
    setup_logging(settings.log_level, settings.log_format)

    config = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    rows = AccountGenerator(config=config, seed=args.seed).generate(num_rows=args.count)

    if args.output == "stdout":
        for row in rows:
            print(json.dumps(row))
    else:
        output_path = Path(args.output_file or f"output/{args.generator}_sample.csv")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(rows, columns=SAMPLE_HEADERS).to_csv(output_path, index=False)
        print(f"Wrote {len(rows)} rows to {output_path}", file=sys.stderr)

    print(f"Generated {len(rows)} rows", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

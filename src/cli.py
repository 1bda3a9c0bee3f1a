"""Command-line entry point for batch scoring.

Usage:
    python -m src.cli score transactions.csv --output results.csv --quality
    python -m src.cli sample --count 20 --seed 7 --output sample.csv --results scored.csv
"""

import argparse
import json
import sys
from pathlib import Path

import pandas as pd
import structlog

from generators.account_generator import SAMPLE_HEADERS, AccountGenerator
from src.config import settings
from src.domains.fraud.config import FraudConfig
from src.domains.fraud.ingest import IngestError, load_csv
from src.domains.fraud.models import Prediction
from src.domains.fraud.quality import inspect_rows
from src.domains.fraud.reporting import assess, summarize
from src.domains.fraud.scorer import LinearFraudScorer
from src.shared.logging import setup_logging

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score bank-account rows for fraud")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score rows from a CSV file")
    score.add_argument("file", type=str, help="Input CSV path")
    score.add_argument("--output", type=str, default=None, help="Write per-row results to CSV")
    score.add_argument("--quality", action="store_true", help="Report defaulted fields")

    sample = sub.add_parser("sample", help="Generate and score sample rows")
    sample.add_argument("--count", type=int, default=20, help="Number of rows to generate")
    sample.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    sample.add_argument("--output", type=str, default=None, help="Write generated rows to CSV")
    sample.add_argument("--results", type=str, default=None, help="Write per-row results to CSV")

    return parser


def _write_results(
    path: str,
    rows: list[dict],
    predictions: list[Prediction],
    config: FraudConfig,
) -> None:
    assessments = assess(rows, predictions, config.risk)
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame([a.model_dump(mode="json") for a in assessments]).to_csv(
        output_path, index=False
    )
    logger.info("results_written", path=str(output_path), rows=len(assessments))


def _write_sample(path: str, rows: list[dict]) -> None:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=SAMPLE_HEADERS).to_csv(output_path, index=False)
    logger.info("sample_written", path=str(output_path), rows=len(rows))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(settings.log_level, settings.log_format)

    config = FraudConfig.from_env()
    scorer = LinearFraudScorer(config=config)
    report = None

    if args.command == "score":
        try:
            data = load_csv(args.file)
        except IngestError as e:
            print(str(e), file=sys.stderr)
            return 1
        rows = data.rows
        if args.quality:
            report = inspect_rows(data.raw_rows)
        results_path = args.output
    else:
        rows = AccountGenerator(seed=args.seed).generate(num_rows=args.count)
        if args.output:
            _write_sample(args.output, rows)
        results_path = args.results

    predictions = scorer.predict(rows)
    if results_path:
        _write_results(results_path, rows, predictions, config)

    output = {"summary": summarize(predictions).model_dump()}
    if report is not None:
        output["quality"] = report.model_dump()
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

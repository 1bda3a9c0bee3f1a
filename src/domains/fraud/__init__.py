"""Fraud detection domain."""

from .config import FEATURE_NAMES, MODEL_BIAS, MODEL_WEIGHTS, FraudConfig, default_config
from .features import encode_account, extract_features, scale_features
from .ingest import CsvData, IngestError, load_csv, parse_csv_text
from .models import (
    AccountAssessment,
    BatchSummary,
    Prediction,
    QualityIssue,
    QualityReport,
    RiskLevel,
)
from .quality import inspect_row, inspect_rows
from .reporting import assess, risk_level, summarize
from .scorer import LinearFraudScorer, get_scorer, predict

__all__ = [
    "FEATURE_NAMES",
    "MODEL_BIAS",
    "MODEL_WEIGHTS",
    "AccountAssessment",
    "BatchSummary",
    "CsvData",
    "FraudConfig",
    "IngestError",
    "LinearFraudScorer",
    "Prediction",
    "QualityIssue",
    "QualityReport",
    "RiskLevel",
    "assess",
    "default_config",
    "encode_account",
    "extract_features",
    "get_scorer",
    "inspect_row",
    "inspect_rows",
    "load_csv",
    "parse_csv_text",
    "predict",
    "risk_level",
    "scale_features",
    "summarize",
]

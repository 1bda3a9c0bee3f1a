"""Fraud scoring configuration with sensible defaults."""

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Ordered feature schema: iteration order and universe of recognized inputs.
FEATURE_NAMES: tuple[str, ...] = (
    "Time",
    *(f"V{i}" for i in range(1, 29)),
    "Accounts",
)

# Columns coerced to numbers on ingest; Accounts stays free text.
NUMERIC_FEATURES: tuple[str, ...] = tuple(f for f in FEATURE_NAMES if f != "Accounts")

MODEL_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "V1": -0.2, "V2": 0.15, "V3": -0.3, "V4": 0.25, "V5": -0.1,
        "V6": 0.2, "V7": -0.25, "V8": 0.1, "V9": -0.15, "V10": 0.3,
        "V11": -0.2, "V12": 0.35, "V13": -0.1, "V14": 0.4, "V15": -0.3,
        "V16": 0.2, "V17": -0.25, "V18": 0.15, "V19": -0.2, "V20": 0.1,
        "V21": -0.15, "V22": 0.25, "V23": -0.3, "V24": 0.2, "V25": -0.1,
        "V26": 0.15, "V27": -0.2, "V28": 0.1,
        "Accounts": 0.0001,
        "Time": 0.00001,
    }
)

MODEL_BIAS: float = -0.5


@dataclass(frozen=True)
class LinearModel:
    """Fixed model constants. Never overridden from the environment."""

    feature_names: tuple[str, ...] = FEATURE_NAMES
    weights: Mapping[str, float] = field(default_factory=lambda: MODEL_WEIGHTS)
    bias: float = MODEL_BIAS
    # Seconds in 48 hours
    time_normalizer: float = 172_800.0
    account_tail_digits: int = 10
    account_hash_modulus: int = 1_000_000_000
    log_divisor: float = 10.0
    decision_threshold: float = 0.5


@dataclass
class RiskLevelThresholds:
    """Confidence cutoffs applied to fraudulent predictions."""

    high: float = 0.8
    medium: float = 0.6


@dataclass
class BatchSettings:
    chunk_size: int = 500


@dataclass
class FraudConfig:
    model: LinearModel = field(default_factory=LinearModel)
    risk: RiskLevelThresholds = field(default_factory=RiskLevelThresholds)
    batch: BatchSettings = field(default_factory=BatchSettings)

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        if v := os.getenv("FRAUD_RISK_HIGH"):
            config.risk.high = float(v)
        if v := os.getenv("FRAUD_RISK_MEDIUM"):
            config.risk.medium = float(v)
        if v := os.getenv("FRAUD_BATCH_CHUNK_SIZE"):
            config.batch.chunk_size = max(1, int(v))

        return config


# Module-level default instance
default_config = FraudConfig()

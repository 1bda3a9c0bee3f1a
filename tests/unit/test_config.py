"""Tests for application and scoring configuration."""

import dataclasses

import pytest

from src.config import Settings
from src.domains.fraud.config import (
    FEATURE_NAMES,
    MODEL_BIAS,
    MODEL_WEIGHTS,
    NUMERIC_FEATURES,
    FraudConfig,
    LinearModel,
    default_config,
)


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "account-fraud-scorer"
        assert settings.app_version == "0.1.0"
        assert settings.log_format == "console"

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEBUG", "true")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.log_level == "DEBUG"
        assert settings.debug is True


class TestFeatureSchema:
    def test_schema_order(self):
        assert len(FEATURE_NAMES) == 30
        assert FEATURE_NAMES[0] == "Time"
        assert FEATURE_NAMES[1] == "V1"
        assert FEATURE_NAMES[28] == "V28"
        assert FEATURE_NAMES[-1] == "Accounts"

    def test_numeric_features_exclude_accounts(self):
        assert len(NUMERIC_FEATURES) == 29
        assert "Accounts" not in NUMERIC_FEATURES

    def test_weight_table(self):
        assert set(MODEL_WEIGHTS) == set(FEATURE_NAMES)
        assert MODEL_WEIGHTS["V14"] == 0.4
        assert MODEL_WEIGHTS["Accounts"] == 0.0001
        assert MODEL_WEIGHTS["Time"] == 0.00001
        assert MODEL_BIAS == -0.5


class TestFraudConfig:
    def test_defaults(self):
        config = FraudConfig()
        assert config.risk.high == 0.8
        assert config.risk.medium == 0.6
        assert config.batch.chunk_size == 500
        assert config.model.time_normalizer == 172_800

    def test_model_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            default_config.model.bias = 1.0  # type: ignore[misc]

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("FRAUD_RISK_HIGH", "0.9")
        monkeypatch.setenv("FRAUD_RISK_MEDIUM", "0.7")
        monkeypatch.setenv("FRAUD_BATCH_CHUNK_SIZE", "0")
        config = FraudConfig.from_env()
        assert config.risk.high == 0.9
        assert config.risk.medium == 0.7
        assert config.batch.chunk_size == 1

    def test_env_does_not_touch_model(self, monkeypatch):
        monkeypatch.setenv("FRAUD_BIAS", "3.0")
        assert FraudConfig.from_env().model == LinearModel()

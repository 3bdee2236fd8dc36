"""Unit tests for runtime.shared.config."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from runtime.shared.config import load_runtime_config

_REQUIRED_ENV = {
    "TABLE_NAME": "items",
}


class TestLoadRuntimeConfig:
    def test_defaults(self) -> None:
        with patch.dict(os.environ, _REQUIRED_ENV, clear=True):
            config = load_runtime_config()

        assert config.stage == "dev"
        assert config.aws_region == "us-east-1"
        assert config.table_name == "items"
        assert config.log_level == "INFO"
        assert config.dynamodb_endpoint is None

    def test_optional_overrides(self) -> None:
        env = {
            **_REQUIRED_ENV,
            "STAGE": "staging",
            "AWS_REGION": "us-west-2",
            "LOG_LEVEL": "debug",
            "DYNAMODB_ENDPOINT": "http://localhost:8000",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_runtime_config()

        assert config.stage == "staging"
        assert config.aws_region == "us-west-2"
        assert config.log_level == "DEBUG"
        assert config.dynamodb_endpoint == "http://localhost:8000"

    def test_missing_table_name_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(KeyError):
                load_runtime_config()

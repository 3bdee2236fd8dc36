"""Runtime configuration loaded from environment variables.

The items Lambda reads these values at cold-start; the API stack sets
them when it creates the function.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RuntimeConfig:
    """Runtime configuration sourced from Lambda environment variables."""

    stage: str
    aws_region: str

    # DynamoDB table name
    table_name: str

    log_level: str = "INFO"

    # Optional override (useful for local testing)
    dynamodb_endpoint: str | None = None


def load_runtime_config() -> RuntimeConfig:
    """Build RuntimeConfig from environment variables set by CDK."""
    return RuntimeConfig(
        stage=os.environ.get("STAGE", "dev"),
        aws_region=os.environ.get("AWS_REGION", "us-east-1"),
        table_name=os.environ["TABLE_NAME"],
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        dynamodb_endpoint=os.environ.get("DYNAMODB_ENDPOINT"),
    )

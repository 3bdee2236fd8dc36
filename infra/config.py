"""Stage configuration tables for the CDK application.

Each subsystem (database, API, frontend) owns an independent table keyed by
stage name. Records are frozen and defined once at import time; stacks look
up their record exactly once while composing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar

from constructs import Node

DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"
PROJECT_TAG = "ModularCDKExample"

# Context keys read by the entry point
CONTEXT_STAGE = "stage"
CONTEXT_REGION = "region"
CONTEXT_ALERT_EMAIL = "alertEmail"


class ConfigNotFoundError(ValueError):
    """Raised when a stage has no entry in a configuration table."""

    def __init__(self, subsystem: str, stage: str) -> None:
        super().__init__(f"No {subsystem} configuration found for stage: {stage}")
        self.subsystem = subsystem
        self.stage = stage


@dataclass(frozen=True)
class DatabaseConfig:
    """Storage settings for one stage."""

    table_name: str
    enable_backups: bool
    ttl_enabled: bool


@dataclass(frozen=True)
class ApiConfig:
    """API Gateway and handler settings for one stage."""

    api_name: str
    enable_cors: bool
    throttle_rate_limit: int
    throttle_burst_limit: int


@dataclass(frozen=True)
class FrontendConfig:
    """Static site delivery settings for one stage."""

    enable_versioning: bool
    enable_cloudfront: bool
    domain_name: str | None = None


@dataclass(frozen=True)
class EnvironmentConfig:
    """Immutable settings shared by every stack of one deployment."""

    stage: str
    aws_region: str = DEFAULT_REGION
    aws_account_id: str | None = None
    alert_email: str | None = None

    # Naming
    project_name: str = "modular-cdk-app"

    extra_tags: dict[str, str] = field(default_factory=dict)

    @property
    def tags(self) -> dict[str, str]:
        return {"Environment": self.stage, "Project": PROJECT_TAG, **self.extra_tags}

    @property
    def resource_prefix(self) -> str:
        return f"{self.project_name}-{self.stage}"

    def resource_name(self, name: str) -> str:
        return f"{self.resource_prefix}-{name}"


# Pre-defined stage tables
DATABASE_CONFIGS: dict[str, DatabaseConfig] = {
    "dev": DatabaseConfig(
        table_name="my-app-dev-table",
        enable_backups=False,
        ttl_enabled=True,
    ),
    "staging": DatabaseConfig(
        table_name="my-app-staging-table",
        enable_backups=True,
        ttl_enabled=True,
    ),
    "prod": DatabaseConfig(
        table_name="my-app-prod-table",
        enable_backups=True,
        ttl_enabled=False,
    ),
}

API_CONFIGS: dict[str, ApiConfig] = {
    "dev": ApiConfig(
        api_name="my-app-dev-api",
        enable_cors=True,
        throttle_rate_limit=100,
        throttle_burst_limit=200,
    ),
    "staging": ApiConfig(
        api_name="my-app-staging-api",
        enable_cors=True,
        throttle_rate_limit=500,
        throttle_burst_limit=1000,
    ),
    "prod": ApiConfig(
        api_name="my-app-prod-api",
        enable_cors=False,
        throttle_rate_limit=1000,
        throttle_burst_limit=2000,
    ),
}

FRONTEND_CONFIGS: dict[str, FrontendConfig] = {
    "dev": FrontendConfig(
        enable_versioning=False,
        enable_cloudfront=False,
    ),
    "staging": FrontendConfig(
        enable_versioning=True,
        enable_cloudfront=True,
        domain_name="staging.myapp.com",
    ),
    "prod": FrontendConfig(
        enable_versioning=True,
        enable_cloudfront=True,
        domain_name="myapp.com",
    ),
}

_T = TypeVar("_T")


def _lookup(table: dict[str, _T], subsystem: str, stage: str) -> _T:
    try:
        return table[stage]
    except KeyError:
        raise ConfigNotFoundError(subsystem, stage) from None


def get_database_config(stage: str) -> DatabaseConfig:
    """Get the database record for ``stage``.

    Raises:
        ConfigNotFoundError: If the stage has no database entry.
    """
    return _lookup(DATABASE_CONFIGS, "database", stage)


def get_api_config(stage: str) -> ApiConfig:
    """Get the API record for ``stage``.

    Raises:
        ConfigNotFoundError: If the stage has no API entry.
    """
    return _lookup(API_CONFIGS, "API", stage)


def get_frontend_config(stage: str) -> FrontendConfig:
    """Get the frontend record for ``stage``.

    Raises:
        ConfigNotFoundError: If the stage has no frontend entry.
    """
    return _lookup(FRONTEND_CONFIGS, "frontend", stage)


def resolve_stage(node: Node) -> str:
    """Read the active stage from CDK context, defaulting to ``dev``."""
    return node.try_get_context(CONTEXT_STAGE) or DEFAULT_STAGE


def parameter_name(stage: str, name: str) -> str:
    """SSM parameter path used to publish values for ``stage``."""
    return f"/{EnvironmentConfig(stage=stage).resource_prefix}/{name}"

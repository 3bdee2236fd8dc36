"""Stack composition for the CDK application.

Reads the deployment context once, plans which stacks the stage gets, and
builds them in dependency order: database, API, frontend, then monitoring.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import aws_cdk as cdk
from aws_cdk import Stack, Tags

from infra.api_stack import ApiStack
from infra.config import (
    CONTEXT_ALERT_EMAIL,
    CONTEXT_REGION,
    DEFAULT_REGION,
    DEFAULT_STAGE,
    EnvironmentConfig,
    resolve_stage,
)
from infra.database_stack import DatabaseStack
from infra.frontend_stack import FrontendStack
from infra.monitoring_stack import MonitoringStack

logger = logging.getLogger(__name__)

DATABASE = "database"
API = "api"
FRONTEND = "frontend"
MONITORING = "monitoring"

_CORE_STACKS = (DATABASE, API, FRONTEND)


@dataclass(frozen=True)
class ComposedStacks:
    """Handles to every stack built for one stage."""

    database: DatabaseStack
    api: ApiStack
    frontend: FrontendStack
    monitoring: MonitoringStack | None = None

    def all(self) -> list[Stack]:
        stacks: list[Stack] = [self.database, self.api, self.frontend]
        if self.monitoring is not None:
            stacks.append(self.monitoring)
        return stacks


def stacks_for_stage(stage: str) -> tuple[str, ...]:
    """Return the ordered stack names to build for ``stage``.

    Development skips monitoring.
    """
    if stage == DEFAULT_STAGE:
        return _CORE_STACKS
    return (*_CORE_STACKS, MONITORING)


def read_environment_config(app: cdk.App) -> EnvironmentConfig:
    """Build the deployment config from CDK context values."""
    node = app.node
    return EnvironmentConfig(
        stage=resolve_stage(node),
        aws_region=node.try_get_context(CONTEXT_REGION) or DEFAULT_REGION,
        aws_account_id=os.environ.get("CDK_DEFAULT_ACCOUNT"),
        alert_email=node.try_get_context(CONTEXT_ALERT_EMAIL) or None,
    )


def compose(app: cdk.App, config: EnvironmentConfig, *, code_path: str = ".") -> ComposedStacks:
    """Instantiate the stacks planned for ``config.stage``.

    Raises:
        ConfigNotFoundError: If any subsystem has no entry for the stage.
    """
    stage = config.stage
    plan = stacks_for_stage(stage)
    logger.info("Composing stacks for stage %s: %s", stage, ", ".join(plan))

    env = cdk.Environment(account=config.aws_account_id, region=config.aws_region)

    database = DatabaseStack(
        app,
        f"Database-{stage}",
        stage=stage,
        env=env,
        description=f"Items DynamoDB table ({stage})",
    )

    api = ApiStack(
        app,
        f"Api-{stage}",
        table=database.table,
        stage=stage,
        code_path=code_path,
        env=env,
        description=f"Items API and handler ({stage})",
    )
    api.add_dependency(database)

    frontend = FrontendStack(
        app,
        f"Frontend-{stage}",
        api_url=api.api_url,
        stage=stage,
        env=env,
        description=f"Frontend site delivery ({stage})",
    )
    frontend.add_dependency(api)

    monitoring = None
    if MONITORING in plan:
        monitoring = MonitoringStack(
            app,
            f"Monitoring-{stage}",
            function=api.function,
            table=database.table,
            alert_email=config.alert_email,
            stage=stage,
            env=env,
            description=f"Alarms and alert topic ({stage})",
        )
        monitoring.add_dependency(api)

    return ComposedStacks(database=database, api=api, frontend=frontend, monitoring=monitoring)


def apply_standard_tags(app: cdk.App, config: EnvironmentConfig) -> None:
    """Tag every top-level stack with the environment and project."""
    for child in app.node.children:
        if isinstance(child, Stack):
            for key, value in config.tags.items():
                Tags.of(child).add(key, value)

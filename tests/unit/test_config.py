"""Unit tests for the stage configuration tables."""

import aws_cdk as cdk
import pytest

from infra.config import (
    API_CONFIGS,
    DATABASE_CONFIGS,
    FRONTEND_CONFIGS,
    ConfigNotFoundError,
    EnvironmentConfig,
    get_api_config,
    get_database_config,
    get_frontend_config,
    parameter_name,
    resolve_stage,
)

STAGES = ["dev", "staging", "prod"]


class TestEnvironmentConfig:
    def test_resource_prefix(self) -> None:
        config = EnvironmentConfig(stage="dev")
        assert config.resource_prefix == "modular-cdk-app-dev"

    def test_resource_name(self) -> None:
        config = EnvironmentConfig(stage="staging")
        assert config.resource_name("site") == "modular-cdk-app-staging-site"

    def test_tags(self) -> None:
        config = EnvironmentConfig(stage="prod")
        assert config.tags == {"Environment": "prod", "Project": "ModularCDKExample"}

    def test_extra_tags_merged(self) -> None:
        config = EnvironmentConfig(stage="prod", extra_tags={"Owner": "platform"})
        assert config.tags["Owner"] == "platform"
        assert config.tags["Environment"] == "prod"

    def test_defaults(self) -> None:
        config = EnvironmentConfig(stage="dev")
        assert config.aws_region == "us-east-1"
        assert config.alert_email is None

    def test_frozen(self) -> None:
        config = EnvironmentConfig(stage="dev")
        with pytest.raises(AttributeError):
            config.stage = "prod"  # type: ignore[misc]


class TestStageTables:
    @pytest.mark.parametrize("stage", STAGES)
    def test_every_stage_has_every_subsystem(self, stage: str) -> None:
        assert get_database_config(stage) is DATABASE_CONFIGS[stage]
        assert get_api_config(stage) is API_CONFIGS[stage]
        assert get_frontend_config(stage) is FRONTEND_CONFIGS[stage]

    @pytest.mark.parametrize("stage", STAGES)
    def test_records_complete(self, stage: str) -> None:
        database = get_database_config(stage)
        api = get_api_config(stage)
        frontend = get_frontend_config(stage)

        assert database.table_name == f"my-app-{stage}-table"
        assert api.api_name == f"my-app-{stage}-api"
        assert api.throttle_burst_limit == 2 * api.throttle_rate_limit
        assert isinstance(frontend.enable_cloudfront, bool)

    def test_dev_values(self) -> None:
        assert get_database_config("dev").enable_backups is False
        assert get_database_config("dev").ttl_enabled is True
        assert get_api_config("dev").enable_cors is True
        assert get_api_config("dev").throttle_rate_limit == 100
        assert get_frontend_config("dev").enable_cloudfront is False
        assert get_frontend_config("dev").domain_name is None

    def test_prod_values(self) -> None:
        assert get_database_config("prod").enable_backups is True
        assert get_database_config("prod").ttl_enabled is False
        assert get_api_config("prod").enable_cors is False
        assert get_api_config("prod").throttle_rate_limit == 1000
        assert get_frontend_config("prod").domain_name == "myapp.com"

    def test_records_frozen(self) -> None:
        with pytest.raises(AttributeError):
            get_api_config("dev").enable_cors = False  # type: ignore[misc]


class TestConfigNotFound:
    @pytest.mark.parametrize(
        ("lookup", "subsystem"),
        [
            (get_database_config, "database"),
            (get_api_config, "API"),
            (get_frontend_config, "frontend"),
        ],
    )
    def test_unknown_stage_raises(self, lookup, subsystem: str) -> None:
        with pytest.raises(ConfigNotFoundError, match=f"No {subsystem} configuration found for stage: qa"):
            lookup("qa")

    def test_error_carries_stage(self) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            get_database_config("qa")
        assert exc_info.value.stage == "qa"
        assert exc_info.value.subsystem == "database"

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            get_api_config("")


class TestResolveStage:
    def test_defaults_to_dev(self) -> None:
        app = cdk.App()
        assert resolve_stage(app.node) == "dev"

    def test_reads_context(self) -> None:
        app = cdk.App(context={"stage": "prod"})
        assert resolve_stage(app.node) == "prod"


class TestParameterName:
    def test_path(self) -> None:
        assert parameter_name("staging", "api-url") == "/modular-cdk-app-staging/api-url"

"""Unit tests for the Database CDK stack."""

import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Match, Template

from infra.config import ConfigNotFoundError
from infra.database_stack import DatabaseStack

_ENV = cdk.Environment(account="123456789012", region="us-east-1")


def _synth_template(stage: str | None = None, context: dict | None = None) -> Template:
    app = cdk.App(context=context)
    stack = DatabaseStack(app, "TestDatabase", stage=stage, env=_ENV)
    return Template.from_stack(stack)


class TestDatabaseStackTable:
    """Tests that the single items table is created."""

    def test_one_table_created(self) -> None:
        template = _synth_template("dev")
        template.resource_count_is("AWS::DynamoDB::Table", 1)

    def test_table_name_from_config(self) -> None:
        template = _synth_template("staging")
        template.has_resource_properties(
            "AWS::DynamoDB::Table", {"TableName": "my-app-staging-table"}
        )

    def test_partition_key(self) -> None:
        template = _synth_template("dev")
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "KeySchema": [{"AttributeName": "pk", "KeyType": "HASH"}],
                "BillingMode": "PAY_PER_REQUEST",
            },
        )

    def test_table_retained(self) -> None:
        template = _synth_template("dev")
        template.has_resource(
            "AWS::DynamoDB::Table",
            {"DeletionPolicy": "Retain", "UpdateReplacePolicy": "Retain"},
        )


class TestDatabaseStackStageSettings:
    """Tests for per-stage backups and TTL."""

    def test_dev_backups_off(self) -> None:
        template = _synth_template("dev")
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {"PointInTimeRecoverySpecification": {"PointInTimeRecoveryEnabled": False}},
        )

    def test_prod_backups_on(self) -> None:
        template = _synth_template("prod")
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {"PointInTimeRecoverySpecification": {"PointInTimeRecoveryEnabled": True}},
        )

    def test_staging_ttl_enabled(self) -> None:
        template = _synth_template("staging")
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {"TimeToLiveSpecification": {"AttributeName": "ttl", "Enabled": True}},
        )

    def test_prod_ttl_disabled(self) -> None:
        template = _synth_template("prod")
        template.has_resource_properties(
            "AWS::DynamoDB::Table", {"TimeToLiveSpecification": Match.absent()}
        )


class TestDatabaseStackStageResolution:
    """Tests for reading the stage from context."""

    def test_stage_from_context(self) -> None:
        template = _synth_template(context={"stage": "prod"})
        template.has_resource_properties(
            "AWS::DynamoDB::Table", {"TableName": "my-app-prod-table"}
        )

    def test_defaults_to_dev(self) -> None:
        template = _synth_template()
        template.has_resource_properties(
            "AWS::DynamoDB::Table", {"TableName": "my-app-dev-table"}
        )

    def test_unknown_stage_fails(self) -> None:
        with pytest.raises(ConfigNotFoundError, match="stage: qa"):
            _synth_template("qa")

    def test_stage_attribute(self) -> None:
        app = cdk.App(context={"stage": "staging"})
        stack = DatabaseStack(app, "TestDatabase", env=_ENV)
        assert stack.stage == "staging"


class TestDatabaseStackOutputs:
    """Tests for stack outputs."""

    def test_outputs_present(self) -> None:
        template = _synth_template("dev")
        template.has_output("TableName", {})
        template.has_output("TableArn", {})

"""DynamoDB CDK stack holding the single items table."""

from __future__ import annotations

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct

from infra.components.dynamo_table import DynamoTable, DynamoTableProps
from infra.config import get_database_config, resolve_stage

TTL_ATTRIBUTE = "ttl"


class DatabaseStack(Stack):
    """Items table for the stage, exposed as :attr:`table`."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        stage: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.stage = stage or resolve_stage(self.node)
        config = get_database_config(self.stage)

        table_construct = DynamoTable(
            self,
            "AppTable",
            DynamoTableProps(
                table_name=config.table_name,
                enable_point_in_time_recovery=config.enable_backups,
                ttl_attribute=TTL_ATTRIBUTE if config.ttl_enabled else None,
            ),
        )
        self.table: dynamodb.ITable = table_construct.table
        self.table.node.add_metadata("stage", self.stage)

        self._create_outputs()

    def _create_outputs(self) -> None:
        CfnOutput(
            self,
            "TableName",
            value=self.table.table_name,
            description="Items DynamoDB table name",
        )
        CfnOutput(
            self,
            "TableArn",
            value=self.table.table_arn,
            description="Items DynamoDB table ARN",
        )

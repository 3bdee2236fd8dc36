"""DynamoDB table construct with the project's storage defaults.

Every table is keyed on a single string partition key ``pk`` and billed
on demand. Point-in-time recovery and retain-on-delete are on unless the
caller turns them off explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct

PARTITION_KEY_NAME = "pk"


@dataclass(frozen=True)
class DynamoTableProps:
    table_name: str
    enable_point_in_time_recovery: bool | None = None
    removal_policy: RemovalPolicy | None = None
    ttl_attribute: str | None = None


class DynamoTable(Construct):
    """Single-table key-value store keyed on ``pk``."""

    def __init__(self, scope: Construct, construct_id: str, props: DynamoTableProps) -> None:
        super().__init__(scope, construct_id)

        pitr = (
            True
            if props.enable_point_in_time_recovery is None
            else props.enable_point_in_time_recovery
        )

        self.table = dynamodb.Table(
            self,
            "Table",
            table_name=props.table_name,
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            partition_key=dynamodb.Attribute(
                name=PARTITION_KEY_NAME, type=dynamodb.AttributeType.STRING
            ),
            point_in_time_recovery_specification=dynamodb.PointInTimeRecoverySpecification(
                point_in_time_recovery_enabled=pitr,
            ),
            time_to_live_attribute=props.ttl_attribute,
            removal_policy=props.removal_policy or RemovalPolicy.RETAIN,
        )

"""Lambda function construct with a least-privilege role and owned log group."""

from __future__ import annotations

from dataclasses import dataclass, field

from aws_cdk import Duration, RemovalPolicy
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_logs as logs
from constructs import Construct

DEFAULT_HANDLER = "runtime.handlers.items.handler"
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_MEMORY_MB = 128

# Paths never shipped inside the function asset
ASSET_EXCLUDES = [
    "cdk.out",
    "tests",
    "infra",
    ".git",
    ".venv",
    "**/__pycache__",
    ".pytest_cache",
    ".hypothesis",
    "*.md",
    "*.txt",
    "*.toml",
    "cdk*.json",
    "app.py",
]


@dataclass(frozen=True)
class LambdaFunctionProps:
    function_name: str
    code_path: str = "."
    handler: str = DEFAULT_HANDLER
    runtime: _lambda.Runtime | None = None
    timeout: Duration | None = None
    memory_size: int | None = None
    environment: dict[str, str] = field(default_factory=dict)
    log_retention: logs.RetentionDays | None = None
    description: str | None = None


class LambdaFunction(Construct):
    """Function, execution role, and log group created together.

    The role starts with only ``AWSLambdaBasicExecutionRole``; callers add
    data-plane permissions through :meth:`add_to_role_policy`. The log group
    is destroyed with the stack.
    """

    def __init__(self, scope: Construct, construct_id: str, props: LambdaFunctionProps) -> None:
        super().__init__(scope, construct_id)

        self.role = iam.Role(
            self,
            "Role",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                ),
            ],
            max_session_duration=Duration.hours(1),
            description=f"IAM role for Lambda function {props.function_name}",
        )

        self.log_group = logs.LogGroup(
            self,
            "LogGroup",
            log_group_name=f"/aws/lambda/{props.function_name}",
            retention=props.log_retention or logs.RetentionDays.TWO_WEEKS,
            removal_policy=RemovalPolicy.DESTROY,
        )

        self.function = _lambda.Function(
            self,
            "Function",
            function_name=props.function_name,
            runtime=props.runtime or _lambda.Runtime.PYTHON_3_11,
            handler=props.handler,
            code=_lambda.Code.from_asset(props.code_path, exclude=ASSET_EXCLUDES),
            role=self.role,
            timeout=props.timeout or Duration.seconds(DEFAULT_TIMEOUT_SECONDS),
            memory_size=props.memory_size or DEFAULT_MEMORY_MB,
            environment=dict(props.environment),
            log_group=self.log_group,
            description=props.description,
        )

    def add_to_role_policy(self, statement: iam.PolicyStatement) -> None:
        self.role.add_to_policy(statement)

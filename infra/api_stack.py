"""API CDK stack: the items Lambda and the REST API in front of it.

The function gets exactly the six DynamoDB actions the handler needs,
scoped to the one table passed in from the database stack.
"""

from __future__ import annotations

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.components.api_gateway import ApiGateway, ApiGatewayProps
from infra.components.lambda_function import LambdaFunction, LambdaFunctionProps
from infra.config import get_api_config, resolve_stage

TABLE_ACTIONS = [
    "dynamodb:GetItem",
    "dynamodb:PutItem",
    "dynamodb:UpdateItem",
    "dynamodb:DeleteItem",
    "dynamodb:Query",
    "dynamodb:Scan",
]

# (path, method) pairs all served by the single items function
ITEM_ROUTES = [
    ("/items", "GET"),
    ("/items", "POST"),
    ("/items/{id}", "GET"),
    ("/items/{id}", "PUT"),
    ("/items/{id}", "DELETE"),
]


class ApiStack(Stack):
    """Items function and API Gateway, exposing :attr:`function` and :attr:`api_url`."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        table: dynamodb.ITable,
        stage: str | None = None,
        code_path: str = ".",
        **kwargs: object,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.stage = stage or resolve_stage(self.node)
        config = get_api_config(self.stage)

        # --- Lambda Function ---
        lambda_construct = LambdaFunction(
            self,
            "ApiFunction",
            LambdaFunctionProps(
                function_name=f"{config.api_name}-handler",
                code_path=code_path,
                environment={
                    "TABLE_NAME": table.table_name,
                    "STAGE": self.stage,
                    "LOG_LEVEL": "DEBUG" if self.stage == "dev" else "INFO",
                },
                description=f"Items CRUD handler ({self.stage})",
            ),
        )
        self.function: _lambda.IFunction = lambda_construct.function

        lambda_construct.add_to_role_policy(
            iam.PolicyStatement(
                effect=iam.Effect.ALLOW,
                actions=TABLE_ACTIONS,
                resources=[table.table_arn],
            )
        )

        # --- API Gateway ---
        api_construct = ApiGateway(
            self,
            "Api",
            ApiGatewayProps(
                api_name=config.api_name,
                description=f"API for {self.stage} environment",
                enable_cors=config.enable_cors,
                stage_name=self.stage,
                throttle_rate_limit=config.throttle_rate_limit,
                throttle_burst_limit=config.throttle_burst_limit,
            ),
        )
        for path, method in ITEM_ROUTES:
            api_construct.add_lambda_integration(path, method, self.function)

        self.api_url: str = api_construct.url

        self._create_outputs()

    def _create_outputs(self) -> None:
        CfnOutput(
            self,
            "ApiUrl",
            value=self.api_url,
            description="Items API base URL",
        )
        CfnOutput(
            self,
            "ApiFunctionName",
            value=self.function.function_name,
            description="Items Lambda function name",
        )

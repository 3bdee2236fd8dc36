"""REST API construct with optional permissive CORS and per-path Lambda bindings."""

from __future__ import annotations

from dataclasses import dataclass

from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

CORS_ALLOWED_HEADERS = ["Content-Type", "Authorization"]


@dataclass(frozen=True)
class ApiGatewayProps:
    api_name: str
    description: str | None = None
    enable_cors: bool = False
    stage_name: str = "prod"
    throttle_rate_limit: int | None = None
    throttle_burst_limit: int | None = None


class ApiGateway(Construct):
    """API Gateway REST API whose methods are registered one at a time."""

    def __init__(self, scope: Construct, construct_id: str, props: ApiGatewayProps) -> None:
        super().__init__(scope, construct_id)

        cors = (
            apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
                allow_headers=CORS_ALLOWED_HEADERS,
            )
            if props.enable_cors
            else None
        )

        self.api = apigw.RestApi(
            self,
            "Api",
            rest_api_name=props.api_name,
            description=props.description,
            default_cors_preflight_options=cors,
            deploy_options=apigw.StageOptions(
                stage_name=props.stage_name,
                throttling_rate_limit=props.throttle_rate_limit,
                throttling_burst_limit=props.throttle_burst_limit,
            ),
        )

    @property
    def url(self) -> str:
        return self.api.url

    def add_lambda_integration(
        self, path: str, method: str, function: _lambda.IFunction
    ) -> apigw.Method:
        """Bind ``method`` on ``path`` to ``function`` via proxy integration."""
        resource = self.api.root.resource_for_path(path)
        return resource.add_method(method, apigw.LambdaIntegration(function))

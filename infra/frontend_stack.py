"""Frontend CDK stack: static site bucket and optional CloudFront delivery.

The API base URL from the API stack is published as an output and an SSM
parameter so the frontend build can discover it.
"""

from __future__ import annotations

from aws_cdk import CfnOutput, RemovalPolicy, Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_ssm as ssm
from constructs import Construct

from infra.components.s3_bucket import S3Bucket, S3BucketProps
from infra.config import FrontendConfig, get_frontend_config, parameter_name, resolve_stage


class FrontendStack(Stack):
    """Site bucket (:attr:`bucket`) and, where enabled, :attr:`distribution`."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        api_url: str,
        stage: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.stage = stage or resolve_stage(self.node)
        config = get_frontend_config(self.stage)
        self.api_url = api_url

        bucket_construct = S3Bucket(
            self,
            "SiteBucket",
            S3BucketProps(
                enable_versioning=config.enable_versioning,
                removal_policy=(
                    RemovalPolicy.DESTROY if self.stage == "dev" else RemovalPolicy.RETAIN
                ),
            ),
        )
        self.bucket = bucket_construct.bucket

        self.distribution: cloudfront.Distribution | None = None
        if config.enable_cloudfront:
            self.distribution = self._create_distribution()

        self._publish_ssm_params()
        self._create_outputs(config)

    def _create_distribution(self) -> cloudfront.Distribution:
        """Serve the private bucket through CloudFront origin access control."""
        return cloudfront.Distribution(
            self,
            "SiteDistribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3BucketOrigin.with_origin_access_control(self.bucket),
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                cache_policy=cloudfront.CachePolicy.CACHING_OPTIMIZED,
            ),
            default_root_object="index.html",
            comment=f"Frontend distribution ({self.stage})",
        )

    def _publish_ssm_params(self) -> None:
        ssm.StringParameter(
            self,
            "SsmApiUrl",
            parameter_name=parameter_name(self.stage, "api-url"),
            string_value=self.api_url,
            description="Items API base URL for the frontend build",
        )

    def _create_outputs(self, config: FrontendConfig) -> None:
        CfnOutput(
            self,
            "SiteBucketName",
            value=self.bucket.bucket_name,
            description="Frontend site bucket name",
        )
        CfnOutput(
            self,
            "ApiUrl",
            value=self.api_url,
            description="Items API base URL used by the frontend",
        )
        if self.distribution is not None:
            CfnOutput(
                self,
                "DistributionDomainName",
                value=self.distribution.distribution_domain_name,
                description="CloudFront distribution domain name",
            )
        if config.domain_name:
            CfnOutput(
                self,
                "SiteDomainName",
                value=config.domain_name,
                description="Public domain the site is served under",
            )

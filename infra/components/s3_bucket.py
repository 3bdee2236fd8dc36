"""S3 bucket construct with encryption, TLS, and owner-enforced objects."""

from __future__ import annotations

from dataclasses import dataclass

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


@dataclass(frozen=True)
class S3BucketProps:
    bucket_name: str | None = None
    enable_versioning: bool = False
    removal_policy: RemovalPolicy | None = None
    block_public_access: bool = True


class S3Bucket(Construct):
    """Private-by-default bucket; public access needs an explicit opt-out."""

    def __init__(self, scope: Construct, construct_id: str, props: S3BucketProps) -> None:
        super().__init__(scope, construct_id)

        public_access = (
            s3.BlockPublicAccess.BLOCK_ALL
            if props.block_public_access
            else s3.BlockPublicAccess(
                block_public_acls=False,
                block_public_policy=False,
                ignore_public_acls=False,
                restrict_public_buckets=False,
            )
        )

        self.bucket = s3.Bucket(
            self,
            "Bucket",
            bucket_name=props.bucket_name,
            versioned=props.enable_versioning,
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=public_access,
            enforce_ssl=True,
            object_ownership=s3.ObjectOwnership.BUCKET_OWNER_ENFORCED,
            removal_policy=props.removal_policy or RemovalPolicy.RETAIN,
        )

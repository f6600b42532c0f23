"""Pulumi resources to create and configure a private S3 bucket"""

from __future__ import annotations

import pulumi
from pulumi_aws import iam, s3

from .helpers import format_resource_name


class Bucket(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create a private, encrypted and versioned bucket.

    Public access is always blocked and requests not made over TLS are denied.

    :param name str: The logical name of the bucket, the physical name is generated.
    :param versioned bool: Keep every version of the objects (default True).
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        versioned: bool = True,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the Bucket class.
        """
        self.name = name
        self.resource_name = f"{format_resource_name(name, self)}-bucket"
        super().__init__("aijay:foundations:Bucket", self.name, {}, opts)
        child_opts = pulumi.ResourceOptions.merge(
            opts, pulumi.ResourceOptions(parent=self)
        )

        self.bucket = s3.Bucket(
            self.resource_name,
            bucket_prefix=f"{format_resource_name(name, self)}-",
            opts=child_opts,
        )

        self.public_access_block = s3.BucketPublicAccessBlock(
            f"{self.resource_name}-public-access-block",
            bucket=self.bucket.id,
            block_public_acls=True,
            block_public_policy=True,
            ignore_public_acls=True,
            restrict_public_buckets=True,
            opts=child_opts,
        )

        self.encryption = s3.BucketServerSideEncryptionConfiguration(
            f"{self.resource_name}-encryption",
            bucket=self.bucket.id,
            rules=[
                s3.BucketServerSideEncryptionConfigurationRuleArgs(
                    apply_server_side_encryption_by_default=s3.BucketServerSideEncryptionConfigurationRuleApplyServerSideEncryptionByDefaultArgs(  # noqa: E501
                        sse_algorithm="AES256",
                    ),
                )
            ],
            opts=child_opts,
        )

        self.versioning = s3.BucketVersioning(
            f"{self.resource_name}-versioning",
            bucket=self.bucket.id,
            versioning_configuration=s3.BucketVersioningVersioningConfigurationArgs(
                status="Enabled" if versioned else "Suspended",
            ),
            opts=child_opts,
        )

        self.policy_statements = [
            {
                "effect": "Deny",
                "principals": [{"type": "*", "identifiers": ["*"]}],
                "actions": ["s3:*"],
                "resources": [
                    self.bucket.arn,
                    self.bucket.arn.apply(lambda arn: f"{arn}/*"),
                ],
                "conditions": [
                    {
                        "test": "Bool",
                        "variable": "aws:SecureTransport",
                        "values": ["false"],
                    }
                ],
            }
        ]

        self.policy = s3.BucketPolicy(
            f"{self.resource_name}-enforce-ssl",
            bucket=self.bucket.id,
            policy=iam.get_policy_document_output(
                statements=self.policy_statements,
            ).json,
            # S3 rejects the policy while the public access block is being applied
            opts=pulumi.ResourceOptions.merge(
                child_opts,
                pulumi.ResourceOptions(depends_on=[self.public_access_block]),
            ),
        )

        self.arn = self.bucket.arn
        self.bucket_name = self.bucket.bucket
        self.register_outputs({"bucket": self.bucket, "arn": self.bucket.arn})

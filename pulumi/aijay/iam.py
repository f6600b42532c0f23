"""Pulumi resources to create and configure IAM Roles"""

from __future__ import annotations

from typing import Any

import pulumi
from pulumi_aws import iam

from .helpers import format_resource_name

BASIC_EXECUTION_POLICY_ARN = (
    "arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole"
)

TABLE_READ_WRITE_ACTIONS = [
    "dynamodb:BatchGetItem",
    "dynamodb:BatchWriteItem",
    "dynamodb:ConditionCheckItem",
    "dynamodb:DeleteItem",
    "dynamodb:DescribeTable",
    "dynamodb:GetItem",
    "dynamodb:GetRecords",
    "dynamodb:GetShardIterator",
    "dynamodb:PutItem",
    "dynamodb:Query",
    "dynamodb:Scan",
    "dynamodb:UpdateItem",
]

BUCKET_READ_WRITE_ACTIONS = [
    "s3:Abort*",
    "s3:DeleteObject*",
    "s3:GetBucket*",
    "s3:GetObject*",
    "s3:List*",
    "s3:PutObject",
    "s3:PutObjectLegalHold",
    "s3:PutObjectRetention",
    "s3:PutObjectTagging",
    "s3:PutObjectVersionTagging",
]

Statement = dict[str, Any]


def table_read_write(*arns: pulumi.Input[str]) -> Statement:
    """Allow reading and writing items of the given tables."""
    return {
        "effect": "Allow",
        "actions": TABLE_READ_WRITE_ACTIONS,
        "resources": list(arns),
    }


def bucket_read_write(*arns: pulumi.Output[str]) -> Statement:
    """Allow reading and writing objects of the given buckets."""
    resources: list[pulumi.Input[str]] = []
    for arn in arns:
        resources.extend([arn, arn.apply(lambda value: f"{value}/*")])
    return {
        "effect": "Allow",
        "actions": BUCKET_READ_WRITE_ACTIONS,
        "resources": resources,
    }


class LambdaRole(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create a IAM LambdaRole.

    :param name str: The name of the role to create.
    :param permissions list[Statement]: The statements of the inline policy to create.
    :param path str: The path for the role.
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        permissions: list[Statement],
        path: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the IAM class.
        """
        self.name = name
        self.permissions = permissions
        self.resource_name = f"{format_resource_name(name, self)}-role"
        super().__init__("aijay:foundations:LambdaRole", self.name, {}, opts)
        path = path or "/"
        child_opts = pulumi.ResourceOptions.merge(
            opts, pulumi.ResourceOptions(parent=self)
        )

        self.role = iam.Role(
            self.resource_name,
            name=self.name,
            path=path,
            assume_role_policy=iam.get_policy_document(
                statements=[
                    {
                        "effect": "Allow",
                        "principals": [
                            {
                                "type": "Service",
                                "identifiers": ["lambda.amazonaws.com"],
                            }
                        ],
                        "actions": ["sts:AssumeRole"],
                    }
                ]
            ).json,
            opts=child_opts,
        )

        iam.RolePolicyAttachment(
            f"{self.resource_name}-basic-execution",
            role=self.role.name,
            policy_arn=BASIC_EXECUTION_POLICY_ARN,
            opts=child_opts,
        )

        iam.RolePolicy(
            f"{self.resource_name}-inline-policy",
            name=f"{self.resource_name}-inline-policy",
            role=self.role.id,
            policy=iam.get_policy_document_output(
                statements=permissions,
            ).json,
            opts=child_opts,
        )

        self.arn = self.role.arn
        self.register_outputs({"lambdarole": self.role})

"""Pulumi resources to create and configure a DynamoDB table on AWS"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import pulumi
from pulumi_aws import dynamodb

from .helpers import format_resource_name


class TableAttributeType(StrEnum):
    """Scalar types allowed for key attributes"""

    STRING = "S"
    NUMBER = "N"
    BINARY = "B"


@dataclass
class TableAttribute:
    """Class TableAttribute to define a key attribute"""

    name: str
    type: TableAttributeType


class Table(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create an on-demand table.

    :param name str: The name of the table to create.
    :param hash_key TableAttribute: The partition key of the table.
    :param range_key TableAttribute | None: The sort key of the table.
    :param ttl str | None: The attribute holding the expiry epoch of an item.
    :param point_in_time_recovery bool: Enable continuous backups (default True).
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        hash_key: TableAttribute,
        range_key: TableAttribute | None = None,
        ttl: str | None = None,
        point_in_time_recovery: bool = True,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the Table class.
        """
        self.name = name
        self.hash_key = hash_key
        self.range_key = range_key
        self.ttl = ttl
        self.resource_name = f"{format_resource_name(name, self)}-table"
        super().__init__("aijay:foundations:Table", self.name, {}, opts)

        ttl_attribute = (
            dynamodb.TableTtlArgs(
                attribute_name=ttl,
                enabled=True,
            )
            if ttl
            else None
        )
        keys = [hash_key, range_key] if range_key else [hash_key]

        self.table = dynamodb.Table(
            self.resource_name,
            name=self.name,
            billing_mode="PAY_PER_REQUEST",
            hash_key=hash_key.name,
            range_key=range_key.name if range_key else None,
            attributes=[
                dynamodb.TableAttributeArgs(
                    name=attr.name,
                    type=attr.type,
                )
                for attr in keys
            ],
            point_in_time_recovery=dynamodb.TablePointInTimeRecoveryArgs(
                enabled=point_in_time_recovery,
            ),
            ttl=ttl_attribute,
            opts=pulumi.ResourceOptions.merge(
                opts, pulumi.ResourceOptions(parent=self, delete_before_replace=True)
            ),
        )

        self.arn = self.table.arn
        self.table_name = self.table.name
        self.register_outputs({"table": self.table, "arn": self.table.arn})

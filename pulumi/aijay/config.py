"""Deployment target configuration"""

from __future__ import annotations

import pulumi
from pulumi_aws import get_caller_identity
from pydantic.dataclasses import dataclass

CONFIG_NAMESPACE = "aijay"
DEFAULT_REGION = "ap-southeast-2"


@dataclass(frozen=True)
class DeploymentContext:
    """
    The target of a deployment.

    :param account str | None: The AWS account identifier to deploy into.
    :param region str: The AWS region to deploy into.
    """

    account: str | None = None
    region: str = DEFAULT_REGION

    @classmethod
    def from_config(cls) -> DeploymentContext:
        """
        Read the deployment target from the `aijay` Pulumi config namespace.

        Without an explicit `aijay:account` the account of the current
        credentials is used.
        """
        config = pulumi.Config(CONFIG_NAMESPACE)
        account = config.get("account") or get_caller_identity().account_id
        return cls(account=account, region=config.get("region") or DEFAULT_REGION)

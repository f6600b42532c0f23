"""Pulumi resources to create and configure Lambda functions"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import pulumi
from pulumi_aws import cloudwatch, lambda_

from .helpers import format_resource_name

if TYPE_CHECKING:
    from .iam import LambdaRole


class FunctionRuntime(Enum):
    """The environment of the function executing the code"""

    PYTHON = lambda_.Runtime.PYTHON3D12


@dataclass
class HandlerEnvironment:
    """Identifiers of the resources the API handler works with"""

    users_table: pulumi.Input[str]
    sessions_table: pulumi.Input[str]
    bucket_name: pulumi.Input[str]
    user_pool_id: pulumi.Input[str]

    def variables(self) -> dict[str, pulumi.Input[str]]:
        """Environment variables exposing the identifiers to the handler."""
        return {
            "USERS_TABLE": self.users_table,
            "SESSIONS_TABLE": self.sessions_table,
            "BUCKET_NAME": self.bucket_name,
            "USER_POOL_ID": self.user_pool_id,
        }


class Function(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create a Lambda function.

    :param name str: The name of the function to create.
    :param code pulumi.Archive: The archive with the code of the function.
    :param handler str: The entry point of the function, as `module.function`.
    :param memory int: The memory of the function to allocate (MB).
    :param timeout Optional[int]: The timeout in seconds for the function execution (default 3).
    :param code_runtime Optional[FunctionRuntime]: The type of the environment to execute the function (default Python).
    :param log_retention int: Days to keep the function logs (default 7).
    :param role Optional[LambdaRole]: The execution IAM role to use in the function.
    :param variables Optional[dict[str,str]]: The environmental variables to use inside the function.
    :param layers Optional[list[str]]: ARNs of the layers to attach to the function.
    :param source_code_hash Optional[str]: The SHA256 of the archive, the code is redeployed when it changes.
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        code: pulumi.Archive,
        handler: str,
        memory: int = 128,
        timeout: int | None = 3,
        code_runtime: FunctionRuntime | None = FunctionRuntime.PYTHON,
        log_retention: int = 7,
        role: LambdaRole | None = None,
        variables: dict[str, pulumi.Input[str]] | None = None,
        layers: list[pulumi.Input[str]] | None = None,
        source_code_hash: pulumi.Input[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the Function class.
        """
        self.name = name
        self.variables = variables or {}
        self.resource_name = f"{format_resource_name(name, self)}-function"
        super().__init__("aijay:foundations:Function", self.name, {}, opts)

        self.log_group = cloudwatch.LogGroup(
            self.resource_name,
            log_group_class="STANDARD",
            name=f"/aws/lambda/{self.name}",
            retention_in_days=log_retention,
            opts=pulumi.ResourceOptions.merge(
                opts, pulumi.ResourceOptions(parent=self)
            ),
        )

        self.function = lambda_.Function(
            self.resource_name,
            code=code,
            source_code_hash=source_code_hash,
            name=self.name,
            role=role.arn if role else None,
            handler=handler,
            runtime=code_runtime.value if code_runtime else None,
            environment=lambda_.FunctionEnvironmentArgs(
                variables=self.variables,
            ),
            layers=layers,
            memory_size=memory,
            timeout=timeout,
            opts=pulumi.ResourceOptions.merge(
                opts,
                pulumi.ResourceOptions(parent=self, depends_on=[self.log_group]),
            ),
        )

        self.arn = self.function.arn
        self.invoke_arn = self.function.invoke_arn
        self.function_name = self.function.name
        self.register_outputs({"function": self.function})

"""The AIJay foundations: identity, storage and the API in front of them"""

from __future__ import annotations

from pathlib import Path

import pulumi

from .api import CorsPolicy, HttpApi, HttpMethod, RouteBinding
from .config import DeploymentContext
from .function import Function, FunctionRuntime, HandlerEnvironment
from .helpers import domain_prefix, format_resource_name
from .iam import LambdaRole, bucket_read_write, table_read_write
from .identity import OAuthSettings, PasswordPolicy, UserPool, UserPoolClient
from .storage import Bucket
from .tables import Table, TableAttribute, TableAttributeType

APP_DIR = Path(__file__).resolve().parents[2] / "app"
API_HANDLER = "api_handler.handler"
CALLBACK_URL = "aijay://auth-callback"
LOGOUT_URL = "aijay://signout"


class FoundationsStack(pulumi.ComponentResource):
    """
    A Pulumi custom resource declaring every resource of the AIJay backend.

    :param name str: The name of the stack, used as prefix of the resources.
    :param context DeploymentContext: The account and region to deploy into.
    :param code pulumi.Archive | None: The archive of the API handler (default the `app` folder).
    :param layers list[str] | None: ARNs of the layers to attach to the API handler.
    :param source_code_hash str | None: The SHA256 of the handler archive.
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    :raises ValueError: If the context has no account.
    """

    def __init__(
        self,
        name: str,
        context: DeploymentContext,
        code: pulumi.Archive | None = None,
        layers: list[pulumi.Input[str]] | None = None,
        source_code_hash: pulumi.Input[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the FoundationsStack class.
        """
        # Validated before anything is registered
        self.domain_prefix = domain_prefix(context.account)
        self.name = name
        self.context = context
        prefix = format_resource_name(name)
        super().__init__("aijay:foundations:FoundationsStack", self.name, {}, opts)
        child_opts = pulumi.ResourceOptions(parent=self)

        # Identity
        self.user_pool = UserPool(
            f"{prefix}-users",
            domain_prefix=self.domain_prefix,
            self_sign_up=True,
            password_policy=PasswordPolicy(
                minimum_length=8,
                require_numbers=True,
                require_lowercase=True,
                require_uppercase=False,
                require_symbols=False,
            ),
            opts=child_opts,
        )
        self.client = UserPoolClient(
            f"{prefix}-ios",
            user_pool=self.user_pool,
            oauth=OAuthSettings(
                callback_urls=[CALLBACK_URL],
                logout_urls=[LOGOUT_URL],
            ),
            opts=child_opts,
        )

        # Storage
        self.bucket = Bucket(f"{prefix}-data", versioned=True, opts=child_opts)
        self.users_table = Table(
            f"{prefix}-Users",
            hash_key=TableAttribute(name="userId", type=TableAttributeType.STRING),
            opts=child_opts,
        )
        self.sessions_table = Table(
            f"{prefix}-Sessions",
            hash_key=TableAttribute(name="sessionId", type=TableAttributeType.STRING),
            range_key=TableAttribute(name="createdAt", type=TableAttributeType.STRING),
            ttl="ttl",
            opts=child_opts,
        )

        # API
        self.environment = HandlerEnvironment(
            users_table=self.users_table.table_name,
            sessions_table=self.sessions_table.table_name,
            bucket_name=self.bucket.bucket_name,
            user_pool_id=self.user_pool.user_pool_id,
        )
        self.role = LambdaRole(
            f"{prefix}-api",
            path=f"/{prefix}/",
            permissions=[
                table_read_write(self.users_table.arn, self.sessions_table.arn),
                bucket_read_write(self.bucket.arn),
            ],
            opts=child_opts,
        )
        self.handler = Function(
            f"{prefix}-api",
            code=code or pulumi.FileArchive(str(APP_DIR)),
            handler=API_HANDLER,
            code_runtime=FunctionRuntime.PYTHON,
            memory=128,
            timeout=10,
            log_retention=7,
            role=self.role,
            variables={
                **self.environment.variables(),
                "POWERTOOLS_SERVICE_NAME": "aijay-api",
                "LOG_LEVEL": "INFO",
            },
            layers=layers,
            source_code_hash=source_code_hash,
            opts=child_opts,
        )
        self.api = HttpApi(
            f"{prefix}-http",
            cors=CorsPolicy(
                allow_headers=["Authorization", "Content-Type"],
                allow_methods=[HttpMethod.ANY],
                allow_origins=["*"],  # tighten later
            ),
            routes=[RouteBinding(path="/ping", method=HttpMethod.GET, function=self.handler)],
            opts=child_opts,
        )

        self.outputs: dict[str, pulumi.Output[str]] = {
            "HttpApiUrl": self.api.api_endpoint,
            "UserPoolId": self.user_pool.user_pool_id,
            "UserPoolClientId": self.client.client_id,
            "CognitoDomain": self.user_pool.domain_name,
            "DataBucket": self.bucket.bucket_name,
        }
        self.register_outputs(self.outputs)

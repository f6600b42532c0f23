"""Pulumi resources to create and configure Cognito user pools and clients"""

from __future__ import annotations

from dataclasses import dataclass, field

import pulumi
from pulumi_aws import cognito

from .helpers import format_resource_name

DEFAULT_OAUTH_SCOPES = [
    "phone",
    "email",
    "openid",
    "profile",
    "aws.cognito.signin.user.admin",
]


@dataclass
class PasswordPolicy:
    """Password requirements enforced on sign up and password change"""

    minimum_length: int = 8
    require_numbers: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = False
    require_symbols: bool = False


@dataclass
class OAuthSettings:
    """OAuth configuration of a user pool client"""

    callback_urls: list[str]
    logout_urls: list[str]
    flows: list[str] = field(default_factory=lambda: ["code"])
    scopes: list[str] = field(default_factory=lambda: list(DEFAULT_OAUTH_SCOPES))


class UserPool(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create a user pool where users sign in with their email.

    :param name str: The name of the user pool to create.
    :param domain_prefix str: The prefix of the hosted UI domain.
    :param self_sign_up bool: Allow users to register themselves (default True).
    :param password_policy PasswordPolicy | None: The password requirements.
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        domain_prefix: str,
        self_sign_up: bool = True,
        password_policy: PasswordPolicy | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the UserPool class.
        """
        self.name = name
        self.password_policy = password_policy or PasswordPolicy()
        self.resource_name = f"{format_resource_name(name, self)}-user-pool"
        super().__init__("aijay:foundations:UserPool", self.name, {}, opts)
        child_opts = pulumi.ResourceOptions.merge(
            opts, pulumi.ResourceOptions(parent=self)
        )

        self.user_pool = cognito.UserPool(
            self.resource_name,
            name=self.name,
            username_attributes=["email"],
            auto_verified_attributes=["email"],
            admin_create_user_config=cognito.UserPoolAdminCreateUserConfigArgs(
                allow_admin_create_user_only=not self_sign_up,
            ),
            account_recovery_setting=cognito.UserPoolAccountRecoverySettingArgs(
                recovery_mechanisms=[
                    cognito.UserPoolAccountRecoverySettingRecoveryMechanismArgs(
                        name="verified_email",
                        priority=1,
                    )
                ],
            ),
            password_policy=cognito.UserPoolPasswordPolicyArgs(
                minimum_length=self.password_policy.minimum_length,
                require_numbers=self.password_policy.require_numbers,
                require_lowercase=self.password_policy.require_lowercase,
                require_uppercase=self.password_policy.require_uppercase,
                require_symbols=self.password_policy.require_symbols,
            ),
            schemas=[
                cognito.UserPoolSchemaArgs(
                    name="email",
                    attribute_data_type="String",
                    required=True,
                    mutable=False,
                    string_attribute_constraints=cognito.UserPoolSchemaStringAttributeConstraintsArgs(
                        min_length="0",
                        max_length="2048",
                    ),
                )
            ],
            opts=child_opts,
        )

        self.domain = cognito.UserPoolDomain(
            f"{self.resource_name}-domain",
            domain=domain_prefix,
            user_pool_id=self.user_pool.id,
            opts=child_opts,
        )

        self.user_pool_id = self.user_pool.id
        self.arn = self.user_pool.arn
        self.domain_name = self.domain.domain
        self.register_outputs(
            {"userpool": self.user_pool, "domain": self.domain.domain}
        )


class UserPoolClient(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create a public user pool client for native applications.

    The client has no secret, signs in with password or SRP and only trusts the
    user pool itself as identity provider.

    :param name str: The name of the client to create.
    :param user_pool UserPool: The user pool the client belongs to.
    :param oauth OAuthSettings: The OAuth flows and redirect URIs of the client.
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        user_pool: UserPool,
        oauth: OAuthSettings,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the UserPoolClient class.
        """
        self.name = name
        self.oauth = oauth
        self.resource_name = f"{format_resource_name(name, self)}-client"
        super().__init__("aijay:foundations:UserPoolClient", self.name, {}, opts)

        self.client = cognito.UserPoolClient(
            self.resource_name,
            name=self.name,
            user_pool_id=user_pool.user_pool_id,
            generate_secret=False,
            explicit_auth_flows=[
                "ALLOW_USER_PASSWORD_AUTH",
                "ALLOW_USER_SRP_AUTH",
                "ALLOW_REFRESH_TOKEN_AUTH",
            ],
            allowed_oauth_flows_user_pool_client=True,
            allowed_oauth_flows=oauth.flows,
            allowed_oauth_scopes=oauth.scopes,
            callback_urls=oauth.callback_urls,
            logout_urls=oauth.logout_urls,
            prevent_user_existence_errors="ENABLED",
            supported_identity_providers=["COGNITO"],
            opts=pulumi.ResourceOptions.merge(
                opts, pulumi.ResourceOptions(parent=self)
            ),
        )

        self.client_id = self.client.id
        self.register_outputs({"client": self.client})

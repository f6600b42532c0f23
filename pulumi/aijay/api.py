"""Pulumi resources to expose Lambda functions through an HTTP API Gateway"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

import pulumi
from pulumi_aws import apigatewayv2, lambda_

from .helpers import format_resource_name, pulumi_error, pulumi_warning

if TYPE_CHECKING:
    from .function import Function


class HttpMethod(StrEnum):
    """HTTP methods accepted by routes and CORS policies"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    ANY = "*"


@dataclass
class CorsPolicy:
    """
    Cross-origin policy answered by the API on preflight requests.

    :param allow_headers list[str]: Headers the browser may send.
    :param allow_methods list[HttpMethod]: Methods the browser may use.
    :param allow_origins list[str]: Origins allowed to call the API, `*` for any.
    """

    allow_headers: list[str] = field(default_factory=list)
    allow_methods: list[HttpMethod] = field(default_factory=list)
    allow_origins: list[str] = field(default_factory=list)

    @property
    def wildcard_origin(self) -> bool:
        """Whether any origin is allowed."""
        return "*" in self.allow_origins

    def to_args(self) -> apigatewayv2.ApiCorsConfigurationArgs:
        """Render the policy as API Gateway configuration."""
        return apigatewayv2.ApiCorsConfigurationArgs(
            allow_headers=self.allow_headers,
            allow_methods=[str(method) for method in self.allow_methods],
            allow_origins=self.allow_origins,
        )


@dataclass
class RouteBinding:
    """A path and method served by a function"""

    path: str
    method: HttpMethod
    function: Function

    @property
    def route_key(self) -> str:
        """The API Gateway route key, e.g. `GET /ping`."""
        return f"{self.method} {self.path}"


class HttpApi(pulumi.ComponentResource):
    """
    A Pulumi custom resource to create an HTTP API routing requests to Lambda functions.

    Every route is proxied to its function with payload format 2.0 and deployed
    on the auto-deployed `$default` stage.

    :param name str: The name of the API to create.
    :param cors CorsPolicy: The cross-origin policy of the API.
    :param routes list[RouteBinding] | None: The routes served by the API.
    :param opts pulumi.ResourceOptions | None: Pulumi resource options for the custom resource.
    """

    def __init__(
        self,
        name: str,
        cors: CorsPolicy,
        routes: list[RouteBinding] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """
        Initialize the HttpApi class.
        """
        self.name = name
        self.cors = cors
        self.routes: list[RouteBinding] = []
        self.route_resources: list[apigatewayv2.Route] = []
        self.resource_name = f"{format_resource_name(name, self)}-api"
        super().__init__("aijay:foundations:HttpApi", self.name, {}, opts)
        self._child_opts = pulumi.ResourceOptions.merge(
            opts, pulumi.ResourceOptions(parent=self)
        )

        if cors.wildcard_origin:
            pulumi_warning(
                f"{self.name} accepts requests from any origin, "
                "restrict `allow_origins` before going to production.",
                self,
            )

        self.api = apigatewayv2.Api(
            self.resource_name,
            name=self.name,
            protocol_type="HTTP",
            cors_configuration=cors.to_args(),
            opts=self._child_opts,
        )

        self.stage = apigatewayv2.Stage(
            f"{self.resource_name}-default-stage",
            api_id=self.api.id,
            name="$default",
            auto_deploy=True,
            opts=self._child_opts,
        )

        for route in routes or []:
            self.add_route(route)

        self.api_endpoint = self.api.api_endpoint
        self.register_outputs({"api": self.api, "endpoint": self.api.api_endpoint})

    def add_route(self, route: RouteBinding) -> apigatewayv2.Route:
        """
        Serve a path and method with a Lambda function.

        :param route: The binding to add.
        :return: The created route.
        :raises ValueError: If the path and method are already bound.
        """
        if any(existing.route_key == route.route_key for existing in self.routes):
            pulumi_error(f"Route {route.route_key} is already bound in {self.name}.", self)
        self.routes.append(route)
        route_name = format_resource_name(
            f"{self.resource_name}-{route.method.name}{route.path.replace('/', '_')}",
            self,
        )

        integration = apigatewayv2.Integration(
            f"{route_name}-integration",
            api_id=self.api.id,
            integration_type="AWS_PROXY",
            integration_uri=route.function.invoke_arn,
            integration_method="POST",
            payload_format_version="2.0",
            opts=self._child_opts,
        )

        lambda_.Permission(
            f"{route_name}-permission",
            action="lambda:InvokeFunction",
            function=route.function.function_name,
            principal="apigateway.amazonaws.com",
            source_arn=self.api.execution_arn.apply(lambda arn: f"{arn}/*/*"),
            opts=self._child_opts,
        )

        route_resource = apigatewayv2.Route(
            f"{route_name}-route",
            api_id=self.api.id,
            route_key=route.route_key,
            target=integration.id.apply(lambda id_: f"integrations/{id_}"),
            opts=self._child_opts,
        )
        self.route_resources.append(route_resource)
        return route_resource

"""Pulumi resources library"""

from .api import CorsPolicy, HttpApi, HttpMethod, RouteBinding
from .config import DeploymentContext
from .foundations import FoundationsStack
from .function import Function, FunctionRuntime, HandlerEnvironment
from .iam import LambdaRole
from .identity import OAuthSettings, PasswordPolicy, UserPool, UserPoolClient
from .storage import Bucket
from .tables import Table, TableAttribute, TableAttributeType

__all__ = [
    "Bucket",
    "CorsPolicy",
    "DeploymentContext",
    "FoundationsStack",
    "Function",
    "FunctionRuntime",
    "HandlerEnvironment",
    "HttpApi",
    "HttpMethod",
    "LambdaRole",
    "OAuthSettings",
    "PasswordPolicy",
    "RouteBinding",
    "Table",
    "TableAttribute",
    "TableAttributeType",
    "UserPool",
    "UserPoolClient",
]

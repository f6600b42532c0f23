"""pytest configuration: run every Pulumi resource against in-memory mocks."""

from __future__ import annotations

from itertools import count
from typing import Any

import pulumi
import pytest

ACCOUNT = "123456789012"
REGION = "ap-southeast-2"
API_ENDPOINT = f"https://a1b2c3d4e5.execute-api.{REGION}.amazonaws.com"
ZIP_SHA256 = "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"
POLICY_JSON = '{"Version": "2012-10-17", "Statement": []}'


class FoundationsMocks(pulumi.runtime.Mocks):
    """Echo the inputs of every resource and fill the attributes AWS computes."""

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs) -> tuple[str, dict[str, Any]]:
        self.resources.append(args)
        outputs = dict(args.inputs)
        name = outputs.get("name", args.name)
        if args.typ == "aws:dynamodb/table:Table":
            outputs["arn"] = f"arn:aws:dynamodb:{REGION}:{ACCOUNT}:table/{name}"
        elif args.typ == "aws:s3/bucket:Bucket":
            outputs["bucket"] = f"{args.name}-0123456789"
            outputs["arn"] = f"arn:aws:s3:::{args.name}-0123456789"
        elif args.typ == "aws:lambda/function:Function":
            outputs["arn"] = f"arn:aws:lambda:{REGION}:{ACCOUNT}:function:{name}"
            outputs["invokeArn"] = f"{outputs['arn']}/invocations"
        elif args.typ == "aws:lambda/layerVersion:LayerVersion":
            outputs["arn"] = f"arn:aws:lambda:{REGION}:{ACCOUNT}:layer:{args.name}:1"
        elif args.typ == "aws:iam/role:Role":
            outputs["arn"] = f"arn:aws:iam::{ACCOUNT}:role/{name}"
        elif args.typ == "aws:cognito/userPool:UserPool":
            outputs["arn"] = f"arn:aws:cognito-idp:{REGION}:{ACCOUNT}:userpool/{args.name}"
        elif args.typ == "aws:apigatewayv2/api:Api":
            outputs["apiEndpoint"] = API_ENDPOINT
            outputs["executionArn"] = f"arn:aws:execute-api:{REGION}:{ACCOUNT}:a1b2c3d4e5"
        elif args.typ == "command:local:Command":
            outputs["stdout"] = ZIP_SHA256
            outputs["stderr"] = ""
        return f"{args.name}_id", outputs

    def call(self, args: pulumi.runtime.MockCallArgs) -> dict[str, Any]:
        if args.token == "aws:iam/getPolicyDocument:getPolicyDocument":
            return {"id": "policy", "json": POLICY_JSON}
        if args.token == "command:local:run":
            return {"stdout": "", "stderr": ""}
        return {}


def parent_type(urn: str) -> str:
    """The type of the direct parent encoded in a resource URN."""
    return urn.split("::")[2].split("$")[-2]


MOCKS = FoundationsMocks()
pulumi.runtime.set_mocks(MOCKS, preview=False)

_stack_ids = count()


@pytest.fixture
def mocks() -> FoundationsMocks:
    return MOCKS


@pytest.fixture
def stack_name() -> str:
    """A stack name unique to the test, so resource names never collide."""
    return f"AIJay-Test{next(_stack_ids)}"

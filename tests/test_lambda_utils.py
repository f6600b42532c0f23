"""Tests for the Lambda packaging helpers, run against the mocks of conftest.py."""

from __future__ import annotations

import pulumi
from lambda_utils import create_lambda_layer, create_lambda_zip

from conftest import ZIP_SHA256


@pulumi.runtime.test
def test_create_lambda_zip(stack_name: str) -> pulumi.Output[None]:
    lambda_zip = create_lambda_zip(stack_name.lower())

    def check(sha256: str) -> None:
        assert sha256 == ZIP_SHA256

    assert isinstance(lambda_zip.zip_path, pulumi.FileArchive)
    assert lambda_zip.zip_path.path == "../dist/lambda.zip"
    return lambda_zip.zip_sha256.apply(check)


@pulumi.runtime.test
def test_create_lambda_layer(stack_name: str) -> pulumi.Output[None]:
    layer = create_lambda_layer(stack_name.lower())

    def check(args: list) -> None:
        layer_name, source_code_hash, runtimes = args
        assert layer_name == stack_name.lower()
        assert source_code_hash == ZIP_SHA256
        assert runtimes == ["python3.12"]

    return pulumi.Output.all(
        layer.layer_name, layer.source_code_hash, layer.compatible_runtimes
    ).apply(check)

"""
Utils module to manage Lambda ZIP archives
"""

from __future__ import annotations

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws
from pulumi_command import local

DEV_FILES = ".venv .mypy_cache .ruff_cache .pytest_cache __pycache__ .env requirements.txt"


@dataclass
class LambdaZip:
    """
    Dataclass to store Lambda ZIP informations
    """

    zip_path: pulumi.FileArchive
    zip_sha256: pulumi.Output[str]


def create_lambda_zip(resource_prefix: str) -> LambdaZip:
    """
    Check changes on application folder to update the ZIP file for the lambda deployment
    """
    dist_folder = "lambda-package"
    output_file = "lambda.zip"
    local.run(
        dir="../",
        command=f"""
        rm -rf ./dist/{dist_folder}; \
        mkdir -p ./dist/{dist_folder}; \
        cp -r -p ./app/. ./dist/{dist_folder}/""",
    )

    local.run(
        dir=f"../dist/{dist_folder}",
        command=f"""rm -rf {DEV_FILES}; \
            zip -q -r -D -X -9 -A ../{output_file} .""",
    )

    sha256_zip = local.Command(
        f"{resource_prefix}-sha256-lambda-zip",
        dir="../dist/",
        create=f"sha256sum {output_file} | cut -d ' ' -f1",
        update=f"sha256sum {output_file} | cut -d ' ' -f1",
        triggers=[
            pulumi.FileArchive(f"../dist/{output_file}"),
        ],
    )

    return LambdaZip(
        zip_path=pulumi.FileArchive(f"../dist/{output_file}"),
        zip_sha256=sha256_zip.stdout,
    )


def create_lambda_layer(resource_prefix: str) -> aws.lambda_.LayerVersion:
    """
    Install the application requirements in a Lambda layer, rebuilt when the requirements change
    """
    dist_folder = "lambda-layer/python"
    output_file = "lambda-layer.zip"
    pip_install = local.Command(
        f"{resource_prefix}-pip-install",
        dir="../",
        create=f"""rm -rf ./dist/{dist_folder}; \
        pip install --quiet -r ./app/requirements.txt --target ./dist/{dist_folder}""",
        update=f"""rm -rf ./dist/{dist_folder}; \
        pip install --quiet -r ./app/requirements.txt --target ./dist/{dist_folder}""",
        environment={"PYTHONUNBUFFERED": "1"},
        triggers=[
            pulumi.FileAsset("../app/requirements.txt"),
        ],
    )

    create_layer_zip = local.Command(
        f"{resource_prefix}-create-zip-layer",
        dir="../dist/lambda-layer",
        create=f"zip -q -r -D -X -9 -A ../{output_file} python",
        update=f"zip -q -r -D -X -9 -A ../{output_file} python",
        triggers=[
            pulumi.FileAsset("../app/requirements.txt"),
            pip_install.stdout,
            pip_install.stderr,
        ],
        opts=pulumi.ResourceOptions(depends_on=[pip_install]),
    )

    sha256_zip = local.Command(
        f"{resource_prefix}-sha256-lambda-zip-layer",
        dir="../dist/",
        create=f"sha256sum {output_file} | cut -d ' ' -f1",
        update=f"sha256sum {output_file} | cut -d ' ' -f1",
        triggers=[
            pulumi.FileAsset("../app/requirements.txt"),
            create_layer_zip.stdout,
            create_layer_zip.stderr,
        ],
        archive_paths=[output_file],
        opts=pulumi.ResourceOptions(depends_on=[create_layer_zip]),
    )

    return aws.lambda_.LayerVersion(
        f"{resource_prefix}-python3.12",
        layer_name=f"{resource_prefix}",
        description=f"Lambda Python layer for {resource_prefix}",
        compatible_runtimes=[aws.lambda_.Runtime.PYTHON3D12],
        code=sha256_zip.archive,
        source_code_hash=sha256_zip.stdout,
        opts=pulumi.ResourceOptions(
            depends_on=[
                pip_install,
                create_layer_zip,
                sha256_zip,
            ]
        ),
    )

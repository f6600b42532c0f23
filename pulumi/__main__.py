"""An AWS Python Pulumi program"""

import pulumi_aws as aws
from aijay import DeploymentContext, FoundationsStack
from lambda_utils import create_lambda_layer, create_lambda_zip

import pulumi

RESOURCES_PREFIX = "aijay"
STACK_NAME = "AIJay-Foundations"

context = DeploymentContext.from_config()

provider = aws.Provider(
    f"{RESOURCES_PREFIX}-{context.region}",
    region=context.region,
    allowed_account_ids=[context.account] if context.account else None,
)

lambda_zip = create_lambda_zip(RESOURCES_PREFIX)
lambda_layer = create_lambda_layer(RESOURCES_PREFIX)

foundations = FoundationsStack(
    STACK_NAME,
    context=context,
    code=lambda_zip.zip_path,
    source_code_hash=lambda_zip.zip_sha256,
    layers=[lambda_layer.arn],
    opts=pulumi.ResourceOptions(providers=[provider]),
)

for output_name, value in foundations.outputs.items():
    pulumi.export(output_name, value)

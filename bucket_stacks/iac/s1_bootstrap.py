# -*- coding: utf-8 -*-

"""
Bootstrap stack.

Including:

- a versioned, encrypted, private S3 bucket to store the state and the
  template artifacts of every other stack
"""

from ..config import config, EncryptionEnum
from . import plan as plan_
from .declarations import (
    BucketDeclaration,
    VersioningDeclaration,
    EncryptionDeclaration,
    PublicAccessBlockDeclaration,
)

BUCKET_LOGICAL_NAME = "StateBucket"


def get_state_bucket_name(aws_account_id: str) -> str:
    return f"{config.bootstrap_bucket_prefix}-{aws_account_id}"


def plan_bootstrap(aws_account_id: str) -> plan_.StackPlan:
    aws_region = config.bootstrap_region
    bucket_name = get_state_bucket_name(aws_account_id)

    plan = plan_.StackPlan(
        stack_name=config.bootstrap_stack_name,
        region=aws_region,
        tags={
            "created_with": "cottonformation",
            "purpose": "iac-state",
        },
    )
    # the state bucket must outlive its own stack
    plan.declare(BucketDeclaration(
        BUCKET_LOGICAL_NAME,
        bucket_name=bucket_name,
        retain=True,
    ))
    plan.declare(VersioningDeclaration(
        "StateBucketVersioning",
        bucket=BUCKET_LOGICAL_NAME,
    ))
    plan.declare(EncryptionDeclaration(
        "StateBucketEncryption",
        bucket=BUCKET_LOGICAL_NAME,
        sse_algorithm=EncryptionEnum.AES256,
        bucket_key_enabled=True,
    ))
    plan.declare(PublicAccessBlockDeclaration(
        "StateBucketPublicAccessBlock",
        bucket=BUCKET_LOGICAL_NAME,
    ))

    plan.export(plan_.OutputDeclaration(
        "BucketName",
        bucket_attr=plan_.BUCKET_REF,
        description="state bucket name",
    ))
    plan.export(plan_.OutputDeclaration("Region", value=aws_region))
    plan.export(plan_.OutputDeclaration(
        "StateBackendUrl",
        value=f"s3://{bucket_name}",
        description="backend url of the state bucket",
    ))
    return plan

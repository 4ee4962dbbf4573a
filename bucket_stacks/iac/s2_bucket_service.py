# -*- coding: utf-8 -*-

"""
Bucket service stack.

Resources:

1. a S3 bucket named ``<bucketName>-<aws_account_id>``, public access is
    always blocked.
2. optional versioning, server side encryption and noncurrent version
    lifecycle rules, driven by :class:`~bucket_stacks.config.BucketServiceConfig`.
"""

import json
import typing as T
import logging

from ..config import BucketServiceConfig, EncryptionEnum
from . import plan as plan_
from .declarations import (
    BucketDeclaration,
    VersioningDeclaration,
    EncryptionDeclaration,
    LifecycleRule,
    LifecycleDeclaration,
    PublicAccessBlockDeclaration,
)

logger = logging.getLogger(__name__)

BUCKET_LOGICAL_NAME = "Bucket"
TRANSITION_RULE_ID = "transition-old-versions"
EXPIRATION_RULE_ID = "expire-old-versions"

SUPPORTED_ENCRYPTION = (
    EncryptionEnum.AES256,
    EncryptionEnum.AWS_KMS,
)


def get_bucket_name(bucket_name: str, aws_account_id: str) -> str:
    return f"{bucket_name}-{aws_account_id}"


def declare_encryption(
    encryption: str,
    bucket: str,
) -> T.Optional[EncryptionDeclaration]:
    """
    ``AES256`` is SSE-S3, ``aws:kms`` is SSE-KMS with the AWS managed key, both
    with bucket key enabled. Other values declare nothing.
    """
    if encryption not in SUPPORTED_ENCRYPTION:
        logger.warning(
            "unsupported encryption %r, no default encryption declared for %r",
            encryption, bucket,
        )
        return None
    return EncryptionDeclaration(
        f"{bucket}Encryption",
        bucket=bucket,
        sse_algorithm=encryption,
        bucket_key_enabled=True,
    )


def declare_lifecycle(
    bucket_config: BucketServiceConfig,
    bucket: str,
) -> T.Optional[LifecycleDeclaration]:
    """
    Lifecycle rules act on noncurrent versions, so they only exist on a
    versioned bucket.
    """
    if not (bucket_config.lifecycle_enabled and bucket_config.versioning):
        if bucket_config.lifecycle_enabled:
            logger.warning(
                "lifecycle is enabled but versioning is not, "
                "no lifecycle rule declared for %r", bucket,
            )
        return None

    rules = list()
    if bucket_config.lifecycle_days > 0:
        rules.append(LifecycleRule(
            TRANSITION_RULE_ID,
            transition_days=bucket_config.lifecycle_days,
        ))
    if bucket_config.expiration_days > 0:
        rules.append(LifecycleRule(
            EXPIRATION_RULE_ID,
            expiration_days=bucket_config.expiration_days,
        ))
    if len(rules) == 0:
        return None
    return LifecycleDeclaration(
        f"{bucket}Lifecycle",
        bucket=bucket,
        rules=rules,
    )


def summarize_config(bucket_config: BucketServiceConfig) -> T.Dict[str, T.Any]:
    return {
        "versioning": bucket_config.versioning,
        "encryption": bucket_config.encryption,
        "lifecycleEnabled": bucket_config.lifecycle_enabled,
        "publicAccess": False,
    }


def plan_bucket_service(
    bucket_config: BucketServiceConfig,
    aws_account_id: str,
) -> plan_.StackPlan:
    aws_region = bucket_config.region
    bucket_name = get_bucket_name(bucket_config.bucket_name, aws_account_id)

    plan = plan_.StackPlan(
        stack_name=bucket_config.bucket_service_stack_name,
        region=aws_region,
        tags={
            "created_with": "cottonformation",
            "service": "bucket-service",
            "managed_by": "cottonformation",
        },
    )

    plan.declare(BucketDeclaration(BUCKET_LOGICAL_NAME, bucket_name=bucket_name))

    if bucket_config.versioning:
        plan.declare(VersioningDeclaration(
            f"{BUCKET_LOGICAL_NAME}Versioning",
            bucket=BUCKET_LOGICAL_NAME,
        ))

    optional_declarations = [
        declare_encryption(bucket_config.encryption, BUCKET_LOGICAL_NAME),
        declare_lifecycle(bucket_config, BUCKET_LOGICAL_NAME),
    ]
    for declaration in optional_declarations:
        if declaration is not None:
            plan.declare(declaration)

    plan.declare(PublicAccessBlockDeclaration(
        f"{BUCKET_LOGICAL_NAME}PublicAccessBlock",
        bucket=BUCKET_LOGICAL_NAME,
    ))

    plan.export(plan_.OutputDeclaration("BucketName", bucket_attr=plan_.BUCKET_REF))
    plan.export(plan_.OutputDeclaration("BucketArn", bucket_attr=plan_.BUCKET_ARN))
    plan.export(plan_.OutputDeclaration("BucketRegion", value=aws_region))
    plan.export(plan_.OutputDeclaration("BucketUrl", value=f"s3://{bucket_name}"))
    plan.export(plan_.OutputDeclaration(
        "BucketDomainName",
        bucket_attr=plan_.BUCKET_DOMAIN_NAME,
    ))
    plan.export(plan_.OutputDeclaration(
        "BucketRegionalDomainName",
        bucket_attr=plan_.BUCKET_REGIONAL_DOMAIN_NAME,
    ))
    # CloudFormation outputs are strings
    plan.export(plan_.OutputDeclaration(
        "Config",
        value=json.dumps(summarize_config(bucket_config), sort_keys=True),
        description="effective bucket service configuration",
    ))
    return plan

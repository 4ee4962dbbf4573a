# -*- coding: utf-8 -*-

import pytest

from bucket_stacks.iac.declarations import (
    BucketDeclaration,
    VersioningDeclaration,
    EncryptionDeclaration,
    LifecycleDeclaration,
    PublicAccessBlockDeclaration,
)
from bucket_stacks.iac.s1_bootstrap import (
    BUCKET_LOGICAL_NAME,
    get_state_bucket_name,
    plan_bootstrap,
)

aws_account_id = "123456789012"


def test_state_bucket_name():
    assert get_state_bucket_name(aws_account_id) == (
        "bucket-stacks-cft-state-123456789012"
    )


def test_plan_bootstrap():
    plan = plan_bootstrap(aws_account_id)
    assert plan.stack_name == "bucket-stacks-bootstrap"
    assert plan.region == "eu-north-1"

    bucket = plan.find_one(BucketDeclaration)
    assert bucket.logical_name == BUCKET_LOGICAL_NAME
    assert bucket.bucket_name == "bucket-stacks-cft-state-123456789012"
    assert bucket.retain is True

    assert plan.find_one(VersioningDeclaration).status == "Enabled"

    encryption = plan.find_one(EncryptionDeclaration)
    assert encryption.sse_algorithm == "AES256"
    assert encryption.bucket_key_enabled is True

    assert plan.find_one(PublicAccessBlockDeclaration).fully_blocked is True
    assert plan.find_one(LifecycleDeclaration) is None

    for declaration in plan.declarations[1:]:
        assert declaration.bucket == BUCKET_LOGICAL_NAME


def test_bootstrap_outputs():
    plan = plan_bootstrap(aws_account_id)
    assert [output.name for output in plan.outputs] == [
        "BucketName",
        "Region",
        "StateBackendUrl",
    ]
    values = plan.output_values
    assert values["Region"] == "eu-north-1"
    assert values["StateBackendUrl"] == "s3://bucket-stacks-cft-state-123456789012"
    assert plan.tags == {"created_with": "cottonformation", "purpose": "iac-state"}


if __name__ == "__main__":
    import os

    basename = os.path.basename(__file__)
    pytest.main([basename, "-s", "--tb=native"])

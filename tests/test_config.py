# -*- coding: utf-8 -*-

import os
import json

import pytest

from bucket_stacks.exc import ConfigError
from bucket_stacks.config import (
    DEFAULT_REGION,
    EncryptionEnum,
    BucketServiceConfig,
    load_config,
    get_config_path,
)


def test_from_dict_defaults():
    bucket_config = BucketServiceConfig.from_dict({"bucketName": "logs"})
    assert bucket_config.bucket_name == "logs"
    assert bucket_config.versioning is False
    assert bucket_config.encryption == EncryptionEnum.AES256
    assert bucket_config.lifecycle_enabled is False
    assert bucket_config.lifecycle_days == 90
    assert bucket_config.expiration_days == 0
    assert bucket_config.region == DEFAULT_REGION
    assert bucket_config.bucket_service_stack_name == "bucket-service-logs"


def test_from_dict_empty_values_fall_back():
    bucket_config = BucketServiceConfig.from_dict(
        {"bucketName": "logs", "encryption": "", "lifecycleDays": 0},
        {"region": ""},
    )
    assert bucket_config.encryption == EncryptionEnum.AES256
    assert bucket_config.lifecycle_days == 90
    assert bucket_config.region == DEFAULT_REGION


def test_from_dict_explicit_values():
    bucket_config = BucketServiceConfig.from_dict(
        {
            "bucketName": "logs",
            "versioning": True,
            "encryption": "aws:kms",
            "lifecycleEnabled": True,
            "lifecycleDays": 30,
            "expirationDays": 365,
        },
        {"region": "us-east-1"},
    )
    assert bucket_config.versioning is True
    assert bucket_config.encryption == EncryptionEnum.AWS_KMS
    assert bucket_config.lifecycle_enabled is True
    assert bucket_config.lifecycle_days == 30
    assert bucket_config.expiration_days == 365
    assert bucket_config.region == "us-east-1"


def test_bucket_name_is_required():
    with pytest.raises(ConfigError):
        BucketServiceConfig.from_dict({"versioning": True})
    with pytest.raises(ConfigError):
        BucketServiceConfig.from_dict({"bucketName": ""})


@pytest.mark.parametrize(
    "data",
    [
        {"bucketName": "logs", "versioning": "yes"},
        {"bucketName": "logs", "lifecycleEnabled": 1},
        {"bucketName": "logs", "lifecycleDays": "30"},
        {"bucketName": "logs", "expirationDays": True},
        {"bucketName": 123},
        {"bucketName": "logs", "lifecycleDays": False},
        {"bucketName": "logs", "expirationDays": False},
        {"bucketName": "logs", "encryption": False},
        {"bucketName": "logs", "encryption": 0},
    ],
)
def test_bad_types(data):
    with pytest.raises(ConfigError):
        BucketServiceConfig.from_dict(data)


def test_null_values_fall_back():
    bucket_config = BucketServiceConfig.from_dict(
        {
            "bucketName": "logs",
            "encryption": None,
            "lifecycleDays": None,
            "expirationDays": None,
        },
        {"region": None},
    )
    assert bucket_config.encryption == EncryptionEnum.AES256
    assert bucket_config.lifecycle_days == 90
    assert bucket_config.expiration_days == 0
    assert bucket_config.region == DEFAULT_REGION


def test_bad_region_type():
    with pytest.raises(ConfigError):
        BucketServiceConfig.from_dict({"bucketName": "logs"}, {"region": False})


def test_stack_name_with_dots():
    bucket_config = BucketServiceConfig.from_dict({"bucketName": "my.logs"})
    assert bucket_config.bucket_name == "my.logs"
    assert bucket_config.bucket_service_stack_name == "bucket-service-my-logs"


def test_from_document_namespaced():
    bucket_config = BucketServiceConfig.from_document({
        "bucket-service": {"bucketName": "logs", "versioning": True},
        "aws": {"region": "us-west-2"},
    })
    assert bucket_config.versioning is True
    assert bucket_config.region == "us-west-2"


def test_from_document_flat():
    bucket_config = BucketServiceConfig.from_document({
        "bucketName": "logs",
        "aws:region": "us-west-2",
    })
    assert bucket_config.bucket_name == "logs"
    assert bucket_config.region == "us-west-2"

    bucket_config = BucketServiceConfig.from_document({"bucketName": "logs"})
    assert bucket_config.region == DEFAULT_REGION


def test_from_document_bad_layout():
    with pytest.raises(ConfigError):
        BucketServiceConfig.from_document(["logs"])
    with pytest.raises(ConfigError):
        BucketServiceConfig.from_document({"bucket-service": "logs"})


def test_load_config(tmp_path):
    path = tmp_path / "bucket-service.json"
    path.write_text(json.dumps({
        "bucket-service": {"bucketName": "data", "encryption": "aws:kms"},
    }))
    bucket_config = load_config(str(path))
    assert bucket_config.bucket_name == "data"
    assert bucket_config.encryption == EncryptionEnum.AWS_KMS


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "not-exists.json"))

    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_load_example_config():
    dir_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    path = os.path.join(dir_root, "config", "bucket-service.json")
    bucket_config = load_config(path)
    assert bucket_config.bucket_name == "logs"


def test_get_config_path(monkeypatch):
    monkeypatch.delenv("BUCKET_SERVICE_CONFIG", raising=False)
    assert get_config_path("/repo") == os.path.join(
        "/repo", "config", "bucket-service.json"
    )
    monkeypatch.setenv("BUCKET_SERVICE_CONFIG", "/etc/bucket.json")
    assert get_config_path("/repo") == "/etc/bucket.json"


if __name__ == "__main__":
    import os

    basename = os.path.basename(__file__)
    pytest.main([basename, "-s", "--tb=native"])

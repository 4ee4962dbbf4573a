# -*- coding: utf-8 -*-

"""
Configuration for the bootstrap stack and the bucket service stack.

The bootstrap stack has no configuration surface, its inputs are constants.
The bucket service stack reads one JSON document once at startup and passes
the resulting :class:`BucketServiceConfig` explicitly into the stack builder.
"""

import os
import json
import typing as T

import attr

from .exc import ConfigError

DEFAULT_REGION = "eu-north-1"


class EncryptionEnum:
    AES256 = "AES256"
    AWS_KMS = "aws:kms"


class Config:
    project_name = "bucket_stacks"
    bootstrap_bucket_prefix = "bucket-stacks-cft-state"
    bootstrap_region = DEFAULT_REGION
    bucket_service_namespace = "bucket-service"
    aws_namespace = "aws"

    @property
    def project_name_slug(self):
        return self.project_name.replace("_", "-")

    @property
    def bootstrap_stack_name(self):
        return f"{self.project_name_slug}-bootstrap"


config = Config()


def _get_or_default(data, key, default, empty):
    """
    Missing, ``None`` or the exact empty value of the expected type fall back
    to ``default``, anything else goes to the validators untouched.
    """
    value = data.get(key)
    if value is None:
        return default
    if type(value) is type(empty) and value == empty:
        return default
    return value


def _check_int(instance, attribute, value):
    # bool is a subclass of int, "lifecycleDays: true" is a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(
            f"{attribute.name!r} must be an integer, got {value!r}"
        )


def _check_bool(instance, attribute, value):
    if not isinstance(value, bool):
        raise ConfigError(
            f"{attribute.name!r} must be a boolean, got {value!r}"
        )


def _check_str(instance, attribute, value):
    if not isinstance(value, str):
        raise ConfigError(
            f"{attribute.name!r} must be a string, got {value!r}"
        )


@attr.s(frozen=True)
class BucketServiceConfig:
    """
    Effective configuration of the bucket service stack.

    Defaults are already applied, use :meth:`from_dict` to build one from raw
    key-value settings.
    """
    bucket_name: str = attr.ib(validator=_check_str)
    versioning: bool = attr.ib(default=False, validator=_check_bool)
    encryption: str = attr.ib(default=EncryptionEnum.AES256, validator=_check_str)
    lifecycle_enabled: bool = attr.ib(default=False, validator=_check_bool)
    lifecycle_days: int = attr.ib(default=90, validator=_check_int)
    expiration_days: int = attr.ib(default=0, validator=_check_int)
    region: str = attr.ib(default=DEFAULT_REGION, validator=_check_str)

    @bucket_name.validator
    def _check_bucket_name(self, attribute, value):
        if not value:
            raise ConfigError("'bucketName' is required")

    @classmethod
    def from_dict(
        cls,
        data: T.Dict[str, T.Any],
        aws_data: T.Optional[T.Dict[str, T.Any]] = None,
    ) -> "BucketServiceConfig":
        """
        Build the effective config from the ``bucket-service`` namespace and
        the ``aws`` namespace.

        Empty ``encryption`` falls back to ``AES256``, zero or missing
        ``lifecycleDays`` falls back to ``90`` and empty ``region`` falls back
        to :data:`DEFAULT_REGION`.
        """
        if aws_data is None:
            aws_data = dict()
        if "bucketName" not in data:
            raise ConfigError("'bucketName' is required")
        return cls(
            bucket_name=data["bucketName"],
            versioning=_get_or_default(data, "versioning", False, None),
            encryption=_get_or_default(data, "encryption", EncryptionEnum.AES256, ""),
            lifecycle_enabled=_get_or_default(data, "lifecycleEnabled", False, None),
            lifecycle_days=_get_or_default(data, "lifecycleDays", 90, 0),
            expiration_days=_get_or_default(data, "expirationDays", 0, 0),
            region=_get_or_default(aws_data, "region", DEFAULT_REGION, ""),
        )

    @classmethod
    def from_document(cls, document: T.Dict[str, T.Any]) -> "BucketServiceConfig":
        """
        Accepts either the namespaced layout::

            {"bucket-service": {...}, "aws": {"region": "..."}}

        or a flat layout with the region under ``"aws:region"``.
        """
        if not isinstance(document, dict):
            raise ConfigError("config document must be a JSON object")
        if config.bucket_service_namespace in document:
            data = document[config.bucket_service_namespace]
            aws_data = document.get(config.aws_namespace, dict())
        else:
            data = {k: v for k, v in document.items() if ":" not in k}
            aws_data = {"region": document.get("aws:region")}
        if not isinstance(data, dict) or not isinstance(aws_data, dict):
            raise ConfigError("config namespaces must be JSON objects")
        return cls.from_dict(data, aws_data)

    @property
    def bucket_service_stack_name(self) -> str:
        # stack names only allow letters, digits and hyphens
        return f"bucket-service-{self.bucket_name}".replace(".", "-")


def load_config(path: str) -> BucketServiceConfig:
    """
    Read the bucket service config JSON file.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"can not read config file {path!r}: {e}") from e
    return BucketServiceConfig.from_document(document)


def get_config_path(dir_root: str) -> str:
    """
    Location of the bucket service config file, ``BUCKET_SERVICE_CONFIG``
    environment variable wins over ``<dir_root>/config/bucket-service.json``.
    """
    return os.environ.get(
        "BUCKET_SERVICE_CONFIG",
        os.path.join(dir_root, "config", "bucket-service.json"),
    )

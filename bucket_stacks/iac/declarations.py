# -*- coding: utf-8 -*-

"""
Resource declarations.

Each declaration is an abstract node with a stable logical name. CloudFormation
models versioning, encryption, lifecycle and public access block as properties
of the ``AWS::S3::Bucket`` resource, so every sub declaration carries the
logical name of the bucket it targets and knows how to express itself as
``cottonformation.res.s3.Bucket`` keyword arguments.
"""

import typing as T

import attr
import cottonformation as cft
from cottonformation.res import s3

STATUS_ENABLED = "Enabled"
STORAGE_CLASS_STANDARD_IA = "STANDARD_IA"


@attr.s
class Declaration:
    logical_name: str = attr.ib()

    def to_bucket_kwargs(self) -> T.Dict[str, T.Any]:  # pragma: no cover
        raise NotImplementedError


@attr.s
class BucketDeclaration(Declaration):
    bucket_name: str = attr.ib()
    retain: bool = attr.ib(default=False)

    def to_bucket_kwargs(self) -> T.Dict[str, T.Any]:
        kwargs = dict(p_BucketName=self.bucket_name)
        if self.retain:
            kwargs["ra_DeletionPolicy"] = cft.constant.DeletionPolicyEnum.Retain
        return kwargs


@attr.s
class BucketSubDeclaration(Declaration):
    """
    Base class of everything attached to a bucket.
    """
    bucket: str = attr.ib()


@attr.s
class VersioningDeclaration(BucketSubDeclaration):
    status: str = attr.ib(default=STATUS_ENABLED)

    def to_bucket_kwargs(self) -> T.Dict[str, T.Any]:
        return dict(
            p_VersioningConfiguration=s3.PropBucketVersioningConfiguration(
                rp_Status=self.status,
            ),
        )


@attr.s
class EncryptionDeclaration(BucketSubDeclaration):
    sse_algorithm: str = attr.ib()
    bucket_key_enabled: bool = attr.ib(default=True)

    def to_bucket_kwargs(self) -> T.Dict[str, T.Any]:
        return dict(
            p_BucketEncryption=s3.PropBucketBucketEncryption(
                rp_ServerSideEncryptionConfiguration=[
                    s3.PropBucketServerSideEncryptionRule(
                        p_ServerSideEncryptionByDefault=s3.PropBucketServerSideEncryptionByDefault(
                            rp_SSEAlgorithm=self.sse_algorithm,
                        ),
                        p_BucketKeyEnabled=self.bucket_key_enabled,
                    ),
                ],
            ),
        )


@attr.s
class LifecycleRule:
    """
    One lifecycle rule acting on noncurrent object versions.

    ``transition_days`` moves noncurrent versions to ``storage_class``,
    ``expiration_days`` deletes them. ``None`` means the sub rule is absent.
    """
    rule_id: str = attr.ib()
    transition_days: T.Optional[int] = attr.ib(default=None)
    expiration_days: T.Optional[int] = attr.ib(default=None)
    storage_class: str = attr.ib(default=STORAGE_CLASS_STANDARD_IA)
    status: str = attr.ib(default=STATUS_ENABLED)

    def to_prop(self) -> s3.PropBucketRule:
        kwargs = dict(
            rp_Status=self.status,
            p_Id=self.rule_id,
        )
        if self.transition_days is not None:
            kwargs["p_NoncurrentVersionTransitions"] = [
                s3.PropBucketNoncurrentVersionTransition(
                    rp_StorageClass=self.storage_class,
                    rp_TransitionInDays=self.transition_days,
                ),
            ]
        if self.expiration_days is not None:
            kwargs["p_NoncurrentVersionExpirationInDays"] = self.expiration_days
        return s3.PropBucketRule(**kwargs)


@attr.s
class LifecycleDeclaration(BucketSubDeclaration):
    rules: T.List[LifecycleRule] = attr.ib(factory=list)

    def to_bucket_kwargs(self) -> T.Dict[str, T.Any]:
        return dict(
            p_LifecycleConfiguration=s3.PropBucketLifecycleConfiguration(
                rp_Rules=[rule.to_prop() for rule in self.rules],
            ),
        )


@attr.s
class PublicAccessBlockDeclaration(BucketSubDeclaration):
    block_public_acls: bool = attr.ib(default=True)
    block_public_policy: bool = attr.ib(default=True)
    ignore_public_acls: bool = attr.ib(default=True)
    restrict_public_buckets: bool = attr.ib(default=True)

    @property
    def fully_blocked(self) -> bool:
        return all([
            self.block_public_acls,
            self.block_public_policy,
            self.ignore_public_acls,
            self.restrict_public_buckets,
        ])

    def to_bucket_kwargs(self) -> T.Dict[str, T.Any]:
        return dict(
            p_PublicAccessBlockConfiguration=s3.PropBucketPublicAccessBlockConfiguration(
                p_BlockPublicAcls=self.block_public_acls,
                p_BlockPublicPolicy=self.block_public_policy,
                p_IgnorePublicAcls=self.ignore_public_acls,
                p_RestrictPublicBuckets=self.restrict_public_buckets,
            ),
        )

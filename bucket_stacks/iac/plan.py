# -*- coding: utf-8 -*-

"""
A stack plan is the ordered sequence of declarations plus the outputs a stack
exports. Stack builders produce plans, :func:`render_template` turns a plan
into a single ``cottonformation.Template`` that is handed to CloudFormation in
one deploy call.
"""

import typing as T
import logging

import attr
import cottonformation as cft
from cottonformation.res import s3

from ..exc import PlanError
from .declarations import (
    Declaration,
    BucketDeclaration,
    BucketSubDeclaration,
)

logger = logging.getLogger(__name__)

# values of OutputDeclaration.bucket_attr
BUCKET_REF = "Ref"
BUCKET_ARN = "Arn"
BUCKET_DOMAIN_NAME = "DomainName"
BUCKET_REGIONAL_DOMAIN_NAME = "RegionalDomainName"


@attr.s
class OutputDeclaration:
    """
    A named stack output. Either a literal ``value`` or an attribute of the
    bucket resource that is only known once CloudFormation created it.
    """
    name: str = attr.ib()
    value: T.Optional[str] = attr.ib(default=None)
    bucket_attr: T.Optional[str] = attr.ib(default=None)
    description: T.Optional[str] = attr.ib(default=None)

    def resolve(self, bucket: s3.Bucket):
        if self.bucket_attr is None:
            return self.value
        if self.bucket_attr == BUCKET_REF:
            return bucket.ref()
        return getattr(bucket, f"rv_{self.bucket_attr}")


@attr.s
class StackPlan:
    stack_name: str = attr.ib()
    region: str = attr.ib()
    declarations: T.List[Declaration] = attr.ib(factory=list)
    outputs: T.List[OutputDeclaration] = attr.ib(factory=list)
    tags: T.Dict[str, str] = attr.ib(factory=dict)

    def declare(self, declaration: Declaration) -> Declaration:
        logger.debug(
            "%s: declare %s %r",
            self.stack_name, type(declaration).__name__, declaration.logical_name,
        )
        self.declarations.append(declaration)
        return declaration

    def export(self, output: OutputDeclaration) -> OutputDeclaration:
        self.outputs.append(output)
        return output

    def find(self, klass: T.Type[Declaration]) -> T.List[Declaration]:
        return [
            declaration
            for declaration in self.declarations
            if isinstance(declaration, klass)
        ]

    def find_one(self, klass: T.Type[Declaration]) -> T.Optional[Declaration]:
        """
        Return the only declaration of ``klass``, ``None`` if not declared.
        """
        found = self.find(klass)
        if len(found) > 1:
            raise PlanError(f"{klass.__name__} declared {len(found)} times")
        if found:
            return found[0]
        return None

    @property
    def output_values(self) -> T.Dict[str, T.Optional[str]]:
        """
        Literal output values, bucket attributes map to ``None``.
        """
        return {output.name: output.value for output in self.outputs}


def build_bucket(declarations: T.List[Declaration]) -> s3.Bucket:
    """
    Fold the bucket declaration and every sub declaration targeting it into
    one ``AWS::S3::Bucket`` resource.
    """
    buckets = [d for d in declarations if isinstance(d, BucketDeclaration)]
    if len(buckets) != 1:
        raise PlanError(
            f"a plan needs exactly one bucket declaration, got {len(buckets)}"
        )
    bucket_declaration = buckets[0]

    kwargs = bucket_declaration.to_bucket_kwargs()
    for declaration in declarations:
        if declaration is bucket_declaration:
            continue
        if not isinstance(declaration, BucketSubDeclaration):
            raise PlanError(
                f"can not render declaration {declaration.logical_name!r}"
            )
        if declaration.bucket != bucket_declaration.logical_name:
            raise PlanError(
                f"{declaration.logical_name!r} targets unknown bucket "
                f"{declaration.bucket!r}"
            )
        kwargs.update(declaration.to_bucket_kwargs())
    return s3.Bucket(bucket_declaration.logical_name, **kwargs)


def render_template(plan: StackPlan) -> cft.Template:
    tpl = cft.Template()

    rg = cft.ResourceGroup("RG1")
    bucket = build_bucket(plan.declarations)
    rg.add(bucket)
    for output in plan.outputs:
        rg.add(cft.Output(
            output.name,
            Value=output.resolve(bucket),
            Description=output.description,
        ))
    tpl.add(rg)

    if plan.tags:
        tpl.batch_tagging(plan.tags)
    return tpl

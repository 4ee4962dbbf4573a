# -*- coding: utf-8 -*-

"""
The only place that talks to CloudFormation. Errors raised by boto3 or
cottonformation abort the run unmodified.
"""

import typing as T
import logging

import boto3
import cottonformation as cft

from .iac.plan import StackPlan, render_template

logger = logging.getLogger(__name__)


def deploy_plan(
    plan: StackPlan,
    boto_ses: boto3.session.Session,
    bucket_name: T.Optional[str] = None,
) -> cft.Template:
    """
    Render ``plan`` and hand the template to CloudFormation in one call.

    :param bucket_name: when given, the template is uploaded to this bucket
        before deploy, usually the bootstrap state bucket.
    """
    tpl = render_template(plan)
    logger.info(
        "deploy stack %r to %s (%d declarations)",
        plan.stack_name, plan.region, len(plan.declarations),
    )
    env = cft.Env(boto_ses=boto_ses)
    kwargs = dict(
        template=tpl,
        stack_name=plan.stack_name,
    )
    if bucket_name is not None:
        kwargs["bucket_name"] = bucket_name
    env.deploy(**kwargs)
    return tpl


def delete_stack(
    stack_name: str,
    boto_ses: boto3.session.Session,
):
    logger.info("delete stack %r", stack_name)
    env = cft.Env(boto_ses=boto_ses)
    env.delete(stack_name=stack_name)

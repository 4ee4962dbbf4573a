# -*- coding: utf-8 -*-

from bucket_stacks.config import config
from bucket_stacks.logger import setup_logging
from bucket_stacks.boto_ses import new_boto_ses, get_aws_account_id
from bucket_stacks.iac.s1_bootstrap import plan_bootstrap
from bucket_stacks.deploy import deploy_plan

setup_logging()

boto_ses = new_boto_ses(config.bootstrap_region)
aws_account_id = get_aws_account_id(boto_ses)

plan = plan_bootstrap(aws_account_id)
deploy_plan(plan, boto_ses)

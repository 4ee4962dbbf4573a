# -*- coding: utf-8 -*-

"""
Print the CloudFormation templates of both stacks without deploying them.
"""

import os

from rich import print as rprint
from bucket_stacks.config import get_config_path, load_config
from bucket_stacks.iac.plan import render_template
from bucket_stacks.iac.s1_bootstrap import plan_bootstrap
from bucket_stacks.iac.s2_bucket_service import plan_bucket_service

# a fake account id is enough to preview
aws_account_id = "123456789012"

dir_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
bucket_config = load_config(get_config_path(dir_root))

for plan in [
    plan_bootstrap(aws_account_id),
    plan_bucket_service(bucket_config, aws_account_id),
]:
    rprint(f"--- {plan.stack_name} ({plan.region})")
    rprint(render_template(plan).to_dict())

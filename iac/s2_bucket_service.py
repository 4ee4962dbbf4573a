# -*- coding: utf-8 -*-

import os

from bucket_stacks.config import get_config_path, load_config
from bucket_stacks.logger import setup_logging
from bucket_stacks.boto_ses import new_boto_ses, get_aws_account_id
from bucket_stacks.iac.s1_bootstrap import get_state_bucket_name
from bucket_stacks.iac.s2_bucket_service import plan_bucket_service
from bucket_stacks.deploy import deploy_plan

setup_logging()

dir_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
bucket_config = load_config(get_config_path(dir_root))

boto_ses = new_boto_ses(bucket_config.region)
aws_account_id = get_aws_account_id(boto_ses)

plan = plan_bucket_service(bucket_config, aws_account_id)

# template artifacts go to the bootstrap state bucket, deploy s1 first
deploy_plan(
    plan,
    boto_ses,
    bucket_name=get_state_bucket_name(aws_account_id),
)

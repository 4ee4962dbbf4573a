# -*- coding: utf-8 -*-

"""
Inspect what is stored in the bootstrap state bucket.
"""

from s3pathlib import S3Path
from bucket_stacks.config import config
from bucket_stacks.boto_ses import new_boto_ses, get_aws_account_id
from bucket_stacks.iac.s1_bootstrap import get_state_bucket_name

boto_ses = new_boto_ses(config.bootstrap_region)
aws_account_id = get_aws_account_id(boto_ses)

s3path_state_bucket = S3Path(get_state_bucket_name(aws_account_id), "/")

# --- Count file number
print(f"{s3path_state_bucket.uri} has {s3path_state_bucket.count_objects()} files")

# --- List files
for s3path in s3path_state_bucket.iter_objects():
    print(s3path.uri)

# --- Preview file content
# print(s3path_state_bucket.iter_objects().one().read_text())

# -*- coding: utf-8 -*-

import boto3


def new_boto_ses(aws_region: str) -> boto3.session.Session:
    return boto3.session.Session(region_name=aws_region)


def get_aws_account_id(boto_ses: boto3.session.Session) -> str:
    sts_client = boto_ses.client("sts")
    return sts_client.get_caller_identity()["Account"]

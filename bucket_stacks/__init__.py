# -*- coding: utf-8 -*-

"""
Declarative S3 bucket stacks rendered as CloudFormation templates.
"""

__version__ = "0.1.1"
__short_description__ = "Bootstrap and bucket service stacks for S3."
__license__ = "MIT"

# -*- coding: utf-8 -*-

class ConfigError(ValueError):
    """
    Raised when the stack configuration is missing a key or has a bad value.
    """


class PlanError(ValueError):
    """
    Raised when a stack plan can not be rendered into a template.
    """

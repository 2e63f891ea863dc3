"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from blog_iac.configs.base import EnvironmentConfig
from blog_iac.configs.environment import get_config
from blog_iac.configs.exceptions import ConfigValidationError
from blog_iac.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDRS,
    DEFAULT_TAGS,
    PORTS,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "ConfigValidationError",
    "VPC_CIDR",
    "SUBNET_CIDRS",
    "DEFAULT_TAGS",
    "PORTS",
]

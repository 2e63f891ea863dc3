"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, logging and output utilities.
"""

from blog_iac.utils.naming import ResourceNamer
from blog_iac.utils.tags import create_tags, merge_tags
from blog_iac.utils.logger import configure_logging, get_logger
from blog_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "configure_logging",
    "get_logger",
    "write_outputs_to_env",
]

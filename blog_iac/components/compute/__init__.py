"""
Compute components for EC2 and Lambda.

Components:
- BastionHostComponent: Public bastion instance for administrative access
- ApiFunctionComponent: Lambda function behind API Gateway
"""

from blog_iac.components.compute.bastion_host import BastionHostComponent, BastionOutputs
from blog_iac.components.compute.api_function import ApiFunctionComponent, FunctionOutputs

__all__ = [
    "BastionHostComponent",
    "BastionOutputs",
    "ApiFunctionComponent",
    "FunctionOutputs",
]

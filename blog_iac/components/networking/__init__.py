"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public and isolated subnet tiers, route tables
- SecurityGroupsComponent: Security groups for bastion, lambda, database, endpoints
- VpcEndpointsComponent: Secrets Manager VPC endpoint
"""

from blog_iac.components.networking.vpc import VpcComponent, VpcOutputs
from blog_iac.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs
from blog_iac.components.networking.vpc_endpoints import VpcEndpointsComponent, VpcEndpointOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
    "VpcEndpointsComponent",
    "VpcEndpointOutputs",
]

"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (10.0.0.0/16): The isolated network container, DNS support and hostnames on.
2. Internet Gateway (IGW): The "door" to the internet for the public tier only.
3. Subnets, one /24 per AZ in two AZs:
   - Public (10.0.0.0/24, 10.0.1.0/24): Bastion host. Public IPs on launch.
   - Isolated (10.0.2.0/24, 10.0.3.0/24): RDS, RDS Proxy and Lambda. No NAT, no internet.
4. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Isolated RT: No routes beyond the implicit "local" route.
     AWS APIs (Secrets Manager) are reached through VPC endpoints.
5. Associations: Explicitly linking subnets to route tables.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.configs.constants import VPC_CIDR, SUBNET_CIDRS, MAX_AZS
from blog_iac.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    vpc_cidr: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    isolated_subnet_ids: list[pulumi.Output[str]]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with a public and an isolated subnet tier.

    Each tier has one subnet per availability zone. Only the public tier
    routes to the internet gateway.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_name: str,
        availability_zones: list[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        if availability_zones is None:
            availability_zones = aws.get_availability_zones(state="available").names
        zones = availability_zones[:MAX_AZS]

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=VPC_CIDR,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, vpc_name),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets = self._create_subnet_tier(name, "public", zones, child_opts)
        self.isolated_subnets = self._create_subnet_tier(name, "isolated", zones, child_opts)

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "vpc_cidr": self.vpc.cidr_block,
            "public_subnet_ids": [subnet.id for subnet in self.public_subnets],
            "isolated_subnet_ids": [subnet.id for subnet in self.isolated_subnets],
        })

    def _create_subnet_tier(
        self,
        name: str,
        tier: str,
        zones: list[str],
        opts: pulumi.ResourceOptions,
    ) -> list[aws.ec2.Subnet]:
        """Create one subnet per AZ for a tier."""
        subnets = []
        for index, (zone, cidr) in enumerate(zip(zones, SUBNET_CIDRS[tier])):
            subnet_name = f"{name}-{tier}-subnet-{index + 1}"
            subnets.append(aws.ec2.Subnet(
                subnet_name,
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=zone,
                map_public_ip_on_launch=tier == "public",
                tags=create_tags(self.environment, subnet_name, Tier=tier),
                opts=opts,
            ))
        return subnets

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and isolated subnets."""
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        # Isolated route table: local route only
        self.isolated_rt = aws.ec2.RouteTable(
            f"{name}-isolated-rt",
            vpc_id=self.vpc.id,
            routes=[],
            tags=create_tags(self.environment, f"{name}-isolated-rt"),
            opts=opts,
        )

        for tier, subnets, route_table in [
            ("public", self.public_subnets, public_rt),
            ("isolated", self.isolated_subnets, self.isolated_rt),
        ]:
            for index, subnet in enumerate(subnets):
                aws.ec2.RouteTableAssociation(
                    f"{name}-{tier}-rt-assoc-{index + 1}",
                    subnet_id=subnet.id,
                    route_table_id=route_table.id,
                    opts=opts,
                )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            vpc_cidr=self.vpc.cidr_block,
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            isolated_subnet_ids=[subnet.id for subnet in self.isolated_subnets],
        )

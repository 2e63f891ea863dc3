"""
Security Groups Component for Network Access Control.

Architectural Steps & Flow:
1. Create "Shell" Security Groups first, without rules, so they can be
   referenced by ID from each other's rules.

2. Specific Access Patterns:
   - Bastion: No inbound. Operators connect through Session Manager.
   - Lambda: No inbound. Talks to RDS Proxy on 3306.
   - Database: Shared by RDS Proxy and the RDS instance. Accepts 3306 from
     Lambda, from the bastion, and from itself (proxy -> instance).
   - Endpoints: Accepts HTTPS from anywhere inside the VPC CIDR.

3. Egress: All groups allow all outbound. Isolated subnets have no internet
   route, so outbound is bounded by routing rather than by the groups.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.configs.constants import PORTS
from blog_iac.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    bastion_sg_id: pulumi.Output[str]
    lambda_sg_id: pulumi.Output[str]
    database_sg_id: pulumi.Output[str]
    endpoints_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups component for network access control.

    - Bastion to DB: attached to the bastion host
    - Lambda to RDS Proxy: attached to the API function
    - RDS Proxy to DB: attached to both the proxy and the database
    - Endpoints: attached to interface VPC endpoints
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        vpc_cidr: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bastion_sg = aws.ec2.SecurityGroup(
            f"{name}-bastion-sg",
            description="Bastion to DB",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-bastion-sg"),
            opts=child_opts,
        )

        self.lambda_sg = aws.ec2.SecurityGroup(
            f"{name}-lambda-sg",
            description="Lambda to RDS Proxy",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-lambda-sg"),
            opts=child_opts,
        )

        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="RDS Proxy to DB",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-database-sg"),
            opts=child_opts,
        )

        self.endpoints_sg = aws.ec2.SecurityGroup(
            f"{name}-endpoints-sg",
            description="Interface VPC endpoints",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-endpoints-sg"),
            opts=child_opts,
        )

        self._create_rules(name, vpc_cidr, child_opts)

        self.register_outputs({
            "bastion_sg_id": self.bastion_sg.id,
            "lambda_sg_id": self.lambda_sg.id,
            "database_sg_id": self.database_sg.id,
            "endpoints_sg_id": self.endpoints_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        vpc_cidr: pulumi.Input[str],
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        self.ingress_rules: dict[str, aws.vpc.SecurityGroupIngressRule] = {}

        # Database: MySQL from the proxy (same group)
        self.ingress_rules["database_from_self"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-self",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            referenced_security_group_id=self.database_sg.id,
            description="allow db connection",
            opts=opts,
        )

        self.ingress_rules["database_from_lambda"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-lambda",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            referenced_security_group_id=self.lambda_sg.id,
            description="allow lambda connection",
            opts=opts,
        )

        self.ingress_rules["database_from_bastion"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-bastion",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            referenced_security_group_id=self.bastion_sg.id,
            description="allow bastion connection",
            opts=opts,
        )

        # Endpoints: HTTPS from inside the VPC
        self.ingress_rules["endpoints_from_vpc"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-endpoints-ingress-vpc",
            security_group_id=self.endpoints_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["https"],
            to_port=PORTS["https"],
            cidr_ipv4=vpc_cidr,
            description="HTTPS from VPC",
            opts=opts,
        )

        for group_name, group in [
            ("bastion", self.bastion_sg),
            ("lambda", self.lambda_sg),
            ("database", self.database_sg),
            ("endpoints", self.endpoints_sg),
        ]:
            aws.vpc.SecurityGroupEgressRule(
                f"{name}-{group_name}-egress-all",
                security_group_id=group.id,
                ip_protocol="-1",
                cidr_ipv4="0.0.0.0/0",
                description="All outbound traffic",
                opts=opts,
            )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            bastion_sg_id=self.bastion_sg.id,
            lambda_sg_id=self.lambda_sg.id,
            database_sg_id=self.database_sg.id,
            endpoints_sg_id=self.endpoints_sg.id,
        )

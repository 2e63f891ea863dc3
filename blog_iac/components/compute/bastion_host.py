"""
Bastion Host Component for administrative database access.

A minimal Amazon Linux instance in the PUBLIC subnet, used by operators to
run the MySQL client against RDS (directly or through the proxy).

Key Components:
1. AMI: Latest Amazon Linux 2023.
2. User Data: Updates packages and installs the MySQL client and jq at first boot.
3. Instance Profile: SSM Session Manager access (no SSH port is opened) and
   read access to the database credentials secret.
4. Placement: first public subnet, bastion security group, public IP.
5. IMDSv2 required, encrypted root volume.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.components.security.iam_roles import assume_role_policy, secret_read_policy
from blog_iac.configs.base import EnvironmentConfig
from blog_iac.configs.constants import BASTION_PACKAGES, MANAGED_POLICY_ARNS
from blog_iac.utils.tags import create_tags


def build_user_data(packages: list[str]) -> str:
    """Bootstrap script run once at first boot."""
    return "\n".join([
        "#!/bin/bash",
        "yum -y update",
        f"yum install -y {' '.join(packages)}",
        "",
    ])


@dataclass
class BastionOutputs:
    """Output values from bastion component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    role_arn: pulumi.Output[str]


class BastionHostComponent(pulumi.ComponentResource):
    """Bastion host in the public subnet tier."""

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        db_secret_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:BastionHost", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=["amazon"],
            filters=[
                aws.ec2.GetAmiFilterArgs(
                    name="name",
                    values=["al2023-ami-2023.*-x86_64"],
                ),
                aws.ec2.GetAmiFilterArgs(
                    name="virtualization-type",
                    values=["hvm"],
                ),
            ],
        )

        self.role = aws.iam.Role(
            f"{name}-role",
            assume_role_policy=assume_role_policy("ec2.amazonaws.com"),
            tags=create_tags(environment, f"{name}-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-ssm-core",
            role=self.role.name,
            policy_arn=MANAGED_POLICY_ARNS["ssm_managed_instance"],
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-db-secret-read",
            role=self.role.id,
            policy=pulumi.Output.from_input(db_secret_arn).apply(secret_read_policy),
            opts=child_opts,
        )

        self.instance_profile = aws.iam.InstanceProfile(
            f"{name}-profile",
            role=self.role.name,
            tags=create_tags(environment, f"{name}-profile"),
            opts=child_opts,
        )

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=ami.id,
            instance_type=config.bastion_instance_type,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            associate_public_ip_address=True,
            iam_instance_profile=self.instance_profile.name,
            user_data=build_user_data(BASTION_PACKAGES),
            root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
                volume_size=8,
                volume_type="gp3",
                encrypted=True,
            ),
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=create_tags(environment, f"{name}-instance"),
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "role_arn": self.role.arn,
        })

    def get_outputs(self) -> BastionOutputs:
        """Get bastion output values."""
        return BastionOutputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            role_arn=self.role.arn,
        )

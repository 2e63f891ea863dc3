"""
IAM roles component for the API function.

Creates:
- Lambda execution role with VPC ENI management
- Secrets Manager access (managed policy plus an explicit read grant on the
  database credentials secret)
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.configs.constants import MANAGED_POLICY_ARNS
from blog_iac.utils.tags import create_tags


def assume_role_policy(service: str) -> str:
    """Trust policy letting an AWS service principal assume a role."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": service},
            "Action": "sts:AssumeRole",
        }],
    })


def secret_read_policy(secret_arn: str) -> str:
    """Read-only access to a single Secrets Manager secret."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": [
                "secretsmanager:GetSecretValue",
                "secretsmanager:DescribeSecret",
            ],
            "Resource": [secret_arn],
        }],
    })


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    lambda_role_arn: pulumi.Output[str]
    lambda_role_name: pulumi.Output[str]


class IamRolesComponent(pulumi.ComponentResource):
    """IAM role assumed by the API function."""

    def __init__(
        self,
        name: str,
        environment: str,
        role_name: str,
        db_secret_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.lambda_role = aws.iam.Role(
            f"{name}-lambda-role",
            name=role_name,
            assume_role_policy=assume_role_policy("lambda.amazonaws.com"),
            tags=create_tags(environment, role_name),
            opts=child_opts,
        )

        # Required to place the function in the VPC
        aws.iam.RolePolicyAttachment(
            f"{name}-lambda-vpc-access",
            role=self.lambda_role.name,
            policy_arn=MANAGED_POLICY_ARNS["lambda_vpc_access"],
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-lambda-secrets-manager",
            role=self.lambda_role.name,
            policy_arn=MANAGED_POLICY_ARNS["secrets_manager_read_write"],
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-lambda-db-secret-read",
            role=self.lambda_role.id,
            policy=pulumi.Output.from_input(db_secret_arn).apply(secret_read_policy),
            opts=child_opts,
        )

        self.register_outputs({
            "lambda_role_arn": self.lambda_role.arn,
            "lambda_role_name": self.lambda_role.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            lambda_role_arn=self.lambda_role.arn,
            lambda_role_name=self.lambda_role.name,
        )

"""
Secrets Manager component for database credentials.

Creates:
- A generated password (alphanumeric, no spaces) held in Pulumi state as a secret
- A Secrets Manager secret named <stack>-rds-credentials
- A secret version holding {"username": ..., "password": ...}

The same username/password pair is handed to the RDS instance as its master
credentials, and RDS Proxy authenticates with this secret. The API function
and the bastion read it by name at runtime.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws
import pulumi_random as random

from blog_iac.configs.constants import DB_DEFAULTS
from blog_iac.utils.tags import create_tags


@dataclass
class DatabaseCredentialsOutputs:
    """Output values from database credentials component."""
    secret_arn: pulumi.Output[str]
    secret_name: pulumi.Output[str]
    username: pulumi.Output[str]
    password: pulumi.Output[str]


class DatabaseCredentialsComponent(pulumi.ComponentResource):
    """
    Generated database credentials stored in Secrets Manager.

    Outside production the secret is deleted without a recovery window so
    stacks can be torn down and recreated under the same name.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        secret_name: str,
        username: str,
        is_production: bool = False,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:DatabaseCredentials", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.password = random.RandomPassword(
            f"{name}-db-password",
            length=int(DB_DEFAULTS["password_length"]),
            special=False,  # exclude punctuation
            opts=child_opts,
        )

        self.secret = aws.secretsmanager.Secret(
            f"{name}-db-credentials",
            name=secret_name,
            description="RDS MySQL credentials",
            recovery_window_in_days=None if is_production else 0,
            tags=create_tags(environment, secret_name),
            opts=child_opts,
        )

        self.secret_version = aws.secretsmanager.SecretVersion(
            f"{name}-db-credentials-version",
            secret_id=self.secret.id,
            secret_string=pulumi.Output.json_dumps({
                "username": username,
                "password": self.password.result,
            }),
            opts=child_opts,
        )

        self.username = pulumi.Output.from_input(username)

        self.register_outputs({
            "secret_arn": self.secret.arn,
            "secret_name": self.secret.name,
        })

    def get_outputs(self) -> DatabaseCredentialsOutputs:
        """Get credential output values."""
        # Consumers wait for the secret value, not just the empty secret
        return DatabaseCredentialsOutputs(
            secret_arn=self.secret_version.arn,
            secret_name=pulumi.Output.all(self.secret.name, self.secret_version.arn).apply(
                lambda args: args[0]
            ),
            username=self.username,
            password=self.password.result,
        )

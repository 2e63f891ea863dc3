"""
RDS Proxy Component for connection pooling.

Lambda opens a new database connection per cold start; RDS Proxy pools and
multiplexes those connections in front of the MySQL instance.

The 4-Resource Chain:
1. IAM Role: Lets the proxy (rds.amazonaws.com) read the credentials secret.
2. Proxy: Endpoint in the isolated subnets, authenticating with the secret.
3. Default Target Group: Connection pool settings.
4. Target: Binds the target group to the RDS instance.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.components.security.iam_roles import assume_role_policy, secret_read_policy
from blog_iac.components.storage.rds_mysql import RdsOutputs
from blog_iac.utils.tags import create_tags


@dataclass
class RdsProxyOutputs:
    """Output values from RDS Proxy component."""
    endpoint: pulumi.Output[str]
    proxy_arn: pulumi.Output[str]
    proxy_name: pulumi.Output[str]


class RdsProxyComponent(pulumi.ComponentResource):
    """RDS Proxy for the MySQL instance, shared security group with the database."""

    def __init__(
        self,
        name: str,
        environment: str,
        database: RdsOutputs,
        db_secret_arn: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        debug_logging: bool = True,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsProxy", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.role = aws.iam.Role(
            f"{name}-proxy-role",
            assume_role_policy=assume_role_policy("rds.amazonaws.com"),
            tags=create_tags(environment, f"{name}-proxy-role"),
            opts=child_opts,
        )

        self.role_policy = aws.iam.RolePolicy(
            f"{name}-proxy-secret-read",
            role=self.role.id,
            policy=pulumi.Output.from_input(db_secret_arn).apply(secret_read_policy),
            opts=child_opts,
        )

        self.proxy = aws.rds.Proxy(
            f"{name}-proxy",
            name=f"{name}-proxy",
            engine_family="MYSQL",
            debug_logging=debug_logging,
            require_tls=True,
            idle_client_timeout=1800,
            role_arn=self.role.arn,
            vpc_subnet_ids=subnet_ids,
            vpc_security_group_ids=[security_group_id],
            auths=[
                aws.rds.ProxyAuthArgs(
                    auth_scheme="SECRETS",
                    iam_auth="DISABLED",
                    secret_arn=db_secret_arn,
                ),
            ],
            tags=create_tags(environment, f"{name}-proxy"),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.role_policy],
            ),
        )

        self.target_group = aws.rds.ProxyDefaultTargetGroup(
            f"{name}-proxy-target-group",
            db_proxy_name=self.proxy.name,
            connection_pool_config=aws.rds.ProxyDefaultTargetGroupConnectionPoolConfigArgs(
                max_connections_percent=100,
                max_idle_connections_percent=50,
                connection_borrow_timeout=120,
            ),
            opts=child_opts,
        )

        self.target = aws.rds.ProxyTarget(
            f"{name}-proxy-target",
            db_proxy_name=self.proxy.name,
            target_group_name=self.target_group.name,
            db_instance_identifier=database.identifier,
            opts=child_opts,
        )

        self.register_outputs({
            "endpoint": self.proxy.endpoint,
            "proxy_arn": self.proxy.arn,
            "proxy_name": self.proxy.name,
        })

    def get_outputs(self) -> RdsProxyOutputs:
        """Get RDS Proxy output values."""
        return RdsProxyOutputs(
            endpoint=self.proxy.endpoint,
            proxy_arn=self.proxy.arn,
            proxy_name=self.proxy.name,
        )

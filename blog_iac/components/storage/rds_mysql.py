"""
RDS MySQL Component for Relational Database.

Access Control - Who Can Connect:
1. RDS Proxy (database_sg, self-reference) → Port 3306 ✅
2. Lambda (lambda_sg) → Port 3306 ✅ (normally via the proxy)
3. Bastion host (bastion_sg) → Port 3306 ✅
4. Anyone else → DENIED ❌

Placement: isolated subnets only, never publicly accessible.
Character sets: every client/server character set parameter is utf8mb4.
Credentials: master username/password come from the generated Secrets
Manager record, so the proxy can authenticate with that same secret.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.configs.base import EnvironmentConfig
from blog_iac.configs.constants import DB_CHARSET_PARAMETERS, DB_DEFAULTS
from blog_iac.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    identifier: pulumi.Output[str]
    address: pulumi.Output[str]
    port: pulumi.Output[int]
    arn: pulumi.Output[str]


class RdsMysqlComponent(pulumi.ComponentResource):
    """
    RDS MySQL instance behind RDS Proxy.

    Torn down with the stack: no deletion protection and no final snapshot
    unless configured for production.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        username: pulumi.Input[str],
        password: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        self.parameter_group = aws.rds.ParameterGroup(
            f"{name}-params",
            family=config.parameter_group_family,
            parameters=[
                aws.rds.ParameterGroupParameterArgs(name=key, value=value)
                for key, value in DB_CHARSET_PARAMETERS.items()
            ],
            tags=create_tags(environment, f"{name}-params"),
            opts=child_opts,
        )

        self.instance = aws.rds.Instance(
            f"{name}-mysql",
            identifier=f"{name}-mysql",
            engine=str(DB_DEFAULTS["engine"]),
            engine_version=config.rds_engine_version,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_type="gp3",
            storage_encrypted=True,
            username=username,
            password=password,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            parameter_group_name=self.parameter_group.name,
            publicly_accessible=False,
            deletion_protection=config.enable_deletion_protection,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=f"{name}-final-snapshot" if config.is_production else None,
            backup_retention_period=7 if config.is_production else 1,
            tags=create_tags(environment, f"{name}-mysql"),
            opts=child_opts,
        )

        self.register_outputs({
            "identifier": self.instance.identifier,
            "address": self.instance.address,
            "port": self.instance.port,
            "arn": self.instance.arn,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            identifier=self.instance.identifier,
            address=self.instance.address,
            port=self.instance.port,
            arn=self.instance.arn,
        )

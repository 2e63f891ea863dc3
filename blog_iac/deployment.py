"""
Composition of every component in dependency order.

1. VPC → Security Groups
2. Database credentials, Secrets Manager VPC endpoint
3. Bastion host, RDS MySQL
4. RDS Proxy
5. Lambda role → API function
6. API Gateway

Each step takes the outputs of the steps it depends on as constructor
arguments, so a component cannot be declared before what it references.
"""

from dataclasses import dataclass

import pulumi

from blog_iac.configs.base import EnvironmentConfig
from blog_iac.utils.naming import ResourceNamer

# Networking
from blog_iac.components.networking.vpc import VpcComponent
from blog_iac.components.networking.security_groups import SecurityGroupsComponent
from blog_iac.components.networking.vpc_endpoints import VpcEndpointsComponent

# Security
from blog_iac.components.security.iam_roles import IamRolesComponent
from blog_iac.components.security.secrets_manager import DatabaseCredentialsComponent

# Storage
from blog_iac.components.storage.rds_mysql import RdsMysqlComponent
from blog_iac.components.storage.rds_proxy import RdsProxyComponent

# Compute
from blog_iac.components.compute.bastion_host import BastionHostComponent
from blog_iac.components.compute.api_function import ApiFunctionComponent

# Edge
from blog_iac.components.edge.api_gateway import ApiGatewayComponent


@dataclass
class Infrastructure:
    """Every top-level component declared for the stack."""
    vpc: VpcComponent
    security_groups: SecurityGroupsComponent
    credentials: DatabaseCredentialsComponent
    vpc_endpoints: VpcEndpointsComponent
    bastion: BastionHostComponent
    database: RdsMysqlComponent
    proxy: RdsProxyComponent
    iam_roles: IamRolesComponent
    api_function: ApiFunctionComponent
    api_gateway: ApiGatewayComponent

    def exports(self) -> dict[str, pulumi.Output]:
        """Stack exports keyed by export name."""
        return {
            "vpc_id": self.vpc.vpc.id,
            "bastion_instance_id": self.bastion.instance.id,
            "bastion_public_ip": self.bastion.instance.public_ip,
            "db_secret_name": self.credentials.secret.name,
            "rds_endpoint": self.database.instance.address,
            "proxy_endpoint": self.proxy.proxy.endpoint,
            "function_name": self.api_function.function.name,
            "api_endpoint": self.api_gateway.api.api_endpoint,
        }


def build_infrastructure(
    config: EnvironmentConfig,
    namer: ResourceNamer,
    availability_zones: list[str] | None = None,
) -> Infrastructure:
    """
    Declare the full stack.

    Args:
        config: Validated environment configuration
        namer: ResourceNamer for the stack
        availability_zones: AZs to spread subnets over; looked up when omitted

    Returns:
        Infrastructure holding every declared component
    """
    base_name = namer.name("")
    environment = config.environment

    # --- Layer 1: Networking Foundation ---
    vpc = VpcComponent(
        name=base_name,
        environment=environment,
        vpc_name=config.vpc_name,
        availability_zones=availability_zones,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=environment,
        vpc_id=vpc_outputs.vpc_id,
        vpc_cidr=vpc_outputs.vpc_cidr,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: Credentials, VPC Endpoints ---
    credentials = DatabaseCredentialsComponent(
        name=base_name,
        environment=environment,
        secret_name=namer.secret_name("rds-credentials"),
        username=config.db_username,
        is_production=config.is_production,
    )
    credential_outputs = credentials.get_outputs()

    vpc_endpoints = VpcEndpointsComponent(
        name=base_name,
        environment=environment,
        vpc_id=vpc_outputs.vpc_id,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.endpoints_sg_id,
    )

    # --- Layer 3: Bastion, Database ---
    bastion = BastionHostComponent(
        name=namer.name("bastion"),
        environment=environment,
        config=config,
        subnet_id=vpc_outputs.public_subnet_ids[0],
        security_group_id=sg_outputs.bastion_sg_id,
        db_secret_arn=credential_outputs.secret_arn,
    )

    database = RdsMysqlComponent(
        name=base_name,
        environment=environment,
        config=config,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        username=credential_outputs.username,
        password=credential_outputs.password,
    )

    # --- Layer 4: Connection Proxy ---
    proxy = RdsProxyComponent(
        name=base_name,
        environment=environment,
        database=database.get_outputs(),
        db_secret_arn=credential_outputs.secret_arn,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        debug_logging=config.proxy_debug_logging,
    )

    # --- Layer 5: Compute ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=environment,
        role_name=namer.name("lambda-role"),
        db_secret_arn=credential_outputs.secret_arn,
    )

    api_function = ApiFunctionComponent(
        name=namer.name("api"),
        environment=environment,
        config=config,
        role_arn=iam_roles.get_outputs().lambda_role_arn,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.lambda_sg_id,
        proxy_endpoint=proxy.get_outputs().endpoint,
        db_secret_name=credential_outputs.secret_name,
    )
    function_outputs = api_function.get_outputs()

    # --- Layer 6: Edge ---
    api_gateway = ApiGatewayComponent(
        name=base_name,
        environment=environment,
        function_name=function_outputs.function_name,
        function_invoke_arn=function_outputs.invoke_arn,
    )

    return Infrastructure(
        vpc=vpc,
        security_groups=security_groups,
        credentials=credentials,
        vpc_endpoints=vpc_endpoints,
        bastion=bastion,
        database=database,
        proxy=proxy,
        iam_roles=iam_roles,
        api_function=api_function,
        api_gateway=api_gateway,
    )

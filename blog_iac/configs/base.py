"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

import re
from dataclasses import dataclass

from blog_iac.configs.constants import VALID_ENVIRONMENTS
from blog_iac.configs.exceptions import ConfigValidationError

_ENGINE_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)(\.\d+)?$")


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        vpc_name: Name tag of the VPC
        bastion_instance_type: EC2 instance type for the bastion host
        rds_instance_class: RDS instance class for MySQL
        rds_engine_version: MySQL engine version (e.g. 8.0 or 8.0.39)
        rds_allocated_storage: RDS storage in GB
        db_username: Master username stored in the credentials secret
        lambda_memory: Lambda function memory in MB
        lambda_timeout: Lambda function timeout in seconds
        lambda_runtime: Lambda runtime identifier
        lambda_handler: Handler entry point inside the code archive
        lambda_code_path: Local directory packaged as the function code
        enable_deletion_protection: Enable deletion protection for the database
        proxy_debug_logging: Log SQL statements passing through RDS Proxy
    """
    environment: str
    vpc_name: str
    bastion_instance_type: str
    rds_instance_class: str
    rds_engine_version: str
    rds_allocated_storage: int
    db_username: str
    lambda_memory: int
    lambda_timeout: int
    lambda_runtime: str
    lambda_handler: str
    lambda_code_path: str
    enable_deletion_protection: bool
    proxy_debug_logging: bool

    def __post_init__(self) -> None:
        if self.environment not in VALID_ENVIRONMENTS:
            raise ConfigValidationError(
                f"environment must be one of {', '.join(VALID_ENVIRONMENTS)}",
                field="environment",
                value=self.environment,
            )
        if not 128 <= self.lambda_memory <= 10240:
            raise ConfigValidationError(
                "lambda_memory must be between 128 and 10240 MB",
                field="lambda_memory",
                value=self.lambda_memory,
            )
        if not 1 <= self.lambda_timeout <= 900:
            raise ConfigValidationError(
                "lambda_timeout must be between 1 and 900 seconds",
                field="lambda_timeout",
                value=self.lambda_timeout,
            )
        if not self.db_username:
            raise ConfigValidationError(
                "db_username must not be empty",
                field="db_username",
                value=self.db_username,
            )
        if not _ENGINE_VERSION_PATTERN.match(self.rds_engine_version):
            raise ConfigValidationError(
                "rds_engine_version must look like <major>.<minor>[.<patch>]",
                field="rds_engine_version",
                value=self.rds_engine_version,
            )

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def parameter_group_family(self) -> str:
        """Get the RDS parameter group family, e.g. mysql8.0."""
        match = _ENGINE_VERSION_PATTERN.match(self.rds_engine_version)
        return f"mysql{match.group(1)}.{match.group(2)}"

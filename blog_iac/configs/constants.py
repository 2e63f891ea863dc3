"""
Infrastructure constants for the game blog stack.

Contains CIDR blocks, ports, database parameters and default configurations.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"
DEFAULT_VPC_NAME: Final[str] = "toppovpc"

# Number of availability zones each subnet tier spans
MAX_AZS: Final[int] = 2

# Subnet CIDR blocks, one /24 per tier per AZ
SUBNET_CIDRS: Final[dict[str, list[str]]] = {
    "public": ["10.0.0.0/24", "10.0.1.0/24"],    # Bastion, internet gateway
    "isolated": ["10.0.2.0/24", "10.0.3.0/24"],  # RDS, RDS Proxy, Lambda
}

# Bastion instance types by environment
INSTANCE_TYPES: Final[dict[str, str]] = {
    "dev": "t3.micro",
    "staging": "t3.micro",
    "prod": "t3.small",
}

# RDS Instance classes by environment
RDS_INSTANCE_CLASSES: Final[dict[str, str]] = {
    "dev": "db.t3.micro",
    "staging": "db.t3.micro",
    "prod": "db.t3.small",
}

# Lambda configuration
LAMBDA_DEFAULTS: Final[dict[str, int | str]] = {
    "memory_mb": 1024,
    "timeout_seconds": 30,
    "runtime": "nodejs20.x",
    "handler": "index.handler",
    "code_path": "src",
}

# Database defaults
DB_DEFAULTS: Final[dict[str, int | str]] = {
    "engine": "mysql",
    "engine_version": "8.0",
    "username": "MyDBAdmin",
    "allocated_storage_gb": 20,
    "password_length": 32,
}

# All client/server character sets forced to utf8mb4
DB_CHARSET_PARAMETERS: Final[dict[str, str]] = {
    "character_set_client": "utf8mb4",
    "character_set_connection": "utf8mb4",
    "character_set_database": "utf8mb4",
    "character_set_results": "utf8mb4",
    "character_set_server": "utf8mb4",
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "game-blog",
    "ManagedBy": "pulumi",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "https": 443,
    "mysql": 3306,
}

# Headers API Gateway allows on CORS preflight by default
CORS_DEFAULT_HEADERS: Final[list[str]] = [
    "Content-Type",
    "X-Amz-Date",
    "Authorization",
    "X-Api-Key",
    "X-Amz-Security-Token",
    "X-Amz-User-Agent",
]

# AWS managed policies
MANAGED_POLICY_ARNS: Final[dict[str, str]] = {
    "lambda_vpc_access": "arn:aws:iam::aws:policy/service-role/AWSLambdaVPCAccessExecutionRole",
    "secrets_manager_read_write": "arn:aws:iam::aws:policy/SecretsManagerReadWrite",
    "ssm_managed_instance": "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore",
}

# Packages the bastion installs at first boot (MySQL client + JSON tooling)
BASTION_PACKAGES: Final[list[str]] = ["mariadb105", "jq"]

VALID_ENVIRONMENTS: Final[tuple[str, ...]] = ("dev", "staging", "prod")

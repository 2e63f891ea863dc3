"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from blog_iac.configs.base import EnvironmentConfig
from blog_iac.configs.constants import (
    DB_DEFAULTS,
    DEFAULT_VPC_NAME,
    INSTANCE_TYPES,
    LAMBDA_DEFAULTS,
    RDS_INSTANCE_CLASSES,
)
from blog_iac.configs.exceptions import ConfigValidationError
from blog_iac.utils.logger import get_logger

logger = get_logger(__name__)


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ConfigValidationError: If a value is malformed or out of range
    """
    config = pulumi.Config()
    environment = config.require("environment")

    env_config = EnvironmentConfig(
        environment=environment,
        vpc_name=config.get("vpc_name") or DEFAULT_VPC_NAME,
        bastion_instance_type=(
            config.get("bastion_instance_type") or INSTANCE_TYPES.get(environment, "t3.micro")
        ),
        rds_instance_class=(
            config.get("rds_instance_class") or RDS_INSTANCE_CLASSES.get(environment, "db.t3.micro")
        ),
        rds_engine_version=config.get("rds_engine_version") or str(DB_DEFAULTS["engine_version"]),
        rds_allocated_storage=_get_int_default(
            config, "rds_allocated_storage", int(DB_DEFAULTS["allocated_storage_gb"])
        ),
        db_username=config.get("db_username") or str(DB_DEFAULTS["username"]),
        lambda_memory=_get_int_default(config, "lambda_memory", int(LAMBDA_DEFAULTS["memory_mb"])),
        lambda_timeout=_get_int_default(
            config, "lambda_timeout", int(LAMBDA_DEFAULTS["timeout_seconds"])
        ),
        lambda_runtime=config.get("lambda_runtime") or str(LAMBDA_DEFAULTS["runtime"]),
        lambda_handler=config.get("lambda_handler") or str(LAMBDA_DEFAULTS["handler"]),
        lambda_code_path=config.get("lambda_code_path") or str(LAMBDA_DEFAULTS["code_path"]),
        enable_deletion_protection=config.get_bool("enable_deletion_protection") or False,
        proxy_debug_logging=_get_bool_default(config, "proxy_debug_logging", True),
    )

    logger.debug("get_config - Loaded config for environment %s", env_config.environment)
    return env_config


def _get_bool_default(config: pulumi.Config, key: str, default: bool) -> bool:
    value = config.get_bool(key)
    return default if value is None else value


def _get_int_default(config: pulumi.Config, key: str, default: int) -> int:
    value = config.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigValidationError(
            f"{key} must be an integer",
            field=key,
            value=value,
        ) from e

"""Pytest fixtures for infrastructure tests.

Resources are declared against Pulumi mocks: no engine or AWS account is
needed. Every registered resource is recorded so tests can inspect the
inputs it was declared with.
"""

import sys
from pathlib import Path

import pulumi
import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

ACCOUNT_ID = "123456789012"
REGION = "ap-northeast-1"
AVAILABILITY_ZONES = [f"{REGION}a", f"{REGION}c", f"{REGION}d"]


def _resource_outputs(args: pulumi.runtime.MockResourceArgs) -> dict:
    """Computed outputs the provider would return for a resource type."""
    name = args.inputs.get("name") or args.name
    if args.typ == "aws:rds/instance:Instance":
        identifier = args.inputs.get("identifier", args.name)
        address = f"{identifier}.abcdefghijkl.{REGION}.rds.amazonaws.com"
        return {
            "address": address,
            "endpoint": f"{address}:3306",
            "port": 3306,
            "arn": f"arn:aws:rds:{REGION}:{ACCOUNT_ID}:db:{identifier}",
        }
    if args.typ == "aws:rds/proxy:Proxy":
        return {
            "endpoint": f"{name}.proxy-abcdefghijkl.{REGION}.rds.amazonaws.com",
            "arn": f"arn:aws:rds:{REGION}:{ACCOUNT_ID}:db-proxy:prx-0123456789",
        }
    if args.typ == "aws:rds/proxyDefaultTargetGroup:ProxyDefaultTargetGroup":
        return {"name": "default"}
    if args.typ == "aws:secretsmanager/secret:Secret":
        # Secrets Manager uses the ARN as the resource ID
        arn = f"arn:aws:secretsmanager:{REGION}:{ACCOUNT_ID}:secret:{name}-AbCdEf"
        return {"id": arn, "arn": arn}
    if args.typ == "aws:secretsmanager/secretVersion:SecretVersion":
        return {"arn": args.inputs.get("secretId"), "versionId": "v1"}
    if args.typ == "aws:iam/role:Role":
        return {"name": name, "arn": f"arn:aws:iam::{ACCOUNT_ID}:role/{name}"}
    if args.typ == "aws:iam/instanceProfile:InstanceProfile":
        return {"name": name, "arn": f"arn:aws:iam::{ACCOUNT_ID}:instance-profile/{name}"}
    if args.typ == "aws:lambda/function:Function":
        arn = f"arn:aws:lambda:{REGION}:{ACCOUNT_ID}:function:{name}"
        return {
            "arn": arn,
            "invokeArn": f"arn:aws:apigateway:{REGION}:lambda:path/2015-03-31/functions/{arn}/invocations",
        }
    if args.typ == "aws:apigatewayv2/api:Api":
        return {
            "apiEndpoint": f"https://abc123.execute-api.{REGION}.amazonaws.com",
            "executionArn": f"arn:aws:execute-api:{REGION}:{ACCOUNT_ID}:abc123",
        }
    if args.typ == "aws:ec2/instance:Instance":
        return {"publicIp": "203.0.113.10", "privateIp": "10.0.0.10"}
    if args.typ == "random:index/randomPassword:RandomPassword":
        return {"result": "a" * int(args.inputs.get("length", 32))}
    return {}


class InfrastructureMocks(pulumi.runtime.Mocks):
    """Pulumi mocks that record every registered resource."""

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        computed = _resource_outputs(args)
        resource_id = computed.pop("id", f"{args.name}_id")
        return [resource_id, {**args.inputs, **computed}]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {
                "id": REGION,
                "names": AVAILABILITY_ZONES,
                "zoneIds": ["apne1-az4", "apne1-az1", "apne1-az2"],
            }
        if args.token == "aws:index/getRegion:getRegion":
            return {"id": REGION, "name": REGION, "description": "Asia Pacific (Tokyo)"}
        if args.token == "aws:ec2/getAmi:getAmi":
            return {"id": "ami-0123456789abcdef0", "architecture": "x86_64"}
        return {}

    def find(
        self,
        typ: str,
        name: str | None = None,
        prefix: str | None = None,
    ) -> list[pulumi.runtime.MockResourceArgs]:
        """Recorded resources of a type, optionally filtered by logical name or name prefix."""
        return [
            resource for resource in self.resources
            if resource.typ == typ
            and (name is None or resource.name == name)
            and (prefix is None or resource.name.startswith(prefix))
        ]


_MOCKS = InfrastructureMocks()
pulumi.runtime.set_mocks(_MOCKS, project="game-blog", stack="dev", preview=False)


def make_config(**overrides):
    """EnvironmentConfig with dev defaults."""
    from blog_iac.configs.base import EnvironmentConfig

    values = {
        "environment": "dev",
        "vpc_name": "toppovpc",
        "bastion_instance_type": "t3.micro",
        "rds_instance_class": "db.t3.micro",
        "rds_engine_version": "8.0",
        "rds_allocated_storage": 20,
        "db_username": "MyDBAdmin",
        "lambda_memory": 1024,
        "lambda_timeout": 30,
        "lambda_runtime": "nodejs20.x",
        "lambda_handler": "index.handler",
        "lambda_code_path": "src",
        "enable_deletion_protection": False,
        "proxy_debug_logging": True,
    }
    values.update(overrides)
    return EnvironmentConfig(**values)


@pytest.fixture(scope="session")
def mocks() -> InfrastructureMocks:
    """Recorder shared by every declared resource."""
    return _MOCKS


@pytest.fixture(scope="session")
def infrastructure(mocks):
    """The full dev stack, declared once per session."""
    from blog_iac.deployment import build_infrastructure
    from blog_iac.utils.naming import ResourceNamer

    namer = ResourceNamer(project="game-blog", environment="dev")
    return build_infrastructure(make_config(), namer)


@pytest.fixture(scope="session")
def prod_infrastructure(mocks):
    """The full prod stack, declared once per session beside the dev stack."""
    from blog_iac.deployment import build_infrastructure
    from blog_iac.utils.naming import ResourceNamer

    namer = ResourceNamer(project="game-blog", environment="prod")
    config = make_config(
        environment="prod",
        bastion_instance_type="t3.small",
        rds_instance_class="db.t3.small",
        enable_deletion_protection=True,
    )
    return build_infrastructure(config, namer)


@pytest.fixture
def dev_config():
    """Valid dev EnvironmentConfig."""
    return make_config()


@pytest.fixture
def config_factory():
    """Build EnvironmentConfig with dev defaults and keyword overrides."""
    return make_config


@pytest.fixture
def iac_project_root():
    """Return the blog_iac package directory."""
    return PROJECT_ROOT / "blog_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the blog_iac package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]

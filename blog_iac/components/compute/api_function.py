"""
Lambda function component serving the blog API.

Creates:
- CloudWatch log group for function logs
- Lambda function in the isolated subnets, reaching MySQL through RDS Proxy

The function source is built elsewhere; this component only packages the
configured directory. At deploy time the function receives:
- PROXY_ENDPOINT: RDS Proxy hostname
- RDS_SECRET_NAME: name of the credentials secret to read at runtime
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.configs.base import EnvironmentConfig
from blog_iac.utils.tags import create_tags


@dataclass
class FunctionOutputs:
    """Output values from Lambda component."""
    function_arn: pulumi.Output[str]
    function_name: pulumi.Output[str]
    invoke_arn: pulumi.Output[str]


class ApiFunctionComponent(pulumi.ComponentResource):
    """Lambda function invoked by API Gateway for every request."""

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        role_arn: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        proxy_endpoint: pulumi.Input[str],
        db_secret_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:ApiFunction", name, None, opts)

        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=f"/aws/lambda/{name}",
            retention_in_days=30,
            tags=create_tags(environment, f"{name}-logs"),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.function = aws.lambda_.Function(
            f"{name}-function",
            name=name,
            role=role_arn,
            code=pulumi.FileArchive(config.lambda_code_path),
            handler=config.lambda_handler,
            runtime=config.lambda_runtime,
            memory_size=config.lambda_memory,
            timeout=config.lambda_timeout,
            vpc_config=aws.lambda_.FunctionVpcConfigArgs(
                subnet_ids=subnet_ids,
                security_group_ids=[security_group_id],
            ),
            environment=aws.lambda_.FunctionEnvironmentArgs(
                variables={
                    "ENVIRONMENT": environment,
                    "PROXY_ENDPOINT": proxy_endpoint,
                    "RDS_SECRET_NAME": db_secret_name,
                    "NODE_OPTIONS": "--enable-source-maps",
                },
            ),
            tags=create_tags(environment, f"{name}-function"),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.log_group],
            ),
        )

        self.register_outputs({
            "function_arn": self.function.arn,
            "function_name": self.function.name,
            "invoke_arn": self.function.invoke_arn,
        })

    def get_outputs(self) -> FunctionOutputs:
        """Get Lambda output values."""
        return FunctionOutputs(
            function_arn=self.function.arn,
            function_name=self.function.name,
            invoke_arn=self.function.invoke_arn,
        )

"""
API Gateway Component for public HTTP access.

Concept: one public HTTP entry point that forwards every path and method to
the API function. API Gateway answers CORS preflight requests itself.

The 5-Resource Dependency Chain:
1. API: The HTTP API container (protocol type, CORS settings).
2. Integration: AWS_PROXY to the Lambda function (payload format 2.0).
3. Routes: "ANY /{proxy+}" for every path, "ANY /" for the root.
4. Stage: "$default" with auto-deploy, giving a clean URL.
5. Permission: Allows apigateway.amazonaws.com to invoke the function.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.configs.constants import CORS_DEFAULT_HEADERS
from blog_iac.utils.tags import create_tags


@dataclass
class ApiGatewayOutputs:
    """Output values from API Gateway component."""
    api_endpoint: pulumi.Output[str]
    api_id: pulumi.Output[str]


class ApiGatewayComponent(pulumi.ComponentResource):
    """
    HTTP API Gateway in front of the API function.

    CORS allows all origins and methods with the default header set.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        function_name: pulumi.Input[str],
        function_invoke_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:edge:ApiGateway", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.api = aws.apigatewayv2.Api(
            f"{name}-api",
            name=f"{name}-api",
            protocol_type="HTTP",
            cors_configuration=aws.apigatewayv2.ApiCorsConfigurationArgs(
                allow_origins=["*"],
                allow_methods=["*"],
                allow_headers=CORS_DEFAULT_HEADERS,
            ),
            tags=create_tags(environment, f"{name}-api"),
            opts=child_opts,
        )

        self.integration = aws.apigatewayv2.Integration(
            f"{name}-integration",
            api_id=self.api.id,
            integration_type="AWS_PROXY",
            integration_method="POST",
            integration_uri=function_invoke_arn,
            payload_format_version="2.0",
            opts=child_opts,
        )

        integration_target = self.integration.id.apply(lambda id: f"integrations/{id}")

        # Catch-all route
        self.route = aws.apigatewayv2.Route(
            f"{name}-route",
            api_id=self.api.id,
            route_key="ANY /{proxy+}",
            target=integration_target,
            opts=child_opts,
        )

        # {proxy+} does not match the bare root path
        self.root_route = aws.apigatewayv2.Route(
            f"{name}-root-route",
            api_id=self.api.id,
            route_key="ANY /",
            target=integration_target,
            opts=child_opts,
        )

        self.stage = aws.apigatewayv2.Stage(
            f"{name}-stage",
            api_id=self.api.id,
            name="$default",
            auto_deploy=True,
            tags=create_tags(environment, f"{name}-stage"),
            opts=child_opts,
        )

        self.permission = aws.lambda_.Permission(
            f"{name}-invoke-permission",
            action="lambda:InvokeFunction",
            function=function_name,
            principal="apigateway.amazonaws.com",
            source_arn=self.api.execution_arn.apply(lambda arn: f"{arn}/*/*"),
            opts=child_opts,
        )

        self.register_outputs({
            "api_endpoint": self.api.api_endpoint,
            "api_id": self.api.id,
        })

    def get_outputs(self) -> ApiGatewayOutputs:
        """Get API Gateway output values."""
        return ApiGatewayOutputs(
            api_endpoint=self.api.api_endpoint,
            api_id=self.api.id,
        )

"""
VPC Endpoints Component for Private AWS Service Access.

The isolated subnets have no internet route. The API function reads the
database credentials from Secrets Manager at runtime, so Secrets Manager is
exposed inside the VPC through an Interface endpoint (PrivateLink ENIs).
"private_dns_enabled=True" makes the regular Secrets Manager hostname resolve
to the endpoint's private IPs, so SDK clients need no endpoint override.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from blog_iac.utils.tags import create_tags


@dataclass
class VpcEndpointOutputs:
    """Output values from VPC endpoints component."""
    secrets_endpoint_id: pulumi.Output[str]


class VpcEndpointsComponent(pulumi.ComponentResource):
    """Secrets Manager interface endpoint for the isolated subnet tier."""

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:VpcEndpoints", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        region = aws.get_region()

        self.secrets_endpoint = aws.ec2.VpcEndpoint(
            f"{name}-secrets-endpoint",
            vpc_id=vpc_id,
            service_name=f"com.amazonaws.{region.id}.secretsmanager",
            vpc_endpoint_type="Interface",
            subnet_ids=subnet_ids,
            security_group_ids=[security_group_id],
            private_dns_enabled=True,
            tags=create_tags(environment, f"{name}-secrets-endpoint"),
            opts=child_opts,
        )

        self.register_outputs({
            "secrets_endpoint_id": self.secrets_endpoint.id,
        })

    def get_outputs(self) -> VpcEndpointOutputs:
        """Get VPC endpoint output values."""
        return VpcEndpointOutputs(secrets_endpoint_id=self.secrets_endpoint.id)

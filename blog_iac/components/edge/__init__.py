"""
Edge components for public API routing.

Components:
- ApiGatewayComponent: HTTP API forwarding every route to the API function
"""

from blog_iac.components.edge.api_gateway import ApiGatewayComponent, ApiGatewayOutputs

__all__ = [
    "ApiGatewayComponent",
    "ApiGatewayOutputs",
]

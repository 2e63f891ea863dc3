"""
Pulumi infrastructure-as-code for the game blog backend.

This package defines AWS infrastructure including:
- VPC with a public and an isolated subnet tier
- Bastion host for administrative database access
- RDS MySQL with generated credentials in Secrets Manager
- RDS Proxy pooling connections from Lambda
- Lambda function serving the API
- HTTP API Gateway forwarding every route to the function
"""

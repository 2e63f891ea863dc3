"""
Pulumi component resources for the game blog infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, security groups, VPC endpoints
- security: IAM roles, database credentials
- storage: RDS MySQL, RDS Proxy
- compute: Bastion host, API Lambda function
- edge: API Gateway
"""

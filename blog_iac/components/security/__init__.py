"""
Security components for IAM and secrets management.

Components:
- IamRolesComponent: IAM role for the API function
- DatabaseCredentialsComponent: Generated database credentials in Secrets Manager
"""

from blog_iac.components.security.iam_roles import IamRolesComponent, IamRoleOutputs
from blog_iac.components.security.secrets_manager import (
    DatabaseCredentialsComponent,
    DatabaseCredentialsOutputs,
)

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "DatabaseCredentialsComponent",
    "DatabaseCredentialsOutputs",
]

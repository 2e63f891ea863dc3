"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def base(self) -> str:
        """Stack-wide prefix shared by every resource name."""
        return f"{self.project}-{self.environment}"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'bastion-sg')

        Returns:
            Formatted resource name
        """
        if not resource:
            return self.base
        return f"{self.base}-{resource}"

    def secret_name(self, name: str) -> str:
        """
        Generate a Secrets Manager secret name.

        Args:
            name: Secret identifier (e.g., 'rds-credentials')

        Returns:
            Secret name with stack prefix
        """
        return f"{self.base}-{name}"

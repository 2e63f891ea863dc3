"""
Storage components for the relational database.

Components:
- RdsMysqlComponent: RDS MySQL instance with utf8mb4 parameter group
- RdsProxyComponent: RDS Proxy pooling connections to the instance
"""

from blog_iac.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs
from blog_iac.components.storage.rds_proxy import RdsProxyComponent, RdsProxyOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
    "RdsProxyComponent",
    "RdsProxyOutputs",
]

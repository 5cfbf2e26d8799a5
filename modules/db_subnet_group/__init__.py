"""
DB Subnet Group Module
RDS DB subnet group as a Pulumi dynamic resource
"""

from .provider import DbSubnetGroupProvider
from .resource import DbSubnetGroup
from .functions import create_db_subnet_group_resources

__all__ = [
    "DbSubnetGroup",
    "DbSubnetGroupProvider",
    "create_db_subnet_group_resources",
]

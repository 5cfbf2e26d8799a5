"""
Pulumi dynamic resource modules
ELBv2 listeners, RDS DB subnet groups and generated service tag helpers
"""

from .lb_listener import create_lb_listener_resources
from .db_subnet_group import create_db_subnet_group_resources

__all__ = [
    "create_lb_listener_resources",
    "create_db_subnet_group_resources",
]

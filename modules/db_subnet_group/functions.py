"""
DB Subnet Group Module Functions
Creates or adopts an RDS DB subnet group
"""

import pulumi
from typing import Dict, List, Optional

from .resource import DbSubnetGroup


def create_db_subnet_group_resources(name: str,
                                     subnet_ids: List[pulumi.Input[str]],
                                     group_name: Optional[str] = None,
                                     description: Optional[str] = None,
                                     existing_group_name: str = "",
                                     region: Optional[str] = None,
                                     tags: Dict[str, str] = None,
                                     opts: Optional[pulumi.ResourceOptions] = None) -> Dict[str, any]:
    """
    Create a DB subnet group, or adopt an existing one

    Args:
        name: Resource name prefix
        subnet_ids: Subnets the group spans
        group_name: Exact group name, generated from name when empty
        description: Group description
        existing_group_name: Import this group instead of creating one
        region: AWS region for the provider calls
        tags: Additional tags
        opts: Pulumi resource options

    Returns:
        Dict with subnet group resource and outputs
    """
    tags = tags or {}

    if existing_group_name:
        pulumi.log.info(f"DB subnet group {existing_group_name} already exists, importing...")
        opts = pulumi.ResourceOptions.merge(opts, pulumi.ResourceOptions(import_=existing_group_name))
        group_name = group_name or existing_group_name

    subnet_group = DbSubnetGroup(
        f"{name}-db-subnet-group",
        subnet_ids=subnet_ids,
        name=group_name,
        name_prefix=None if group_name else f"{name}-",
        description=description,
        tags={
            **tags,
            "Name": f"{name}-db-subnet-group",
            "Module": "db_subnet_group"
        },
        region=region,
        opts=opts,
    )

    return {
        "subnet_group": subnet_group,
        "subnet_group_name": subnet_group.name,
        "subnet_group_arn": subnet_group.arn,
    }

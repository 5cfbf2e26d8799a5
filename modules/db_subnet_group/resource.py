"""
DB Subnet Group Resource
Declares an RDS DB subnet group managed by DbSubnetGroupProvider
"""

import pulumi
from pulumi.dynamic import Resource
from typing import Dict, List, Optional

from .provider import DbSubnetGroupProvider


class DbSubnetGroup(Resource):
    """An RDS DB subnet group"""

    arn: pulumi.Output[str]
    name: pulumi.Output[str]
    name_prefix: pulumi.Output[Optional[str]]
    description: pulumi.Output[str]
    subnet_ids: pulumi.Output[List[str]]
    tags: pulumi.Output[Dict[str, str]]

    def __init__(self, resource_name: str,
                 subnet_ids: pulumi.Input[List[pulumi.Input[str]]],
                 name: Optional[pulumi.Input[str]] = None,
                 name_prefix: Optional[pulumi.Input[str]] = None,
                 description: Optional[pulumi.Input[str]] = None,
                 tags: Optional[pulumi.Input[Dict[str, str]]] = None,
                 region: Optional[str] = None,
                 opts: Optional[pulumi.ResourceOptions] = None):
        super().__init__(
            DbSubnetGroupProvider(),
            resource_name,
            {
                "arn": None,
                "name": name,
                "name_prefix": name_prefix,
                "description": description,
                "subnet_ids": subnet_ids,
                "tags": tags,
                "region": region,
            },
            opts,
        )

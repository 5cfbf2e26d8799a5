"""
LB Listener Resource
Declares an ELBv2 listener managed by LbListenerProvider
"""

import pulumi
from pulumi.dynamic import Resource
from typing import Dict, List, Optional

from .provider import LbListenerProvider


class LbListener(Resource):
    """An ELBv2 listener with a single forward default action"""

    arn: pulumi.Output[str]
    load_balancer_arn: pulumi.Output[str]
    port: pulumi.Output[int]
    protocol: pulumi.Output[str]
    ssl_policy: pulumi.Output[str]
    certificate_arn: pulumi.Output[Optional[str]]
    default_action: pulumi.Output[List[Dict[str, str]]]

    def __init__(self, resource_name: str,
                 load_balancer_arn: pulumi.Input[str],
                 port: pulumi.Input[int],
                 default_action: pulumi.Input[List[Dict[str, pulumi.Input[str]]]],
                 protocol: Optional[pulumi.Input[str]] = None,
                 ssl_policy: Optional[pulumi.Input[str]] = None,
                 certificate_arn: Optional[pulumi.Input[str]] = None,
                 region: Optional[str] = None,
                 opts: Optional[pulumi.ResourceOptions] = None):
        super().__init__(
            LbListenerProvider(),
            resource_name,
            {
                "arn": None,
                "load_balancer_arn": load_balancer_arn,
                "port": port,
                "protocol": protocol,
                "ssl_policy": ssl_policy,
                "certificate_arn": certificate_arn,
                "default_action": default_action,
                "region": region,
            },
            opts,
        )

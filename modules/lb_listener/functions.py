"""
LB Listener Module Functions
Creates or adopts an ELBv2 listener forwarding to a target group
"""

import pulumi
from typing import Dict, Optional

from .resource import LbListener


def create_lb_listener_resources(name: str,
                                 load_balancer_arn: pulumi.Input[str],
                                 target_group_arn: pulumi.Input[str],
                                 port: int = 80,
                                 protocol: str = "HTTP",
                                 ssl_policy: Optional[str] = None,
                                 certificate_arn: Optional[pulumi.Input[str]] = None,
                                 existing_listener_arn: str = "",
                                 region: Optional[str] = None,
                                 opts: Optional[pulumi.ResourceOptions] = None) -> Dict[str, any]:
    """
    Create an LB listener, or adopt an existing one

    Args:
        name: Resource name prefix
        load_balancer_arn: ARN of the load balancer
        target_group_arn: ARN of the target group to forward to
        port: Listener port
        protocol: HTTP, HTTPS or TCP
        ssl_policy: SSL policy name, HTTPS only
        certificate_arn: Default certificate ARN, HTTPS only
        existing_listener_arn: Import this listener instead of creating one
        region: AWS region for the provider calls
        opts: Pulumi resource options

    Returns:
        Dict with listener resource and outputs
    """
    if existing_listener_arn:
        pulumi.log.info(f"LB listener {existing_listener_arn} already exists, importing...")
        opts = pulumi.ResourceOptions.merge(opts, pulumi.ResourceOptions(import_=existing_listener_arn))

    listener = LbListener(
        f"{name}-listener-{port}",
        load_balancer_arn=load_balancer_arn,
        port=port,
        protocol=protocol,
        ssl_policy=ssl_policy,
        certificate_arn=certificate_arn,
        default_action=[{
            "target_group_arn": target_group_arn,
            "type": "forward",
        }],
        region=region,
        opts=opts,
    )

    return {
        "listener": listener,
        "listener_arn": listener.arn,
        "listener_port": listener.port,
        "listener_protocol": listener.protocol,
    }

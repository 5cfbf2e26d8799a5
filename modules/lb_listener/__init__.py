"""
LB Listener Module
ELBv2 listener as a Pulumi dynamic resource
"""

from .provider import LbListenerProvider
from .resource import LbListener
from .functions import create_lb_listener_resources

__all__ = [
    "LbListener",
    "LbListenerProvider",
    "create_lb_listener_resources",
]

"""
LB Listener Provider
Pulumi dynamic provider mapping listener inputs onto the elbv2 API
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import pulumi
from botocore.exceptions import ClientError
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)

from modules.resource_utils import (
    DEFAULT_RETRY_TIMEOUT,
    DEFAULT_WAIT_TIMEOUT,
    ResourceError,
    get_client,
    is_aws_error,
    retry_with_timeout,
    wait_for_state,
)

DEFAULT_PROTOCOL = "HTTP"
LISTENER_PROTOCOLS = ["HTTP", "HTTPS", "TCP"]
ACTION_TYPES = ["forward"]

CERTIFICATE_NOT_FOUND = "CertificateNotFound"
LISTENER_NOT_FOUND = "ListenerNotFound"

INPUT_FIELDS = [
    "load_balancer_arn",
    "port",
    "protocol",
    "ssl_policy",
    "certificate_arn",
    "default_action",
    "region",
]
REPLACE_FIELDS = ["load_balancer_arn", "region"]


def listener_params(props: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the request fields shared by CreateListener and ModifyListener

    Args:
        props: Checked listener inputs

    Returns:
        Dict of elbv2 request keyword arguments
    """
    params = {
        "Port": int(props["port"]),
        "Protocol": props.get("protocol") or DEFAULT_PROTOCOL,
    }

    if props.get("ssl_policy"):
        params["SslPolicy"] = props["ssl_policy"]

    if props.get("certificate_arn"):
        params["Certificates"] = [{"CertificateArn": props["certificate_arn"]}]

    default_actions = props.get("default_action") or []
    if len(default_actions) == 1:
        params["DefaultActions"] = [
            {
                "TargetGroupArn": action["target_group_arn"],
                "Type": action["type"],
            }
            for action in default_actions
        ]

    return params


def listener_refresh_func(client, arn: str) -> Callable[[], Tuple[Optional[Dict[str, Any]], str]]:
    """Return a refresh function reporting "exists" once the listener is described"""

    def refresh():
        try:
            resp = client.describe_listeners(ListenerArns=[arn])
        except ClientError as e:
            if is_aws_error(e, LISTENER_NOT_FOUND):
                return None, ""
            raise ResourceError(f"Error retrieving Listener: {e}") from e

        listeners = resp.get("Listeners") or []
        if len(listeners) != 1:
            raise ResourceError(
                f"Error retrieving Listener {arn!r} (expected 1, got {len(listeners)})"
            )

        return listeners[0], "exists"

    return refresh


def listener_outputs(listener: Dict[str, Any], props: Dict[str, Any]) -> Dict[str, Any]:
    """Map a described listener back onto resource outputs"""
    outs = {
        "arn": listener["ListenerArn"],
        "load_balancer_arn": listener.get("LoadBalancerArn"),
        "port": listener.get("Port"),
        "protocol": listener.get("Protocol"),
        "ssl_policy": listener.get("SslPolicy"),
        "certificate_arn": props.get("certificate_arn"),
        "default_action": [
            {
                "target_group_arn": action.get("TargetGroupArn", ""),
                "type": action.get("Type", ""),
            }
            for action in listener.get("DefaultActions") or []
        ],
        "region": props.get("region"),
    }

    # Only a single certificate maps onto certificate_arn
    certificates = listener.get("Certificates") or []
    if len(certificates) == 1 and certificates[0]:
        outs["certificate_arn"] = certificates[0].get("CertificateArn")

    return outs


def _normalize_default_action(actions: Any) -> List[Dict[str, Any]]:
    return [
        {
            "target_group_arn": action.get("target_group_arn"),
            "type": (action.get("type") or "").lower(),
        }
        for action in actions or []
    ]


class LbListenerProvider(ResourceProvider):
    """Create/read/update/delete an ELBv2 listener"""

    def check(self, _olds: Dict[str, Any], news: Dict[str, Any]) -> CheckResult:
        inputs = dict(news)
        failures = []

        if not inputs.get("load_balancer_arn"):
            failures.append(CheckFailure("load_balancer_arn", "load_balancer_arn is required"))

        port = inputs.get("port")
        try:
            port = int(port)
        except (TypeError, ValueError):
            failures.append(CheckFailure("port", f"port must be an integer, got {port!r}"))
        else:
            if not 1 <= port <= 65535:
                failures.append(CheckFailure("port", f"port must be between 1 and 65535, got {port}"))
            inputs["port"] = port

        protocol = (inputs.get("protocol") or DEFAULT_PROTOCOL).upper()
        if protocol not in LISTENER_PROTOCOLS:
            failures.append(CheckFailure(
                "protocol", f"protocol must be one of {LISTENER_PROTOCOLS}, got {inputs.get('protocol')!r}"
            ))
        inputs["protocol"] = protocol

        default_action = inputs.get("default_action") or []
        if len(default_action) != 1:
            failures.append(CheckFailure(
                "default_action", f"exactly one default_action is required, got {len(default_action)}"
            ))
        else:
            action = default_action[0]
            if not action.get("target_group_arn"):
                failures.append(CheckFailure("default_action", "default_action.target_group_arn is required"))
            if (action.get("type") or "").lower() not in ACTION_TYPES:
                failures.append(CheckFailure(
                    "default_action", f"default_action.type must be one of {ACTION_TYPES}, got {action.get('type')!r}"
                ))
        inputs["default_action"] = _normalize_default_action(default_action)

        return CheckResult(inputs, failures)

    def diff(self, _id: str, olds: Dict[str, Any], news: Dict[str, Any]) -> DiffResult:
        changed = []
        for field in INPUT_FIELDS:
            # ssl_policy is computed when not set
            if field == "ssl_policy" and news.get(field) is None:
                continue
            old, new = olds.get(field), news.get(field)
            if field == "default_action":
                old, new = _normalize_default_action(old), _normalize_default_action(new)
            if old != new:
                changed.append(field)

        replaces = [field for field in changed if field in REPLACE_FIELDS]
        return DiffResult(
            changes=bool(changed),
            replaces=replaces,
            delete_before_replace=bool(replaces),
        )

    def create(self, props: Dict[str, Any]) -> CreateResult:
        client = get_client("elbv2", props.get("region"))
        lb_arn = props["load_balancer_arn"]

        params = listener_params(props)
        params["LoadBalancerArn"] = lb_arn

        def create_listener():
            pulumi.log.debug(f"Creating LB listener for ARN: {lb_arn}")
            return client.create_listener(**params)

        try:
            resp = retry_with_timeout(
                create_listener,
                timeout=DEFAULT_RETRY_TIMEOUT,
                retryable_codes=[CERTIFICATE_NOT_FOUND],
            )
        except (ClientError, ResourceError) as e:
            raise ResourceError(f"Error creating LB Listener: {e}") from e

        listeners = resp.get("Listeners") or []
        if not listeners:
            raise ResourceError("Error creating LB Listener: no listeners returned in response")

        arn = listeners[0]["ListenerArn"]

        # The describe call may not return a new listener right away
        pulumi.log.debug(f"Waiting for the LB Listener ({arn}) to exist")
        try:
            listener = wait_for_state(
                listener_refresh_func(client, arn),
                pending=[""],
                target=["exists"],
                timeout=DEFAULT_WAIT_TIMEOUT,
            )
        except ResourceError as e:
            raise ResourceError(f"Error waiting for LB Listener ({arn}) to exist: {e}") from e

        pulumi.log.debug(f"LB Listener ({arn}) exists")
        return CreateResult(id_=arn, outs=listener_outputs(listener, props))

    def read(self, id_: str, props: Dict[str, Any]) -> ReadResult:
        client = get_client("elbv2", props.get("region"))
        listener, _ = listener_refresh_func(client, id_)()

        if listener is None:
            pulumi.log.warn(f"DescribeListeners - removing {id_} from state")
            return ReadResult(id_="", outs={})

        return ReadResult(id_=id_, outs=listener_outputs(listener, props))

    def update(self, id_: str, _olds: Dict[str, Any], news: Dict[str, Any]) -> UpdateResult:
        client = get_client("elbv2", news.get("region"))

        params = listener_params(news)
        params["ListenerArn"] = id_

        try:
            retry_with_timeout(
                lambda: client.modify_listener(**params),
                timeout=DEFAULT_RETRY_TIMEOUT,
                retryable_codes=[CERTIFICATE_NOT_FOUND],
            )
        except (ClientError, ResourceError) as e:
            raise ResourceError(f"Error modifying LB Listener: {e}") from e

        result = self.read(id_, news)
        if not result.id:
            raise ResourceError(f"Error modifying LB Listener: listener {id_} disappeared")
        return UpdateResult(outs=result.outs)

    def delete(self, id_: str, props: Dict[str, Any]) -> None:
        client = get_client("elbv2", props.get("region"))

        try:
            client.delete_listener(ListenerArn=id_)
        except ClientError as e:
            raise ResourceError(f"Error deleting Listener: {e}") from e

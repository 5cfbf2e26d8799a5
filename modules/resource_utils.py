"""
Resource utilities shared by the dynamic providers
Retry on transient AWS errors and wait for eventual consistency
"""

import secrets
import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, Tuple

import boto3
import pulumi
from botocore.config import Config as BotoConfig
from botocore.exceptions import ClientError

DEFAULT_RETRY_TIMEOUT = 5 * 60
DEFAULT_WAIT_TIMEOUT = 3 * 60


class ResourceError(Exception):
    """Raised when a lifecycle operation against AWS fails"""


class RetryTimeoutError(ResourceError):
    """Raised when a retryable error persists past the retry timeout"""

    def __init__(self, timeout: float, last_error: Exception):
        self.timeout = timeout
        self.last_error = last_error
        super().__init__(f"timeout after {timeout}s, last error: {last_error}")


class WaitTimeoutError(ResourceError):
    """Raised when a resource does not reach its target state in time"""

    def __init__(self, timeout: float, last_state: str, target: Iterable[str]):
        self.timeout = timeout
        self.last_state = last_state
        self.target = list(target)
        super().__init__(
            f"timeout while waiting for state to become {self.target!r} "
            f"(last state: {last_state!r}, timeout: {timeout}s)"
        )


class UnexpectedStateError(ResourceError):
    """Raised when a refresh reports a state that is neither pending nor target"""

    def __init__(self, state: str, expected: Iterable[str]):
        self.state = state
        self.expected = list(expected)
        super().__init__(f"unexpected state {state!r}, wanted target {self.expected!r}")


class ResourceNotFoundError(ResourceError):
    """Raised when a refresh keeps returning nothing"""


def get_client(service: str, region: Optional[str] = None):
    """
    Create a boto3 client for a provider call

    Args:
        service: boto3 service name, e.g. "elbv2"
        region: AWS region, falls back to the environment when empty

    Returns:
        boto3 client
    """
    config = BotoConfig(retries={"max_attempts": 10, "mode": "standard"})
    if region:
        return boto3.client(service, region_name=region, config=config)
    return boto3.client(service, config=config)


def unique_name(prefix: str) -> str:
    """
    Generate a name that sorts by creation time

    Args:
        prefix: Name prefix

    Returns:
        prefix followed by a 26 character timestamp and random suffix
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")[:18]
    return f"{prefix}{timestamp}{secrets.token_hex(4)}"


def error_code(error: Exception) -> str:
    """Return the AWS error code of a ClientError, or an empty string"""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def is_aws_error(error: Exception, code: str, message: str = "") -> bool:
    """
    Check if an exception is an AWS error with the given code

    Args:
        error: Exception from a boto3 call
        code: Expected AWS error code
        message: Substring the error message must contain, ignored when empty

    Returns:
        True if the error matches, False otherwise
    """
    if not isinstance(error, ClientError):
        return False
    details = error.response.get("Error", {})
    return details.get("Code") == code and message in details.get("Message", "")


def retry_with_timeout(func: Callable[[], Any], timeout: float = DEFAULT_RETRY_TIMEOUT,
                       retryable_codes: Iterable[str] = (), initial_delay: float = 0.5,
                       max_delay: float = 10.0) -> Any:
    """
    Retry a function on whitelisted AWS error codes until a timeout

    Args:
        func: Function to call
        timeout: Seconds after which retrying stops
        retryable_codes: AWS error codes worth another attempt
        initial_delay: Initial delay in seconds
        max_delay: Upper bound for the delay between attempts

    Returns:
        Result of the function call

    Raises:
        RetryTimeoutError: A retryable error persisted past the timeout
        Exception: Any non-retryable error, unchanged
    """
    retryable_codes = set(retryable_codes)
    deadline = time.monotonic() + timeout
    delay = initial_delay
    attempt = 0

    while True:
        attempt += 1
        try:
            return func()
        except ClientError as e:
            code = error_code(e)
            if code not in retryable_codes:
                raise
            if time.monotonic() >= deadline:
                pulumi.log.error(f"Retry timeout reached after {attempt} attempts: {e}")
                raise RetryTimeoutError(timeout, e) from e
            pulumi.log.warn(f"Attempt {attempt} failed with {code}, retrying in {delay}s")
            time.sleep(delay)
            delay = min(delay * 2, max_delay)


def wait_for_state(refresh: Callable[[], Tuple[Any, str]], pending: List[str], target: List[str],
                   timeout: float = DEFAULT_WAIT_TIMEOUT, delay: float = 0.0,
                   poll_interval: float = 5.0, not_found_checks: int = 20) -> Any:
    """
    Poll a refresh function until the resource reaches a target state

    Args:
        refresh: Returns (resource, state); resource is None when not found
        pending: States that mean keep waiting
        target: States that mean done
        timeout: Seconds to wait overall
        delay: Seconds to wait before the first refresh
        poll_interval: Seconds between refreshes
        not_found_checks: Consecutive empty refreshes tolerated before giving up

    Returns:
        The resource returned with the target state
    """
    if delay:
        time.sleep(delay)

    deadline = time.monotonic() + timeout
    not_found = 0
    last_state = ""

    while True:
        resource, state = refresh()
        last_state = state

        if resource is None and state not in target:
            not_found += 1
            if not_found > not_found_checks:
                raise ResourceNotFoundError(
                    f"couldn't find resource ({not_found_checks} retries)"
                )
        else:
            not_found = 0
            if state in target:
                return resource
            if state not in pending:
                raise UnexpectedStateError(state, target)

        if time.monotonic() >= deadline:
            raise WaitTimeoutError(timeout, last_state, target)

        time.sleep(poll_interval)

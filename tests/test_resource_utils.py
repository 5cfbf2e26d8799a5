"""
Unit tests for the shared retry and wait helpers
"""

import unittest
from unittest.mock import Mock, patch
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from botocore.exceptions import ClientError

from modules.resource_utils import (
    ResourceNotFoundError,
    RetryTimeoutError,
    UnexpectedStateError,
    WaitTimeoutError,
    error_code,
    is_aws_error,
    retry_with_timeout,
    unique_name,
    wait_for_state,
)


def client_error(code, message=""):
    return ClientError({"Error": {"Code": code, "Message": message}}, "Operation")


class TestAwsErrors(unittest.TestCase):
    """Test AWS error classification"""

    def test_matches_code(self):
        """Test that the error code is matched exactly"""
        err = client_error("ListenerNotFound", "One or more listeners not found")
        self.assertTrue(is_aws_error(err, "ListenerNotFound"))
        self.assertFalse(is_aws_error(err, "CertificateNotFound"))

    def test_matches_message_substring(self):
        """Test that a message filter must be contained in the message"""
        err = client_error("InvalidParameter", "subnet subnet-1 is in use")
        self.assertTrue(is_aws_error(err, "InvalidParameter", "in use"))
        self.assertFalse(is_aws_error(err, "InvalidParameter", "not found"))

    def test_non_client_errors(self):
        """Test that other exceptions never match"""
        self.assertFalse(is_aws_error(ValueError("ListenerNotFound"), "ListenerNotFound"))
        self.assertEqual(error_code(ValueError("boom")), "")
        self.assertEqual(error_code(client_error("Throttling")), "Throttling")


@patch("modules.resource_utils.time")
class TestRetryWithTimeout(unittest.TestCase):
    """Test retrying on whitelisted error codes"""

    def test_returns_first_success(self, mock_time):
        """Test that a successful call is not retried"""
        mock_time.monotonic.return_value = 0
        func = Mock(return_value="ok")

        self.assertEqual(retry_with_timeout(func, timeout=300, retryable_codes=["CertificateNotFound"]), "ok")
        func.assert_called_once()
        mock_time.sleep.assert_not_called()

    def test_retries_retryable_codes(self, mock_time):
        """Test that retryable errors are retried until success"""
        mock_time.monotonic.return_value = 0
        func = Mock(side_effect=[
            client_error("CertificateNotFound"),
            client_error("CertificateNotFound"),
            "created",
        ])

        result = retry_with_timeout(func, timeout=300, retryable_codes=["CertificateNotFound"])

        self.assertEqual(result, "created")
        self.assertEqual(func.call_count, 3)
        self.assertEqual(mock_time.sleep.call_count, 2)

    def test_backoff_is_capped(self, mock_time):
        """Test that the delay doubles up to max_delay"""
        mock_time.monotonic.return_value = 0
        func = Mock(side_effect=[client_error("CertificateNotFound")] * 4 + ["ok"])

        retry_with_timeout(func, timeout=300, retryable_codes=["CertificateNotFound"],
                           initial_delay=1.0, max_delay=3.0)

        delays = [c.args[0] for c in mock_time.sleep.call_args_list]
        self.assertEqual(delays, [1.0, 2.0, 3.0, 3.0])

    def test_non_retryable_raises_immediately(self, mock_time):
        """Test that errors outside the whitelist propagate unchanged"""
        mock_time.monotonic.return_value = 0
        err = client_error("AccessDenied")
        func = Mock(side_effect=err)

        with self.assertRaises(ClientError) as ctx:
            retry_with_timeout(func, timeout=300, retryable_codes=["CertificateNotFound"])

        self.assertIs(ctx.exception, err)
        func.assert_called_once()

    def test_timeout(self, mock_time):
        """Test that a persisting retryable error ends in RetryTimeoutError"""
        mock_time.monotonic.side_effect = [0, 10, 301]
        err = client_error("CertificateNotFound")
        func = Mock(side_effect=err)

        with self.assertRaises(RetryTimeoutError) as ctx:
            retry_with_timeout(func, timeout=300, retryable_codes=["CertificateNotFound"])

        self.assertIs(ctx.exception.last_error, err)
        self.assertEqual(func.call_count, 2)


@patch("modules.resource_utils.time")
class TestWaitForState(unittest.TestCase):
    """Test polling for eventual consistency"""

    def test_waits_until_target(self, mock_time):
        """Test that pending states are polled until the target is reached"""
        mock_time.monotonic.return_value = 0
        listener = {"ListenerArn": "arn:listener"}
        refresh = Mock(side_effect=[(None, ""), (None, ""), (listener, "exists")])

        result = wait_for_state(refresh, pending=[""], target=["exists"], timeout=180)

        self.assertIs(result, listener)
        self.assertEqual(refresh.call_count, 3)
        self.assertEqual(mock_time.sleep.call_count, 2)

    def test_timeout(self, mock_time):
        """Test that WaitTimeoutError is raised when the deadline passes"""
        mock_time.monotonic.side_effect = [0, 10, 200]
        refresh = Mock(return_value=(None, ""))

        with self.assertRaises(WaitTimeoutError) as ctx:
            wait_for_state(refresh, pending=[""], target=["exists"], timeout=180)

        self.assertEqual(ctx.exception.target, ["exists"])
        self.assertEqual(refresh.call_count, 2)

    def test_unexpected_state(self, mock_time):
        """Test that a state outside pending and target is an error"""
        mock_time.monotonic.return_value = 0
        refresh = Mock(return_value=({"Status": "failed"}, "failed"))

        with self.assertRaises(UnexpectedStateError) as ctx:
            wait_for_state(refresh, pending=["pending"], target=["destroyed"])

        self.assertEqual(ctx.exception.state, "failed")

    def test_not_found_checks(self, mock_time):
        """Test that repeated empty refreshes give up when not expected"""
        mock_time.monotonic.return_value = 0
        refresh = Mock(return_value=(None, ""))

        with self.assertRaises(ResourceNotFoundError):
            wait_for_state(refresh, pending=["pending"], target=["exists"], not_found_checks=2)

        self.assertEqual(refresh.call_count, 3)

    def test_not_found_checks_with_empty_pending(self, mock_time):
        """Test that a create wait stops after the not-found limit, not the timeout"""
        mock_time.monotonic.return_value = 0
        refresh = Mock(return_value=(None, ""))

        with self.assertRaises(ResourceNotFoundError):
            wait_for_state(refresh, pending=[""], target=["exists"], timeout=1000, not_found_checks=20)

        self.assertEqual(refresh.call_count, 21)

    def test_initial_delay(self, mock_time):
        """Test that the first refresh waits for the configured delay"""
        mock_time.monotonic.return_value = 0
        refresh = Mock(return_value=("group", "destroyed"))

        wait_for_state(refresh, pending=["pending"], target=["destroyed"], delay=5)

        mock_time.sleep.assert_called_once_with(5)


class TestUniqueName(unittest.TestCase):
    """Test generated resource names"""

    def test_prefix_and_length(self):
        """Test that names keep the prefix and add 26 characters"""
        name = unique_name("app-")
        self.assertTrue(name.startswith("app-"))
        self.assertEqual(len(name), len("app-") + 26)
        self.assertEqual(name, name.lower())

    def test_names_differ(self):
        """Test that consecutive names are distinct"""
        self.assertNotEqual(unique_name("app-"), unique_name("app-"))


if __name__ == "__main__":
    unittest.main()

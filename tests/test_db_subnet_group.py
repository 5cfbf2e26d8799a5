"""
Unit tests for the DB subnet group dynamic provider
AWS calls are replaced by a mocked rds client
"""

import unittest
from unittest.mock import Mock, patch
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from botocore.exceptions import ClientError

from modules.db_subnet_group.provider import DEFAULT_DESCRIPTION, DbSubnetGroupProvider
from modules.resource_utils import ResourceError

GROUP_ARN = "arn:aws:rds:af-south-1:123456789012:subgrp:app-db"
# Placeholder the engine sends for values not known until apply
UNKNOWN = "04da6b54-80e4-46f7-96ec-b56ff0331ba9"


def client_error(code, message=""):
    return ClientError({"Error": {"Code": code, "Message": message}}, "Operation")


def group_props(**overrides):
    props = {
        "name": "app-db",
        "name_prefix": None,
        "description": "App database subnets",
        "subnet_ids": ["subnet-1", "subnet-2"],
        "tags": {"Name": "app-db"},
        "region": "af-south-1",
    }
    props.update(overrides)
    return props


def described_group(name="app-db", subnet_ids=("subnet-2", "subnet-1"), description="App database subnets"):
    return {
        "DBSubnetGroupName": name,
        "DBSubnetGroupDescription": description,
        "DBSubnetGroupArn": GROUP_ARN,
        "VpcId": "vpc-1",
        "SubnetGroupStatus": "Complete",
        "Subnets": [{"SubnetIdentifier": subnet_id} for subnet_id in subnet_ids],
    }


class TestSubnetGroupCheck(unittest.TestCase):
    """Test input validation and defaults"""

    def setUp(self):
        self.provider = DbSubnetGroupProvider()

    def test_defaults(self):
        """Test description default, name lower-casing and subnet set semantics"""
        result = self.provider.check({}, {
            "name": "App-DB",
            "subnet_ids": ["subnet-2", "subnet-1", "subnet-2"],
        })

        self.assertEqual(result.failures, [])
        self.assertEqual(result.inputs["name"], "app-db")
        self.assertEqual(result.inputs["description"], DEFAULT_DESCRIPTION)
        self.assertEqual(result.inputs["subnet_ids"], ["subnet-1", "subnet-2"])
        self.assertEqual(result.inputs["tags"], {})

    def test_invalid_names(self):
        """Test rejected names"""
        for name in ("default", "app/db", "a" * 256):
            with self.subTest(name=name):
                result = self.provider.check({}, group_props(name=name))
                self.assertEqual([f.property for f in result.failures], ["name"])

    def test_name_prefix_length(self):
        """Test that prefixes leave room for the generated suffix"""
        result = self.provider.check({}, group_props(name=None, name_prefix="a" * 230))
        self.assertEqual([f.property for f in result.failures], ["name_prefix"])

    def test_name_conflicts_with_prefix(self):
        """Test that name and name_prefix are exclusive"""
        result = self.provider.check({}, group_props(name_prefix="app-"))
        self.assertIn("name", [f.property for f in result.failures])

    def test_subnets_required(self):
        """Test that at least one subnet is required"""
        result = self.provider.check({}, group_props(subnet_ids=[]))
        self.assertEqual([f.property for f in result.failures], ["subnet_ids"])

    def test_unknown_subnets_during_preview(self):
        """Test that an unresolved subnet list is passed through unchanged"""
        result = self.provider.check({}, group_props(subnet_ids=UNKNOWN))
        self.assertEqual(result.failures, [])
        self.assertEqual(result.inputs["subnet_ids"], UNKNOWN)


class TestSubnetGroupDiff(unittest.TestCase):
    """Test update versus replace decisions"""

    def setUp(self):
        self.provider = DbSubnetGroupProvider()
        self.olds = {**group_props(), "arn": GROUP_ARN}

    def test_subnet_order_ignored(self):
        """Test that subnet ids compare as a set"""
        result = self.provider.diff("app-db", self.olds, group_props(subnet_ids=["subnet-2", "subnet-1"]))
        self.assertFalse(result.changes)

    def test_generated_name_kept(self):
        """Test that an unset name does not diff against the generated one"""
        olds = {**self.olds, "name": "app-20240101000000000000000001", "name_prefix": "app-"}
        result = self.provider.diff(olds["name"], olds, group_props(name=None, name_prefix="app-"))
        self.assertFalse(result.changes)

    def test_description_updates(self):
        """Test that description changes are in place"""
        result = self.provider.diff("app-db", self.olds, group_props(description="new"))
        self.assertTrue(result.changes)
        self.assertEqual(result.replaces, [])

    def test_tags_update(self):
        """Test that tag changes are in place"""
        result = self.provider.diff("app-db", self.olds, group_props(tags={"Name": "other"}))
        self.assertTrue(result.changes)
        self.assertEqual(result.replaces, [])

    def test_name_replaces(self):
        """Test that renaming forces replacement"""
        result = self.provider.diff("app-db", self.olds, group_props(name="other-db"))
        self.assertEqual(result.replaces, ["name"])
        self.assertTrue(result.delete_before_replace)


@patch("modules.resource_utils.time")
@patch("modules.db_subnet_group.provider.get_client")
class TestSubnetGroupLifecycle(unittest.TestCase):
    """Test create/read/update/delete against a mocked client"""

    def setUp(self):
        self.provider = DbSubnetGroupProvider()
        self.client = Mock()
        self.client.list_tags_for_resource.return_value = {"TagList": [
            {"Key": "Name", "Value": "app-db"},
            {"Key": "aws:cloudformation:stack-id", "Value": "ignored"},
        ]}

    def test_create(self, mock_get_client, mock_time):
        """Test create sends RDS-shaped tags and waits for visibility"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0
        self.client.create_db_subnet_group.return_value = {"DBSubnetGroup": described_group()}
        self.client.describe_db_subnet_groups.side_effect = [
            client_error("DBSubnetGroupNotFoundFault"),
            {"DBSubnetGroups": [described_group()]},
        ]

        result = self.provider.create(group_props(tags={"Name": "app-db", "aws:reserved": "x"}))

        mock_get_client.assert_called_once_with("rds", "af-south-1")
        self.client.create_db_subnet_group.assert_called_once_with(
            DBSubnetGroupName="app-db",
            DBSubnetGroupDescription="App database subnets",
            SubnetIds=["subnet-1", "subnet-2"],
            Tags=[{"Key": "Name", "Value": "app-db"}],
        )
        self.assertEqual(result.id, "app-db")
        self.assertEqual(result.outs["arn"], GROUP_ARN)
        self.assertEqual(result.outs["subnet_ids"], ["subnet-1", "subnet-2"])
        self.assertEqual(result.outs["tags"], {"Name": "app-db"})

    def test_create_with_prefix(self, mock_get_client, mock_time):
        """Test a generated name is used when only a prefix is set"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0

        def create(**kwargs):
            return {"DBSubnetGroup": described_group(name=kwargs["DBSubnetGroupName"])}

        def describe(DBSubnetGroupName):
            return {"DBSubnetGroups": [described_group(name=DBSubnetGroupName)]}

        self.client.create_db_subnet_group.side_effect = create
        self.client.describe_db_subnet_groups.side_effect = describe

        result = self.provider.create(group_props(name=None, name_prefix="app-"))

        self.assertTrue(result.id.startswith("app-"))
        self.assertEqual(len(result.id), len("app-") + 26)
        self.assertEqual(result.outs["name_prefix"], "app-")

    def test_create_retries_invalid_subnet(self, mock_get_client, mock_time):
        """Test create retries while new subnets propagate"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0
        self.client.create_db_subnet_group.side_effect = [
            client_error("InvalidSubnet"),
            {"DBSubnetGroup": described_group()},
        ]
        self.client.describe_db_subnet_groups.return_value = {"DBSubnetGroups": [described_group()]}

        self.provider.create(group_props())

        self.assertEqual(self.client.create_db_subnet_group.call_count, 2)

    def test_create_error(self, mock_get_client, mock_time):
        """Test create wraps non-retryable errors"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0
        self.client.create_db_subnet_group.side_effect = client_error("DBSubnetGroupAlreadyExists")

        with self.assertRaises(ResourceError) as ctx:
            self.provider.create(group_props())

        self.assertIn("Error creating DB Subnet Group", str(ctx.exception))

    def test_read(self, mock_get_client, mock_time):
        """Test read maps the group and drops aws: tags"""
        mock_get_client.return_value = self.client
        self.client.describe_db_subnet_groups.return_value = {"DBSubnetGroups": [described_group(name="App-DB")]}

        result = self.provider.read("app-db", group_props())

        self.client.list_tags_for_resource.assert_called_once_with(ResourceName=GROUP_ARN)
        self.assertEqual(result.id, "app-db")
        self.assertEqual(result.outs["tags"], {"Name": "app-db"})
        self.assertEqual(result.outs["description"], "App database subnets")

    def test_read_removes_missing_group(self, mock_get_client, mock_time):
        """Test read reports an empty id when the group is gone"""
        mock_get_client.return_value = self.client
        self.client.describe_db_subnet_groups.side_effect = client_error("DBSubnetGroupNotFoundFault")

        result = self.provider.read("app-db", group_props())

        self.assertEqual(result.id, "")
        self.client.list_tags_for_resource.assert_not_called()

    def test_update_subnets_and_tags(self, mock_get_client, mock_time):
        """Test update modifies subnets and applies the tag diff"""
        mock_get_client.return_value = self.client
        self.client.describe_db_subnet_groups.return_value = {"DBSubnetGroups": [
            described_group(subnet_ids=["subnet-1", "subnet-3"]),
        ]}
        olds = {**group_props(tags={"Name": "app-db", "Old": "1"}), "arn": GROUP_ARN}
        news = group_props(subnet_ids=["subnet-3", "subnet-1"], tags={"Name": "app-db", "New": "2"})

        result = self.provider.update("app-db", olds, news)

        self.client.modify_db_subnet_group.assert_called_once_with(
            DBSubnetGroupName="app-db",
            DBSubnetGroupDescription="App database subnets",
            SubnetIds=["subnet-1", "subnet-3"],
        )
        self.client.remove_tags_from_resource.assert_called_once_with(ResourceName=GROUP_ARN, TagKeys=["Old"])
        self.client.add_tags_to_resource.assert_called_once_with(
            ResourceName=GROUP_ARN, Tags=[{"Key": "New", "Value": "2"}],
        )
        self.assertEqual(result.outs["subnet_ids"], ["subnet-1", "subnet-3"])

    def test_update_tags_only(self, mock_get_client, mock_time):
        """Test that unchanged subnets and description skip ModifyDBSubnetGroup"""
        mock_get_client.return_value = self.client
        self.client.describe_db_subnet_groups.return_value = {"DBSubnetGroups": [described_group()]}
        olds = {**group_props(), "arn": GROUP_ARN}

        self.provider.update("app-db", olds, group_props(tags={"Name": "renamed"}))

        self.client.modify_db_subnet_group.assert_not_called()
        self.client.remove_tags_from_resource.assert_not_called()
        self.client.add_tags_to_resource.assert_called_once_with(
            ResourceName=GROUP_ARN, Tags=[{"Key": "Name", "Value": "renamed"}],
        )

    def test_delete_waits_until_gone(self, mock_get_client, mock_time):
        """Test delete retries while in use, then waits for the group to disappear"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0
        self.client.delete_db_subnet_group.side_effect = [client_error("InvalidDBSubnetGroupStateFault"), {}]
        self.client.describe_db_subnet_groups.side_effect = [
            {"DBSubnetGroups": [described_group()]},
            client_error("DBSubnetGroupNotFoundFault"),
        ]

        self.provider.delete("app-db", group_props())

        self.assertEqual(self.client.delete_db_subnet_group.call_count, 2)
        self.assertEqual(self.client.describe_db_subnet_groups.call_count, 2)

    def test_delete_already_gone(self, mock_get_client, mock_time):
        """Test delete treats a missing group as deleted"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0
        self.client.delete_db_subnet_group.side_effect = client_error("DBSubnetGroupNotFoundFault")

        self.provider.delete("app-db", group_props())

        self.client.describe_db_subnet_groups.assert_not_called()

    def test_delete_error(self, mock_get_client, mock_time):
        """Test delete wraps other errors"""
        mock_get_client.return_value = self.client
        mock_time.monotonic.return_value = 0
        self.client.delete_db_subnet_group.side_effect = client_error("AccessDenied")

        with self.assertRaises(ResourceError) as ctx:
            self.provider.delete("app-db", group_props())

        self.assertIn("Error deleting DB Subnet Group", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()

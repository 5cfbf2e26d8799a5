"""
Unit tests for the generic tag container and generated service conversions
"""

import unittest
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from modules import keyvaluetags
from modules.keyvaluetags import KeyValueTags
from modules.keyvaluetags.generators.servicetags import MAP_SERVICE_NAMES, SLICE_SERVICE_NAMES


class TestKeyValueTags(unittest.TestCase):
    """Test KeyValueTags operations"""

    def test_new_from_supported_values(self):
        """Test construction from dicts, key lists and None"""
        self.assertEqual(KeyValueTags.new({"Name": "db", "Empty": None}), {"Name": "db", "Empty": None})
        self.assertEqual(KeyValueTags.new(["a", "b"]), {"a": None, "b": None})
        self.assertEqual(KeyValueTags.new(None), {})
        self.assertIsInstance(KeyValueTags.new({"a": "1"}), KeyValueTags)

    def test_new_rejects_other_types(self):
        """Test that unsupported values raise TypeError"""
        with self.assertRaises(TypeError):
            KeyValueTags.new("Name=db")

    def test_ignore_aws(self):
        """Test that aws: reserved keys are dropped"""
        tags = KeyValueTags.new({"aws:cloudformation:stack-name": "x", "Name": "db"})
        self.assertEqual(tags.ignore_aws(), {"Name": "db"})

    def test_ignore(self):
        """Test that explicit keys are dropped"""
        tags = KeyValueTags.new({"a": "1", "b": "2"})
        self.assertEqual(tags.ignore(["a"]), {"b": "2"})

    def test_map(self):
        """Test that missing values become empty strings"""
        self.assertEqual(KeyValueTags.new({"a": None, "b": "2"}).map(), {"a": "", "b": "2"})

    def test_removed_and_updated(self):
        """Test computing a tag diff"""
        old = KeyValueTags.new({"keep": "1", "change": "old", "drop": "x"})
        new = {"keep": "1", "change": "new", "add": "y"}

        self.assertEqual(old.removed(new), {"drop": "x"})
        self.assertEqual(old.updated(new), {"change": "new", "add": "y"})

    def test_merge(self):
        """Test that merged keys win on conflict"""
        tags = KeyValueTags.new({"a": "1", "b": "2"}).merge({"b": "3"})
        self.assertEqual(tags, {"a": "1", "b": "3"})

    def test_equal(self):
        """Test equality treats None and empty string alike"""
        self.assertTrue(KeyValueTags.new({"a": None}).equal({"a": ""}))
        self.assertFalse(KeyValueTags.new({"a": "1"}).equal({"a": "2"}))
        self.assertTrue(KeyValueTags.new(None).equal(None))


class TestServiceTags(unittest.TestCase):
    """Test generated service tag conversions"""

    def setUp(self):
        self.tags = KeyValueTags.new({"Name": "db", "Env": "dev"})

    def test_slice_service(self):
        """Test list-of-dict services round trip through KeyValueTags"""
        rds = keyvaluetags.rds_tags(self.tags)
        self.assertIn({"Key": "Name", "Value": "db"}, rds)
        self.assertEqual(len(rds), 2)
        self.assertEqual(keyvaluetags.rds_key_value_tags(rds), self.tags)

    def test_map_service(self):
        """Test map services use plain dicts"""
        self.assertEqual(keyvaluetags.lambda_tags(self.tags), {"Name": "db", "Env": "dev"})
        self.assertEqual(keyvaluetags.sqs_key_value_tags({"Name": "q"}), {"Name": "q"})

    def test_kms_fields(self):
        """Test kms uses TagKey and TagValue"""
        self.assertIn({"TagKey": "Name", "TagValue": "db"}, keyvaluetags.kms_tags(self.tags))
        converted = keyvaluetags.kms_key_value_tags([{"TagKey": "a", "TagValue": "1"}])
        self.assertEqual(converted, {"a": "1"})

    def test_lowercase_fields(self):
        """Test services whose tag dicts use lowercase fields"""
        self.assertIn({"key": "Name", "value": "db"}, keyvaluetags.ecs_tags(self.tags))
        self.assertEqual(keyvaluetags.ecs_key_value_tags([{"key": "a", "value": "1"}]), {"a": "1"})

    def test_elb_tag_keys(self):
        """Test elb exposes key-only tags for untagging"""
        self.assertEqual(
            sorted(keyvaluetags.elb_tag_keys(self.tags), key=lambda t: t["Key"]),
            [{"Key": "Env"}, {"Key": "Name"}],
        )
        self.assertFalse(hasattr(keyvaluetags, "elbv2_tag_keys"))

    def test_missing_values(self):
        """Test absent values survive conversion as None"""
        self.assertEqual(keyvaluetags.ec2_key_value_tags([{"Key": "a"}]), {"a": None})
        self.assertEqual(keyvaluetags.ec2_key_value_tags(None), {})

    def test_every_service_has_helpers(self):
        """Test that each listed service has both conversions"""
        for name in MAP_SERVICE_NAMES + SLICE_SERVICE_NAMES:
            with self.subTest(service=name):
                self.assertTrue(callable(getattr(keyvaluetags, f"{name}_tags", None)))
                self.assertTrue(callable(getattr(keyvaluetags, f"{name}_key_value_tags", None)))


if __name__ == "__main__":
    unittest.main()

"""
DB Subnet Group Provider
Pulumi dynamic provider mapping subnet group inputs onto the RDS API
"""

import re
from typing import Any, Callable, Dict, Optional, Tuple

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

from modules.keyvaluetags import KeyValueTags, rds_key_value_tags, rds_tags
from modules.resource_utils import (
    DEFAULT_RETRY_TIMEOUT,
    DEFAULT_WAIT_TIMEOUT,
    ResourceError,
    get_client,
    is_aws_error,
    retry_with_timeout,
    unique_name,
    wait_for_state,
)

DEFAULT_DESCRIPTION = "Managed by Pulumi"
DEFAULT_NAME_PREFIX = "pulumi-"
DELETE_WAIT_TIMEOUT = 10 * 60

NAME_MAX_LENGTH = 255
NAME_PREFIX_MAX_LENGTH = 229
NAME_PATTERN = re.compile(r"^[ ._0-9a-z-]+$")

SUBNET_GROUP_NOT_FOUND = "DBSubnetGroupNotFoundFault"
INVALID_SUBNET = "InvalidSubnet"
INVALID_SUBNET_GROUP_STATE = "InvalidDBSubnetGroupStateFault"

INPUT_FIELDS = ["name", "name_prefix", "description", "subnet_ids", "tags", "region"]
REPLACE_FIELDS = ["name", "name_prefix", "region"]


def validate_name(field: str, value: str, max_length: int) -> Optional[str]:
    """Return the reason a subnet group name is invalid, or None"""
    if not NAME_PATTERN.match(value):
        return (f"only lowercase alphanumeric characters, hyphens, underscores, periods, "
                f"and spaces allowed in {field}")
    if len(value) > max_length:
        return f"{field} cannot be longer than {max_length} characters"
    if field == "name" and value == "default":
        return "name 'default' is not allowed"
    return None


def subnet_group_refresh_func(client, name: str) -> Callable[[], Tuple[Optional[Dict[str, Any]], str]]:
    """Return a refresh function reporting "exists" once the group is described"""

    def refresh():
        try:
            resp = client.describe_db_subnet_groups(DBSubnetGroupName=name)
        except ClientError as e:
            if is_aws_error(e, SUBNET_GROUP_NOT_FOUND):
                return None, ""
            raise ResourceError(f"Error retrieving DB Subnet Group: {e}") from e

        # AWS matches names case-insensitively
        for group in resp.get("DBSubnetGroups") or []:
            if group.get("DBSubnetGroupName", "").lower() == name.lower():
                return group, "exists"

        return None, ""

    return refresh


def subnet_group_deleted_refresh_func(client, name: str) -> Callable[[], Tuple[Any, str]]:
    """Return a refresh function reporting "destroyed" once the group is gone"""
    refresh = subnet_group_refresh_func(client, name)

    def deleted():
        group, _ = refresh()
        if group is None:
            return name, "destroyed"
        return group, "pending"

    return deleted


def read_tags(client, arn: str) -> Dict[str, str]:
    """List RDS tags of a resource, without aws: keys"""
    try:
        resp = client.list_tags_for_resource(ResourceName=arn)
    except ClientError as e:
        raise ResourceError(f"Error listing tags for DB Subnet Group ({arn}): {e}") from e
    return rds_key_value_tags(resp.get("TagList")).ignore_aws().map()


def update_tags(client, arn: str, old_tags: Dict[str, str], new_tags: Dict[str, str]) -> None:
    """Apply a tag diff with RemoveTagsFromResource and AddTagsToResource"""
    old = KeyValueTags.new(old_tags).ignore_aws()
    new = KeyValueTags.new(new_tags).ignore_aws()

    try:
        removed = old.removed(new)
        if removed:
            pulumi.log.debug(f"Removing tags {sorted(removed)} from {arn}")
            client.remove_tags_from_resource(ResourceName=arn, TagKeys=sorted(removed))

        updated = old.updated(new)
        if updated:
            pulumi.log.debug(f"Updating tags {sorted(updated)} on {arn}")
            client.add_tags_to_resource(ResourceName=arn, Tags=rds_tags(updated))
    except ClientError as e:
        raise ResourceError(f"Error updating tags for DB Subnet Group ({arn}): {e}") from e


def normalize_subnet_ids(subnet_ids: Any) -> Any:
    """Sort and dedupe subnet ids, leaving an unknown preview value untouched"""
    if isinstance(subnet_ids, (list, tuple, set)):
        return sorted(set(subnet_ids))
    return subnet_ids


def subnet_group_outputs(group: Dict[str, Any], tags: Dict[str, str], props: Dict[str, Any]) -> Dict[str, Any]:
    """Map a described subnet group back onto resource outputs"""
    return {
        "arn": group.get("DBSubnetGroupArn"),
        "name": group.get("DBSubnetGroupName"),
        "name_prefix": props.get("name_prefix"),
        "description": group.get("DBSubnetGroupDescription"),
        "subnet_ids": sorted(subnet["SubnetIdentifier"] for subnet in group.get("Subnets") or []),
        "tags": tags,
        "region": props.get("region"),
    }


class DbSubnetGroupProvider(ResourceProvider):
    """Create/read/update/delete an RDS DB subnet group"""

    def check(self, _olds: Dict[str, Any], news: Dict[str, Any]) -> CheckResult:
        inputs = dict(news)
        failures = []

        name = inputs.get("name")
        name_prefix = inputs.get("name_prefix")

        if name and name_prefix:
            failures.append(CheckFailure("name", "name conflicts with name_prefix"))

        if name:
            inputs["name"] = name = name.lower()
            reason = validate_name("name", name, NAME_MAX_LENGTH)
            if reason:
                failures.append(CheckFailure("name", reason))

        if name_prefix:
            inputs["name_prefix"] = name_prefix = name_prefix.lower()
            reason = validate_name("name_prefix", name_prefix, NAME_PREFIX_MAX_LENGTH)
            if reason:
                failures.append(CheckFailure("name_prefix", reason))

        if not inputs.get("description"):
            inputs["description"] = DEFAULT_DESCRIPTION

        subnet_ids = inputs.get("subnet_ids") or []
        if not subnet_ids:
            failures.append(CheckFailure("subnet_ids", "at least one subnet id is required"))
        inputs["subnet_ids"] = normalize_subnet_ids(subnet_ids)

        inputs["tags"] = KeyValueTags.new(inputs.get("tags")).map()

        return CheckResult(inputs, failures)

    def diff(self, _id: str, olds: Dict[str, Any], news: Dict[str, Any]) -> DiffResult:
        changed = []
        for field in INPUT_FIELDS:
            # name is computed when not set
            if field == "name" and news.get(field) is None:
                continue
            old, new = olds.get(field), news.get(field)
            if field == "subnet_ids":
                old, new = normalize_subnet_ids(old or []), normalize_subnet_ids(new or [])
            elif field == "tags":
                old, new = KeyValueTags.new(old).map(), KeyValueTags.new(new).map()
            if old != new:
                changed.append(field)

        replaces = [field for field in changed if field in REPLACE_FIELDS]
        return DiffResult(
            changes=bool(changed),
            replaces=replaces,
            delete_before_replace=bool(replaces),
        )

    def create(self, props: Dict[str, Any]) -> CreateResult:
        client = get_client("rds", props.get("region"))

        if props.get("name"):
            name = props["name"]
        elif props.get("name_prefix"):
            name = unique_name(props["name_prefix"])
        else:
            name = unique_name(DEFAULT_NAME_PREFIX)

        tags = KeyValueTags.new(props.get("tags")).ignore_aws()
        params = {
            "DBSubnetGroupName": name,
            "DBSubnetGroupDescription": props.get("description") or DEFAULT_DESCRIPTION,
            "SubnetIds": list(props.get("subnet_ids") or []),
            "Tags": rds_tags(tags),
        }

        def create_subnet_group():
            pulumi.log.debug(f"Creating DB Subnet Group: {name}")
            return client.create_db_subnet_group(**params)

        try:
            resp = retry_with_timeout(
                create_subnet_group,
                timeout=DEFAULT_RETRY_TIMEOUT,
                retryable_codes=[INVALID_SUBNET],
            )
        except (ClientError, ResourceError) as e:
            raise ResourceError(f"Error creating DB Subnet Group: {e}") from e

        name = resp.get("DBSubnetGroup", {}).get("DBSubnetGroupName", name).lower()

        pulumi.log.debug(f"Waiting for the DB Subnet Group ({name}) to exist")
        try:
            group = wait_for_state(
                subnet_group_refresh_func(client, name),
                pending=[""],
                target=["exists"],
                timeout=DEFAULT_WAIT_TIMEOUT,
            )
        except ResourceError as e:
            raise ResourceError(f"Error waiting for DB Subnet Group ({name}) to exist: {e}") from e

        pulumi.log.debug(f"DB Subnet Group ({name}) exists")
        return CreateResult(id_=name, outs=subnet_group_outputs(group, tags.map(), props))

    def read(self, id_: str, props: Dict[str, Any]) -> ReadResult:
        client = get_client("rds", props.get("region"))
        group, _ = subnet_group_refresh_func(client, id_)()

        if group is None:
            pulumi.log.warn(f"DescribeDBSubnetGroups - removing {id_} from state")
            return ReadResult(id_="", outs={})

        tags = read_tags(client, group["DBSubnetGroupArn"])
        return ReadResult(id_=id_, outs=subnet_group_outputs(group, tags, props))

    def update(self, id_: str, olds: Dict[str, Any], news: Dict[str, Any]) -> UpdateResult:
        client = get_client("rds", news.get("region"))

        description = news.get("description") or DEFAULT_DESCRIPTION
        subnet_ids = normalize_subnet_ids(news.get("subnet_ids") or [])

        if description != olds.get("description") or subnet_ids != normalize_subnet_ids(olds.get("subnet_ids") or []):
            try:
                client.modify_db_subnet_group(
                    DBSubnetGroupName=id_,
                    DBSubnetGroupDescription=description,
                    SubnetIds=subnet_ids,
                )
            except ClientError as e:
                raise ResourceError(f"Error modifying DB Subnet Group ({id_}): {e}") from e

        if not KeyValueTags.new(olds.get("tags")).equal(news.get("tags")):
            update_tags(client, olds["arn"], olds.get("tags"), news.get("tags"))

        result = self.read(id_, news)
        if not result.id:
            raise ResourceError(f"Error modifying DB Subnet Group: {id_} disappeared")
        return UpdateResult(outs=result.outs)

    def delete(self, id_: str, props: Dict[str, Any]) -> None:
        client = get_client("rds", props.get("region"))

        def delete_subnet_group():
            pulumi.log.debug(f"Deleting DB Subnet Group: {id_}")
            return client.delete_db_subnet_group(DBSubnetGroupName=id_)

        try:
            retry_with_timeout(
                delete_subnet_group,
                timeout=DEFAULT_RETRY_TIMEOUT,
                retryable_codes=[INVALID_SUBNET_GROUP_STATE],
            )
        except ClientError as e:
            if is_aws_error(e, SUBNET_GROUP_NOT_FOUND):
                return
            raise ResourceError(f"Error deleting DB Subnet Group ({id_}): {e}") from e
        except ResourceError as e:
            raise ResourceError(f"Error deleting DB Subnet Group ({id_}): {e}") from e

        try:
            wait_for_state(
                subnet_group_deleted_refresh_func(client, id_),
                pending=["pending"],
                target=["destroyed"],
                timeout=DELETE_WAIT_TIMEOUT,
            )
        except ResourceError as e:
            raise ResourceError(f"Error waiting for DB Subnet Group ({id_}) to be deleted: {e}") from e

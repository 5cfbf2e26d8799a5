#!/usr/bin/env python3
"""
Service Tags Generator
Writes modules/keyvaluetags/service_tags_gen.py from the service lists below

Usage:
    python -m modules.keyvaluetags.generators.servicetags [--output PATH]
"""

import argparse
import logging
import os
import sys
from typing import Dict, List

import jinja2

logger = logging.getLogger(__name__)

FILENAME = "service_tags_gen.py"
DEFAULT_OUTPUT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), FILENAME)

# Services whose tags are a list of {"Key": ..., "Value": ...} dicts
SLICE_SERVICE_NAMES = [
    "acm",
    "acmpca",
    "appmesh",
    "athena",
    # "autoscaling", includes extra PropagateAtLaunch, skip for now
    "cloud9",
    "cloudformation",
    "cloudfront",
    "cloudhsmv2",
    "cloudtrail",
    "cloudwatch",
    "cloudwatchevents",
    "codebuild",
    "codedeploy",
    "codepipeline",
    "configservice",
    "databasemigrationservice",
    "datapipeline",
    "datasync",
    "dax",
    "devicefarm",
    "directconnect",
    "directoryservice",
    "docdb",
    "dynamodb",
    "ec2",
    "ecr",
    "ecs",
    "efs",
    "elasticache",
    "elasticbeanstalk",
    "elasticsearchservice",
    "elb",
    "elbv2",
    "emr",
    "firehose",
    "fms",
    "fsx",
    "gamelift",
    "globalaccelerator",
    "iam",
    "inspector",
    "iot",
    "iotanalytics",
    "iotevents",
    "kinesis",
    "kinesisanalytics",
    "kinesisanalyticsv2",
    "kms",
    "licensemanager",
    "lightsail",
    "mediastore",
    "neptune",
    "organizations",
    "quicksight",
    "ram",
    "rds",
    "redshift",
    "route53",
    "route53resolver",
    "s3",
    "sagemaker",
    "secretsmanager",
    "serverlessapplicationrepository",
    "servicecatalog",
    "sfn",
    "sns",
    "ssm",
    "storagegateway",
    "swf",
    "transfer",
    "waf",
    "wafregional",
    "wafv2",
    "workspaces",
]

# Services whose tags are a plain {key: value} dict
MAP_SERVICE_NAMES = [
    "accessanalyzer",
    "amplify",
    "apigateway",
    "apigatewayv2",
    "appstream",
    "appsync",
    "backup",
    "batch",
    "cloudwatchlogs",
    "codecommit",
    "codestarnotifications",
    "cognitoidentity",
    "cognitoidentityprovider",
    "dataexchange",
    "dlm",
    "eks",
    "glacier",
    "glue",
    "guardduty",
    "greengrass",
    "kafka",
    "kinesisvideo",
    "imagebuilder",
    "lambda",
    "mediaconnect",
    "mediaconvert",
    "medialive",
    "mediapackage",
    "mq",
    "opsworks",
    "qldb",
    "pinpoint",
    "resourcegroups",
    "securityhub",
    "sqs",
]

# boto3 client names that differ from the service name
CLIENT_NAMES: Dict[str, str] = {
    "acmpca": "acm-pca",
    "cloudwatchevents": "events",
    "cloudwatchlogs": "logs",
    "codestarnotifications": "codestar-notifications",
    "cognitoidentity": "cognito-identity",
    "cognitoidentityprovider": "cognito-idp",
    "configservice": "config",
    "databasemigrationservice": "dms",
    "directoryservice": "ds",
    "elasticsearchservice": "es",
    "licensemanager": "license-manager",
    "resourcegroups": "resource-groups",
    "serverlessapplicationrepository": "serverlessrepo",
    "sfn": "stepfunctions",
    "wafregional": "waf-regional",
}

# Services whose tag dicts use lowercase key/value fields
LOWERCASE_FIELD_SERVICES = {
    "appmesh",
    "codepipeline",
    "datapipeline",
    "ecs",
    "inspector",
    "iotanalytics",
    "iotevents",
    "lightsail",
    "ram",
    "swf",
}

# Services with a separate key-only tag shape for untagging
TAG_KEY_ONLY_SERVICES = {"elb"}

TEMPLATE_BODY = '''# Code generated by modules/keyvaluetags/generators/servicetags.py; DO NOT EDIT.
"""
Service Tags
Conversions between KeyValueTags and each service's boto3 tag shape
"""

from typing import Dict, List, Optional

from .key_value_tags import KeyValueTags

__all__ = [
{% for name in map_service_names %}
    "{{ name }}_tags",
    "{{ name }}_key_value_tags",
{% endfor %}
{% for name in slice_service_names %}
{% if name | tag_key_only %}
    "{{ name }}_tag_keys",
{% endif %}
    "{{ name }}_tags",
    "{{ name }}_key_value_tags",
{% endfor %}
]


# Dict[str, str] handling
{% for name in map_service_names %}


def {{ name }}_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return {{ name | client_name }} service tags"""
    return tags.map()


def {{ name }}_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from {{ name | client_name }} service tags"""
    return KeyValueTags.new(tags)
{% endfor %}


# List[Dict[str, str]] handling
{% for name in slice_service_names %}
{% if name | tag_key_only %}


def {{ name }}_tag_keys(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return {{ name | client_name }} service tag keys"""
    return [{"{{ name | key_field }}": k} for k in tags]
{% endif %}


def {{ name }}_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return {{ name | client_name }} service tags"""
    return [{"{{ name | key_field }}": k, "{{ name | value_field }}": v} for k, v in tags.map().items()]


def {{ name }}_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from {{ name | client_name }} service tags"""
    return KeyValueTags.new({tag["{{ name | key_field }}"]: tag.get("{{ name | value_field }}") for tag in tags or []})
{% endfor %}
'''


def service_client_name(service_name: str) -> str:
    """Determine the boto3 client name for a service"""
    return CLIENT_NAMES.get(service_name, service_name)


def service_tag_key_field(service_name: str) -> str:
    """Determine the service tagging tag key field"""
    if service_name == "kms":
        return "TagKey"
    if service_name in LOWERCASE_FIELD_SERVICES:
        return "key"
    return "Key"


def service_tag_value_field(service_name: str) -> str:
    """Determine the service tagging tag value field"""
    if service_name == "kms":
        return "TagValue"
    if service_name in LOWERCASE_FIELD_SERVICES:
        return "value"
    return "Value"


def service_tag_key_only(service_name: str) -> bool:
    """Determine whether the service has a key-only tag shape"""
    return service_name in TAG_KEY_ONLY_SERVICES


def render(map_service_names: List[str] = None, slice_service_names: List[str] = None) -> str:
    """
    Render the service tags module source

    Args:
        map_service_names: Services with map tags, defaults to MAP_SERVICE_NAMES
        slice_service_names: Services with list tags, defaults to SLICE_SERVICE_NAMES

    Returns:
        Python source of the generated module
    """
    # Always sort to reduce any potential generation churn
    if map_service_names is None:
        map_service_names = MAP_SERVICE_NAMES
    if slice_service_names is None:
        slice_service_names = SLICE_SERVICE_NAMES
    map_service_names = sorted(map_service_names)
    slice_service_names = sorted(slice_service_names)

    env = jinja2.Environment(
        loader=jinja2.BaseLoader(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["client_name"] = service_client_name
    env.filters["key_field"] = service_tag_key_field
    env.filters["value_field"] = service_tag_value_field
    env.filters["tag_key_only"] = service_tag_key_only

    template = env.from_string(TEMPLATE_BODY)
    return template.render(
        map_service_names=map_service_names,
        slice_service_names=slice_service_names,
    )


def generate(output: str = DEFAULT_OUTPUT) -> str:
    """
    Render, validate and write the service tags module

    Args:
        output: Destination file path

    Returns:
        The written path
    """
    source = render()

    # Fails with SyntaxError before anything is written
    compile(source, output, "exec")

    with open(output, "w") as f:
        f.write(source)

    logger.info("Wrote %s", output)
    return output


def main(argv: List[str] = None) -> int:
    """Generator entrypoint"""
    parser = argparse.ArgumentParser(description="Generate service tag conversion functions")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help=f"output file (default: {FILENAME} in the keyvaluetags package)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        generate(args.output)
    except jinja2.TemplateError as e:
        logger.error("error executing template: %s", e)
        return 1
    except SyntaxError as e:
        logger.error("error validating generated file: %s", e)
        return 1
    except OSError as e:
        logger.error("error writing to file (%s): %s", args.output, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

# Code generated by modules/keyvaluetags/generators/servicetags.py; DO NOT EDIT.
"""
Service Tags
Conversions between KeyValueTags and each service's boto3 tag shape
"""

from typing import Dict, List, Optional

from .key_value_tags import KeyValueTags

__all__ = [
    "accessanalyzer_tags",
    "accessanalyzer_key_value_tags",
    "amplify_tags",
    "amplify_key_value_tags",
    "apigateway_tags",
    "apigateway_key_value_tags",
    "apigatewayv2_tags",
    "apigatewayv2_key_value_tags",
    "appstream_tags",
    "appstream_key_value_tags",
    "appsync_tags",
    "appsync_key_value_tags",
    "backup_tags",
    "backup_key_value_tags",
    "batch_tags",
    "batch_key_value_tags",
    "cloudwatchlogs_tags",
    "cloudwatchlogs_key_value_tags",
    "codecommit_tags",
    "codecommit_key_value_tags",
    "codestarnotifications_tags",
    "codestarnotifications_key_value_tags",
    "cognitoidentity_tags",
    "cognitoidentity_key_value_tags",
    "cognitoidentityprovider_tags",
    "cognitoidentityprovider_key_value_tags",
    "dataexchange_tags",
    "dataexchange_key_value_tags",
    "dlm_tags",
    "dlm_key_value_tags",
    "eks_tags",
    "eks_key_value_tags",
    "glacier_tags",
    "glacier_key_value_tags",
    "glue_tags",
    "glue_key_value_tags",
    "greengrass_tags",
    "greengrass_key_value_tags",
    "guardduty_tags",
    "guardduty_key_value_tags",
    "imagebuilder_tags",
    "imagebuilder_key_value_tags",
    "kafka_tags",
    "kafka_key_value_tags",
    "kinesisvideo_tags",
    "kinesisvideo_key_value_tags",
    "lambda_tags",
    "lambda_key_value_tags",
    "mediaconnect_tags",
    "mediaconnect_key_value_tags",
    "mediaconvert_tags",
    "mediaconvert_key_value_tags",
    "medialive_tags",
    "medialive_key_value_tags",
    "mediapackage_tags",
    "mediapackage_key_value_tags",
    "mq_tags",
    "mq_key_value_tags",
    "opsworks_tags",
    "opsworks_key_value_tags",
    "pinpoint_tags",
    "pinpoint_key_value_tags",
    "qldb_tags",
    "qldb_key_value_tags",
    "resourcegroups_tags",
    "resourcegroups_key_value_tags",
    "securityhub_tags",
    "securityhub_key_value_tags",
    "sqs_tags",
    "sqs_key_value_tags",
    "acm_tags",
    "acm_key_value_tags",
    "acmpca_tags",
    "acmpca_key_value_tags",
    "appmesh_tags",
    "appmesh_key_value_tags",
    "athena_tags",
    "athena_key_value_tags",
    "cloud9_tags",
    "cloud9_key_value_tags",
    "cloudformation_tags",
    "cloudformation_key_value_tags",
    "cloudfront_tags",
    "cloudfront_key_value_tags",
    "cloudhsmv2_tags",
    "cloudhsmv2_key_value_tags",
    "cloudtrail_tags",
    "cloudtrail_key_value_tags",
    "cloudwatch_tags",
    "cloudwatch_key_value_tags",
    "cloudwatchevents_tags",
    "cloudwatchevents_key_value_tags",
    "codebuild_tags",
    "codebuild_key_value_tags",
    "codedeploy_tags",
    "codedeploy_key_value_tags",
    "codepipeline_tags",
    "codepipeline_key_value_tags",
    "configservice_tags",
    "configservice_key_value_tags",
    "databasemigrationservice_tags",
    "databasemigrationservice_key_value_tags",
    "datapipeline_tags",
    "datapipeline_key_value_tags",
    "datasync_tags",
    "datasync_key_value_tags",
    "dax_tags",
    "dax_key_value_tags",
    "devicefarm_tags",
    "devicefarm_key_value_tags",
    "directconnect_tags",
    "directconnect_key_value_tags",
    "directoryservice_tags",
    "directoryservice_key_value_tags",
    "docdb_tags",
    "docdb_key_value_tags",
    "dynamodb_tags",
    "dynamodb_key_value_tags",
    "ec2_tags",
    "ec2_key_value_tags",
    "ecr_tags",
    "ecr_key_value_tags",
    "ecs_tags",
    "ecs_key_value_tags",
    "efs_tags",
    "efs_key_value_tags",
    "elasticache_tags",
    "elasticache_key_value_tags",
    "elasticbeanstalk_tags",
    "elasticbeanstalk_key_value_tags",
    "elasticsearchservice_tags",
    "elasticsearchservice_key_value_tags",
    "elb_tag_keys",
    "elb_tags",
    "elb_key_value_tags",
    "elbv2_tags",
    "elbv2_key_value_tags",
    "emr_tags",
    "emr_key_value_tags",
    "firehose_tags",
    "firehose_key_value_tags",
    "fms_tags",
    "fms_key_value_tags",
    "fsx_tags",
    "fsx_key_value_tags",
    "gamelift_tags",
    "gamelift_key_value_tags",
    "globalaccelerator_tags",
    "globalaccelerator_key_value_tags",
    "iam_tags",
    "iam_key_value_tags",
    "inspector_tags",
    "inspector_key_value_tags",
    "iot_tags",
    "iot_key_value_tags",
    "iotanalytics_tags",
    "iotanalytics_key_value_tags",
    "iotevents_tags",
    "iotevents_key_value_tags",
    "kinesis_tags",
    "kinesis_key_value_tags",
    "kinesisanalytics_tags",
    "kinesisanalytics_key_value_tags",
    "kinesisanalyticsv2_tags",
    "kinesisanalyticsv2_key_value_tags",
    "kms_tags",
    "kms_key_value_tags",
    "licensemanager_tags",
    "licensemanager_key_value_tags",
    "lightsail_tags",
    "lightsail_key_value_tags",
    "mediastore_tags",
    "mediastore_key_value_tags",
    "neptune_tags",
    "neptune_key_value_tags",
    "organizations_tags",
    "organizations_key_value_tags",
    "quicksight_tags",
    "quicksight_key_value_tags",
    "ram_tags",
    "ram_key_value_tags",
    "rds_tags",
    "rds_key_value_tags",
    "redshift_tags",
    "redshift_key_value_tags",
    "route53_tags",
    "route53_key_value_tags",
    "route53resolver_tags",
    "route53resolver_key_value_tags",
    "s3_tags",
    "s3_key_value_tags",
    "sagemaker_tags",
    "sagemaker_key_value_tags",
    "secretsmanager_tags",
    "secretsmanager_key_value_tags",
    "serverlessapplicationrepository_tags",
    "serverlessapplicationrepository_key_value_tags",
    "servicecatalog_tags",
    "servicecatalog_key_value_tags",
    "sfn_tags",
    "sfn_key_value_tags",
    "sns_tags",
    "sns_key_value_tags",
    "ssm_tags",
    "ssm_key_value_tags",
    "storagegateway_tags",
    "storagegateway_key_value_tags",
    "swf_tags",
    "swf_key_value_tags",
    "transfer_tags",
    "transfer_key_value_tags",
    "waf_tags",
    "waf_key_value_tags",
    "wafregional_tags",
    "wafregional_key_value_tags",
    "wafv2_tags",
    "wafv2_key_value_tags",
    "workspaces_tags",
    "workspaces_key_value_tags",
]


# Dict[str, str] handling


def accessanalyzer_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return accessanalyzer service tags"""
    return tags.map()


def accessanalyzer_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from accessanalyzer service tags"""
    return KeyValueTags.new(tags)


def amplify_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return amplify service tags"""
    return tags.map()


def amplify_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from amplify service tags"""
    return KeyValueTags.new(tags)


def apigateway_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return apigateway service tags"""
    return tags.map()


def apigateway_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from apigateway service tags"""
    return KeyValueTags.new(tags)


def apigatewayv2_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return apigatewayv2 service tags"""
    return tags.map()


def apigatewayv2_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from apigatewayv2 service tags"""
    return KeyValueTags.new(tags)


def appstream_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return appstream service tags"""
    return tags.map()


def appstream_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from appstream service tags"""
    return KeyValueTags.new(tags)


def appsync_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return appsync service tags"""
    return tags.map()


def appsync_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from appsync service tags"""
    return KeyValueTags.new(tags)


def backup_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return backup service tags"""
    return tags.map()


def backup_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from backup service tags"""
    return KeyValueTags.new(tags)


def batch_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return batch service tags"""
    return tags.map()


def batch_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from batch service tags"""
    return KeyValueTags.new(tags)


def cloudwatchlogs_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return logs service tags"""
    return tags.map()


def cloudwatchlogs_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from logs service tags"""
    return KeyValueTags.new(tags)


def codecommit_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return codecommit service tags"""
    return tags.map()


def codecommit_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from codecommit service tags"""
    return KeyValueTags.new(tags)


def codestarnotifications_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return codestar-notifications service tags"""
    return tags.map()


def codestarnotifications_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from codestar-notifications service tags"""
    return KeyValueTags.new(tags)


def cognitoidentity_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return cognito-identity service tags"""
    return tags.map()


def cognitoidentity_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from cognito-identity service tags"""
    return KeyValueTags.new(tags)


def cognitoidentityprovider_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return cognito-idp service tags"""
    return tags.map()


def cognitoidentityprovider_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from cognito-idp service tags"""
    return KeyValueTags.new(tags)


def dataexchange_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return dataexchange service tags"""
    return tags.map()


def dataexchange_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from dataexchange service tags"""
    return KeyValueTags.new(tags)


def dlm_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return dlm service tags"""
    return tags.map()


def dlm_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from dlm service tags"""
    return KeyValueTags.new(tags)


def eks_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return eks service tags"""
    return tags.map()


def eks_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from eks service tags"""
    return KeyValueTags.new(tags)


def glacier_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return glacier service tags"""
    return tags.map()


def glacier_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from glacier service tags"""
    return KeyValueTags.new(tags)


def glue_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return glue service tags"""
    return tags.map()


def glue_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from glue service tags"""
    return KeyValueTags.new(tags)


def greengrass_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return greengrass service tags"""
    return tags.map()


def greengrass_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from greengrass service tags"""
    return KeyValueTags.new(tags)


def guardduty_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return guardduty service tags"""
    return tags.map()


def guardduty_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from guardduty service tags"""
    return KeyValueTags.new(tags)


def imagebuilder_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return imagebuilder service tags"""
    return tags.map()


def imagebuilder_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from imagebuilder service tags"""
    return KeyValueTags.new(tags)


def kafka_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return kafka service tags"""
    return tags.map()


def kafka_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from kafka service tags"""
    return KeyValueTags.new(tags)


def kinesisvideo_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return kinesisvideo service tags"""
    return tags.map()


def kinesisvideo_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from kinesisvideo service tags"""
    return KeyValueTags.new(tags)


def lambda_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return lambda service tags"""
    return tags.map()


def lambda_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from lambda service tags"""
    return KeyValueTags.new(tags)


def mediaconnect_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return mediaconnect service tags"""
    return tags.map()


def mediaconnect_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from mediaconnect service tags"""
    return KeyValueTags.new(tags)


def mediaconvert_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return mediaconvert service tags"""
    return tags.map()


def mediaconvert_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from mediaconvert service tags"""
    return KeyValueTags.new(tags)


def medialive_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return medialive service tags"""
    return tags.map()


def medialive_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from medialive service tags"""
    return KeyValueTags.new(tags)


def mediapackage_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return mediapackage service tags"""
    return tags.map()


def mediapackage_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from mediapackage service tags"""
    return KeyValueTags.new(tags)


def mq_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return mq service tags"""
    return tags.map()


def mq_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from mq service tags"""
    return KeyValueTags.new(tags)


def opsworks_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return opsworks service tags"""
    return tags.map()


def opsworks_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from opsworks service tags"""
    return KeyValueTags.new(tags)


def pinpoint_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return pinpoint service tags"""
    return tags.map()


def pinpoint_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from pinpoint service tags"""
    return KeyValueTags.new(tags)


def qldb_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return qldb service tags"""
    return tags.map()


def qldb_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from qldb service tags"""
    return KeyValueTags.new(tags)


def resourcegroups_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return resource-groups service tags"""
    return tags.map()


def resourcegroups_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from resource-groups service tags"""
    return KeyValueTags.new(tags)


def securityhub_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return securityhub service tags"""
    return tags.map()


def securityhub_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from securityhub service tags"""
    return KeyValueTags.new(tags)


def sqs_tags(tags: KeyValueTags) -> Dict[str, str]:
    """Return sqs service tags"""
    return tags.map()


def sqs_key_value_tags(tags: Optional[Dict[str, str]]) -> KeyValueTags:
    """Create KeyValueTags from sqs service tags"""
    return KeyValueTags.new(tags)


# List[Dict[str, str]] handling


def acm_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return acm service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def acm_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from acm service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def acmpca_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return acm-pca service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def acmpca_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from acm-pca service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def appmesh_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return appmesh service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def appmesh_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from appmesh service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def athena_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return athena service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def athena_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from athena service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloud9_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return cloud9 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloud9_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from cloud9 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloudformation_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return cloudformation service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloudformation_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from cloudformation service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloudfront_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return cloudfront service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloudfront_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from cloudfront service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloudhsmv2_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return cloudhsmv2 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloudhsmv2_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from cloudhsmv2 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloudtrail_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return cloudtrail service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloudtrail_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from cloudtrail service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloudwatch_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return cloudwatch service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloudwatch_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from cloudwatch service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def cloudwatchevents_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return events service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def cloudwatchevents_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from events service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def codebuild_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return codebuild service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def codebuild_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from codebuild service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def codedeploy_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return codedeploy service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def codedeploy_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from codedeploy service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def codepipeline_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return codepipeline service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def codepipeline_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from codepipeline service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def configservice_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return config service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def configservice_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from config service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def databasemigrationservice_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return dms service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def databasemigrationservice_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from dms service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def datapipeline_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return datapipeline service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def datapipeline_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from datapipeline service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def datasync_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return datasync service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def datasync_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from datasync service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def dax_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return dax service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def dax_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from dax service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def devicefarm_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return devicefarm service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def devicefarm_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from devicefarm service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def directconnect_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return directconnect service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def directconnect_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from directconnect service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def directoryservice_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return ds service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def directoryservice_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from ds service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def docdb_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return docdb service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def docdb_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from docdb service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def dynamodb_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return dynamodb service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def dynamodb_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from dynamodb service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def ec2_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return ec2 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def ec2_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from ec2 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def ecr_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return ecr service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def ecr_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from ecr service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def ecs_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return ecs service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def ecs_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from ecs service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def efs_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return efs service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def efs_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from efs service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def elasticache_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return elasticache service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def elasticache_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from elasticache service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def elasticbeanstalk_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return elasticbeanstalk service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def elasticbeanstalk_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from elasticbeanstalk service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def elasticsearchservice_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return es service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def elasticsearchservice_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from es service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def elb_tag_keys(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return elb service tag keys"""
    return [{"Key": k} for k in tags]


def elb_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return elb service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def elb_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from elb service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def elbv2_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return elbv2 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def elbv2_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from elbv2 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def emr_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return emr service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def emr_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from emr service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def firehose_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return firehose service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def firehose_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from firehose service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def fms_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return fms service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def fms_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from fms service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def fsx_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return fsx service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def fsx_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from fsx service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def gamelift_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return gamelift service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def gamelift_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from gamelift service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def globalaccelerator_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return globalaccelerator service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def globalaccelerator_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from globalaccelerator service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def iam_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return iam service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def iam_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from iam service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def inspector_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return inspector service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def inspector_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from inspector service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def iot_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return iot service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def iot_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from iot service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def iotanalytics_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return iotanalytics service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def iotanalytics_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from iotanalytics service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def iotevents_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return iotevents service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def iotevents_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from iotevents service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def kinesis_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return kinesis service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def kinesis_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from kinesis service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def kinesisanalytics_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return kinesisanalytics service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def kinesisanalytics_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from kinesisanalytics service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def kinesisanalyticsv2_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return kinesisanalyticsv2 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def kinesisanalyticsv2_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from kinesisanalyticsv2 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def kms_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return kms service tags"""
    return [{"TagKey": k, "TagValue": v} for k, v in tags.map().items()]


def kms_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from kms service tags"""
    return KeyValueTags.new({tag["TagKey"]: tag.get("TagValue") for tag in tags or []})


def licensemanager_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return license-manager service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def licensemanager_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from license-manager service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def lightsail_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return lightsail service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def lightsail_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from lightsail service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def mediastore_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return mediastore service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def mediastore_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from mediastore service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def neptune_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return neptune service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def neptune_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from neptune service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def organizations_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return organizations service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def organizations_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from organizations service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def quicksight_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return quicksight service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def quicksight_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from quicksight service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def ram_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return ram service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def ram_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from ram service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def rds_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return rds service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def rds_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from rds service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def redshift_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return redshift service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def redshift_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from redshift service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def route53_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return route53 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def route53_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from route53 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def route53resolver_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return route53resolver service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def route53resolver_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from route53resolver service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def s3_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return s3 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def s3_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from s3 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def sagemaker_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return sagemaker service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def sagemaker_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from sagemaker service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def secretsmanager_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return secretsmanager service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def secretsmanager_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from secretsmanager service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def serverlessapplicationrepository_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return serverlessrepo service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def serverlessapplicationrepository_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from serverlessrepo service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def servicecatalog_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return servicecatalog service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def servicecatalog_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from servicecatalog service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def sfn_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return stepfunctions service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def sfn_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from stepfunctions service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def sns_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return sns service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def sns_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from sns service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def ssm_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return ssm service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def ssm_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from ssm service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def storagegateway_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return storagegateway service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def storagegateway_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from storagegateway service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def swf_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return swf service tags"""
    return [{"key": k, "value": v} for k, v in tags.map().items()]


def swf_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from swf service tags"""
    return KeyValueTags.new({tag["key"]: tag.get("value") for tag in tags or []})


def transfer_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return transfer service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def transfer_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from transfer service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def waf_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return waf service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def waf_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from waf service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def wafregional_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return waf-regional service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def wafregional_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from waf-regional service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def wafv2_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return wafv2 service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def wafv2_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from wafv2 service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})


def workspaces_tags(tags: KeyValueTags) -> List[Dict[str, str]]:
    """Return workspaces service tags"""
    return [{"Key": k, "Value": v} for k, v in tags.map().items()]


def workspaces_key_value_tags(tags: Optional[List[Dict[str, str]]]) -> KeyValueTags:
    """Create KeyValueTags from workspaces service tags"""
    return KeyValueTags.new({tag["Key"]: tag.get("Value") for tag in tags or []})

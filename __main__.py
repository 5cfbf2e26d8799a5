"""
LB Listener and DB Subnet Group
Dynamic providers driven by stack configuration
"""
import pulumi
import pulumi_aws as aws
from config import get_config
from modules.lb_listener import create_lb_listener_resources
from modules.db_subnet_group import create_db_subnet_group_resources

# Configuration
config = get_config()

problems = config.validate()
if problems:
    raise pulumi.RunError("Invalid configuration: " + "; ".join(problems))

# 1. Listener
if config.enable_listener:
    load_balancer_arn = config.load_balancer_arn or aws.lb.get_load_balancer(
        name=config.load_balancer_name).arn
    target_group_arn = config.target_group_arn or aws.lb.get_target_group(
        name=config.target_group_name).arn

    listener = create_lb_listener_resources(
        config.name,
        load_balancer_arn=load_balancer_arn,
        target_group_arn=target_group_arn,
        port=config.listener_port,
        protocol=config.listener_protocol,
        ssl_policy=config.ssl_policy,
        certificate_arn=config.certificate_arn,
        existing_listener_arn=config.existing_listener_arn,
        region=config.aws_region)

    pulumi.export("listener_arn", listener["listener_arn"])
    pulumi.export("listener_port", listener["listener_port"])

# 2. DB subnet group
if config.enable_db_subnet_group:
    subnet_ids = config.db_subnet_ids
    if not subnet_ids:
        pulumi.log.info(f"Looking up subnets of VPC {config.vpc_id}")
        subnet_ids = aws.ec2.get_subnets(filters=[aws.ec2.GetSubnetsFilterArgs(
            name="vpc-id",
            values=[config.vpc_id])]).ids

    subnet_group = create_db_subnet_group_resources(
        config.name,
        subnet_ids=subnet_ids,
        group_name=config.db_subnet_group_name,
        description=config.db_subnet_group_description,
        existing_group_name=config.existing_db_subnet_group_name,
        region=config.aws_region,
        tags=config.common_tags)

    pulumi.export("db_subnet_group_name", subnet_group["subnet_group_name"])
    pulumi.export("db_subnet_group_arn", subnet_group["subnet_group_arn"])

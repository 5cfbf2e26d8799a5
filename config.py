"""
Configuration management for the LB listener and DB subnet group stack
"""

import pulumi
from typing import Dict, List, Optional

class Config:
    """Centralized configuration management for the dynamic resources"""
    
    def __init__(self):
        self.config = pulumi.Config()
        self.aws_config = pulumi.Config("aws")
        
        # AWS Configuration
        self.aws_region = self.aws_config.get("region") or "af-south-1"
        self.name = self.config.get("name") or "builder-space"
        
        # Listener Configuration
        self.enable_listener = self.config.get_bool("enable_listener")
        if self.enable_listener is None:
            self.enable_listener = True
        self.load_balancer_arn = self.config.get("load_balancer_arn") or ""
        self.load_balancer_name = self.config.get("load_balancer_name") or ""
        self.target_group_arn = self.config.get("target_group_arn") or ""
        self.target_group_name = self.config.get("target_group_name") or ""
        self.listener_port = self.config.get_int("listener_port") or 80
        self.listener_protocol = (self.config.get("listener_protocol") or "HTTP").upper()
        self.ssl_policy = self.config.get("ssl_policy")
        self.certificate_arn = self.config.get("certificate_arn")
        self.existing_listener_arn = self.config.get("existing_listener_arn") or ""
        
        # DB Subnet Group Configuration
        self.enable_db_subnet_group = self.config.get_bool("enable_db_subnet_group")
        if self.enable_db_subnet_group is None:
            self.enable_db_subnet_group = True
        self.db_subnet_group_name = self.config.get("db_subnet_group_name")
        self.db_subnet_group_description = self.config.get("db_subnet_group_description")
        self.db_subnet_ids = self.config.get_object("db_subnet_ids") or []
        self.vpc_id = self.config.get("vpc_id") or ""
        self.existing_db_subnet_group_name = self.config.get("existing_db_subnet_group_name") or ""
        
        # Additional tags
        self.additional_tags = self.config.get_object("tags") or {}
        
    @property
    def common_tags(self) -> Dict[str, str]:
        """Get common tags for all resources"""
        base_tags = {
            "Environment": "development",
            "Project": self.name,
            "ManagedBy": "pulumi",
        }
        base_tags.update(self.additional_tags)
        return base_tags
    
    @property
    def is_https(self) -> bool:
        """Whether the listener terminates TLS"""
        return self.listener_protocol == "HTTPS"
    
    def validate(self) -> List[str]:
        """Return configuration problems, empty when the config is usable"""
        problems = []
        if self.enable_listener:
            if not (self.load_balancer_arn or self.load_balancer_name):
                problems.append("load_balancer_arn or load_balancer_name is required")
            if not (self.target_group_arn or self.target_group_name):
                problems.append("target_group_arn or target_group_name is required")
            if self.is_https and not self.certificate_arn:
                problems.append("certificate_arn is required for HTTPS listeners")
        if self.enable_db_subnet_group and not (self.db_subnet_ids or self.vpc_id):
            problems.append("db_subnet_ids or vpc_id is required")
        return problems

def get_config() -> Config:
    """Get the global configuration instance"""
    return Config()

"""
Key/Value Tags Module
Generic tag container plus generated per-service conversions
Regenerate service_tags_gen.py with: python -m modules.keyvaluetags.generators.servicetags
"""

from .key_value_tags import AWS_TAG_KEY_PREFIX, KeyValueTags
from .service_tags_gen import *  # noqa: F401,F403
from . import service_tags_gen

__all__ = ["AWS_TAG_KEY_PREFIX", "KeyValueTags"] + service_tags_gen.__all__

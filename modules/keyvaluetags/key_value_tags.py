"""
Generic key/value tag container
Service specific request/response shapes are converted by service_tags_gen
"""

from typing import Any, Dict, Iterable, Optional

AWS_TAG_KEY_PREFIX = "aws:"


class KeyValueTags(dict):
    """Tag key to optional string value"""

    @classmethod
    def new(cls, value: Any = None) -> "KeyValueTags":
        """
        Create KeyValueTags from a supported value

        Args:
            value: dict of key to value (None allowed), iterable of keys,
                another KeyValueTags, or None

        Returns:
            New KeyValueTags
        """
        if value is None:
            return cls()
        if isinstance(value, dict):
            return cls({str(k): (None if v is None else str(v)) for k, v in value.items()})
        if isinstance(value, (list, tuple, set, frozenset)):
            return cls({str(k): None for k in value})
        raise TypeError(f"can't create KeyValueTags from {type(value).__name__}")

    def ignore_aws(self) -> "KeyValueTags":
        """Return tags without AWS reserved (aws:) keys"""
        return KeyValueTags({k: v for k, v in self.items() if not k.startswith(AWS_TAG_KEY_PREFIX)})

    def ignore(self, ignore: Iterable[str]) -> "KeyValueTags":
        """Return tags without the given keys"""
        ignored = set(ignore)
        return KeyValueTags({k: v for k, v in self.items() if k not in ignored})

    def map(self) -> Dict[str, str]:
        """Return a plain dict, missing values become empty strings"""
        return {k: ("" if v is None else v) for k, v in self.items()}

    def merge(self, other: Optional[Dict[str, Optional[str]]]) -> "KeyValueTags":
        """Return tags with other's keys added, other wins on conflicts"""
        result = KeyValueTags(self)
        result.update(KeyValueTags.new(other))
        return result

    def removed(self, new: Optional[Dict[str, Optional[str]]]) -> "KeyValueTags":
        """Return tags whose keys are absent from new"""
        new = KeyValueTags.new(new)
        return KeyValueTags({k: v for k, v in self.items() if k not in new})

    def updated(self, new: Optional[Dict[str, Optional[str]]]) -> "KeyValueTags":
        """Return tags from new that are added or have a changed value"""
        new = KeyValueTags.new(new)
        return KeyValueTags({k: v for k, v in new.items() if k not in self or self[k] != v})

    def equal(self, other: Optional[Dict[str, Optional[str]]]) -> bool:
        return self.map() == KeyValueTags.new(other).map()

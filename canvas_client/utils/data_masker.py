"""
Data masker utility for keeping credentials out of logs.

Request headers are passed through DataMasker before they are written to
debug logs so the bearer token never appears in log output.
"""

from typing import Any, Set


class DataMasker:
    """Static class for masking sensitive data."""

    MASKED_VALUE = "***MASKED***"

    # Normalized (lowercase, no separators) fragments of sensitive names
    _sensitive_fields: Set[str] = {
        "authorization",
        "accesskey",
        "accesstoken",
        "refreshtoken",
        "token",
        "password",
        "secret",
        "cookie",
        "apikey",
    }

    @classmethod
    def is_sensitive_field(cls, key: str) -> bool:
        """
        Check if a field or header name indicates sensitive data.

        Args:
            key: Field name to check

        Returns:
            True if field is sensitive, False otherwise
        """
        normalized_key = key.lower().replace("_", "").replace("-", "")
        return any(fragment in normalized_key for fragment in cls._sensitive_fields)

    @classmethod
    def mask_sensitive_data(cls, data: Any) -> Any:
        """
        Return a masked copy of dicts and lists, leaving the original untouched.

        Nested dicts and lists are processed recursively; primitives are
        returned unchanged.

        Args:
            data: Data to mask (dict, list, or primitive)

        Returns:
            Masked copy of the data
        """
        if isinstance(data, list):
            return [cls.mask_sensitive_data(item) for item in data]

        if not isinstance(data, dict):
            return data

        masked: dict[str, Any] = {}
        for key, value in data.items():
            if cls.is_sensitive_field(str(key)):
                masked[key] = cls.MASKED_VALUE
            else:
                masked[key] = cls.mask_sensitive_data(value)
        return masked

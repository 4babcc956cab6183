"""
Schema versioning for exported invoice reports.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class SchemaVersion(Enum):
    """
    Invoice report schema versions.

    Versions:
        V1_0: Invoice lines with charge type and amount
    """

    V1_0 = "1.0"


CURRENT_SCHEMA_VERSION = SchemaVersion.V1_0


@dataclass
class VersionedData:
    """
    Report data with version information.

    Attributes:
        schema_version: Version identifier
        data: Report content

    Examples:
        >>> versioned = VersionedData.wrap(summary.to_dict())
        >>> save_json(versioned.to_dict(), path)
    """

    schema_version: str
    data: Dict[str, Any]

    @classmethod
    def wrap(cls, data: Dict[str, Any]) -> 'VersionedData':
        """Wrap data with the current schema version."""
        return cls(schema_version=CURRENT_SCHEMA_VERSION.value, data=data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "schema_version": self.schema_version,
            "data": self.data
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'VersionedData':
        """
        Create instance from dictionary.

        Reports written without a version are treated as V1_0.
        """
        return cls(
            schema_version=d.get("schema_version", SchemaVersion.V1_0.value),
            data=d.get("data", {})
        )

    @property
    def version_enum(self) -> SchemaVersion:
        """
        Get schema version as enum.

        Raises:
            ValueError: If the version is unknown
        """
        return SchemaVersion(self.schema_version)

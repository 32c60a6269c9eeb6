"""Base model for all zmkview Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all zmkview models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ZmkViewBaseModel(BaseModel):
    """Base model class for all zmkview Pydantic models.

    This class enforces consistent serialization behavior:
    - by_alias=True: Use field aliases for serialization
    - mode="json": Use JSON-compatible serialization
    """

    model_config = ConfigDict(
        # Accept both field names and aliases on input
        populate_by_name=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")


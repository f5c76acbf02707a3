"""
Base model for all dashboard entities

Provides common functionality for data validation, serialization, and API interaction.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Dict, Any


class DashboardBaseModel(BaseModel):
    """Base model for all dashboard entities with common functionality."""

    model_config = {
        "validate_assignment": True,
        "use_enum_values": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self, exclude_none: bool = False) -> Dict[str, Any]:
        """Convert model to a camelCase, JSON-ready dictionary."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=exclude_none)

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from API response data."""
        if not data:
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls(**data)

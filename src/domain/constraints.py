"""Field constraints checked before entities are persisted."""

from pydantic import BaseModel, ConfigDict, Field


class UserGroupRules(BaseModel):
    """Constraints on a user group's editable fields."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntityType(str, Enum):
    """Kinds of entity that carry custom fields."""
    MEMBER = "member"
    GROUP = "group"


class CustomFieldValue(BaseModel):
    """Server's last known value and metadata for one field on one entity."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    value: Any = None
    bundle: Optional[Union[int, str]] = None
    member_edit_own: bool = False

    @field_validator("bundle", mode="before")
    @classmethod
    def _bundle_id(cls, value):
        # Bundles come back either as a bare id or as {"id": ...}
        if isinstance(value, dict):
            value = value.get("id")
        if value == "":
            return None
        return value


class CustomFieldUpdate(BaseModel):
    """A proposed value for one custom field."""
    model_config = ConfigDict(frozen=True)

    id: int
    value: Any = None


class Entity(BaseModel):
    """A subject identified by {type, id}."""
    model_config = ConfigDict(extra="allow")

    type: EntityType
    id: int
    # None means the entity was fetched without custom field data
    custom_fields: Optional[List[CustomFieldValue]] = None


class Member(Entity):
    type: Literal[EntityType.MEMBER] = EntityType.MEMBER
    name: Optional[str] = None
    ref: Optional[str] = None


class Group(Entity):
    type: Literal[EntityType.GROUP] = EntityType.GROUP
    title: Optional[str] = None


class MemberUpdate(BaseModel):
    """Partial member body. Only fields that were set are sent."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    ref: Optional[str] = None
    notes: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class Page(BaseModel):
    """One page of a list response."""
    model_config = ConfigDict(populate_by_name=True)

    results: List[Dict[str, Any]] = Field(default_factory=list)
    page: int = 0
    page_size: Optional[int] = Field(None, alias="pageSize")
    total_size: Optional[int] = Field(None, alias="totalSize")


_ENTITY_MODELS = {
    EntityType.MEMBER: Member,
    EntityType.GROUP: Group,
}


def stamp_entity(entity_type: EntityType, data: Dict[str, Any]) -> Entity:
    """Build the entity variant for a raw response.

    Responses do not say what kind of entity they describe, so the caller
    supplies the kind and it overrides anything in the payload.
    """
    entity_type = EntityType(entity_type)
    model = _ENTITY_MODELS[entity_type]
    return model.model_validate({**data, "type": entity_type})

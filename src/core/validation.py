"""Entity validation backed by Pydantic models."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from core.exceptions import EntityValidationError

EntityT = TypeVar("EntityT")


class EntityValidator(Generic[EntityT]):
    """Validate domain entities against a Pydantic rules model.

    The rules model declares only the constrained fields; it is read from
    the entity's attributes, so any dataclass with matching fields works.
    """

    def __init__(self, rules: type[BaseModel], entity_type: str) -> None:
        self._rules = rules
        self._entity_type = entity_type

    def validate(self, entity: EntityT) -> EntityT:
        """Return the entity unchanged, or raise EntityValidationError."""
        try:
            self._rules.model_validate(entity, from_attributes=True)
        except ValidationError as e:
            raise EntityValidationError(
                self._entity_type, self._format_errors(e)
            ) from e
        return entity

    @staticmethod
    def _format_errors(error: ValidationError) -> list[dict[str, Any]]:
        return [
            {
                "field": ".".join(str(x) for x in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in error.errors()
        ]

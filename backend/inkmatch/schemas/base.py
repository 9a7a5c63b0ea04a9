from typing import Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..utils.errors import ValidationFailed

M = TypeVar("M", bound=BaseModel)


class DocumentModel(BaseModel):
    """Pydantic base for records stored as camelCase documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self, *, exclude_unset: bool = False) -> dict:
        # Absent optional fields are never written to the store.
        return self.model_dump(by_alias=True, exclude_none=True, exclude_unset=exclude_unset)


def field_errors(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        key = ".".join(str(p) for p in err.get("loc", ())) or "__root__"
        errors.setdefault(key, err.get("msg", "invalid"))
    return errors


def validate_payload(model: Type[M], data) -> M:
    """Coerce ``data`` into ``model`` or raise ``ValidationFailed``."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(f"Invalid {model.__name__} payload", field_errors(exc)) from exc

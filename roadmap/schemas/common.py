from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, model_validator
from pydantic.alias_generators import to_camel


def _parse_iso(value: Any) -> Any:
    # Accepts date-only strings ("2025-03-01") and a trailing "Z".
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, BeforeValidator(_parse_iso), AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PatchModel(CamelModel):
    """Partial update body. Only fields the client sent are applied."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        for name in self.model_fields_set - self.nullable_fields:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

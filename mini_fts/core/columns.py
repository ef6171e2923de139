"""Column references resolved from dataclass models."""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, ClassVar, Optional, Protocol, Type


class DataclassModel(Protocol):
    """Protocol for supported dataclass model types."""

    __dataclass_fields__: ClassVar[dict[str, Any]]


def require_dataclass_model(cls: Type[Any]) -> None:
    """Validate that a class is a dataclass model."""

    if not is_dataclass(cls):
        raise TypeError(f"{cls.__name__} must be a dataclass.")


def table_name(model_or_cls: Any) -> str:
    """Resolve table name from model class or instance.

    Uses `__table__` override when present, otherwise lowercased class name.
    """

    cls = model_or_cls if isinstance(model_or_cls, type) else type(model_or_cls)
    name = getattr(cls, "__table__", None)
    return name if isinstance(name, str) and name else cls.__name__.lower()


@dataclass(frozen=True)
class Column:
    """Reference to a table column, rendered as a quoted identifier.

    Attributes:
        name: Raw column name.
        table: Optional raw table name used as qualifier.
    """

    name: str
    table: Optional[str] = None

    @classmethod
    def of(cls, model: Type[DataclassModel], field_name: str) -> "Column":
        """Build a qualified column reference from a dataclass model field.

        Raises:
            TypeError: If `model` is not a dataclass.
            ValueError: If the model has no field named `field_name`.
        """

        model_cls = model if isinstance(model, type) else type(model)
        require_dataclass_model(model_cls)
        names = {item.name for item in fields(model_cls)}
        if field_name not in names:
            raise ValueError(
                f"{model_cls.__name__} has no field {field_name!r}."
            )
        return cls(name=field_name, table=table_name(model_cls))

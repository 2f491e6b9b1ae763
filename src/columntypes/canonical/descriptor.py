from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from columntypes.canonical.sql_types import SqlType
from columntypes.utils.exceptions import DescriptorValidationError


class LengthSemantics(Enum):
    """
    Whether a textual column's size counts characters or bytes.
    """
    CHAR = "CHAR"
    BYTE = "BYTE"

    @classmethod
    def parse(cls, value) -> Optional["LengthSemantics"]:
        if value is None or isinstance(value, cls):
            return value

        key = str(value).strip().upper()
        if key == "CHARACTER":
            key = "CHAR"
        if key not in cls.__members__:
            raise DescriptorValidationError(
                f"Invalid length semantics '{value}'. Allowed values: CHAR, BYTE"
            )
        return cls.__members__[key]


@dataclass(frozen=True)
class ColumnTypeDescriptor:
    """
    Snapshot of a column's type as read from database metadata.

    nullable is tri-state: True, False or None when unknown.
    """
    sql_type: SqlType
    type_name: str
    column_size: int = 0
    decimal_digits: int = 0
    length_semantics: Optional[LengthSemantics] = None
    certain_data_type: bool = True
    nullable: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnTypeDescriptor":
        """
        Build a descriptor from a plain mapping (config files, HTTP payloads).

        Expected keys: type, type_name, column_size, decimal_digits,
        length_semantics, certain_data_type, nullable.
        """
        if not isinstance(data, dict):
            raise DescriptorValidationError(
                f"Column descriptor must be a mapping, got {type(data).__name__}"
            )

        if data.get("type") is None:
            raise DescriptorValidationError("Column descriptor requires a 'type'")

        sql_type = SqlType.parse(data["type"])
        type_name = data.get("type_name") or sql_type.name

        nullable = data.get("nullable")
        if nullable is not None and not isinstance(nullable, bool):
            raise DescriptorValidationError(
                f"'nullable' must be true, false or null, got {nullable!r}"
            )

        return cls(
            sql_type=sql_type,
            type_name=str(type_name),
            column_size=_as_int(data, "column_size"),
            decimal_digits=_as_int(data, "decimal_digits"),
            length_semantics=LengthSemantics.parse(data.get("length_semantics")),
            certain_data_type=as_bool(data, "certain_data_type", True),
            nullable=nullable,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.sql_type.name,
            "type_name": self.type_name,
            "column_size": self.column_size,
            "decimal_digits": self.decimal_digits,
            "length_semantics": (
                self.length_semantics.name if self.length_semantics else None
            ),
            "certain_data_type": self.certain_data_type,
            "nullable": self.nullable,
        }


def _as_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise DescriptorValidationError(f"'{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise DescriptorValidationError(f"'{key}' must be an integer, got {value!r}")


def as_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise DescriptorValidationError(f"'{key}' must be a boolean, got {value!r}")
    return value

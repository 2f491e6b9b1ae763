from dataclasses import dataclass
from typing import Any, Dict, Optional

from columntypes.canonical.descriptor import ColumnTypeDescriptor, as_bool
from columntypes.canonical.sql_types import is_numeric
from columntypes.governance import column_diff
from columntypes.governance.dialect import Dialect
from columntypes.pipeline.type_renderer import render_data_type
from columntypes.utils.exceptions import DescriptorValidationError


@dataclass
class Column:
    """
    A table or view column as read from database metadata.
    """
    name: str
    descriptor: ColumnTypeDescriptor

    table_name: Optional[str] = None
    view_name: Optional[str] = None
    default_value: Any = None
    auto_increment: bool = False
    primary_key: bool = False
    unique: bool = False
    remarks: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Column":
        if not isinstance(data, dict) or not data.get("name"):
            raise DescriptorValidationError("Column entry requires a 'name'")

        return cls(
            name=data["name"],
            descriptor=ColumnTypeDescriptor.from_dict(data),
            table_name=data.get("table"),
            view_name=data.get("view"),
            default_value=data.get("default_value"),
            auto_increment=as_bool(data, "auto_increment", False),
            primary_key=as_bool(data, "primary_key", False),
            unique=as_bool(data, "unique", False),
            remarks=data.get("remarks"),
        )

    @property
    def qualified_name(self) -> str:
        container = self.table_name if self.table_name is not None else self.view_name
        if container is None:
            return self.name
        return f"{container}.{self.name}"

    def is_numeric(self) -> bool:
        return is_numeric(self.descriptor.sql_type)

    def data_type_string(self, dialect: Dialect = Dialect.DEFAULT) -> str:
        return render_data_type(self.descriptor, dialect)

    def is_data_type_different(self, other: "Column") -> bool:
        return column_diff.data_type_differs(self.descriptor, other.descriptor)

    def is_nullability_different(self, other: "Column") -> bool:
        return column_diff.nullability_differs(self.descriptor, other.descriptor)

    def is_different(self, other: "Column") -> bool:
        return column_diff.differs(self.descriptor, other.descriptor)

    def __str__(self) -> str:
        return self.qualified_name

from typing import Dict, List

from columntypes.canonical.descriptor import ColumnTypeDescriptor
from columntypes.governance.dialect import Dialect
from columntypes.pipeline.type_renderer import render_data_type

DATA_TYPE_ATTRIBUTES = (
    "sql_type",
    "column_size",
    "decimal_digits",
    "length_semantics",
)


def data_type_differs(a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> bool:
    """
    True when both types are certain and any type attribute differs.
    An uncertain type never counts as a difference.
    """
    if not a.certain_data_type or not b.certain_data_type:
        return False
    return any(getattr(a, attr) != getattr(b, attr) for attr in DATA_TYPE_ATTRIBUTES)


def nullability_differs(a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> bool:
    if a.nullable is None and b.nullable is None:
        return False
    if a.nullable is None or b.nullable is None:
        return True
    return a.nullable != b.nullable


def differs(a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> bool:
    return data_type_differs(a, b) or nullability_differs(a, b)


def changed_attributes(a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> List[str]:
    """
    Names of the descriptor attributes that count as differences.
    """
    changes = []
    if data_type_differs(a, b):
        changes.extend(
            attr for attr in DATA_TYPE_ATTRIBUTES
            if getattr(a, attr) != getattr(b, attr)
        )
    if nullability_differs(a, b):
        changes.append("nullable")
    return changes


class ColumnDiffEvaluator:
    """
    Column comparison predicates consumed by schema diffing.
    """

    def data_type_differs(self, a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> bool:
        return data_type_differs(a, b)

    def nullability_differs(self, a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> bool:
        return nullability_differs(a, b)

    def differs(self, a: ColumnTypeDescriptor, b: ColumnTypeDescriptor) -> bool:
        return differs(a, b)


class ColumnSetDiff:
    """
    Computes column drift between two sets of columns.
    Columns are paired by case-insensitive name.
    """

    def __init__(self, old_columns, new_columns, dialect: Dialect = Dialect.DEFAULT):
        self.old_columns = {c.name.lower(): c for c in old_columns}
        self.new_columns = {c.name.lower(): c for c in new_columns}
        self.dialect = dialect

    def diff(self) -> Dict:
        added = []
        removed = []
        modified = []

        for key, new_col in self.new_columns.items():
            if key not in self.old_columns:
                added.append(self._describe(new_col))
                continue

            old_col = self.old_columns[key]
            changes = changed_attributes(old_col.descriptor, new_col.descriptor)
            if changes:
                modified.append({
                    "column": new_col.name,
                    "changes": changes,
                    "old": render_data_type(old_col.descriptor, self.dialect),
                    "new": render_data_type(new_col.descriptor, self.dialect),
                })

        for key, old_col in self.old_columns.items():
            if key not in self.new_columns:
                removed.append(self._describe(old_col))

        return {
            "added_columns": added,
            "removed_columns": removed,
            "modified_columns": modified,
        }

    def _describe(self, column) -> Dict:
        return {
            "column": column.name,
            "type": render_data_type(column.descriptor, self.dialect),
            "nullable": column.descriptor.nullable,
            "primary_key": column.primary_key,
            "auto_increment": column.auto_increment,
            "unique": column.unique,
            "default_value": column.default_value,
            "remarks": column.remarks,
        }

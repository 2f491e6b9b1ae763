from typing import Dict, List

from columntypes.canonical.column import Column
from columntypes.canonical.descriptor import ColumnTypeDescriptor
from columntypes.governance.column_diff import (
    ColumnDiffEvaluator,
    ColumnSetDiff,
    changed_attributes,
)
from columntypes.governance.dialect import Dialect
from columntypes.pipeline.type_renderer import DialectTypeRenderer
from columntypes.observability.logger import log_event, generate_request_id, RequestTimer
from columntypes.utils.exceptions import ColumnTypesError, DescriptorValidationError

ACTIONS = ("render", "diff", "compare_columns")


def _require_list(payload: Dict, key: str) -> List:
    value = payload.get(key)
    if not isinstance(value, list):
        raise DescriptorValidationError(f"'{key}' must be a list of column entries")
    return value


def _require_mapping(payload: Dict, key: str) -> Dict:
    value = payload.get(key)
    if not isinstance(value, dict):
        raise DescriptorValidationError(f"'{key}' must be a column entry")
    return value


def render_columns(entries: List[Dict], dialect: Dialect) -> List[Dict]:
    """
    Render a list of column entries. Entries without a name are rendered
    as bare descriptors.
    """
    renderer = DialectTypeRenderer(dialect)
    rendered = []

    for entry in entries:
        if isinstance(entry, dict) and entry.get("name"):
            column = Column.from_dict(entry)
            rendered.append({
                "column": column.qualified_name,
                "type": renderer.render(column.descriptor),
                "numeric": column.is_numeric(),
            })
        else:
            descriptor = ColumnTypeDescriptor.from_dict(entry)
            rendered.append({"type": renderer.render(descriptor)})

    return rendered


def compare_descriptors(left: Dict, right: Dict) -> Dict:
    a = ColumnTypeDescriptor.from_dict(left)
    b = ColumnTypeDescriptor.from_dict(right)
    evaluator = ColumnDiffEvaluator()

    return {
        "data_type_differs": evaluator.data_type_differs(a, b),
        "nullability_differs": evaluator.nullability_differs(a, b),
        "differs": evaluator.differs(a, b),
        "changes": changed_attributes(a, b),
    }


def compare_column_sets(old: List[Dict], new: List[Dict], dialect: Dialect) -> Dict:
    old_columns = [Column.from_dict(c) for c in old]
    new_columns = [Column.from_dict(c) for c in new]
    return ColumnSetDiff(old_columns, new_columns, dialect).diff()


# ==========================================================
# ROUTER
# ==========================================================
def route(payload: Dict) -> Dict:
    """
    Main entry point for API and CLI callers.

    Actions:
      render          -> {"dialect", "columns": [...]}
      diff            -> {"left": {...}, "right": {...}}
      compare_columns -> {"dialect", "old": [...], "new": [...]}
    """
    request_id = generate_request_id()
    timer = RequestTimer()

    action = payload.get("action", "render")
    if action not in ACTIONS:
        raise ColumnTypesError(
            f"Unknown action '{action}'. Allowed values: {', '.join(ACTIONS)}"
        )

    dialect = Dialect.from_name(payload.get("dialect"))

    if action == "render":
        columns = render_columns(_require_list(payload, "columns"), dialect)
        log_event("TYPE_RENDERING_COMPLETED", {
            "request_id": request_id,
            "dialect": dialect.value,
            "columns": len(columns),
            "duration_seconds": timer.duration(),
        })
        return {
            "status": "SUCCESS",
            "request_id": request_id,
            "dialect": dialect.value,
            "columns": columns,
        }

    if action == "diff":
        result = compare_descriptors(
            _require_mapping(payload, "left"),
            _require_mapping(payload, "right"),
        )
        log_event("COLUMN_DIFF_COMPLETED", {
            "request_id": request_id,
            "differs": result["differs"],
            "duration_seconds": timer.duration(),
        })
        return {"status": "SUCCESS", "request_id": request_id, **result}

    report = compare_column_sets(
        _require_list(payload, "old"),
        _require_list(payload, "new"),
        dialect,
    )
    log_event("COLUMN_DIFF_COMPLETED", {
        "request_id": request_id,
        "dialect": dialect.value,
        "added": len(report["added_columns"]),
        "removed": len(report["removed_columns"]),
        "modified": len(report["modified_columns"]),
        "duration_seconds": timer.duration(),
    })
    return {
        "status": "SUCCESS",
        "request_id": request_id,
        "dialect": dialect.value,
        **report,
    }

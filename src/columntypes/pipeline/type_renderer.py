import logging
from typing import Callable, Dict, Iterable, List, Optional

from columntypes.canonical.descriptor import ColumnTypeDescriptor
from columntypes.canonical.sql_types import SqlType
from columntypes.governance.dialect import Dialect
from columntypes.inference.arity import Arity, classify
from columntypes.observability.logger import log_event

# A rule receives the descriptor and the normalized type name. It returns the
# rendered type to short-circuit, or None to fall through to the next rule.
Rule = Callable[[ColumnTypeDescriptor, str], Optional[str]]

# Postgres reports unconstrained NUMERIC with this precision.
POSTGRES_UNCONSTRAINED_NUMERIC = 131089


# -------------------------------------------------
# Step 1: name normalization
# -------------------------------------------------
def _postgres_bpchar(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if type_name == "bpchar":
        return "char"
    return None


NAME_NORMALIZERS: Dict[Dialect, List[Rule]] = {
    Dialect.POSTGRES: [_postgres_bpchar],
}


# -------------------------------------------------
# Step 2: whole-type overrides
# -------------------------------------------------
def _float_family(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if descriptor.sql_type in (SqlType.FLOAT, SqlType.DOUBLE):
        return "float"
    return None


def _informix_interval(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    # The Informix driver reports interval columns as CHAR; without this the
    # size is appended, e.g. "INTERVAL HOUR TO FRACTION(3)(2413)".
    if type_name.upper().startswith("INTERVAL"):
        return type_name
    return None


def _informix_real(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if descriptor.sql_type == SqlType.REAL:
        return "SMALLFLOAT"
    return None


WHOLE_TYPE_RULES: Dict[Dialect, List[Rule]] = {
    Dialect.HSQL: [_float_family],
    Dialect.H2: [_float_family],
    Dialect.DERBY: [_float_family],
    Dialect.INFORMIX: [_informix_interval, _informix_real],
}


# -------------------------------------------------
# Step 5: one-parameter overrides
# -------------------------------------------------
def _postgres_text(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if type_name == "TEXT":
        return type_name
    return None


def _mssql_uniqueidentifier(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if type_name == "uniqueidentifier":
        return type_name
    return None


def _mysql_enum_or_set(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if type_name.startswith("enum(") or type_name.startswith("set("):
        return type_name
    return None


def _mysql_double(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if type_name.upper() == "DOUBLE":
        return type_name
    return None


def _oracle_varchar2(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if type_name != "VARCHAR2":
        return None
    if descriptor.length_semantics is None:
        return f"{type_name}({descriptor.column_size})"
    return f"{type_name}({descriptor.column_size} {descriptor.length_semantics.name})"


ONE_PARAM_RULES: Dict[Dialect, List[Rule]] = {
    Dialect.POSTGRES: [_postgres_text],
    Dialect.MSSQL: [_mssql_uniqueidentifier],
    Dialect.MYSQL: [_mysql_enum_or_set, _mysql_double],
    Dialect.ORACLE: [_oracle_varchar2],
}


# -------------------------------------------------
# Step 6: two-parameter overrides
# -------------------------------------------------
def _postgres_unconstrained_numeric(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if descriptor.column_size == POSTGRES_UNCONSTRAINED_NUMERIC:
        return "DECIMAL"
    return None


def _mssql_money(descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    if "money" in type_name.lower():
        return type_name.upper()
    return None


TWO_PARAM_RULES: Dict[Dialect, List[Rule]] = {
    Dialect.POSTGRES: [_postgres_unconstrained_numeric],
    Dialect.MSSQL: [_mssql_money],
}


def _apply(rules: Dict[Dialect, List[Rule]], dialect: Dialect,
           descriptor: ColumnTypeDescriptor, type_name: str) -> Optional[str]:
    for rule in rules.get(dialect, ()):
        result = rule(descriptor, type_name)
        if result is not None:
            return result
    return None


def render_data_type(descriptor: ColumnTypeDescriptor, dialect: Dialect = Dialect.DEFAULT) -> str:
    """
    Return the type name and any parameters suitable for DDL in the given dialect.

    Never raises. Unclassified SQL types are logged and rendered as the bare
    type name.
    """
    type_name = descriptor.type_name
    type_name = _apply(NAME_NORMALIZERS, dialect, descriptor, type_name) or type_name

    override = _apply(WHOLE_TYPE_RULES, dialect, descriptor, type_name)
    if override is not None:
        return override

    arity = classify(descriptor.sql_type)

    if arity is Arity.NONE:
        return type_name

    if arity is Arity.ONE:
        override = _apply(ONE_PARAM_RULES, dialect, descriptor, type_name)
        if override is not None:
            return override
        return f"{type_name}({descriptor.column_size})"

    if arity is Arity.TWO:
        override = _apply(TWO_PARAM_RULES, dialect, descriptor, type_name)
        if override is not None:
            return override
        return f"{type_name}({descriptor.column_size},{descriptor.decimal_digits})"

    log_event("UNKNOWN_DATA_TYPE", {
        "message": (
            f"Unknown Data Type: {int(descriptor.sql_type)} ({descriptor.type_name}). "
            "Assuming it does not take parameters"
        ),
        "sql_type": int(descriptor.sql_type),
        "type_name": descriptor.type_name,
        "dialect": dialect.value,
    }, level=logging.WARNING)
    return descriptor.type_name


class DialectTypeRenderer:
    """
    Renders column type declarations for one target dialect.
    """

    def __init__(self, dialect: Dialect = Dialect.DEFAULT):
        self.dialect = dialect

    def render(self, descriptor: ColumnTypeDescriptor) -> str:
        return render_data_type(descriptor, self.dialect)

    def render_many(self, descriptors: Iterable[ColumnTypeDescriptor]) -> List[str]:
        return [self.render(d) for d in descriptors]

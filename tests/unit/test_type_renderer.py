import logging

import pytest

from columntypes.canonical.descriptor import ColumnTypeDescriptor, LengthSemantics
from columntypes.canonical.sql_types import SqlType
from columntypes.governance.dialect import Dialect
from columntypes.inference.arity import NO_PARAMS
from columntypes.pipeline.type_renderer import DialectTypeRenderer, render_data_type


def _d(sql_type, type_name, size=0, scale=0, semantics=None):
    return ColumnTypeDescriptor(sql_type, type_name, size, scale, semantics)


# -------------------------------------------------
# Arity defaults
# -------------------------------------------------
@pytest.mark.parametrize("dialect", list(Dialect))
@pytest.mark.parametrize("sql_type", sorted(NO_PARAMS))
def test_no_param_types_render_bare_name(sql_type, dialect):
    assert render_data_type(_d(sql_type, "SOMETYPE", 42, 7), dialect) == "SOMETYPE"


@pytest.mark.parametrize("sql_type", [SqlType.CHAR, SqlType.VARCHAR, SqlType.VARBINARY])
@pytest.mark.parametrize("dialect", [Dialect.DEFAULT, Dialect.POSTGRES, Dialect.ORACLE])
def test_one_param_default(sql_type, dialect):
    assert render_data_type(_d(sql_type, "COLTYPE", 30), dialect) == "COLTYPE(30)"


@pytest.mark.parametrize("sql_type", [SqlType.DECIMAL, SqlType.NUMERIC, SqlType.REAL])
@pytest.mark.parametrize("dialect", [Dialect.DEFAULT, Dialect.MYSQL, Dialect.ORACLE])
def test_two_param_default(sql_type, dialect):
    assert render_data_type(_d(sql_type, "NUM", 12, 3), dialect) == "NUM(12,3)"


def test_varchar_default():
    assert render_data_type(_d(SqlType.VARCHAR, "VARCHAR", 255), Dialect.DEFAULT) == "VARCHAR(255)"


def test_decimal_default():
    assert render_data_type(_d(SqlType.DECIMAL, "DECIMAL", 10, 2), Dialect.DEFAULT) == "DECIMAL(10,2)"


def test_default_dialect_is_used_when_omitted():
    assert render_data_type(_d(SqlType.FLOAT, "FLOAT", 53)) == "FLOAT(53)"


def test_rendering_is_repeatable():
    d = _d(SqlType.VARCHAR, "VARCHAR2", 100, semantics=LengthSemantics.CHAR)
    assert render_data_type(d, Dialect.ORACLE) == render_data_type(d, Dialect.ORACLE)


# -------------------------------------------------
# Postgres
# -------------------------------------------------
def test_postgres_text_has_no_length():
    assert render_data_type(_d(SqlType.VARCHAR, "TEXT", 0), Dialect.POSTGRES) == "TEXT"


def test_text_on_other_dialects_keeps_length():
    assert render_data_type(_d(SqlType.VARCHAR, "TEXT", 0), Dialect.DEFAULT) == "TEXT(0)"


def test_postgres_bpchar_is_normalized():
    assert render_data_type(_d(SqlType.CHAR, "bpchar", 10), Dialect.POSTGRES) == "char(10)"


def test_bpchar_untouched_outside_postgres():
    assert render_data_type(_d(SqlType.CHAR, "bpchar", 10), Dialect.DEFAULT) == "bpchar(10)"


def test_postgres_unconstrained_numeric():
    d = _d(SqlType.DECIMAL, "NUMERIC", 131089, 0)
    assert render_data_type(d, Dialect.POSTGRES) == "DECIMAL"
    assert render_data_type(d, Dialect.DEFAULT) == "NUMERIC(131089,0)"


def test_postgres_constrained_numeric():
    assert render_data_type(_d(SqlType.NUMERIC, "numeric", 10, 2), Dialect.POSTGRES) == "numeric(10,2)"


# -------------------------------------------------
# MSSQL
# -------------------------------------------------
def test_mssql_uniqueidentifier():
    d = _d(SqlType.CHAR, "uniqueidentifier", 36)
    assert render_data_type(d, Dialect.MSSQL) == "uniqueidentifier"
    assert render_data_type(d, Dialect.DEFAULT) == "uniqueidentifier(36)"


@pytest.mark.parametrize("type_name, expected", [
    ("money", "MONEY"),
    ("smallmoney", "SMALLMONEY"),
    ("Money", "MONEY"),
])
def test_mssql_money(type_name, expected):
    assert render_data_type(_d(SqlType.DECIMAL, type_name, 19, 4), Dialect.MSSQL) == expected


def test_money_outside_mssql_keeps_parameters():
    assert render_data_type(_d(SqlType.DECIMAL, "money", 19, 4), Dialect.POSTGRES) == "money(19,4)"


# -------------------------------------------------
# MySQL
# -------------------------------------------------
@pytest.mark.parametrize("type_name", ["enum('a','b')", "set('x','y')"])
def test_mysql_enum_and_set(type_name):
    assert render_data_type(_d(SqlType.CHAR, type_name, 1), Dialect.MYSQL) == type_name


@pytest.mark.parametrize("type_name", ["DOUBLE", "double"])
def test_mysql_double(type_name):
    assert render_data_type(_d(SqlType.DOUBLE, type_name, 22), Dialect.MYSQL) == type_name


def test_double_outside_mysql_keeps_length():
    assert render_data_type(_d(SqlType.DOUBLE, "DOUBLE", 22), Dialect.DEFAULT) == "DOUBLE(22)"


# -------------------------------------------------
# Oracle
# -------------------------------------------------
def test_oracle_varchar2_char_semantics():
    d = _d(SqlType.VARCHAR, "VARCHAR2", 100, semantics=LengthSemantics.CHAR)
    assert render_data_type(d, Dialect.ORACLE) == "VARCHAR2(100 CHAR)"


def test_oracle_varchar2_byte_semantics():
    d = _d(SqlType.VARCHAR, "VARCHAR2", 255, semantics=LengthSemantics.BYTE)
    assert render_data_type(d, Dialect.ORACLE) == "VARCHAR2(255 BYTE)"


def test_oracle_varchar2_without_semantics():
    assert render_data_type(_d(SqlType.VARCHAR, "VARCHAR2", 20), Dialect.ORACLE) == "VARCHAR2(20)"


def test_oracle_other_types_ignore_semantics():
    d = _d(SqlType.VARCHAR, "NVARCHAR2", 20, semantics=LengthSemantics.CHAR)
    assert render_data_type(d, Dialect.ORACLE) == "NVARCHAR2(20)"


# -------------------------------------------------
# Informix
# -------------------------------------------------
@pytest.mark.parametrize("type_name", ["INTERVAL HOUR TO FRACTION(3)", "interval day to second"])
def test_informix_interval_reported_as_char(type_name):
    assert render_data_type(_d(SqlType.CHAR, type_name, 2413), Dialect.INFORMIX) == type_name


def test_informix_real():
    assert render_data_type(_d(SqlType.REAL, "REAL", 7, 0), Dialect.INFORMIX) == "SMALLFLOAT"


def test_informix_other_types_use_defaults():
    assert render_data_type(_d(SqlType.VARCHAR, "VARCHAR", 40), Dialect.INFORMIX) == "VARCHAR(40)"


# -------------------------------------------------
# Hsql / H2 / Derby
# -------------------------------------------------
@pytest.mark.parametrize("dialect", [Dialect.HSQL, Dialect.H2, Dialect.DERBY])
@pytest.mark.parametrize("sql_type", [SqlType.FLOAT, SqlType.DOUBLE])
def test_embedded_databases_render_float(sql_type, dialect):
    assert render_data_type(_d(sql_type, "DOUBLE PRECISION", 17), dialect) == "float"


def test_embedded_databases_keep_real_parameters():
    assert render_data_type(_d(SqlType.REAL, "REAL", 7, 0), Dialect.H2) == "REAL(7,0)"


# -------------------------------------------------
# Unclassified types
# -------------------------------------------------
def test_unclassified_type_renders_bare_name_and_warns(events):
    result = render_data_type(_d(SqlType.NVARCHAR, "nvarchar", 50), Dialect.MSSQL)

    assert result == "nvarchar"
    assert len(events) == 1
    assert events[0]["event_type"] == "UNKNOWN_DATA_TYPE"
    assert events[0]["level"] == logging.WARNING
    assert events[0]["message"] == (
        "Unknown Data Type: -9 (nvarchar). Assuming it does not take parameters"
    )


def test_unknown_sentinel_renders_bare_name(events):
    assert render_data_type(_d(SqlType.UNKNOWN, "geometry", 10, 2)) == "geometry"
    assert events[0]["sql_type"] == int(SqlType.UNKNOWN)


def test_classified_types_do_not_warn(events):
    render_data_type(_d(SqlType.VARCHAR, "VARCHAR", 10))
    assert events == []


# -------------------------------------------------
# Renderer class
# -------------------------------------------------
def test_renderer_render_many():
    renderer = DialectTypeRenderer(Dialect.POSTGRES)
    result = renderer.render_many([
        _d(SqlType.INTEGER, "int4"),
        _d(SqlType.CHAR, "bpchar", 3),
        _d(SqlType.NUMERIC, "numeric", 131089),
    ])
    assert result == ["int4", "char(3)", "DECIMAL"]

from enum import Enum
from typing import Optional

from columntypes.canonical.sql_types import SqlType


class Arity(Enum):
    """
    Number of size-like parameters a type declaration takes.
    """
    NONE = 0
    ONE = 1
    TWO = 2


NO_PARAMS = frozenset({
    SqlType.ARRAY,
    SqlType.BIGINT,
    SqlType.BINARY,
    SqlType.BIT,
    SqlType.BLOB,
    SqlType.BOOLEAN,
    SqlType.CLOB,
    SqlType.DATALINK,
    SqlType.DATE,
    SqlType.DISTINCT,
    SqlType.INTEGER,
    SqlType.JAVA_OBJECT,
    SqlType.LONGVARBINARY,
    SqlType.NULL,
    SqlType.OTHER,
    SqlType.REF,
    SqlType.SMALLINT,
    SqlType.STRUCT,
    SqlType.TIME,
    SqlType.TIMESTAMP,
    SqlType.TINYINT,
    SqlType.LONGVARCHAR,
})

ONE_PARAM = frozenset({
    SqlType.CHAR,
    SqlType.VARCHAR,
    SqlType.VARBINARY,
    SqlType.DOUBLE,
    SqlType.FLOAT,
})

TWO_PARAMS = frozenset({
    SqlType.DECIMAL,
    SqlType.NUMERIC,
    SqlType.REAL,
})

_ARITY_BY_TYPE = {
    **{t: Arity.NONE for t in NO_PARAMS},
    **{t: Arity.ONE for t in ONE_PARAM},
    **{t: Arity.TWO for t in TWO_PARAMS},
}


def classify(sql_type: SqlType) -> Optional[Arity]:
    """
    Return the arity of a generic SQL type, or None when it is unclassified.
    """
    return _ARITY_BY_TYPE.get(sql_type)

from enum import IntEnum

from columntypes.utils.exceptions import UnknownSqlTypeError


class SqlType(IntEnum):
    """
    Generic SQL type codes (java.sql.Types numbering).
    """
    ARRAY = 2003
    BIGINT = -5
    BINARY = -2
    BIT = -7
    BLOB = 2004
    BOOLEAN = 16
    CHAR = 1
    CLOB = 2005
    DATALINK = 70
    DATE = 91
    DECIMAL = 3
    DISTINCT = 2001
    DOUBLE = 8
    FLOAT = 6
    INTEGER = 4
    JAVA_OBJECT = 2000
    LONGVARBINARY = -4
    LONGVARCHAR = -1
    NULL = 0
    NUMERIC = 2
    OTHER = 1111
    REAL = 7
    REF = 2006
    SMALLINT = 5
    STRUCT = 2002
    TIME = 92
    TIMESTAMP = 93
    TINYINT = -6
    VARBINARY = -3
    VARCHAR = 12

    # Later JDBC codes, not classified by arity
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011
    ROWID = -8
    SQLXML = 2009

    UNKNOWN = -2147483648

    @classmethod
    def parse(cls, value) -> "SqlType":
        """
        Resolve a member, integer code or case-insensitive name.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, bool):
            raise UnknownSqlTypeError(f"Invalid SQL type: {value!r}")

        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise UnknownSqlTypeError(f"Unknown SQL type code: {value}")

        if isinstance(value, str):
            key = value.strip().upper()
            if key.lstrip("-").isdigit():
                return cls.parse(int(key))
            if key in cls.__members__:
                return cls.__members__[key]

        raise UnknownSqlTypeError(f"Unknown SQL type: {value!r}")


NUMERIC_TYPES = frozenset({
    SqlType.BIGINT,
    SqlType.BIT,
    SqlType.DECIMAL,
    SqlType.DOUBLE,
    SqlType.FLOAT,
    SqlType.INTEGER,
    SqlType.NUMERIC,
    SqlType.REAL,
    SqlType.SMALLINT,
    SqlType.TINYINT,
})


def is_numeric(sql_type: SqlType) -> bool:
    return sql_type in NUMERIC_TYPES

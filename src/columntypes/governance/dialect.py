from enum import Enum
from typing import Optional

from columntypes.utils.exceptions import UnknownDialectError


class Dialect(Enum):
    DEFAULT = "default"
    POSTGRES = "postgres"
    MSSQL = "mssql"
    MYSQL = "mysql"
    ORACLE = "oracle"
    INFORMIX = "informix"
    HSQL = "hsql"
    H2 = "h2"
    DERBY = "derby"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Dialect":
        """
        Resolve a dialect tag or a JDBC database product name.
        """
        if isinstance(name, cls):
            return name

        if not name:
            return cls.DEFAULT

        key = " ".join(str(name).strip().lower().split())
        if key in _ALIASES:
            return _ALIASES[key]

        raise UnknownDialectError(
            f"Unknown dialect '{name}'. "
            f"Allowed values: {', '.join(d.value for d in cls)}"
        )


_ALIASES = {d.value: d for d in Dialect}
_ALIASES.update({
    "generic": Dialect.DEFAULT,
    "postgresql": Dialect.POSTGRES,
    "pgsql": Dialect.POSTGRES,
    "sqlserver": Dialect.MSSQL,
    "sql server": Dialect.MSSQL,
    "microsoft sql server": Dialect.MSSQL,
    "mariadb": Dialect.MYSQL,
    "informix dynamic server": Dialect.INFORMIX,
    "hsqldb": Dialect.HSQL,
    "hsql database engine": Dialect.HSQL,
    "apache derby": Dialect.DERBY,
})

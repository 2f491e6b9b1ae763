class ColumnTypesError(Exception):
    """
    Base exception for all column type errors
    """
    pass


class DescriptorValidationError(ColumnTypesError):
    """
    Raised when a column descriptor cannot be built from input data
    """
    pass


class UnknownSqlTypeError(DescriptorValidationError):
    """
    Raised when a generic SQL type name or code is not recognised
    """
    pass


class UnknownDialectError(ColumnTypesError):
    """
    Raised when a dialect tag or product name is not recognised
    """
    pass


class ConfigurationError(ColumnTypesError):
    """
    Raised when a batch configuration file is malformed
    """
    pass

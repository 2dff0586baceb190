class SchemaError(ValueError):
    """The options or message document does not have the required shape."""


def kind_of(value):
    # JSON names for python values, used in error messages
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__

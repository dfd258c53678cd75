"""Schema registry keyed by (domain, command), kept apart from the schemas to avoid import cycles."""

from pydantic import BaseModel

_SCHEMAS: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Bind ``schema_class`` to ``ccr.api.<domain>.cmd_<command_name>``.

    Raises:
        ValueError: If the command already has a schema
    """
    if (domain, command_name) in _SCHEMAS:
        raise ValueError(f"Duplicate output schema for {domain}.{command_name}")
    _SCHEMAS[(domain, command_name)] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command_name))

"""Schema loading utilities for typso.

A schema document maps field names to descriptor shapes:

```yaml
name: string
age: number
tags: [array, string]
id: [string, number]
role:
  type: string
  default: user
```
"""

import json
from pathlib import Path
from typing import Any

import yaml

from typso.validator import TypeDescriptor, descriptor


def load_schema(content: str, format: str = "yaml") -> dict[str, TypeDescriptor]:
    """Load a schema from string content.

    Args:
        content: Schema content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        Mapping of field name to type descriptor

    Raises:
        ValueError: If format is not supported, parsing fails or a descriptor is invalid
    """
    if format == "yaml":
        try:
            raw = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    elif format == "json":
        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")

    return _build_schema(raw)


def load_schema_from_file(path: str | Path) -> dict[str, TypeDescriptor]:
    """Load a schema from a YAML or JSON file.

    Args:
        path: Path to the schema file

    Returns:
        Mapping of field name to type descriptor

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    # Determine format from extension
    if path.suffix.lower() in [".yaml", ".yml"]:
        format = "yaml"
    elif path.suffix.lower() == ".json":
        format = "json"
    else:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")

    content = path.read_text(encoding="utf-8")
    return load_schema(content, format=format)


def _build_schema(raw: Any) -> dict[str, TypeDescriptor]:
    if not isinstance(raw, dict):
        raise ValueError(f"Schema must be a mapping of field names, got {type(raw).__name__}")

    schema = {}
    for name, spec in raw.items():
        try:
            schema[str(name)] = descriptor(spec)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid descriptor for field '{name}': {e}") from e
    return schema

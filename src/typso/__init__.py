"""typso - runtime type validation for Python values.

## Modules

### Validation (`typso.validator`)
Kind checks, tagged type descriptors, object schemas and the `Validator`
policy layer.

### Adapters (`typso.adapters`)
Prop checking for UI components and request body validation for Starlette.

### Decorators (`typso.decorators`)
`enforce_types` for functions and YAML/JSON schema loading.
"""

from typso.validator import (
    MISSING,
    ValidationConfig,
    ValidationError,
    Validator,
    check_array,
    check_boolean,
    check_custom,
    check_date,
    check_field,
    check_instance,
    check_length,
    check_not_nan,
    check_object,
    check_range,
    check_type,
    check_union,
    normalize,
    set_mode,
    set_warn_only,
)
from typso.version import PACKAGE_VERSION as __version__

__all__ = [
    "MISSING",
    "ValidationConfig",
    "ValidationError",
    "Validator",
    "check_array",
    "check_boolean",
    "check_custom",
    "check_date",
    "check_field",
    "check_instance",
    "check_length",
    "check_not_nan",
    "check_object",
    "check_range",
    "check_type",
    "check_union",
    "normalize",
    "set_mode",
    "set_warn_only",
]

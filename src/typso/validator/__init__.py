"""typso validator - runtime type checks driven by declarative schemas.

## Key Components

### Descriptors
- `primitive`, `instance_of`, `array_of`, `predicate`, `one_of`: named
  constructors for the tagged `TypeDescriptor` variants
- `descriptor`: coerces shorthand shapes (`"string"`, `("array", "number")`,
  classes, callables, mappings) into descriptors

### Validation
- `Validator`: runs checks under one immutable `ValidationConfig`
- `ValidationError`: raised for failures unless the validator is warn-only
- `CheckResult`: collected failures from `Validator.evaluate*`

### Process default
Module-level `check_*` functions use a process-wide default validator,
configured with `set_mode` and `set_warn_only`.

## Quick Examples

```python
from typso.validator import check_object, set_warn_only

schema = {"name": "string", "age": "number", "tags": ("array", "string")}

check_object({"name": "Alice", "age": 25, "tags": []}, schema)   # passes
check_object({"name": "Alice", "age": "25"}, schema)
# ValidationError: Field 'age': TypeKindMismatch: Expected number but received string

set_warn_only(True)
check_object({"name": "Alice", "age": "25"}, schema)             # logged, returns
```
"""

from ._types import (
    ArrayOf,
    Instance,
    Predicate,
    Primitive,
    TypeDescriptor,
    UnionOf,
    array_of,
    default_of,
    descriptor,
    instance_of,
    one_of,
    predicate,
    primitive,
    with_default,
)
from .config import ValidationConfig
from .core import (
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
    get_validator,
    reset_validator,
    set_mode,
    set_warn_only,
)
from .errors import CheckResult, Failure, FailureKind, ValidationError
from .kinds import MISSING, PRIMITIVE_KINDS, kind_of
from .normalize import normalize

__all__ = [
    # Descriptors
    "TypeDescriptor",
    "Primitive",
    "Instance",
    "ArrayOf",
    "Predicate",
    "UnionOf",
    "primitive",
    "instance_of",
    "array_of",
    "predicate",
    "one_of",
    "descriptor",
    "default_of",
    "with_default",
    # Kinds
    "MISSING",
    "PRIMITIVE_KINDS",
    "kind_of",
    # Errors
    "Failure",
    "FailureKind",
    "CheckResult",
    "ValidationError",
    # Core
    "ValidationConfig",
    "Validator",
    "get_validator",
    "reset_validator",
    "set_mode",
    "set_warn_only",
    "check_type",
    "check_instance",
    "check_array",
    "check_union",
    "check_object",
    "check_date",
    "check_boolean",
    "check_custom",
    "check_not_nan",
    "check_range",
    "check_length",
    "check_field",
    # Utilities
    "normalize",
]

"""Host framework adapters.

- `check_props` / `with_prop_types`: prop checking for UI components
- `validate_request_body`: JSON body validation for Starlette endpoints
"""

from .props import OPTIONAL, check_props, with_prop_types
from .web import validate_request_body

__all__ = [
    "OPTIONAL",
    "check_props",
    "with_prop_types",
    "validate_request_body",
]

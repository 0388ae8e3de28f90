"""Base Pydantic model for typso.

Example:
    >>> from typso.models import TypsoBaseModel
    >>>
    >>> class Settings(TypsoBaseModel):
    ...     enabled: bool = True
    >>>
    >>> Settings().model_dump()
    {'enabled': True}
"""

from pydantic import BaseModel, ConfigDict


class TypsoBaseModel(BaseModel):
    """Base model for all typso Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable so they can be shared freely
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

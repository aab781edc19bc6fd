"""Write notifications published by the record store."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

R = TypeVar("R")


class BeforeWriteEvent(BaseModel, Generic[R]):
    """Published immediately before a record is inserted or replaced."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    previous_value: R | None = None
    new_value: R


class AfterWriteEvent(BaseModel, Generic[R]):
    """Published immediately after a record is inserted or replaced."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: R

"""
Work-day options validation.

Uses Pydantic for the options accepted by ``add_work_days``.
"""

from datetime import date, datetime
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


DANISH_HOLIDAYS = "danish"


class WorkDayOptions(BaseModel):
    """Options for adding work days."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    holidays: Union[None, Literal["danish"], List[Union[datetime, date]]] = Field(
        default=None,
        description=(
            "Days to skip: none, an explicit list of dates, "
            "or 'danish' for the Danish holidays of the start year"
        ),
    )

    @field_validator("holidays", mode="before")
    @classmethod
    def normalize_table_name(cls, v: Any) -> Any:
        """Accept the table name in any case and with surrounding blanks."""
        if isinstance(v, str):
            v = v.strip().lower()
            if not v:
                return None
        return v

    @property
    def uses_default_table(self) -> bool:
        return self.holidays == DANISH_HOLIDAYS

    @property
    def explicit_holidays(self) -> Optional[List[Union[datetime, date]]]:
        """The explicit holiday list, or None when no list was given."""
        if isinstance(self.holidays, list):
            return self.holidays
        return None

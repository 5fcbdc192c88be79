"""Pydantic request/response models for the API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core import QueryOptions, ResolutionResult, TimeRange


class TimeRangeModel(BaseModel):
    """Absolute range plus the relative expressions it came from."""

    model_config = ConfigDict(populate_by_name=True)

    start: datetime = Field(alias="from")
    end: datetime = Field(alias="to")
    raw_from: str = ""
    raw_to: str = ""

    def to_time_range(self) -> TimeRange:
        return TimeRange(
            start=self.start,
            end=self.end,
            raw_from=self.raw_from,
            raw_to=self.raw_to,
        )


class ResolveRequest(BaseModel):
    """Resolve a template for one time range and interval."""

    template: str
    time_range: TimeRangeModel
    interval: str = ""
    default_time_column: str | None = Field(default=None, min_length=1)
    select_all_value: str | None = Field(default=None, min_length=1)

    def to_options(self) -> QueryOptions:
        return QueryOptions(
            time_range=self.time_range.to_time_range(),
            interval=self.interval,
        )


class ResolveResponse(BaseModel):
    """Resolved query text and its URI-encoded form."""

    raw_query: str
    uri_string: str

    @classmethod
    def from_result(cls, result: ResolutionResult) -> "ResolveResponse":
        return cls(raw_query=result.raw_query, uri_string=result.uri_string)


class MacroModel(BaseModel):
    """A registered macro as listed by /macros."""

    name: str
    token: str
    category: str
    description: str = ""
    example: str | None = None
    takes_arguments: bool = False


class MacroListResponse(BaseModel):
    total_macros: int
    categories: list[str]
    macros: list[MacroModel]

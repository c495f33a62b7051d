from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_TRUE_FLAGS = {"true", "t", "yes", "y", "1", "on"}


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_FLAGS


class ParamConfig(BaseModel):
    sources: list[str] = Field(default_factory=list, alias="from")
    value: Any = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("sources", mode="before")
    @classmethod
    def split_sources(cls, v: Any) -> Any:
        # 'from: "get:a post:a"' is accepted as well as a list
        if v is None:
            return []
        if isinstance(v, str):
            return v.split()
        return v


class CommandConfig(BaseModel):
    name: str | None = None
    invoke: str | None = None
    group: str | None = None
    cache: bool = False
    params: dict[str, ParamConfig] = Field(default_factory=dict)

    @field_validator("cache", mode="before")
    @classmethod
    def parse_cache(cls, v: Any) -> bool:
        return _parse_flag(v)

    @field_validator("params", mode="before")
    @classmethod
    def wrap_scalar_params(cls, v: Any) -> Any:
        # A bare scalar is shorthand for a static default
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        return {
            name: p if isinstance(p, dict) else {"value": p}
            for name, p in v.items()
        }

    @model_validator(mode="after")
    def check_invoke_or_group(self) -> "CommandConfig":
        if self.group is not None and self.invoke is not None:
            raise ValueError("A command entry takes either 'invoke' or 'group', not both")
        return self


class RequestConfig(BaseModel):
    name: str
    cache: bool = False
    commands: list[CommandConfig] = Field(default_factory=list)

    @field_validator("cache", mode="before")
    @classmethod
    def parse_cache(cls, v: Any) -> bool:
        return _parse_flag(v)


class GroupConfig(BaseModel):
    name: str
    commands: list[CommandConfig] = Field(default_factory=list)


class FacilityConfig(BaseModel):
    name: str
    invoke: str
    params: dict[str, Any] = Field(default_factory=dict)


class CommandsConfig(BaseModel):
    requests: list[RequestConfig] = Field(default_factory=list)
    groups: list[GroupConfig] = Field(default_factory=list)
    loggers: list[FacilityConfig] = Field(default_factory=list)
    caches: list[FacilityConfig] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_unique_names(self) -> "CommandsConfig":
        for label, items in (
            ("request", self.requests),
            ("group", self.groups),
            ("logger", self.loggers),
            ("cache", self.caches),
        ):
            seen: set[str] = set()
            for item in items:
                if item.name in seen:
                    raise ValueError(f"Duplicate {label} name: {item.name}")
                seen.add(item.name)
        return self

"""Pydantic models for the search provider config file."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


# ---------------------------------------------------------------------------
# Browser setting
# ---------------------------------------------------------------------------


class SystemBrowser(BaseModel):
    """Open the URL with the platform's default opener."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["system"] = "system"


class ConfigDefaultBrowser(BaseModel):
    """Defer to ``Config.default.browser``; falls back to the system opener."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["config"] = "config"


class ExplicitBrowser(BaseModel):
    """Open the URL with a specific browser binary or application name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    path: str


BrowserSetting = Annotated[
    Union[SystemBrowser, ConfigDefaultBrowser, ExplicitBrowser],
    Field(discriminator="kind"),
]

# Shorthand keywords accepted for ``providers[].browser`` in config.yaml
SYSTEM_KEYWORD = "system"
CONFIG_KEYWORD = "config"


def _browser_json_schema(schema: dict[str, Any]) -> None:
    """Advertise the string / null shorthand next to the tagged long form."""
    long_form = {key: schema.pop(key) for key in ("oneOf", "anyOf", "discriminator", "$ref") if key in schema}
    schema["anyOf"] = [{"type": "string"}, {"type": "null"}, long_form]


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class Provider(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The name of the provider")
    aliases: list[str] | None = Field(default=None, description="The name aliases")
    url: str = Field(description="The URL template of the provider, e.g. https://example.com/?q={{ word | urlencode }}")
    browser: BrowserSetting = Field(
        default_factory=ConfigDefaultBrowser,
        description="Browser used for this provider: 'system', 'config' or a browser path",
        json_schema_extra=_browser_json_schema,
    )

    @field_validator("browser", mode="before")
    @classmethod
    def _expand_browser_shorthand(cls, value: Any) -> Any:
        if value is None or value == CONFIG_KEYWORD:
            return {"kind": "config"}
        if value == SYSTEM_KEYWORD:
            return {"kind": "system"}
        if isinstance(value, str):
            return {"kind": "path", "path": value}
        return value

    @field_serializer("browser")
    def _collapse_browser_shorthand(self, browser: Any) -> str | None:
        if isinstance(browser, ExplicitBrowser):
            return browser.path
        if isinstance(browser, SystemBrowser):
            return SYSTEM_KEYWORD
        return None

    def alias_list(self) -> list[str]:
        return list(self.aliases or [])


class DefaultConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    browser: str | None = Field(
        default=None, description="Browser used by providers that defer to the config default"
    )


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    providers: list[Provider] = Field(default_factory=list)
    default: DefaultConfig | None = None

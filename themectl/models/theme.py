"""Theme model and the validator that builds it from a settings tree."""

from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ParseThemeError
from .style import StyleModifier, ThemeItem, ThemeSettings

ModelT = TypeVar("ModelT", bound=BaseModel)


class Theme(BaseModel):
    """A validated syntax-highlighting theme."""

    name: Optional[str] = None
    author: Optional[str] = None
    uuid: Optional[str] = None
    settings: ThemeSettings = Field(default_factory=ThemeSettings)
    scopes: List[ThemeItem] = []

    @classmethod
    def parse_settings(cls, settings: Any) -> "Theme":
        """Build a theme from a generic settings tree.

        The tree must be a dictionary with a ``settings`` list. The first
        entry of that list holds the default settings; every following entry
        is a rule with a ``scope`` string and a ``settings`` dictionary.

        Args:
            settings: Settings tree produced by the settings-document parser

        Returns:
            Validated theme

        Raises:
            ParseThemeError: If the tree is not a usable theme
        """
        if not isinstance(settings, Mapping):
            raise ParseThemeError(
                f"Theme document must be a dictionary, got {type(settings).__name__}"
            )

        metadata = {}
        for key in ("name", "author", "uuid"):
            value = settings.get(key)
            if value is not None and not isinstance(value, str):
                raise ParseThemeError(f"Field '{key}' must be a string", field=key)
            metadata[key] = value

        items = settings.get("settings")
        if items is None:
            raise ParseThemeError("Theme has no 'settings' array", field="settings")
        if not isinstance(items, list):
            raise ParseThemeError("Field 'settings' must be an array", field="settings")
        if not items:
            raise ParseThemeError("Theme 'settings' array has no default settings entry", field="settings")

        defaults = items[0]
        if not isinstance(defaults, Mapping) or not isinstance(defaults.get("settings"), Mapping):
            raise ParseThemeError(
                "First 'settings' entry must contain a 'settings' dictionary",
                field="settings[0]",
            )
        theme_settings = _build(ThemeSettings, defaults["settings"], "settings[0].settings")

        scopes = [_parse_item(item, index) for index, item in enumerate(items[1:], start=1)]

        return cls(settings=theme_settings, scopes=scopes, **metadata)

    class Config:
        """Pydantic configuration."""
        frozen = True


def _parse_item(item: Any, index: int) -> ThemeItem:
    location = f"settings[{index}]"
    if not isinstance(item, Mapping):
        raise ParseThemeError(f"Style rule {location} must be a dictionary", field=location)

    scope = item.get("scope")
    if scope is None:
        raise ParseThemeError(f"Style rule {location} has no 'scope'", field=f"{location}.scope")
    if not isinstance(scope, str):
        raise ParseThemeError(f"Scope of {location} must be a string", field=f"{location}.scope")

    style = item.get("settings")
    if not isinstance(style, Mapping):
        raise ParseThemeError(
            f"Style rule {location} must contain a 'settings' dictionary",
            field=f"{location}.settings",
        )

    name = item.get("name")
    if name is not None and not isinstance(name, str):
        raise ParseThemeError(f"Name of {location} must be a string", field=f"{location}.name")

    modifier = _build(StyleModifier, style, f"{location}.settings")
    try:
        return ThemeItem(scope=scope, name=name, style=modifier)
    except PydanticValidationError as e:
        raise _convert(e, location) from e


def _build(model: Type[ModelT], data: Mapping[str, Any], location: str) -> ModelT:
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as e:
        raise _convert(e, location) from e


def _convert(error: PydanticValidationError, location: str) -> ParseThemeError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in (location, *first.get("loc", ())))
    message = first.get("msg", "invalid value")
    return ParseThemeError(
        f"{field}: {message}",
        field=field,
        details={"errors": error.error_count()},
    )

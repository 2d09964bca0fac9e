"""Style models for themes: font styles, scoped rules and default settings."""

from enum import Flag
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from .color import Color


class FontStyle(Flag):
    """Font style flags applied by a style rule."""

    NONE = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4

    @classmethod
    def parse(cls, value: str) -> "FontStyle":
        """Parse a whitespace separated ``fontStyle`` string.

        Words match case-insensitively. ``normal`` and ``regular`` are
        accepted and add no flags.
        """
        style = cls.NONE
        for word in value.split():
            lowered = word.lower()
            if lowered == "bold":
                style |= cls.BOLD
            elif lowered == "italic":
                style |= cls.ITALIC
            elif lowered == "underline":
                style |= cls.UNDERLINE
            elif lowered in ("normal", "regular"):
                continue
            else:
                raise ValueError(f"Unknown font style {word!r}")
        return style

    def describe(self) -> str:
        """Space separated flag names, lowercase, or an empty string."""
        names = [flag.name.lower() for flag in (FontStyle.BOLD, FontStyle.ITALIC, FontStyle.UNDERLINE) if flag in self]
        return " ".join(names)


class StyleModifier(BaseModel):
    """Colors and font style a rule applies on top of the defaults."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    font_style: Optional[FontStyle] = Field(None, alias="fontStyle")

    @field_validator("font_style", mode="before")
    @classmethod
    def parse_font_style(cls, v: Any) -> Any:
        """Parse the ``fontStyle`` string into flags."""
        if isinstance(v, str):
            return FontStyle.parse(v)
        return v

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True


class ThemeItem(BaseModel):
    """A style rule bound to a scope selector."""

    scope: str = Field(..., description="Scope selector the rule applies to")
    name: Optional[str] = None
    style: StyleModifier

    @field_validator("scope")
    @classmethod
    def validate_scope(cls, v: str) -> str:
        """Reject blank scope selectors."""
        if not v.strip():
            raise ValueError("Scope selector cannot be empty")
        return v.strip()

    @property
    def selectors(self) -> List[str]:
        """Comma separated selectors of the scope, trimmed."""
        return [part.strip() for part in self.scope.split(",") if part.strip()]

    class Config:
        """Pydantic configuration."""
        frozen = True


class ThemeSettings(BaseModel):
    """Default style settings of a theme (the unscoped first entry)."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    caret: Optional[Color] = None
    line_highlight: Optional[Color] = Field(None, alias="lineHighlight")
    misspelling: Optional[Color] = None
    minimap_border: Optional[Color] = Field(None, alias="minimapBorder")
    accent: Optional[Color] = None
    popup_css: Optional[str] = Field(None, alias="popupCss")
    phantom_css: Optional[str] = Field(None, alias="phantomCss")

    bracket_contents_foreground: Optional[Color] = Field(None, alias="bracketContentsForeground")
    brackets_foreground: Optional[Color] = Field(None, alias="bracketsForeground")
    brackets_background: Optional[Color] = Field(None, alias="bracketsBackground")
    tags_foreground: Optional[Color] = Field(None, alias="tagsForeground")

    highlight: Optional[Color] = None
    find_highlight: Optional[Color] = Field(None, alias="findHighlight")
    find_highlight_foreground: Optional[Color] = Field(None, alias="findHighlightForeground")

    gutter: Optional[Color] = None
    gutter_foreground: Optional[Color] = Field(None, alias="gutterForeground")

    selection: Optional[Color] = None
    selection_foreground: Optional[Color] = Field(None, alias="selectionForeground")
    selection_border: Optional[Color] = Field(None, alias="selectionBorder")
    inactive_selection: Optional[Color] = Field(None, alias="inactiveSelection")
    inactive_selection_foreground: Optional[Color] = Field(None, alias="inactiveSelectionForeground")

    guide: Optional[Color] = None
    active_guide: Optional[Color] = Field(None, alias="activeGuide")
    stack_guide: Optional[Color] = Field(None, alias="stackGuide")
    shadow: Optional[Color] = None

    def colors(self) -> dict:
        """Map of field name to hex string for every color that is set."""
        return {
            name: value.to_hex()
            for name, value in self
            if isinstance(value, Color)
        }

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True

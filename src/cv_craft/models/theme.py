"""Theme configuration models.

A theme is pure configuration data edited in the web UI. Field names are
snake_case in Python and camelCase on the wire, so the editor's JSON
validates as-is. Every field has a default, so ``ThemeConfig()`` and
``ThemeConfig.model_validate({})`` are both complete themes.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ThemeModel(BaseModel):
    """Base for theme sub-models: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Colors


class TextColors(ThemeModel):
    primary: str = "#0f172a"
    secondary: str = "#475569"
    muted: str = "#94a3b8"


class LinkColors(ThemeModel):
    default: str = "#2563eb"
    hover: str = "#1d4ed8"


class ThemeColors(ThemeModel):
    """Semantic color pairs: each base color has an ``on_`` color for text on it."""

    primary: str = "#2563eb"
    on_primary: str = "#ffffff"
    secondary: str = "#64748b"
    on_secondary: str = "#ffffff"
    tertiary: str | None = "#f59e0b"
    on_tertiary: str | None = "#ffffff"
    background: str = "#ffffff"
    muted: str | None = "#f1f5f9"
    on_muted: str | None = "#334155"
    text: TextColors = Field(default_factory=TextColors)
    borders: str = "#e2e8f0"
    links: LinkColors = Field(default_factory=LinkColors)
    custom1: str = "#8b5cf6"
    on_custom1: str = "#ffffff"
    custom2: str = "#ec4899"
    on_custom2: str = "#ffffff"
    custom3: str = "#14b8a6"
    on_custom3: str = "#ffffff"
    custom4: str = "#f97316"
    on_custom4: str = "#ffffff"
    # Deprecated alias of tertiary, still present in older saved themes
    accent: str | None = None


# ---------------------------------------------------------------------------
# Typography


class FontFamilies(ThemeModel):
    heading: str = "Inter, system-ui, -apple-system, sans-serif"
    body: str = 'Georgia, "Times New Roman", serif'
    monospace: str = '"Fira Code", "Courier New", monospace'


class FontScale(ThemeModel):
    """Multipliers applied to ``base_font_size``."""

    h1: float = 3.2
    h2: float = 2.4
    h3: float = 2.0
    body: float = 1.6
    small: float = 1.4
    tiny: float = 1.2
    tag: float = 1.3
    date_line: float = 1.3
    inline_code: float = 1.2


class FontWeights(ThemeModel):
    heading: int = 700
    subheading: int = 600
    body: int = 400
    bold: int = 600


class LineHeights(ThemeModel):
    heading: float = 1.2
    body: float = 1.6
    compact: float = 1.4


class Typography(ThemeModel):
    base_font_size: str = "10pt"
    font_family: FontFamilies = Field(default_factory=FontFamilies)
    font_scale: FontScale = Field(default_factory=FontScale)
    font_weight: FontWeights = Field(default_factory=FontWeights)
    line_height: LineHeights = Field(default_factory=LineHeights)


# ---------------------------------------------------------------------------
# Layout


class PageMargin(ThemeModel):
    """Margins; bare numbers are millimetres."""

    top: str | float | None = "20mm"
    right: str | float | None = "20mm"
    bottom: str | float | None = "20mm"
    left: str | float | None = "20mm"


class Layout(ThemeModel):
    template_type: str = "two-column"
    sidebar_width: str = "84mm"
    page_width: str = "210mm"
    page_margin: PageMargin = Field(default_factory=PageMargin)
    section_spacing: str = "24px"
    paragraph_spacing: str = "12px"


# ---------------------------------------------------------------------------
# Components

ShadowSize = Literal["none", "sm", "md", "lg", "xl"]


class TextStyle(ThemeModel):
    """Styling shared by the name, section headers and entry titles.

    Unset fields fall back to values derived from the typography scale.
    ``color_key`` names a semantic color (``primary``, ``text-secondary``, ...)
    and wins over a literal ``color``.
    """

    font_size: str | None = None
    font_weight: int | None = None
    font_style: str | None = None
    color: str | None = None
    color_key: str | None = None
    color_opacity: float = 1.0
    letter_spacing: str | None = None
    text_transform: str | None = None
    line_height: float | None = None
    alignment: str | None = None
    margin_top: str | None = None
    margin_bottom: str | None = None
    padding: str | None = None
    border_bottom: str | None = None
    shadow: ShadowSize = "none"


class ContactInfoStyle(ThemeModel):
    layout: Literal["inline", "vertical", "horizontal"] = "inline"
    icon_size: str = "16px"
    icon_color: str | None = "#64748b"
    icon_color_key: str | None = None
    text_color: str | None = "#475569"
    spacing: str = "12px"
    font_size: str | None = None
    show_icons: bool = True


class ProfilePhotoStyle(ThemeModel):
    size: str = "160px"
    border_radius: str = "50%"
    border_width: str = "3px"
    border_style: str = "solid"
    border_color: str = "#e2e8f0"
    position: str = "center"
    margin_bottom: str = "16px"
    opacity: float = 1.0
    shadow: ShadowSize = "none"
    filter: Literal["none", "grayscale", "sepia"] = "none"


class TagStyle(ThemeModel):
    """Skill tag presentation: rounded ``pill`` tags or flat ``inline`` text."""

    style: Literal["pill", "inline"] = "pill"
    separator: str = "·"
    color_pair: str = "tertiary"
    background_opacity: float = 0.2
    text_opacity: float = 1.0
    border_radius: str = "4px"
    padding: str = "4px 8px"
    font_size: str | None = None
    font_weight: int = 500
    gap: str = "8px"


class DateLineStyle(ThemeModel):
    color: str | None = "#64748b"
    color_key: str | None = None
    color_opacity: float = 1.0
    font_style: str = "italic"
    font_size: str | None = None
    font_weight: int = 400
    alignment: str = "right"


class ListLevel(ThemeModel):
    color: str | None = None
    indent: str | None = None


class ListStyle(ThemeModel):
    level1: ListLevel = Field(default_factory=lambda: ListLevel(color="#2563eb", indent="20px"))
    level2: ListLevel = Field(default_factory=lambda: ListLevel(color="#64748b", indent="40px"))
    level3: ListLevel = Field(default_factory=lambda: ListLevel(color="#94a3b8", indent="60px"))


class LinkStyle(ThemeModel):
    color: str | None = "#2563eb"
    color_key: str | None = None
    hover_color: str | None = "#1d4ed8"
    hover_color_key: str | None = None
    font_weight: int = 500


class Components(ThemeModel):
    name: TextStyle = Field(
        default_factory=lambda: TextStyle(
            font_weight=700,
            color="#0f172a",
            letter_spacing="-0.02em",
            text_transform="uppercase",
            alignment="left",
            margin_bottom="8px",
        )
    )
    contact_info: ContactInfoStyle = Field(default_factory=ContactInfoStyle)
    profile_photo: ProfilePhotoStyle = Field(default_factory=ProfilePhotoStyle)
    section_header: TextStyle = Field(
        default_factory=lambda: TextStyle(
            font_weight=700,
            color="#0f172a",
            text_transform="uppercase",
            letter_spacing="0.05em",
            border_bottom="2px solid #2563eb",
            padding="0 0 4px 0",
            margin_top="24px",
            margin_bottom="12px",
        )
    )
    job_title: TextStyle = Field(
        default_factory=lambda: TextStyle(
            font_weight=600, color="#0f172a", font_style="normal", margin_bottom="4px"
        )
    )
    organization_name: TextStyle = Field(
        default_factory=lambda: TextStyle(font_weight=500, color="#475569", font_style="normal")
    )
    tags: TagStyle = Field(default_factory=TagStyle)
    date_line: DateLineStyle = Field(default_factory=DateLineStyle)
    list: ListStyle = Field(default_factory=ListStyle)
    links: LinkStyle = Field(default_factory=LinkStyle)


# ---------------------------------------------------------------------------
# PDF / advanced


class PdfOptions(ThemeModel):
    """Output page format. Only A4 portrait is produced."""

    page_size: Literal["A4"] = "A4"
    orientation: Literal["portrait"] = "portrait"


class AdvancedOptions(ThemeModel):
    custom_css: str = ""
    animations: bool = False
    shadows: bool = False


class ThemeConfig(ThemeModel):
    """Complete, versioned theme configuration."""

    version: str = "1"
    colors: ThemeColors = Field(default_factory=ThemeColors)
    typography: Typography = Field(default_factory=Typography)
    layout: Layout = Field(default_factory=Layout)
    components: Components = Field(default_factory=Components)
    pdf: PdfOptions = Field(default_factory=PdfOptions)
    advanced: AdvancedOptions = Field(default_factory=AdvancedOptions)

    @classmethod
    def from_json(cls, raw: str) -> "ThemeConfig":
        """Build a theme from the editor's JSON."""
        return cls.model_validate_json(raw)

"""Profile photo block."""

from cv_craft.rendering.escape import escape_html


def render_photo(
    src: str | None,
    alt: str = "Profile",
    class_name: str = "",
    placeholder_text: str = "Photo",
) -> str:
    """Render a photo, or a placeholder box when there is no source."""
    classes = "photo-container"
    if class_name:
        classes += f" {escape_html(class_name)}"
    if src:
        return (
            f'<div class="{classes}"><img src="{escape_html(src)}" class="profile-photo" '
            f'alt="{escape_html(alt)}" /></div>'
        )
    return (
        f'<div class="{classes}"><div class="profile-photo-placeholder">'
        f"{escape_html(placeholder_text)}</div></div>"
    )


def render_profile_photo(
    data_uri: str | None,
    frontmatter_photo: str | None,
    placeholder: bool = True,
) -> str:
    """Render the profile photo, preferring an inlined data URI over a URL.

    Args:
        data_uri: Base64 data URI resolved from asset storage.
        frontmatter_photo: Photo URL from the CV frontmatter.
        placeholder: Render a placeholder when neither source is set; the PDF
            sidebar passes False and gets an empty string instead.
    """
    src = data_uri or frontmatter_photo or None
    if not src and not placeholder:
        return ""
    return render_photo(src)

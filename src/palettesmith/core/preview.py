"""
Standalone HTML preview of a palette applied to sample UI components.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import InvalidArgumentError
from .exporters import export_css
from .ir import BasePalette

_COMPONENTS: dict[str, str] = {
    "button": """
    <div>
      <h3 style="color: rgb(var(--color-text));">Buttons</h3>
      <button style="background: rgb(var(--color-button-primary)); color: rgb(var(--color-button-primary-text)); padding: 0.5rem 1rem; border: none; border-radius: 6px; margin: 0.25rem;">Primary</button>
      <button style="background: rgb(var(--color-button-secondary)); color: rgb(var(--color-button-secondary-text)); padding: 0.5rem 1rem; border: 1px solid rgb(var(--color-border)); border-radius: 6px; margin: 0.25rem;">Secondary</button>
    </div>""",
    "card": """
    <div>
      <h3 style="color: rgb(var(--color-text));">Cards</h3>
      <div style="background: rgb(var(--color-card)); border: 1px solid rgb(var(--color-border)); border-radius: 8px; padding: 1.5rem; margin: 0.5rem 0;">
        <h4 style="color: rgb(var(--color-text)); margin: 0 0 0.5rem 0;">Card Title</h4>
        <p style="color: rgb(var(--color-text-muted)); margin: 0;">Card content with muted text</p>
      </div>
    </div>""",
    "form": """
    <div>
      <h3 style="color: rgb(var(--color-text));">Form Elements</h3>
      <input type="text" placeholder="Input field" style="background: rgb(var(--color-card)); border: 1px solid rgb(var(--color-border)); padding: 0.5rem; border-radius: 4px; color: rgb(var(--color-text)); margin: 0.25rem; display: block; width: 200px;">
      <input type="text" placeholder="Focused state" style="background: rgb(var(--color-card)); border: 2px solid rgb(var(--color-border-focus)); padding: 0.5rem; border-radius: 4px; color: rgb(var(--color-text)); margin: 0.25rem; display: block; width: 200px;">
    </div>""",
    "navigation": """
    <div>
      <h3 style="color: rgb(var(--color-text));">Navigation</h3>
      <nav style="background: rgb(var(--color-card)); border: 1px solid rgb(var(--color-border)); border-radius: 8px; padding: 1rem;">
        <a href="#" style="color: rgb(var(--color-accent)); text-decoration: none; margin-right: 1rem;">Home</a>
        <a href="#" style="color: rgb(var(--color-text)); text-decoration: none; margin-right: 1rem;">About</a>
        <a href="#" style="color: rgb(var(--color-text-muted)); text-decoration: none;">Contact</a>
      </nav>
    </div>""",
}

PREVIEW_COMPONENTS: tuple[str, ...] = (*_COMPONENTS, "all")


def generate_preview_html(
    palette: BasePalette, components: Iterable[str] = ("button", "card")
) -> str:
    """Render an HTML page showing ``components`` styled with the palette.

    ``"all"`` (or an empty selection) renders every component.
    """
    selected = list(components)
    unknown = [name for name in selected if name not in PREVIEW_COMPONENTS]
    if unknown:
        raise InvalidArgumentError(
            f"Unknown preview component(s): {', '.join(unknown)}. "
            f"Valid: {', '.join(PREVIEW_COMPONENTS)}"
        )

    if not selected or "all" in selected:
        selected = list(_COMPONENTS)

    body = "\n".join(_COMPONENTS[name] for name in selected)
    css = export_css(palette)

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Color Palette Preview</title>
  <style>
{css}

body {{ font-family: -apple-system, sans-serif; padding: 2rem; background: rgb(var(--color-background)); }}
.preview-grid {{ display: grid; gap: 2rem; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); }}
  </style>
</head>
<body>
  <h1 style="color: rgb(var(--color-text));">Color Palette Preview</h1>
  <div class="preview-grid">
{body}
  </div>
</body>
</html>"""

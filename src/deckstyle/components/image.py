"""Image renderer."""

from __future__ import annotations

from .html import class_attr, escape_html, id_attr
from .models import Image


def render_image(component: Image) -> str:
    fit = component.fit_mode
    figure_class = class_attr("image-container", f"image-fit-{fit}", component.class_name)
    loading = ' loading="lazy"' if component.lazy_load else ""

    caption_html = ""
    if component.caption:
        caption_html = (
            f'\n  <figcaption class="image-caption">{escape_html(component.caption)}</figcaption>'
        )

    src = escape_html(component.src)
    alt = escape_html(component.alt)

    return f"""<figure class="{figure_class}"{id_attr(component.id)}>
  <img src="{src}" alt="{alt}" class="image image-{fit}"{loading} />{caption_html}
</figure>"""

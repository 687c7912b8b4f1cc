"""
Code block renderer.

Features:
- Language class for client-side highlighters (highlight.js, Prism, ...)
- Optional line numbers
- Optional line highlighting, independent of line numbers
- Optional caption
- Optional copy button
"""

from __future__ import annotations

from .html import class_attr, escape_html, id_attr
from .models import CodeBlock

_COPY_ICON = (
    '<svg width="16" height="16" viewBox="0 0 16 16" fill="none" '
    'xmlns="http://www.w3.org/2000/svg">'
    '<rect x="4" y="4" width="8" height="8" rx="1" stroke="currentColor" stroke-width="1.5"/>'
    '<path d="M12 4V2.5C12 1.67157 11.3284 1 10.5 1H2.5C1.67157 1 1 1.67157 1 2.5V10.5'
    'C1 11.3284 1.67157 12 2.5 12H4" stroke="currentColor" stroke-width="1.5"/>'
    "</svg>"
)


def render_code_block(component: CodeBlock) -> str:
    """
    Render a CodeBlock to HTML.

    Code is split strictly on ``\\n`` after escaping. Line numbers are
    1-based; each valid index in ``highlight_lines`` marks exactly one line.
    """
    escaped_code = escape_html(component.code)
    lines = escaped_code.split("\n")
    language = escape_html(component.language)

    highlighted = {n for n in component.highlight_lines if 1 <= n <= len(lines)}
    wrap_lines = component.show_line_numbers or bool(highlighted)

    line_numbers_html = ""
    if component.show_line_numbers:
        numbers = "\n".join(
            f'<span class="line-number">{index}</span>' for index in range(1, len(lines) + 1)
        )
        line_numbers_html = f'<div class="line-numbers" aria-hidden="true">\n{numbers}\n</div>'

    if wrap_lines:
        rendered: list[str] = []
        for index, line in enumerate(lines, start=1):
            line_class = "code-line highlighted-line" if index in highlighted else "code-line"
            rendered.append(f'<span class="{line_class}" data-line="{index}">{line}</span>')
        code_html = "\n".join(rendered)
    else:
        code_html = escaped_code

    copy_button_html = ""
    if component.show_copy_button:
        copy_button_html = (
            f'<button class="copy-button" aria-label="Copy code" data-code="{escaped_code}"'
            ' onclick="navigator.clipboard.writeText(this.dataset.code)">\n'
            f"  {_COPY_ICON}\n"
            "</button>"
        )

    caption_html = ""
    if component.caption:
        caption = escape_html(component.caption)
        caption_html = f'<figcaption class="code-caption">{caption}</figcaption>'

    pre_class = class_attr(
        "code-block", "with-line-numbers" if component.show_line_numbers else None
    )
    container_class = class_attr("code-block-container", component.class_name)

    return f"""<figure class="{container_class}"{id_attr(component.id)} data-language="{language}">
  <div class="code-block-header">
    <span class="code-language">{language}</span>
    {copy_button_html}
  </div>
  <div class="code-block-content">
    {line_numbers_html}
    <pre class="{pre_class}"><code class="language-{language}">{code_html}</code></pre>
  </div>
  {caption_html}
</figure>"""

"""Server-rendered viewer page."""

from __future__ import annotations

from html import escape

from docx2sections.output_formatter import render_sections_html
from docx2sections.session import DocumentSession

PAGE_TITLE = "Article Parser"
UPLOAD_LABEL = "Bir .docx uzantlı dosya seçin"
SELECTED_FILE_LABEL = "Seçilen dosya:"
PROCESSING_LABEL = "Makale işleniyor..."
STRUCTURE_HEADING = "Makale Yapısı:"
NO_TITLES_MESSAGE = "No titles found in the document."

_STYLE = """
body{font-family:system-ui,sans-serif;background:#f3f4f6;margin:0;padding:2rem 1rem}
main{max-width:56rem;margin:0 auto;background:#fff;padding:1.5rem;border-radius:.5rem}
.toast{border:1px solid #dc2626;background:#fef2f2;color:#991b1b;padding:.75rem 1rem;margin-bottom:1rem;border-radius:.375rem}
.structure{border:1px solid #e5e7eb;border-radius:.5rem}
.structure h2{margin:0;padding:1rem;border-bottom:1px solid #e5e7eb}
.section{border-bottom:1px solid #e5e7eb}
.section:last-child{border-bottom:0}
.section-title{cursor:pointer;padding:.5rem 1rem;font-weight:600}
.section-body{margin-left:1.5rem;padding:1rem;background:#f9fafb}
.section-children{margin-top:1rem}
#processing{display:none;text-align:center;color:#4b5563}
"""

_SCRIPT = """
document.getElementById('file-upload').addEventListener('change', function () {
  if (this.files.length) {
    var form = this.form;
    document.querySelectorAll('details[open]').forEach(function (node) {
      var input = document.createElement('input');
      input.type = 'hidden';
      input.name = 'open_section';
      input.value = node.dataset.sectionKey;
      form.appendChild(input);
    });
    document.getElementById('processing').style.display = 'block';
    form.submit();
  }
});
"""


def render_page(session: DocumentSession | None = None) -> str:
    """Render the full viewer page for a session's current state."""
    session = session or DocumentSession()
    body: list[str] = [
        f'<h1>{PAGE_TITLE} <small>(only .docx)</small></h1>',
        *_render_notifications(session),
        '<form method="post" action="/" enctype="multipart/form-data">'
        f'<label for="file-upload">{UPLOAD_LABEL}</label> '
        '<input type="file" name="file" id="file-upload" accept=".docx">'
        '<noscript><button type="submit">OK</button></noscript>'
        "</form>",
    ]
    if session.filename:
        body.append(f"<p><b>{SELECTED_FILE_LABEL}</b> {escape(session.filename)}</p>")
    body.append(f'<p id="processing">{PROCESSING_LABEL}</p>')

    if session.sections:
        body.append(
            '<div class="structure">'
            f"<h2>{STRUCTURE_HEADING}</h2>"
            f"{render_sections_html(session.sections, session.open_keys)}"
            "</div>"
        )
    elif session.filename and not session.notifications:
        body.append(f"<p>{NO_TITLES_MESSAGE}</p>")

    return (
        "<!DOCTYPE html>"
        '<html lang="tr"><head><meta charset="utf-8">'
        f"<title>{PAGE_TITLE}</title><style>{_STYLE}</style></head>"
        f"<body><main>{''.join(body)}</main><script>{_SCRIPT}</script></body></html>"
    )


def _render_notifications(session: DocumentSession) -> list[str]:
    return [
        f'<div class="toast {escape(note.variant)}" role="alert">'
        f"<strong>{escape(note.title)}</strong> {escape(note.description)}</div>"
        for note in session.notifications
    ]

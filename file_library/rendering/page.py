import logging
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, TemplateError
from markupsafe import Markup

from .. import config
from ..browser.format import format_timestamp, human_size, icon_for
from ..browser.state import ViewState, visible_records
from ..exceptions import OutputWriteError, RenderError
from ..models import FileRecord
from .assets import BROWSER_SCRIPT, STYLESHEET

_jinja_env = Environment(autoescape=True)
_jinja_env.filters['human_size'] = human_size
_jinja_env.filters['timestamp'] = format_timestamp
_jinja_env.filters['icon'] = icon_for

PAGE_TEMPLATE = _jinja_env.from_string("""\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>{{ title }}</title>
  <style>{{ stylesheet }}</style>
</head>
<body>
  <header>
    <h1>{{ title }}</h1>
    <p class="lead">Files in the root of this folder. Click to open them in the embedded viewer (when supported) or in a new tab.</p>
  </header>

  <main class="wrap">
    <div class="toolbar" role="region" aria-label="Filter tools">
      <input id="q" type="search" placeholder="Filter by name or extension…" aria-label="Filter">
      <select id="kind" aria-label="Kind">
        <option value="">All kinds</option>
        {% for kind, label in kinds %}<option value="{{ kind }}">{{ label }}</option>
        {% endfor %}
      </select>
      <select id="sort" aria-label="Sort">
        {% for key, label in sorts %}<option value="{{ key }}"{% if key == default_sort %} selected{% endif %}>{{ label }}</option>
        {% endfor %}
      </select>
      <button id="clear" type="button">Reset</button>
    </div>

    <section>
      <div id="grid" class="grid" aria-live="polite"{% if not cards %} hidden{% endif %}>
        {% for f in cards %}<article class="card">
          <h3>{{ f.preview_kind|icon }} {{ f.name }}</h3>
          <div class="meta"><span class="chip">{{ f.extension or 'no extension' }}</span> • {{ f.size_bytes|human_size }} • {{ f.modified_ms|timestamp }}</div>
          <div class="actions"><a class="btn" href="{{ f.name|urlencode }}" target="_blank" rel="noopener">{{ 'Open' if f.preview_kind == 'link' else 'View' }}</a></div>
        </article>
        {% endfor %}
      </div>
      <div id="empty" class="empty"{% if cards %} hidden{% endif %}>No files found.</div>
    </section>

    <section aria-label="Viewer" class="viewer" id="viewer">
      <div class="empty">Select a file to preview it here.</div>
    </section>
  </main>

  <footer>
    Generated by <code>file-library</code> with {{ count }} file(s). Static only, no backend.
  </footer>

  <script id="file-data" type="application/json">{{ payload|tojson }}</script>
  <script id="browser-config" type="application/json">{{ browser_config|tojson }}</script>
  <script>{{ script }}</script>
</body>
</html>
""")


class PageRenderer:
    """Renders the ordered records into one self-contained HTML document."""

    def render(self, records: Iterable[FileRecord]) -> str:
        records = list(records)
        try:
            return PAGE_TEMPLATE.render(
                title=config.PAGE_TITLE,
                stylesheet=Markup(STYLESHEET),
                script=Markup(BROWSER_SCRIPT),
                kinds=[(k, config.KIND_LABELS[k]) for k in config.PREVIEW_KINDS],
                sorts=[(k, config.SORT_LABELS[k]) for k in config.SORT_KEYS],
                default_sort=config.DEFAULT_SORT,
                cards=visible_records(records, ViewState()),
                count=len(records),
                payload=[r.to_payload() for r in records],
                browser_config=self._browser_config(),
            )
        except (TemplateError, UnicodeError) as e:
            raise RenderError(f"Failed to render page: {e}") from e

    def _browser_config(self) -> dict:
        """Tables the page script shares with config.py."""
        return {
            'defaultSort': config.DEFAULT_SORT,
            'sizeUnits': list(config.SIZE_UNITS),
            'icons': dict(config.KIND_ICONS),
            'fallbackIcon': config.FALLBACK_ICON,
            'htmlSandbox': config.HTML_SANDBOX,
        }


def write_document(html: str, root: Path) -> Path:
    """Writes html to root/index.html, replacing any previous version."""
    out_path = root / config.OUTPUT_FILENAME
    try:
        out_path.write_text(html, encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise OutputWriteError(f"Cannot write {out_path}: {e}") from e
    logging.debug(f"Wrote {len(html)} characters to {out_path}")
    return out_path

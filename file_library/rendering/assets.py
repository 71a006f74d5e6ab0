"""
Stylesheet and browser script inlined into every generated page.

Both are fixed; per-run data reaches the script through the two JSON blocks
`file-data` (the records) and `browser-config` (tables shared with config.py).
"""

STYLESHEET = """
:root {
  --bg: #0b0c10;
  --panel: #111318;
  --ink: #eaeef2;
  --muted: #9aa4af;
  --accent: #7cc5ff;
  --border: #252a33;
  --field: #0d0f14;
}
* { box-sizing: border-box }
body {
  margin: 0;
  font-family: system-ui, -apple-system, "Segoe UI", Roboto, Ubuntu, Cantarell, "Noto Sans", Arial, sans-serif;
  background: var(--bg);
  color: var(--ink);
  line-height: 1.5;
}
header { padding: 2rem 1rem 1rem; max-width: 1000px; margin: 0 auto; }
h1 { margin: 0 0 .25rem 0; font-size: 1.75rem; }
p.lead { margin: 0; color: var(--muted); }
a { color: var(--accent); }
.wrap {
  max-width: 1000px;
  margin: 1rem auto 2rem;
  padding: 0 1rem;
  display: grid;
  grid-template-columns: 1fr;
  gap: 1rem;
}
.toolbar {
  display: flex; gap: .75rem; flex-wrap: wrap;
  background: var(--panel); border: 1px solid var(--border);
  padding: .75rem; border-radius: .75rem;
}
.toolbar input[type="search"] {
  flex: 1; min-width: 12rem;
  background: var(--field); color: var(--ink);
  border: 1px solid var(--border); border-radius: .5rem;
  padding: .6rem .8rem;
}
.toolbar select, .toolbar button, button.btn {
  background: var(--field); color: var(--ink);
  border: 1px solid var(--border); border-radius: .5rem;
  padding: .6rem .8rem; cursor: pointer; font: inherit;
}
.grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
  gap: .75rem;
}
.card {
  background: var(--panel); border: 1px solid var(--border);
  border-radius: .75rem; padding: .9rem;
  display: flex; flex-direction: column; gap: .5rem;
}
.card h3 { margin: 0; font-size: 1rem; word-break: break-word; }
.meta { color: var(--muted); font-size: .875rem; }
.chip {
  display: inline-block; font-size: .75rem; padding: .15rem .5rem;
  border: 1px solid var(--border); border-radius: .5rem; color: var(--muted);
}
.actions { display: flex; gap: .5rem; }
a.btn {
  display: inline-block; text-decoration: none; color: var(--ink);
  border: 1px solid var(--border); padding: .5rem .7rem; border-radius: .5rem;
}
.viewer {
  background: var(--panel); border: 1px solid var(--border);
  border-radius: .75rem; min-height: 60vh; padding: .5rem;
}
.viewer > iframe, .viewer > video, .viewer > img, .viewer > pre {
  width: 100%; height: calc(60vh - 1rem); border: 0;
}
.viewer > audio { width: 100%; }
.viewer > img { object-fit: contain; }
.viewer > pre { margin: 0; overflow: auto; white-space: pre-wrap; word-break: break-word; }
.empty { color: var(--muted); padding: 1rem; text-align: center; }
footer { color: var(--muted); font-size: .875rem; text-align: center; padding: 2rem 1rem 3rem; }
@media (prefers-reduced-motion: no-preference) {
  .card { transition: transform .12s ease }
  .card:hover { transform: translateY(-2px) }
}
"""

BROWSER_SCRIPT = r"""
(function () {
  'use strict';

  function readJson(id) {
    return JSON.parse(document.getElementById(id).textContent);
  }

  const FILES = Object.freeze(readJson('file-data').map(Object.freeze));
  const CONFIG = Object.freeze(readJson('browser-config'));
  const ALL = '';

  // --- State ---
  // Every user input produces a new frozen snapshot; nothing else is mutable.

  function initialState() {
    return Object.freeze({
      query: '',
      kind: ALL,
      sort: CONFIG.defaultSort,
      previewName: null,
      previewRequest: 0,
    });
  }

  function nextState(state, patch) {
    return Object.freeze(Object.assign({}, state, patch));
  }

  // --- Filter & sort ---

  function matchesQuery(f, query) {
    const term = (query || '').trim().toLowerCase();
    if (!term) return true;
    return f.name.toLowerCase().includes(term) || f.ext.toLowerCase().includes(term);
  }

  function matchesKind(f, kind) {
    return kind === ALL || f.preview === kind;
  }

  const COMPARATORS = {
    'mtime-asc': (a, b) => a.mtimeMs - b.mtimeMs,
    'mtime-desc': (a, b) => b.mtimeMs - a.mtimeMs,
    'name-asc': (a, b) => a.name.localeCompare(b.name),
    'name-desc': (a, b) => b.name.localeCompare(a.name),
    'size-asc': (a, b) => a.size - b.size,
    'size-desc': (a, b) => b.size - a.size,
  };

  function compareBy(sortKey) {
    return COMPARATORS[sortKey] || COMPARATORS[CONFIG.defaultSort];
  }

  function view(files, state) {
    return files
      .filter((f) => matchesQuery(f, state.query) && matchesKind(f, state.kind))
      .sort(compareBy(state.sort));
  }

  // --- Formatting ---

  function humanSize(bytes) {
    const units = CONFIG.sizeUnits;
    let i = 0, n = bytes;
    while (n >= 1024 && i < units.length - 1) { n /= 1024; i++; }
    if (i === 0) return bytes + ' ' + units[0];
    return (Math.round(n * 10) / 10).toFixed(1) + ' ' + units[i];
  }

  function formatDate(ms) {
    return new Date(ms).toLocaleString();
  }

  function iconFor(kind) {
    return CONFIG.icons[kind] || CONFIG.fallbackIcon;
  }

  function fileUrl(name) {
    return encodeURIComponent(name);
  }

  // --- DOM ---

  function el(tag, props, children) {
    const node = document.createElement(tag);
    Object.assign(node, props || {});
    for (const child of children || []) {
      node.append(child);
    }
    return node;
  }

  function openLink(f, label) {
    return el('a', {
      href: fileUrl(f.name),
      className: 'btn',
      target: '_blank',
      rel: 'noopener',
      textContent: label,
    });
  }

  const grid = document.getElementById('grid');
  const empty = document.getElementById('empty');
  const viewer = document.getElementById('viewer');
  const controls = {
    query: document.getElementById('q'),
    kind: document.getElementById('kind'),
    sort: document.getElementById('sort'),
    clear: document.getElementById('clear'),
  };

  let state = initialState();

  function card(f) {
    const meta = el('div', { className: 'meta' }, [
      el('span', { className: 'chip', textContent: f.ext || 'no extension' }),
      ' • ' + humanSize(f.size) + ' • ' + formatDate(f.mtimeMs),
    ]);
    const show = el('button', { type: 'button', className: 'btn', textContent: 'Show in panel' });
    show.addEventListener('click', () => {
      update({ previewName: f.name, previewRequest: state.previewRequest + 1 });
    });
    return el('article', { className: 'card' }, [
      el('h3', { textContent: iconFor(f.preview) + ' ' + f.name }),
      meta,
      el('div', { className: 'actions' }, [
        openLink(f, f.preview === 'link' ? 'Open' : 'View'),
        show,
      ]),
    ]);
  }

  function renderList(list) {
    const frag = document.createDocumentFragment();
    for (const f of list) frag.append(card(f));
    grid.replaceChildren(frag);
    grid.hidden = list.length === 0;
    empty.hidden = list.length !== 0;
  }

  function unavailable(message, f) {
    return el('div', { className: 'empty' }, [message + ' ', openLink(f, 'Open in new tab')]);
  }

  function previewElement(f) {
    const url = fileUrl(f.name);
    switch (f.preview) {
      case 'pdf':
        return el('iframe', { src: url + '#toolbar=1', title: 'PDF viewer' });
      case 'image':
        return el('img', { src: url, alt: f.name });
      case 'video':
        return el('video', { src: url, controls: true });
      case 'audio':
        return el('audio', { src: url, controls: true });
      case 'html': {
        const frame = el('iframe', { title: 'HTML page' });
        frame.setAttribute('sandbox', CONFIG.htmlSandbox);
        frame.src = url;
        return frame;
      }
      case 'text':
        return el('pre', { textContent: 'Loading…' });
      default:
        return unavailable('No inline preview for this file type.', f);
    }
  }

  function renderPreview(f, token) {
    if (!f) {
      viewer.replaceChildren(el('div', { className: 'empty', textContent: 'Select a file to preview it here.' }));
      return;
    }
    const node = previewElement(f);
    viewer.replaceChildren(node);
    if (f.preview !== 'text') return;

    // Results of superseded requests are dropped
    fetch(fileUrl(f.name))
      .then((r) => {
        if (!r.ok) throw new Error('HTTP ' + r.status);
        return r.text();
      })
      .then((txt) => {
        if (token === state.previewRequest) node.textContent = txt;
      })
      .catch(() => {
        if (token === state.previewRequest) {
          viewer.replaceChildren(unavailable('Preview unavailable for this file.', f));
        }
      });
  }

  function syncControls(s) {
    controls.query.value = s.query;
    controls.kind.value = s.kind;
    controls.sort.value = s.sort;
  }

  function update(patch) {
    const prev = state;
    state = nextState(state, patch);
    syncControls(state);
    renderList(view(FILES, state));
    if (state.previewRequest !== prev.previewRequest) {
      renderPreview(FILES.find((f) => f.name === state.previewName), state.previewRequest);
    }
  }

  controls.query.addEventListener('input', () => update({ query: controls.query.value }));
  controls.kind.addEventListener('change', () => update({ kind: controls.kind.value }));
  controls.sort.addEventListener('change', () => update({ sort: controls.sort.value }));
  controls.clear.addEventListener('click', () => {
    update({ query: '', kind: ALL, sort: CONFIG.defaultSort });
  });

  update({});
})();
"""

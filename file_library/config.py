"""
Configuration constants for the file library generator.
"""
from types import MappingProxyType

# --- Output ---
OUTPUT_FILENAME = "index.html"
PAGE_TITLE = "File Library"

# --- Scan Exclusions ---
# Generator-owned artifacts and OS junk. Matched against the exact name.
IGNORED_NAMES = frozenset({
    OUTPUT_FILENAME,
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
})
HIDDEN_PREFIX = "."

# --- Preview Kinds ---
PDF_EXTS = frozenset({'pdf'})
IMAGE_EXTS = frozenset({'png', 'jpg', 'jpeg', 'webp', 'gif', 'svg'})
VIDEO_EXTS = frozenset({'mp4', 'webm'})
AUDIO_EXTS = frozenset({'mp3', 'wav', 'ogg'})
HTML_EXTS = frozenset({'html', 'htm'})
TEXT_EXTS = frozenset({'txt', 'md'})

DEFAULT_PREVIEW_KIND = 'link'

# Extension (no dot, lower-case) to preview kind
_ext_to_preview = {}
for ext in PDF_EXTS: _ext_to_preview[ext] = 'pdf'
for ext in IMAGE_EXTS: _ext_to_preview[ext] = 'image'
for ext in VIDEO_EXTS: _ext_to_preview[ext] = 'video'
for ext in AUDIO_EXTS: _ext_to_preview[ext] = 'audio'
for ext in HTML_EXTS: _ext_to_preview[ext] = 'html'
for ext in TEXT_EXTS: _ext_to_preview[ext] = 'text'
EXT_TO_PREVIEW = MappingProxyType(_ext_to_preview)
del _ext_to_preview

# Display order of the kind filter
PREVIEW_KINDS = ('pdf', 'image', 'video', 'audio', 'html', 'text', 'link')

KIND_LABELS = MappingProxyType({
    'pdf': 'PDF',
    'image': 'Images',
    'video': 'Videos',
    'audio': 'Audio',
    'html': 'HTML',
    'text': 'Text',
    'link': 'Other',
})

KIND_ICONS = MappingProxyType({
    'pdf': '📄',
    'image': '🖼️',
    'video': '🎞️',
    'audio': '🎧',
    'html': '🕸️',
    'text': '📝',
    'link': '🔗',
})
FALLBACK_ICON = '📦'

# --- Sorting ---
SORT_KEYS = ('mtime-desc', 'mtime-asc', 'name-asc', 'name-desc', 'size-desc', 'size-asc')
DEFAULT_SORT = 'mtime-desc'

SORT_LABELS = MappingProxyType({
    'mtime-desc': 'Newest first',
    'mtime-asc': 'Oldest first',
    'name-asc': 'Name A→Z',
    'name-desc': 'Name Z→A',
    'size-desc': 'Largest first',
    'size-asc': 'Smallest first',
})

# --- Display ---
SIZE_UNITS = ('B', 'KB', 'MB', 'GB', 'TB')
DATE_FORMAT = "%Y-%m-%d %H:%M"

# Capabilities granted to embedded HTML previews
HTML_SANDBOX = "allow-scripts allow-forms allow-popups allow-same-origin"

# --- Logging ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

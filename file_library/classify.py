from typing import Mapping

from . import config


def extension_of(name: str) -> str:
    """Lower-cased text after the last '.', or '' when there is none."""
    _, dot, ext = name.rpartition('.')
    if not dot:
        return ''
    return ext.lower()


def extension_to_preview_kind(extension: str,
                              table: Mapping[str, str] = config.EXT_TO_PREVIEW) -> str:
    """Maps an extension to its preview kind. Unknown extensions become 'link'."""
    return table.get(extension.lower(), config.DEFAULT_PREVIEW_KIND)

"""Document rendering."""

from hoarder_sync.rendering.assets import AssetEmbeds, AssetResolver
from hoarder_sync.rendering.escaping import escape_markdown_path, escape_tag, escape_yaml
from hoarder_sync.rendering.markdown import MarkdownRenderer

__all__ = [
    "AssetEmbeds",
    "AssetResolver",
    "MarkdownRenderer",
    "escape_markdown_path",
    "escape_tag",
    "escape_yaml",
]

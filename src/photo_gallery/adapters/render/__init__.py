"""Gallery renderers."""

from photo_gallery.adapters.render.html_renderer import HtmlGalleryRenderer

__all__ = ["HtmlGalleryRenderer"]

"""File-format codecs and the extension resolver."""

from .base import FormatResolver, default_resolver
from .binary_codec import binary_codec
from .html_codec import html_codec
from .text_codec import text_codec

__all__ = ["FormatResolver", "default_resolver", "binary_codec", "html_codec", "text_codec"]

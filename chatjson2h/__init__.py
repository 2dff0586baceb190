"""
Chat message code generator

Turns a JSON chat message catalog (languages + per-language translations)
into a C++ header of constexpr string tables.
"""

from .errors import SchemaError
from .options import Configuration, load_options, read_options
from .catalog import LanguageTable, Message, TranslationEntry, parse_catalog, read_catalog
from .emitter import emit_file, emit_message, generate

__version__ = "1.0.0"

__all__ = [
    "SchemaError",
    "Configuration",
    "load_options",
    "read_options",
    "LanguageTable",
    "Message",
    "TranslationEntry",
    "parse_catalog",
    "read_catalog",
    "emit_file",
    "emit_message",
    "generate",
]

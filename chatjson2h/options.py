import json
from dataclasses import dataclass, field, replace

from .errors import SchemaError, kind_of
from .fileio import read_file_sequentially


@dataclass(frozen=True)
class Configuration:
    # JSON field: "pch"
    # Precompiled header, e.g. "PROJECT_PCH" -> #include PROJECT_PCH
    precompiled_header: str = ""

    # JSON field: "namespace"
    # e.g. "chat_txt" -> namespace chat_txt { ... }
    namespace_name: str = ""

    # JSON field: "languageEnum"
    # e.g. "game::Languages" -> result[static_cast<int>(game::Languages::English)] = ...
    language_enum_name: str = ""

    # JSON field: "headerFiles"
    # Included after the precompiled header, in order: "MyHeaderFile.h" -> #include "MyHeaderFile.h"
    header_files: tuple = field(default_factory=tuple)

    # JSON field: "chatMessageType"
    # Accepted and checked, but not applied to any emitted declaration.
    message_value_type_hint: str = "constexpr auto"

    # JSON field: "useCompileMacro"
    # Wrap every literal in FMT_COMPILE(...). Should be enabled for C++20.
    use_compiled_format_wrapper: bool = True

    # JSON field: "usePragmaOnce"
    use_include_guard_pragma: bool = True

    def to_document(self):
        """Options document that loads back into this configuration."""
        document = {}
        for key, _, attribute in OPTION_FIELDS:
            value = getattr(self, attribute)
            document[key] = list(value) if isinstance(value, tuple) else value
        return document


def _string_items(values):
    # non-string entries are skipped, not rejected
    return tuple(value for value in values if isinstance(value, str))


# (JSON key, expected JSON kind, Configuration attribute)
OPTION_FIELDS = (
    ("useCompileMacro", "boolean", "use_compiled_format_wrapper"),
    ("usePragmaOnce",   "boolean", "use_include_guard_pragma"),
    ("languageEnum",    "string",  "language_enum_name"),
    ("pch",             "string",  "precompiled_header"),
    ("namespace",       "string",  "namespace_name"),
    ("chatMessageType", "string",  "message_value_type_hint"),
    ("headerFiles",     "array",   "header_files"),
)

_CONVERTERS = {
    "array": _string_items,
}


def load_options(document):
    """
    Build a Configuration from an already parsed options document.

    Unknown keys are ignored and absent keys keep their defaults. A known
    key holding the wrong JSON kind raises SchemaError.
    """
    if not isinstance(document, dict):
        raise SchemaError("Could not parse options file - value is not an object.")

    values = {}
    for key, kind, attribute in OPTION_FIELDS:
        if key not in document:
            continue
        value = document[key]
        if kind_of(value) != kind:
            raise SchemaError(f"Could not parse options file - \"{key}\" value is not a {kind}.")
        convert = _CONVERTERS.get(kind)
        values[attribute] = convert(value) if convert else value

    return replace(Configuration(), **values)


def parse_options(text):
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Could not parse options file - {e}") from e
    return load_options(document)


def read_options(stream):
    return parse_options(read_file_sequentially(stream))

# Every generated message type derives from this empty tag type.
MESSAGE_BASE_DECLARATION = "namespace internal {\nstruct ChatMessageBase {};\n}\n\n"

MESSAGE_TEMPLATE = (
    "// \"{comment}\"\n"
    "class \n\t: public internal::ChatMessageBase\n"
    "{{\n"
    "\tstatic constexpr auto generateContent = []\n\t{{\n"
    "\t\tstd::array<std::string_view, {size}> result;\n"
    "{assignments}"
    "\t\treturn result;\n"
    "\t}};\n"
    "public:\n"
    "\tstatic constexpr auto text = generateContent();\n"
    "}} inline constexpr {unique_name};\n\n"
)

COMPILED_FORMAT_OPEN = "FMT_COMPILE("
COMPILED_FORMAT_CLOSE = ")"


def index_expression(config, languages, position, language_id):
    if not config.language_enum_name:
        return str(position)
    return f"static_cast<int>({config.language_enum_name}::{languages.name_of(language_id)})"


def literal_expression(config, processed):
    # `processed` is embedded as-is, the catalog owns its escaping
    literal = f"\"{processed}\""
    if config.use_compiled_format_wrapper:
        literal = COMPILED_FORMAT_OPEN + literal + COMPILED_FORMAT_CLOSE
    return literal


def emit_message(config, languages, message):
    """
    Generate the class block for one message.

    One `result[...] = ...;` line per translation, in content order. The
    array size is the number of translations, whatever the indices are.
    Only the first translation's comment is used.
    """
    comment = None
    assignments = ""
    for position, translation in enumerate(message.translations.values()):
        if comment is None:
            comment = translation.comment
        index = index_expression(config, languages, position, translation.language_id)
        assignments += f"\t\tresult[{index}] = {literal_expression(config, translation.processed)};\n"

    return MESSAGE_TEMPLATE.format(
        comment=comment or "",
        size=len(message.translations),
        assignments=assignments,
        unique_name=message.unique_name,
    )


def emit_preamble(config):
    output = ""
    if config.use_include_guard_pragma:
        output += "#pragma once\n\n"
    if config.precompiled_header:
        output += f"#include {config.precompiled_header}\n"
    for header_file in config.header_files:
        output += f"#include {header_file}\n"
    output += "\n\n"
    if config.namespace_name:
        output += f"namespace {config.namespace_name}\n{{\n\n"
    return output


def emit_postamble(config):
    if config.namespace_name:
        return "\n}\n"
    return ""


def emit_file(config, languages, messages):
    """Assemble the whole generated header from the message blocks."""
    body = "".join(emit_message(config, languages, message) for message in messages)
    return emit_preamble(config) + MESSAGE_BASE_DECLARATION + body + emit_postamble(config)


def generate(config, catalog):
    return emit_file(config, catalog.languages, catalog.messages)

import json
from collections import namedtuple

from .errors import SchemaError, kind_of
from .fileio import read_file_sequentially


class LanguageTable(dict):
    """Language id -> language display name, from the "languages" array."""

    def name_of(self, language_id):
        # Undeclared ids resolve to an empty name, which yields `Enum::`
        # in the generated index.  That is left for the C++ compiler to report.
        return self.get(language_id, "")


TranslationEntry = namedtuple("TranslationEntry", ["language_id", "comment", "processed"])

# translations: dict of language id -> TranslationEntry, in document order
Message = namedtuple("Message", ["unique_name", "translations"])

Catalog = namedtuple("Catalog", ["languages", "messages"])


def _required_string(obj, key, where):
    if key not in obj:
        raise SchemaError(f"Could not parse JSON file - {where} has no \"{key}\" field.")
    value = obj[key]
    if not isinstance(value, str):
        raise SchemaError(f"Could not parse JSON file - {where} \"{key}\" is a {kind_of(value)}, not a string.")
    return value


def _required_array(document, key):
    value = document.get(key)
    if not isinstance(value, list):
        raise SchemaError(f"Could not parse JSON file - \"{key}\" field not exists or is not an array.")
    return value


def read_languages(entries):
    languages = LanguageTable()
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SchemaError("Could not parse JSON file - language content is not an object.")
        where = f"languages[{index}]"
        language_id = _required_string(entry, "id", where)
        # later duplicates of an id replace earlier ones
        languages[language_id] = _required_string(entry, "name", where)
    return languages


def read_translation(language_id, entry, where, first):
    # only the first translation's comment is ever used, later ones may omit it
    if not isinstance(entry, dict):
        raise SchemaError(f"Could not parse JSON file - {where} is a {kind_of(entry)}, not an object.")
    if first:
        comment = _required_string(entry, "comment", where)
    else:
        comment = entry.get("comment", "")
        if not isinstance(comment, str):
            comment = ""
    return TranslationEntry(language_id, comment, _required_string(entry, "processed", where))


def read_message(index, entry):
    """
    Turn one "chatMessages" entry into a Message.

    Returns None for entries that are silently dropped: non-objects and
    objects missing "uniqueName" or "content". A null "content" gives a
    message without translations.
    """
    if not isinstance(entry, dict):
        return None
    if "uniqueName" not in entry or "content" not in entry:
        return None

    where = f"chatMessages[{index}]"
    unique_name = _required_string(entry, "uniqueName", where)
    content = entry["content"]
    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise SchemaError(f"Could not parse JSON file - {where} \"content\" is a {kind_of(content)}, not an object.")

    translations = {}
    for language_id, value in content.items():
        translations[language_id] = read_translation(language_id, value, f"{where}.content.{language_id}",
                                                     first=not translations)
    return Message(unique_name, translations)


def iter_messages(entries):
    for index, entry in enumerate(entries):
        message = read_message(index, entry)
        if message is not None:
            yield message


def parse_catalog(document):
    """
    Validate the message document and return a Catalog.

    The language table is built first since enum-qualified indices need it.
    Messages keep document order, and so do the translations of each
    message (json.loads preserves object key order).
    """
    if not isinstance(document, dict):
        raise SchemaError("Could not parse JSON file - value is not an object.")

    languages = read_languages(_required_array(document, "languages"))
    messages = list(iter_messages(_required_array(document, "chatMessages")))
    return Catalog(languages, messages)


def load_catalog(text):
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Could not parse JSON file - {e}") from e
    return parse_catalog(document)


def read_catalog(stream):
    return load_catalog(read_file_sequentially(stream))

"""
Generate a C++ header of chat message string tables from a JSON catalog.

Usage:
    chatjson2h options.json messages.json ChatMessages.hpp
    python3 -m chatjson2h options.json messages.json ChatMessages.hpp

Missing arguments and files that cannot be opened are reported on stdout
and the exit status stays 0, as build steps calling this tool expect.
Malformed documents raise SchemaError and abort without writing anything.
"""

import sys
from contextlib import ExitStack

from .catalog import read_catalog
from .emitter import generate
from .fileio import open_for_reading, open_for_writing, write_output
from .options import read_options


def _open(stack, opener, file_path, message):
    try:
        return stack.enter_context(opener(file_path))
    except OSError:
        print(message.format(file_path))
        return None


def main(argv=None):
    args = list(sys.argv if argv is None else argv)
    program = args[0] if args else "chatjson2h"

    if len(args) < 4:
        print(f"Usage: {program} [options file name] [input file name] [output file name]")
        return 0

    with ExitStack() as stack:
        options_file = _open(stack, open_for_reading, args[1],
                             "Error: could not open \"{}\" options file for reading.")
        if options_file is None:
            return 0
        input_file = _open(stack, open_for_reading, args[2],
                           "Error: could not open \"{}\" input file for reading.")
        if input_file is None:
            return 0
        output_file = _open(stack, open_for_writing, args[3],
                            "Error: could not open \"{}\" file for writing.")
        if output_file is None:
            return 0

        config = read_options(options_file)
        catalog = read_catalog(input_file)
        write_output(output_file, generate(config, catalog))
    return 0


if __name__ == "__main__":
    sys.exit(main())

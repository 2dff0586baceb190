# Input and output files are opened with surrogateescape so that bytes which
# are not valid UTF-8 pass through to the generated header untouched.
ENCODING = "utf8"
ERRORS = "surrogateescape"


def open_for_reading(file_path):
    return open(file_path, 'r', encoding=ENCODING, errors=ERRORS)


def open_for_writing(file_path):
    return open(file_path, 'w', encoding=ENCODING, errors=ERRORS, newline='')


def read_file_sequentially(stream):
    """Read a text stream to the end and return its whole contents."""
    content = stream.read()
    if isinstance(content, bytes):
        content = content.decode(ENCODING, errors=ERRORS)
    return content


def write_output(stream, text):
    stream.write(text)
    stream.flush()

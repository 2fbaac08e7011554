"""Last-resort text recovery over the whole raw buffer.

Used only when no located stream produced text. The buffer, binary regions
included, is read as Latin-1 and every ``BT`` ... ``ET`` text object is run
through the content interpreter.
"""

import re

from sidesreader.pdf.cleanup import clean_text
from sidesreader.pdf.interpreter import interpret_content

# BT/ET must stand alone so words such as "OBTAIN" or "GET" are not delimiters
_TEXT_OBJECT_RE = re.compile(
    r"(?<![A-Za-z0-9])BT(?![A-Za-z0-9])\s*(.*?)\s*(?<![A-Za-z0-9])ET(?![A-Za-z0-9])",
    re.DOTALL,
)


def extract_raw_text(buffer: bytes) -> str:
    text = buffer.decode("latin-1")
    parts = []
    for match in _TEXT_OBJECT_RE.finditer(text):
        extracted = interpret_content(match.group(1))
        if extracted.strip():
            parts.append(extracted)
    return clean_text("\n".join(parts))

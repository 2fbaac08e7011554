import re

_LINE_ENDING_RE = re.compile(r"\r\n?")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_SPACE_RUN_RE = re.compile(r"[ \t]+")


def clean_text(text: str) -> str:
    """Normalize line endings and collapse redundant whitespace.

    Keeps paragraph breaks (a single blank line) and trims every line.
    Running it on already-cleaned text is a no-op.
    """
    text = _LINE_ENDING_RE.sub("\n", text)
    text = _SPACE_RUN_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    # whitespace-only lines are empty by now and join the blank run
    return _BLANK_RUN_RE.sub("\n\n", text).strip()

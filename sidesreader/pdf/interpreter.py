"""Recovers text lines from a decoded PDF content stream.

A single forward lexer walks the content string, collecting operands on a
stack until an operator keyword consumes them. Only the text-showing
operators (``Tj``, ``TJ``) and the positioning operators used as line-break
signals (``Td``, ``Tm``) produce operations; everything else is skipped.
"""

import re

from sidesreader.pdf.models import TextOperation

_WHITESPACE = frozenset("\x00\t\n\x0c\r ")
_DELIMITERS = frozenset("()<>[]{}/%")

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")
_INLINE_IMAGE_END_RE = re.compile(r"\sEI(?=\s|$)")
_ESCAPE_RE = re.compile(r"\\(?:([0-7]{1,3})|(\r\n|\r|\n)|(.))", re.DOTALL)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}


class _Literal:
    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text


Operand = float | _Literal | list | None


def decode_pdf_string(raw: str) -> str:
    """Resolve the escape sequences of a PDF literal string body.

    Handles ``\\n``, ``\\r``, ``\\t``, ``\\b``, ``\\f``, ``\\\\``, ``\\(``,
    ``\\)``, octal codes ``\\ddd`` and backslash line continuations. Any
    other escaped character stands for itself.
    """
    return _ESCAPE_RE.sub(_replace_escape, raw)


def _replace_escape(match: re.Match[str]) -> str:
    octal, newline, char = match.groups()
    if octal is not None:
        return chr(int(octal, 8) & 0xFF)
    if newline is not None:
        return ""
    return _SIMPLE_ESCAPES.get(char, char)


class _ContentScanner:
    def __init__(self, content: str) -> None:
        self._content = content
        self._pos = 0
        self._operands: list[Operand] = []
        self._arrays: list[list[Operand]] = []
        self._operations: list[TextOperation] = []

    def scan(self) -> list[TextOperation]:
        content = self._content
        end = len(content)
        while self._pos < end:
            ch = content[self._pos]
            if ch in _WHITESPACE:
                self._pos += 1
            elif ch == "%":
                self._skip_comment()
            elif ch == "(":
                if not self._read_literal():
                    break
            elif ch == "[":
                self._arrays.append([])
                self._pos += 1
            elif ch == "]":
                if self._arrays:
                    self._push(self._arrays.pop())
                self._pos += 1
            elif ch == "<":
                self._read_angle()
            elif ch in ">{}":
                self._pos += 1
            elif ch == "/":
                self._pos += 1
                self._read_token()
                self._push(None)
            else:
                start = self._pos
                token = self._read_token()
                if not token:
                    self._pos += 1
                elif _NUMBER_RE.fullmatch(token):
                    self._push(float(token))
                elif token in ("true", "false", "null"):
                    self._push(None)
                else:
                    self._apply(token, start)
        return self._operations

    def _push(self, value: Operand) -> None:
        if self._arrays:
            self._arrays[-1].append(value)
        else:
            self._operands.append(value)

    def _read_token(self) -> str:
        content = self._content
        start = self._pos
        while (
            self._pos < len(content)
            and content[self._pos] not in _WHITESPACE
            and content[self._pos] not in _DELIMITERS
        ):
            self._pos += 1
        return content[start : self._pos]

    def _skip_comment(self) -> None:
        content = self._content
        while self._pos < len(content) and content[self._pos] not in "\r\n":
            self._pos += 1

    def _read_literal(self) -> bool:
        """Consume a balanced ``( ... )`` string. False if it never closes."""
        content = self._content
        depth = 0
        i = self._pos
        while i < len(content):
            ch = content[i]
            if ch == "\\":
                i += 2
                continue
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    raw = content[self._pos + 1 : i]
                    self._push(_Literal(decode_pdf_string(raw)))
                    self._pos = i + 1
                    return True
            i += 1
        self._pos = len(content)
        return False

    def _read_angle(self) -> None:
        # ``<<`` opens a dictionary, ``<...>`` is a hex string (not decoded)
        if self._content.startswith("<<", self._pos):
            self._pos += 2
            return
        close = self._content.find(">", self._pos + 1)
        self._pos = len(self._content) if close == -1 else close + 1
        self._push(None)

    def _apply(self, operator: str, index: int) -> None:
        operands = self._operands
        if self._arrays:
            # operators never appear inside arrays; drop the unclosed ones
            self._arrays.clear()

        if operator == "Tj":
            if operands and isinstance(operands[-1], _Literal):
                self._emit(TextOperation("tj", index, text=operands[-1].text))
        elif operator == "TJ":
            if operands and isinstance(operands[-1], list):
                parts = [item.text for item in operands[-1] if isinstance(item, _Literal)]
                if parts:
                    self._emit(TextOperation("tj", index, text="".join(parts)))
        elif operator == "Td":
            if _numeric_tail(operands, 2):
                self._emit(TextOperation("td", index, y_move=operands[-1]))
        elif operator == "Tm":
            if _numeric_tail(operands, 6):
                self._emit(TextOperation("tm", index, y_move=0.0))
        elif operator == "ID":
            self._skip_inline_image()

        operands.clear()

    def _emit(self, operation: TextOperation) -> None:
        self._operations.append(operation)

    def _skip_inline_image(self) -> None:
        match = _INLINE_IMAGE_END_RE.search(self._content, self._pos)
        self._pos = len(self._content) if match is None else match.end()


def _numeric_tail(operands: list[Operand], count: int) -> bool:
    if len(operands) < count:
        return False
    return all(isinstance(value, float) for value in operands[-count:])


def scan_operations(content: str) -> list[TextOperation]:
    """Return the text operations of a content stream in execution order."""
    return _ContentScanner(content).scan()


def interpret_content(content: str) -> str:
    """Rebuild newline-separated text lines from a content stream.

    ``tj`` text accumulates into the current line. A ``td`` with a nonzero
    vertical move, or any ``tm``, starts a new line.
    """
    lines: list[str] = []
    current = ""
    for operation in scan_operations(content):
        if operation.type == "tj":
            current += operation.text
        elif operation.type == "tm" or operation.y_move:
            if current.strip():
                lines.append(current.strip())
            current = ""
    if current.strip():
        lines.append(current.strip())
    return "\n".join(lines)

import base64
import binascii
from pathlib import Path
from typing import Protocol, Union
from urllib.parse import unquote, unquote_to_bytes, urlparse

from sidesreader.pdf.exceptions import PdfReadError, UnsupportedSourceError


class Readable(Protocol):
    def read(self) -> bytes: ...


BinarySource = Union[bytes, bytearray, memoryview, Readable]


class ByteSourceResolver:
    """Produces the raw bytes of a file from whichever source is available.

    An in-memory source wins over the URI. URIs are read as ``data:`` URIs
    (base64 or percent-encoded), ``file://`` URIs, or plain paths.
    """

    def resolve(self, uri: str, binary_source: BinarySource | None = None) -> bytes:
        """Read the file bytes.

        Raises:
            PdfReadError: if the source exists but cannot be read.
            UnsupportedSourceError: if no byte source is available for ``uri``.
        """
        if binary_source is not None:
            return self._read_in_memory(binary_source)
        if not uri:
            raise UnsupportedSourceError("Unable to read PDF file: no file reference")
        if uri.startswith("data:"):
            return self._read_data_uri(uri)
        return self._read_file(self._resolve_path(uri))

    def _read_in_memory(self, source: BinarySource) -> bytes:
        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source)
        try:
            data = source.read()
        except PdfReadError:
            raise
        except Exception as exc:
            raise PdfReadError(f"Could not read in-memory file: {exc}") from exc
        if not isinstance(data, (bytes, bytearray)):
            raise PdfReadError(
                f"In-memory file returned {type(data).__name__}, expected bytes"
            )
        return bytes(data)

    def _read_data_uri(self, uri: str) -> bytes:
        header, sep, payload = uri.partition(",")
        if not sep:
            raise PdfReadError("Malformed data URI: missing ',' separator")
        if header.endswith(";base64"):
            try:
                # line-wrapped (MIME style) payloads are accepted
                encoded = "".join(unquote(payload).split())
                return base64.b64decode(encoded, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise PdfReadError(f"Invalid base64 payload: {exc}") from exc
        return unquote_to_bytes(payload)

    def _resolve_path(self, uri: str) -> Path:
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            return Path(unquote(parsed.path))
        # single-letter schemes are Windows drive letters
        if parsed.scheme and len(parsed.scheme) > 1:
            raise UnsupportedSourceError(
                f"Unable to read PDF file: scheme '{parsed.scheme}' is not supported"
            )
        return Path(uri)

    def _read_file(self, path: Path) -> bytes:
        if not path.is_file():
            raise PdfReadError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise PdfReadError(f"Could not read {path}: {exc}") from exc

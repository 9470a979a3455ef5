from __future__ import annotations

import zlib
from base64 import a85decode
from datetime import date

TODAY = date(2026, 10, 19)


def in_days(days: int) -> str:
    return date.fromordinal(TODAY.toordinal() + days).strftime("%d/%m/%Y")


class RecordingCanvas:
    """Canvas double recording every drawing call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple, dict]] = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))

        return record

    def named(self, name: str) -> list[tuple[tuple, dict]]:
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]

    def strings(self) -> list[str]:
        return [
            args[2]
            for call, args, _ in self.calls
            if call in {"drawString", "drawRightString", "drawCentredString"}
        ]


def extract_pdf_stream_text(pdf_bytes: bytes) -> bytes:
    chunks: list[bytes] = []
    cursor = 0
    while True:
        start = pdf_bytes.find(b"stream", cursor)
        if start == -1:
            break
        start = pdf_bytes.find(b"\n", start)
        if start == -1:
            break
        start += 1
        end = pdf_bytes.find(b"endstream", start)
        if end == -1:
            break
        stream = pdf_bytes[start:end].strip()
        decoded = stream
        try:
            decoded = a85decode(stream, adobe=True)
        except Exception:
            try:
                decoded = a85decode(stream, adobe=False)
            except Exception:
                decoded = stream
        try:
            chunks.append(zlib.decompress(decoded))
        except zlib.error:
            chunks.append(decoded)
        cursor = end + len(b"endstream")
    return b"".join(chunks)

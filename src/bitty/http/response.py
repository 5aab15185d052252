"""Response value returned by controller operations.

Frozen: ``with_status`` and ``with_header`` hand back modified copies,
which is how ``redirect()`` assembles its response.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """Status, headers and body of an HTTP response.

    Headers are ordered ``(name, value)`` pairs; a name may repeat.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Copy of this response with *name*: *value* appended."""
        return replace(self, headers=(*self.headers, (name, value)))

    # Header names compare case-insensitively

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name*, or *default* when absent."""
        values = self.get_header(name)
        return values[0] if values else default

    def get_header(self, name: str) -> list[str]:
        """All values of header *name* in order; empty when absent."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]

    def has_header(self, name: str) -> bool:
        return bool(self.get_header(name))

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8."""
        body = self.body
        return body.encode("utf-8") if isinstance(body, str) else body

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        body = self.body
        return body.decode("utf-8") if isinstance(body, bytes) else body


def redirect(url: str, status: int = 302) -> Response:
    """Build a redirect response to *url*.

    The body is empty and ``Location`` (set to *url* unmodified) is the
    only header.

    Raises ``ValueError`` if *status* is not a 3xx code.
    """
    if not 300 <= status < 400:
        msg = f"Redirect status must be 3xx, got {status}"
        raise ValueError(msg)
    return Response().with_status(status).with_header("Location", url)

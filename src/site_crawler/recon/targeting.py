from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urldefrag, urlparse, urlunparse

HTTP_SCHEMES = frozenset({"http", "https"})
DEFAULT_PORTS = {"http": 80, "https": 443}

# Characters Chromium leaves unescaped when it serializes a URL
PATH_SAFE = "/%:@!$&'()*+,;="
QUERY_SAFE = PATH_SAFE + "?"


def ascii_host(hostname: Optional[str]) -> Optional[str]:
    """Lower-cased, IDNA-encoded form of ``hostname`` (``None`` if it cannot be encoded)."""

    if not hostname:
        return None
    try:
        return hostname.lower().encode("idna").decode("ascii")
    except UnicodeError:
        return None


def normalize_url(url: Optional[str]) -> Optional[str]:
    """Canonical form used as ledger key and as the exact load destination.

    Scheme and host are lower-cased, the host is IDNA-encoded, default ports
    and the fragment are dropped, path and query are percent-encoded the way
    the browser reports them, and an empty path becomes ``/``. Returns
    ``None`` for anything that is not an absolute http(s) address.
    """

    if not url:
        return None

    try:
        without_fragment, _ = urldefrag(url.strip())
        parsed = urlparse(without_fragment)
        port = parsed.port
    except ValueError:
        return None

    scheme = parsed.scheme.lower()
    host = ascii_host(parsed.hostname)
    if scheme not in HTTP_SCHEMES or not host:
        return None

    netloc = f"[{host}]" if ":" in host else host
    if port and port != DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"

    return urlunparse((
        scheme,
        netloc,
        quote(parsed.path, safe=PATH_SAFE) or "/",
        parsed.params,
        quote(parsed.query, safe=QUERY_SAFE),
        "",
    ))


def is_admissible(candidate: Optional[str], origin_host: str) -> bool:
    """True when ``candidate`` is an absolute http(s) URL on ``origin_host``."""

    if not candidate:
        return False

    try:
        parsed = urlparse(candidate)
    except (TypeError, ValueError):
        return False

    if parsed.scheme.lower() not in HTTP_SCHEMES:
        return False

    hostname = ascii_host(parsed.hostname)
    return hostname is not None and hostname == ascii_host(origin_host)


@dataclass(frozen=True)
class OriginFilter:
    """Binds URL admission to the hostname of the crawl seed."""

    origin_host: str

    @classmethod
    def from_seed(cls, seed_url: str) -> Optional["OriginFilter"]:
        """Filter for the seed's host, or ``None`` when the seed has no usable host."""

        try:
            hostname = ascii_host(urlparse(seed_url).hostname)
        except ValueError:
            return None
        return cls(origin_host=hostname) if hostname else None

    def is_allowed(self, url: Optional[str]) -> bool:
        return is_admissible(url, self.origin_host)

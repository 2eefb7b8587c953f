"""Domain normalisation and naked-URL detection for anchor texts."""

from __future__ import annotations

import re
from typing import List

SCHEME_PATTERN = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:)?//")
WWW_PATTERN = re.compile(r"^www\.", flags=re.IGNORECASE)
PATH_DELIMITERS = re.compile(r"[/?#]")


def normalise_domain(url: str) -> str:
    """Reduce ``url`` to its last two host labels.

    ``https://www.example.com/page?x=1`` becomes ``example.com``. Multi-label
    public suffixes are not special-cased, so ``www.example.co.uk`` becomes
    ``co.uk``. A port is kept as part of the last label
    (``acme.com:8080``). The result keeps the input's case.
    """

    host = SCHEME_PATTERN.sub("", url.strip(), count=1)
    host = WWW_PATTERN.sub("", host, count=1)
    host = PATH_DELIMITERS.split(host, maxsplit=1)[0]
    labels = host.split(".")
    if len(labels) > 2:
        labels = labels[-2:]
    return ".".join(labels)


def url_patterns(domain: str) -> List[str]:
    """Return the literal strings that mark an anchor as a URL for ``domain``."""

    return [
        f"http://{domain}",
        f"https://{domain}",
        f"www.{domain}",
        f"{domain}/",
        f"{domain}?",
    ]


def is_subdomain_of(anchor: str, domain: str) -> bool:
    """``True`` for ``blog.example.com`` style anchors (but not ``www.``)."""

    if anchor.startswith("www."):
        return False
    return re.match(rf"^[a-z0-9-]+\.{re.escape(domain)}$", anchor) is not None


def is_url_anchor(anchor_lower: str, site_domain: str) -> bool:
    """Return ``True`` when ``anchor_lower`` is a bare URL of ``site_domain``.

    Both arguments are expected in lower case; ``site_domain`` is the output of
    :func:`normalise_domain`.
    """

    if not site_domain or not site_domain.strip("."):
        return False
    if site_domain in anchor_lower:
        return True
    if any(pattern in anchor_lower for pattern in url_patterns(site_domain)):
        return True
    return is_subdomain_of(anchor_lower, site_domain)

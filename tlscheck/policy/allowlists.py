"""Allow-list of domains permitted to get a TLS certificate on this platform."""
from pathlib import Path
from typing import Iterable, Iterator

from tlscheck.config import Settings


class AllowListError(RuntimeError):
    """Allow-list could not be loaded from its configured source."""


class AllowList:
    """Read-only set of domain names. Matching is exact and case-sensitive."""

    __slots__ = ("_domains", "source")

    def __init__(self, domains: Iterable[str], source: str = "inline"):
        object.__setattr__(self, "_domains", frozenset(domains))
        object.__setattr__(self, "source", source)

    def __setattr__(self, name, value):
        raise AttributeError("AllowList is immutable")

    def __delattr__(self, name):
        raise AttributeError("AllowList is immutable")

    def contains(self, domain: str) -> bool:
        return domain in self._domains

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._domains)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._domains))

    def __repr__(self) -> str:
        return f"AllowList(size={len(self)}, source={self.source!r})"


def _read_allowlist_file(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise AllowListError(f"Could not read allow-list file {path}: {e}") from e
    domains = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        domains.append(line)
    return domains


def load_allowlist(settings: Settings) -> AllowList:
    """Build the process-wide allow-list. A configured file takes precedence over the inline list."""
    if settings.allowlist_file is not None:
        path = Path(settings.allowlist_file)
        return AllowList(_read_allowlist_file(path), source=str(path))
    return AllowList(settings.allowed_domains, source="settings")

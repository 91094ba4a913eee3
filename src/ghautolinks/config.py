"""ContextVar-based autolink configuration for ghautolinks.

Provides context-local configuration using Python's ContextVars (PEP 567).
A caller that renders many documents for one repository can set the
repository once for the current context instead of passing it to every
render_inline() call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from ghautolinks.config import AutolinkConfig, autolink_config_context

    with autolink_config_context(AutolinkConfig(repository="octo/hello-world")):
        html = render_inline("Fixes #26")

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AutolinkConfig:
    """Immutable autolink configuration.

    Attributes:
        repository: ``owner/repo`` used to resolve relative references
        include: Names of the extensions to enable (None enables all)

    """

    repository: str | None = None
    include: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AutolinkConfig":
        """Create AutolinkConfig from dictionary.

        Only includes keys that are valid AutolinkConfig fields; unknown keys
        are silently ignored. ``include`` is normalized with normalize_include().

        Example:
            >>> config = AutolinkConfig.from_dict({
            ...     "repository": "octo/hello-world",
            ...     "include": ["github_mentions"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.include
            ('github_mentions',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if filtered.get("include") is not None:
            filtered["include"] = normalize_include(filtered["include"])
        return cls(**filtered)


def normalize_include(include: str | Iterable[str] | None) -> tuple[str, ...] | None:
    """Return ``include`` as a tuple of names; a single name is wrapped, not split."""
    if include is None:
        return None
    if isinstance(include, str):
        return (include,)
    return tuple(include)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: AutolinkConfig = AutolinkConfig()

_autolink_config: ContextVar[AutolinkConfig] = ContextVar(
    "autolink_config",
    default=_DEFAULT_CONFIG,
)


def get_autolink_config() -> AutolinkConfig:
    """Get the active autolink configuration for this context."""
    return _autolink_config.get()


def set_autolink_config(config: AutolinkConfig) -> None:
    """Set autolink configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _autolink_config.set(config)


def reset_autolink_config() -> None:
    """Reset to default configuration."""
    _autolink_config.set(_DEFAULT_CONFIG)


@contextmanager
def autolink_config_context(config: AutolinkConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with autolink_config_context(AutolinkConfig(repository="octo/repo")):
        ...     get_autolink_config().repository
        'octo/repo'

    """
    previous = _autolink_config.get()
    _autolink_config.set(config)
    try:
        yield
    finally:
        _autolink_config.set(previous)


__all__ = [
    "AutolinkConfig",
    "autolink_config_context",
    "get_autolink_config",
    "normalize_include",
    "reset_autolink_config",
    "set_autolink_config",
]

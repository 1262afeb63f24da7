"""Registry of export profiles keyed by record kind."""

from dataclasses import dataclass, field

from .exporters.shared.profile import ExportProfile


@dataclass
class Registry:
    profiles: dict[str, ExportProfile] = field(default_factory=dict)

    def register_profile(self, profile: ExportProfile, *, key: str | None = None) -> None:
        self.profiles[str(key or profile.kind).strip().lower()] = profile

    def get_profile(self, key: str) -> ExportProfile:
        normalized = str(key).strip().lower()
        profile = self.profiles.get(normalized)
        if profile is None:
            raise KeyError(f"No export profile registered for kind: {normalized}")
        return profile

    def list_profiles(self) -> list[str]:
        return sorted(self.profiles.keys())


_registry = Registry()


def register_profile(profile: ExportProfile, *, key: str | None = None) -> None:
    _registry.register_profile(profile, key=key)


def get_profile(key: str) -> ExportProfile:
    return _registry.get_profile(key)


def list_profiles() -> list[str]:
    return _registry.list_profiles()


def _register_defaults() -> None:
    from .exporters.platforms import DEFAULT_PROFILES

    for profile in DEFAULT_PROFILES:
        if profile.kind not in _registry.profiles:
            _registry.register_profile(profile)


_register_defaults()


__all__ = [
    "Registry",
    "get_profile",
    "list_profiles",
    "register_profile",
]

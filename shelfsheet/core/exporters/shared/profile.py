from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ...codec.utils import make_export_filename
from ...codec.writer import DEFAULT_DATE_NUMBER_FORMAT, TabularFormat, encode
from ...config import CoreConfig
from ...schema.columns import Accessor, Column, Lookup
from ...schema.reflect import derive_columns
from .services import ExportServices, StaticExportServices

AccessorFactory = Callable[[ExportServices], Mapping[str, Accessor]]
LookupFactory = Callable[[ExportServices], Mapping[str, Lookup]]


@dataclass(frozen=True)
class ExportOptions:
    exclude: frozenset[str] = frozenset()
    strict: bool = False


@dataclass(frozen=True)
class ExportProfile:
    """Static sheet layout for one record type."""

    kind: str
    record_type: type
    columns: tuple[str, ...]
    replace_pairs: Mapping[str, str] = field(default_factory=dict)
    ignore: frozenset[str] = frozenset()
    accessor_factory: AccessorFactory | None = None
    lookup_factory: LookupFactory | None = None
    sheet_title: str = "Sheet1"
    filename_stem: str = ""

    def accessors(self, services: ExportServices) -> dict[str, Accessor]:
        if self.accessor_factory is None:
            return {}
        return dict(self.accessor_factory(services))

    def lookups(self, services: ExportServices) -> dict[str, Lookup]:
        if self.lookup_factory is None:
            return {}
        return dict(self.lookup_factory(services))

    def header(self, options: ExportOptions | None = None) -> list[str]:
        excluded = options.exclude if options else frozenset()
        return [name for name in self.columns if name not in excluded]

    def build_columns(
        self,
        services: ExportServices,
        options: ExportOptions | None = None,
    ) -> tuple[Column, ...]:
        return derive_columns(
            self.record_type,
            self.header(options),
            replace_pairs=self.replace_pairs,
            accessors=self.accessors(services),
            lookups=self.lookups(services),
        )


def lookup_from_services(services: ExportServices, name: str) -> Lookup:
    return Lookup.from_mapping(services.lookup_items(name))


def export_with_profile(
    profile: ExportProfile,
    records: Iterable[Any],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    fmt: TabularFormat = "xlsx",
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    resolved_services = services if services is not None else StaticExportServices()
    resolved_options = options or ExportOptions()
    resolved_config = config or CoreConfig()

    columns = profile.build_columns(resolved_services, resolved_options)
    data = encode(
        list(records),
        columns,
        fmt=fmt,
        sheet_title=resolved_config.sheet_title or profile.sheet_title,
        date_number_format=resolved_config.date_number_format or DEFAULT_DATE_NUMBER_FORMAT,
        strict=resolved_config.strict or resolved_options.strict,
    )
    filename = make_export_filename(profile.filename_stem or profile.kind, extension=fmt)
    return data, filename


__all__ = [
    "AccessorFactory",
    "ExportOptions",
    "ExportProfile",
    "LookupFactory",
    "export_with_profile",
    "lookup_from_services",
]

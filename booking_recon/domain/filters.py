"""Full-text search and faceted filtering over reconciled records.

Search and facet/toggle filtering are two separate modes: submitting a search
drops the facet and toggle effects, and changing a facet or toggle leaves
search mode. ``FilterState`` is immutable and hashable; every transition
returns a new state.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Mapping, Sequence, Union

from booking_recon.config import SETTINGS, Settings

from .models import ReconciledRecord
from .normalization import normalize

FacetSelection = tuple[tuple[str, frozenset[str]], ...]
FacetInput = Union[Mapping[str, Union[str, Iterable[str]]], Iterable[tuple[str, Union[str, Iterable[str]]]]]


def resolve_column(column: str, settings: Settings | None = None) -> str:
    """Map a facet column, given as a record field or an export header, to its field name."""
    columns = (settings or SETTINGS).assignment_columns
    name = str(column).strip()
    if name in columns:
        return name
    by_header = {header.strip().lower(): field_name for field_name, header in columns.items()}
    try:
        return by_header[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown facet column {column!r}; expected one of {sorted(columns)} or their headers"
        ) from None


def _selected_values(values: str | Iterable[str]) -> frozenset[str]:
    if isinstance(values, str):
        values = (values,)
    return frozenset(v for v in (normalize(value) for value in values) if v)


def _coerce_facets(facets: FacetInput) -> FacetSelection:
    pairs = facets.items() if isinstance(facets, Mapping) else facets
    merged: dict[str, frozenset[str]] = {}
    for column, values in pairs:
        field_name = resolve_column(column)
        merged[field_name] = merged.get(field_name, frozenset()) | _selected_values(values)
    return tuple(sorted((name, values) for name, values in merged.items() if values))


@dataclass(frozen=True)
class FilterState:
    search_text: str = ""
    search_active: bool = False
    facets: FacetSelection = ()
    mismatch_only: bool = False
    ready_only: bool = False
    selected_date: date | str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "facets", _coerce_facets(self.facets))

    def facet_map(self) -> dict[str, frozenset[str]]:
        return dict(self.facets)

    def with_search(self, text: str) -> "FilterState":
        return replace(self, search_text=text, search_active=True)

    def with_facet(self, column: str, values: str | Iterable[str]) -> "FilterState":
        field_name = resolve_column(column)
        facets = self.facet_map()
        selected = _selected_values(values)
        if selected:
            facets[field_name] = selected
        else:
            facets.pop(field_name, None)
        return replace(self, facets=tuple(facets.items()), search_active=False)

    def with_mismatch_only(self, enabled: bool) -> "FilterState":
        return replace(self, mismatch_only=enabled, search_active=False)

    def with_ready_only(self, enabled: bool) -> "FilterState":
        return replace(self, ready_only=enabled, search_active=False)

    def with_date(self, selected: date | str | None) -> "FilterState":
        return replace(self, selected_date=selected)

    def reset(self) -> "FilterState":
        return FilterState(selected_date=self.selected_date)


class FilterEngine:
    def apply(self, dataset: Sequence[ReconciledRecord], state: FilterState) -> tuple[ReconciledRecord, ...]:
        if state.search_active:
            return self.search(dataset, state.search_text)
        return self.facet(dataset, state)

    @staticmethod
    def search(dataset: Sequence[ReconciledRecord], text: str) -> tuple[ReconciledRecord, ...]:
        keyword = normalize(text)
        return tuple(
            item
            for item in dataset
            if any(keyword in normalize(value) for value in item.record.field_values())
        )

    @staticmethod
    def facet(dataset: Sequence[ReconciledRecord], state: FilterState) -> tuple[ReconciledRecord, ...]:
        result = list(dataset)
        for column, wanted in state.facets:
            result = [item for item in result if normalize(getattr(item.record, column)) in wanted]
        if state.mismatch_only:
            result = [item for item in result if item.result.is_mismatch]
        if state.ready_only:
            result = [item for item in result if item.result.is_ready_to_switch_back]
        return tuple(result)


def facet_options(
    dataset: Sequence[ReconciledRecord],
    columns: Sequence[str] | None = None,
) -> dict[str, list[str]]:
    """Distinct normalized, non-empty values per column over the full dataset."""
    columns = tuple(columns or SETTINGS.facet_fields)
    options: dict[str, list[str]] = {}
    for column in columns:
        seen = {normalize(getattr(item.record, column, None)) for item in dataset}
        seen.discard("")
        options[column] = sorted(seen)
    return options


def filter_records(dataset: Sequence[ReconciledRecord], state: FilterState) -> tuple[ReconciledRecord, ...]:
    return FilterEngine().apply(dataset, state)

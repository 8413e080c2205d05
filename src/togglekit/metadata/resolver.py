"""Metadata – resolve declared markers for a feature.

Every function is a pure lookup over the group's :class:`MarkerTable`;
nothing is cached between calls, so resolution is safe from any thread.

Precedence: a marker on the feature declaration wins over a marker of the
same kind on the group.  A feature whose declaration cannot be inspected
(no group, or an identifier the group does not declare) resolves exactly
like a feature without markers.
"""
from __future__ import annotations

from typing import Any, TypeVar

from togglekit.config.validation import MarkerConfigurationError
from togglekit.features.feature import Feature, FeatureLike, as_identifier
from togglekit.metadata.markers import (
    AttributePair,
    EnabledByDefault,
    InfoLink,
    Label,
    Owner,
    feature_attribute_spec,
)

MarkerT = TypeVar("MarkerT")

_NO_MARKERS: tuple[tuple[Any, ...], tuple[Any, ...]] = ((), ())


def _marker_levels(feature: FeatureLike) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
    """Return ``(declaration markers, group markers)`` for *feature*."""
    if not isinstance(feature, Feature) or feature.group is None:
        return _NO_MARKERS
    try:
        table = feature.group.marker_table()
        return table.markers_for(feature.id), table.group_markers
    except (AttributeError, KeyError, TypeError):
        return _NO_MARKERS


def get_marker(feature: FeatureLike, kind: type[MarkerT]) -> MarkerT | None:
    """First marker of *kind*, looking at the declaration before the group."""
    declared, grouped = _marker_levels(feature)
    for marker in (*declared, *grouped):
        if isinstance(marker, kind):
            return marker
    return None


def is_marker_present(feature: FeatureLike, kind: type) -> bool:
    return get_marker(feature, kind) is not None


def get_markers(feature: FeatureLike) -> tuple[Any, ...]:
    """Union of declaration-level and group-level markers.

    Declaration markers come first.  A marker identical or equal to one
    already collected is dropped, so unhashable markers are supported.
    """
    declared, grouped = _marker_levels(feature)
    markers: list[Any] = []
    for marker in (*declared, *grouped):
        if not any(marker is seen or marker == seen for seen in markers):
            markers.append(marker)
    return tuple(markers)


def get_label(feature: FeatureLike) -> str:
    label = get_marker(feature, Label)
    if label is not None:
        return label.value
    return as_identifier(feature).value


def get_owner(feature: FeatureLike) -> str | None:
    owner = get_marker(feature, Owner)
    return owner.value if owner is not None else None


def get_info_link(feature: FeatureLike) -> str | None:
    info_link = get_marker(feature, InfoLink)
    return info_link.value if info_link is not None else None


def is_enabled_by_default(feature: FeatureLike) -> bool:
    """Whether :class:`EnabledByDefault` is present on the declaration itself.

    Group-level ``EnabledByDefault`` markers are not consulted.
    """
    declared, _ = _marker_levels(feature)
    return any(isinstance(marker, EnabledByDefault) for marker in declared)


def get_feature_attribute(marker: Any) -> AttributePair | None:
    """Attribute contributed by *marker*, or ``None`` for ordinary markers.

    Raises :class:`MarkerConfigurationError` when the registered accessor
    cannot be invoked.
    """
    spec = feature_attribute_spec(marker)
    if spec is None:
        return None
    try:
        value = spec.getter(marker)
    except Exception as exc:
        raise MarkerConfigurationError(
            type(marker).__name__,
            f"accessor '{spec.accessor}' failed: {exc!r}",
            cause=exc,
        ) from exc
    return AttributePair(spec.name, str(value))


def get_feature_attributes(feature: FeatureLike) -> dict[str, str]:
    """All custom attributes of *feature*; declaration-level values win."""
    declared, grouped = _marker_levels(feature)
    attributes: dict[str, str] = {}
    for marker in (*declared, *grouped):
        pair = get_feature_attribute(marker)
        if pair is not None:
            attributes.setdefault(pair.name, pair.value)
    return attributes


__all__ = [
    "get_feature_attribute",
    "get_feature_attributes",
    "get_info_link",
    "get_label",
    "get_marker",
    "get_markers",
    "get_owner",
    "is_enabled_by_default",
    "is_marker_present",
]

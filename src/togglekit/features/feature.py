"""Features – Feature handle and class-based FeatureGroup declarations.

A feature group is declared once and builds its marker table eagerly::

    class ShopFeatures(FeatureGroup, markers=(Label("Shop"), Owner("team-shop"))):
        CHECKOUT_V2 = declare(Label("Checkout V2"), EnabledByDefault())
        SEARCH = declare()

    ShopFeatures.CHECKOUT_V2          # Feature(id=FeatureIdentifier('CHECKOUT_V2'))
    ShopFeatures.marker_table()       # MarkerTable(group_markers=(...), ...)
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Mapping, Union

from togglekit.config.validation import MarkerConfigurationError
from togglekit.kernel.types import FeatureIdentifier


@dataclasses.dataclass(frozen=True)
class MarkerTable:
    """Markers attached to a feature group and to each of its features."""

    group_markers: tuple[Any, ...] = ()
    feature_markers: Mapping[str, tuple[Any, ...]] = dataclasses.field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "group_markers", tuple(self.group_markers))
        object.__setattr__(
            self,
            "feature_markers",
            MappingProxyType({k: tuple(v) for k, v in self.feature_markers.items()}),
        )

    def markers_for(self, feature_id: FeatureIdentifier | str) -> tuple[Any, ...]:
        """Return the declaration-level markers of *feature_id*.

        Raises ``KeyError`` when the group does not declare that identifier.
        """
        return self.feature_markers[str(feature_id)]


@dataclasses.dataclass(frozen=True)
class Feature:
    """Handle for one feature: its identifier plus its declaring group.

    ``group`` is ``None`` for features that exist only by name; those carry
    no metadata.
    """

    id: FeatureIdentifier
    group: type[FeatureGroup] | None = dataclasses.field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.id, FeatureIdentifier):
            object.__setattr__(self, "id", FeatureIdentifier(self.id))

    @classmethod
    def named(cls, feature_id: str) -> "Feature":
        """Return a handle without a declaration site."""
        return cls(FeatureIdentifier(feature_id))

    @property
    def name(self) -> str:
        return self.id.value

    def __str__(self) -> str:
        return self.id.value


FeatureLike = Union[Feature, FeatureIdentifier, str]


def as_identifier(feature: FeatureLike) -> FeatureIdentifier:
    """Normalise a handle, identifier or plain string to a :class:`FeatureIdentifier`."""
    if isinstance(feature, Feature):
        return feature.id
    if isinstance(feature, FeatureIdentifier):
        return feature
    return FeatureIdentifier(feature)


@dataclasses.dataclass(frozen=True)
class FeatureDeclaration:
    """Placeholder assigned in a group body; replaced by a :class:`Feature`."""

    markers: tuple[Any, ...] = ()
    id: str | None = None


def declare(*markers: Any, id: str | None = None) -> Any:  # noqa: A002
    """Declare a feature inside a :class:`FeatureGroup` body.

    The identifier defaults to the attribute name; pass *id* to override it.
    """
    return FeatureDeclaration(markers=tuple(markers), id=id)


class FeatureGroup:
    """Base class for feature declarations.

    Subclasses pass group-level markers as the ``markers`` class keyword.
    Every attribute holding a :func:`declare` result is turned into a
    :class:`Feature` bound to the subclass.  Only the subclass's own body is
    scanned; declarations are not inherited.
    """

    _marker_table: ClassVar[MarkerTable] = MarkerTable()
    _features: ClassVar[Mapping[str, Feature]] = MappingProxyType({})

    def __init_subclass__(cls, markers: Iterable[Any] = (), **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        features: dict[str, Feature] = {}
        feature_markers: dict[str, tuple[Any, ...]] = {}

        for attr, value in list(vars(cls).items()):
            if not isinstance(value, FeatureDeclaration):
                continue
            feature_id = value.id or attr
            if feature_id in features:
                raise MarkerConfigurationError(
                    cls.__name__, f"feature id '{feature_id}' is declared more than once"
                )
            feature = Feature(FeatureIdentifier(feature_id), cls)
            features[feature_id] = feature
            feature_markers[feature_id] = value.markers
            setattr(cls, attr, feature)

        cls._marker_table = MarkerTable(tuple(markers), feature_markers)
        cls._features = MappingProxyType(features)

    @classmethod
    def marker_table(cls) -> MarkerTable:
        return cls._marker_table

    @classmethod
    def features(cls) -> tuple[Feature, ...]:
        """All features of the group, in declaration order."""
        return tuple(cls._features.values())

    @classmethod
    def get(cls, feature_id: FeatureIdentifier | str) -> Feature:
        """Look up a feature by identifier; raises ``KeyError`` if undeclared."""
        return cls._features[str(feature_id)]


__all__ = [
    "Feature",
    "FeatureDeclaration",
    "FeatureGroup",
    "FeatureLike",
    "MarkerTable",
    "as_identifier",
    "declare",
]

"""Metadata – marker kinds and custom feature-attribute registration.

Markers are plain frozen dataclasses attached to a feature or its group via
:func:`togglekit.features.declare` and the ``markers=`` class keyword.  Any
marker kind can contribute a named attribute by decorating it with
:func:`feature_attribute`::

    @feature_attribute("priority", accessor="level")
    @dataclasses.dataclass(frozen=True)
    class Priority:
        level: str
"""
from __future__ import annotations

import dataclasses
import inspect
import operator
from typing import Any, Callable, NamedTuple, TypeVar

from togglekit.config.validation import MarkerConfigurationError

M = TypeVar("M", bound=type)


class AttributePair(NamedTuple):
    """A custom attribute contributed by a marker."""

    name: str
    value: str


@dataclasses.dataclass(frozen=True)
class FeatureAttributeSpec:
    """Attribute name and resolved accessor stored on a marker kind."""

    name: str
    accessor: str
    getter: Callable[[Any], Any] = dataclasses.field(compare=False, repr=False)


def _resolve_accessor(kind: type, accessor: str) -> Callable[[Any], Any]:
    if dataclasses.is_dataclass(kind) and accessor in {f.name for f in dataclasses.fields(kind)}:
        return operator.attrgetter(accessor)

    for klass in kind.__mro__:
        if accessor in vars(klass):
            member = vars(klass)[accessor]
            break
        if accessor in inspect.get_annotations(klass):
            return operator.attrgetter(accessor)
    else:
        raise MarkerConfigurationError(kind.__name__, f"accessor '{accessor}' does not exist")

    if isinstance(member, property):
        return operator.attrgetter(accessor)
    if isinstance(member, (staticmethod, classmethod)):
        raise MarkerConfigurationError(
            kind.__name__, f"accessor '{accessor}' must be an instance method"
        )
    if inspect.isfunction(member):
        required = [
            p
            for p in list(inspect.signature(member).parameters.values())[1:]
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        if required:
            raise MarkerConfigurationError(
                kind.__name__, f"accessor '{accessor}' must take no arguments"
            )
        return member
    if callable(member):
        raise MarkerConfigurationError(
            kind.__name__, f"accessor '{accessor}' is not a method, property or field"
        )
    return operator.attrgetter(accessor)


def feature_attribute(name: str, accessor: str = "value") -> Callable[[M], M]:
    """Tag a marker kind as contributing the feature attribute *name*.

    *accessor* names a field, property or zero-argument method whose result,
    rendered with ``str()``, becomes the attribute value.  It is resolved when
    the decorator runs; an unknown accessor raises
    :class:`~togglekit.config.validation.MarkerConfigurationError` at import
    time of the marker kind.

    The accessor must be visible on the class itself: a dataclass field, an
    annotated class attribute, a property or a zero-argument method.  An
    attribute that is only assigned in ``__init__`` (``self.level = level``)
    cannot be found and is rejected.
    """
    if not name:
        raise MarkerConfigurationError("<unknown>", "attribute name must not be empty")

    def decorator(kind: M) -> M:
        getter = _resolve_accessor(kind, accessor)
        kind.__feature_attribute__ = FeatureAttributeSpec(name, accessor, getter)  # type: ignore[attr-defined]
        return kind

    return decorator


def feature_attribute_spec(marker: Any) -> FeatureAttributeSpec | None:
    """Return the :class:`FeatureAttributeSpec` of *marker*'s kind, if tagged."""
    spec = getattr(type(marker), "__feature_attribute__", None)
    if spec is None:
        return None
    if not isinstance(spec, FeatureAttributeSpec):
        raise MarkerConfigurationError(
            type(marker).__name__, "__feature_attribute__ is not a FeatureAttributeSpec"
        )
    return spec


# ---------------------------------------------------------------------------
# Built-in marker kinds
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class Label:
    """Human readable name shown instead of the raw identifier."""

    value: str


@feature_attribute("owner")
@dataclasses.dataclass(frozen=True)
class Owner:
    """Person or team responsible for the feature."""

    value: str


@feature_attribute("InfoLink")
@dataclasses.dataclass(frozen=True)
class InfoLink:
    """Link to documentation or a ticket describing the feature."""

    value: str


@dataclasses.dataclass(frozen=True)
class EnabledByDefault:
    """Presence marks the feature as enabled until state is stored for it."""


@dataclasses.dataclass(frozen=True)
class ActivationParameter:
    name: str
    value: str


@dataclasses.dataclass(frozen=True)
class DefaultActivationStrategy:
    """Activation strategy applied to the default state of a feature."""

    id: str
    parameters: tuple[ActivationParameter, ...] = ()

    def parameter_map(self) -> dict[str, str]:
        return {p.name: p.value for p in self.parameters}


__all__ = [
    "ActivationParameter",
    "AttributePair",
    "DefaultActivationStrategy",
    "EnabledByDefault",
    "FeatureAttributeSpec",
    "InfoLink",
    "Label",
    "Owner",
    "feature_attribute",
    "feature_attribute_spec",
]

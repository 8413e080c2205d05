"""Unit tests for metadata resolution precedence."""

from __future__ import annotations

import dataclasses
import threading

from togglekit.features import Feature, FeatureGroup, declare
from togglekit.kernel.types import FeatureIdentifier
from togglekit.metadata import (
    EnabledByDefault,
    InfoLink,
    Label,
    Owner,
    get_info_link,
    get_label,
    get_marker,
    get_markers,
    get_owner,
    is_enabled_by_default,
    is_marker_present,
)


@dataclasses.dataclass(frozen=True)
class Experimental:
    pass


@dataclasses.dataclass
class Rollout:
    percentage: int


class CheckoutFeatures(
    FeatureGroup,
    markers=(Label("Legacy"), Owner("team-legacy"), InfoLink("https://wiki/legacy")),
):
    CHECKOUT_V2 = declare(
        Label("Checkout V2"),
        Owner("team-checkout"),
        InfoLink("https://wiki/checkout-v2"),
        EnabledByDefault(),
    )
    ONE_CLICK = declare()


class PlainFeatures(FeatureGroup):
    BARE = declare()
    SHARED = declare(Experimental())


class DefaultedGroup(FeatureGroup, markers=(EnabledByDefault(), Experimental())):
    CHILD = declare(Experimental())


class RolloutFeatures(FeatureGroup, markers=(Rollout(10), Label("Rollouts"))):
    RAMP = declare(Rollout(10), Rollout(50))


# ---------------------------------------------------------------------------
# Label
# ---------------------------------------------------------------------------


class TestLabel:
    def test_declaration_wins_over_group(self) -> None:
        assert get_label(CheckoutFeatures.CHECKOUT_V2) == "Checkout V2"

    def test_falls_back_to_group(self) -> None:
        assert get_label(CheckoutFeatures.ONE_CLICK) == "Legacy"

    def test_falls_back_to_identifier(self) -> None:
        assert get_label(PlainFeatures.BARE) == "BARE"

    def test_plain_string_and_named_feature(self) -> None:
        assert get_label("SOME_FEATURE") == "SOME_FEATURE"
        assert get_label(Feature.named("SOME_FEATURE")) == "SOME_FEATURE"


# ---------------------------------------------------------------------------
# Owner / info link
# ---------------------------------------------------------------------------


class TestOwnerAndInfoLink:
    def test_declaration_wins(self) -> None:
        assert get_owner(CheckoutFeatures.CHECKOUT_V2) == "team-checkout"
        assert get_info_link(CheckoutFeatures.CHECKOUT_V2) == "https://wiki/checkout-v2"

    def test_group_fallback(self) -> None:
        assert get_owner(CheckoutFeatures.ONE_CLICK) == "team-legacy"
        assert get_info_link(CheckoutFeatures.ONE_CLICK) == "https://wiki/legacy"

    def test_absent_at_both_levels(self) -> None:
        assert get_owner(PlainFeatures.BARE) is None
        assert get_info_link(PlainFeatures.BARE) is None


# ---------------------------------------------------------------------------
# Enabled by default
# ---------------------------------------------------------------------------


class TestEnabledByDefault:
    def test_present_marker_without_payload(self) -> None:
        assert is_enabled_by_default(CheckoutFeatures.CHECKOUT_V2) is True

    def test_absent(self) -> None:
        assert is_enabled_by_default(CheckoutFeatures.ONE_CLICK) is False

    def test_group_level_marker_not_consulted(self) -> None:
        assert is_enabled_by_default(DefaultedGroup.CHILD) is False


# ---------------------------------------------------------------------------
# Generic lookup
# ---------------------------------------------------------------------------


class TestMarkerLookup:
    def test_get_marker_declaration_first(self) -> None:
        assert get_marker(CheckoutFeatures.CHECKOUT_V2, Label) == Label("Checkout V2")

    def test_get_marker_missing(self) -> None:
        assert get_marker(PlainFeatures.BARE, Label) is None

    def test_is_marker_present_checks_group(self) -> None:
        assert is_marker_present(CheckoutFeatures.ONE_CLICK, Owner) is True
        assert is_marker_present(PlainFeatures.BARE, Experimental) is False

    def test_get_markers_is_union(self) -> None:
        assert get_markers(CheckoutFeatures.ONE_CLICK) == (
            Label("Legacy"),
            Owner("team-legacy"),
            InfoLink("https://wiki/legacy"),
        )

    def test_get_markers_collapses_duplicates(self) -> None:
        assert get_markers(DefaultedGroup.CHILD) == (Experimental(), EnabledByDefault())

    def test_no_markers(self) -> None:
        assert get_markers(PlainFeatures.BARE) == ()

    def test_unhashable_markers_at_both_levels(self) -> None:
        assert get_markers(RolloutFeatures.RAMP) == (Rollout(10), Rollout(50), Label("Rollouts"))
        assert get_marker(RolloutFeatures.RAMP, Rollout) == Rollout(10)


# ---------------------------------------------------------------------------
# Introspection failures
# ---------------------------------------------------------------------------


class TestIntrospectionFailures:
    def test_mismatched_identifier_yields_nothing(self) -> None:
        stray = Feature(FeatureIdentifier("NOT_DECLARED"), CheckoutFeatures)
        assert get_markers(stray) == ()
        assert get_label(stray) == "NOT_DECLARED"
        assert get_owner(stray) is None
        assert is_enabled_by_default(stray) is False

    def test_group_that_is_not_a_feature_group(self) -> None:
        class NotAGroup:
            pass

        stray = Feature(FeatureIdentifier("X"), NotAGroup)  # type: ignore[arg-type]
        assert get_markers(stray) == ()
        assert get_label(stray) == "X"


class TestConcurrency:
    def test_parallel_resolution_is_consistent(self) -> None:
        results: list[str] = []
        lock = threading.Lock()

        def resolve() -> None:
            for _ in range(200):
                label = get_label(CheckoutFeatures.CHECKOUT_V2)
                with lock:
                    results.append(label)

        threads = [threading.Thread(target=resolve) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert set(results) == {"Checkout V2"}
        assert len(results) == 1600

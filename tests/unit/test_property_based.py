"""
Property-based tests using Hypothesis.

These tests verify ordering, reference and scale invariants across a wide
range of generated inputs.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from blueprint_themes.core.color_refs import resolve_color_ref, serialize_color_ref
from blueprint_themes.core.color_scale import generate_scale
from blueprint_themes.core.errors import CircularDependencyError
from blueprint_themes.core.ir import CANONICAL_STEPS, ColorDefinition, OKLCHColor, PluginDependency
from blueprint_themes.core.plugin import define_plugin
from blueprint_themes.core.resolver import sort_plugins

color_names = st.from_regex(r"[a-zA-Z][a-zA-Z0-9_]{0,15}", fullmatch=True)
steps = st.sampled_from(CANONICAL_STEPS)

oklch_colors = st.builds(
    OKLCHColor,
    l=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
    c=st.floats(min_value=0.0, max_value=0.4, allow_nan=False),
    h=st.floats(min_value=0.0, max_value=359.99, allow_nan=False),
)

scales = st.lists(steps, min_size=1, max_size=len(CANONICAL_STEPS), unique=True).map(
    lambda values: tuple(sorted(values))
)


def _plugin(index: int, deps: list[int]):
    return define_plugin(
        id=f"p{index}",
        version="1.0.0",
        register=lambda ctx: None,
        dependencies=[PluginDependency(id=f"p{d}") for d in deps],
    )


@st.composite
def plugin_dags(draw):
    """Acyclic plugin sets: plugin i may depend only on plugins created before it."""
    count = draw(st.integers(min_value=1, max_value=8))
    plugins = []
    for index in range(count):
        deps = draw(st.lists(st.integers(0, index - 1), unique=True)) if index else []
        plugins.append(_plugin(index, deps))
    return draw(st.permutations(plugins))


# =============================================================================
# Resolver
# =============================================================================


class TestResolverProperties:
    """Property-based tests for plugin ordering."""

    @given(plugin_dags())
    @settings(max_examples=200)
    def test_order_respects_every_edge(self, plugins) -> None:
        """Invariant: every plugin exactly once, dependencies before dependents."""
        ordered = sort_plugins(plugins)

        ids = [p.id for p in ordered]
        assert sorted(ids) == sorted(p.id for p in plugins)
        position = {plugin_id: i for i, plugin_id in enumerate(ids)}
        for plugin in plugins:
            for dep in plugin.dependencies:
                assert position[dep.id] < position[plugin.id]

    @given(plugin_dags())
    @settings(max_examples=100)
    def test_order_is_reproducible(self, plugins) -> None:
        """Invariant: the same input always yields the same order."""
        assert [p.id for p in sort_plugins(plugins)] == [p.id for p in sort_plugins(plugins)]

    @given(st.integers(min_value=2, max_value=6), st.randoms())
    @settings(max_examples=50)
    def test_ring_always_raises(self, size: int, rnd) -> None:
        """Invariant: a dependency ring never yields a partial order."""
        plugins = [_plugin(i, [(i + 1) % size]) for i in range(size)]
        rnd.shuffle(plugins)

        with pytest.raises(CircularDependencyError) as exc_info:
            sort_plugins(plugins)
        assert set(exc_info.value.cycle) == {f"p{i}" for i in range(size)}


# =============================================================================
# Colour references
# =============================================================================


class TestColorRefProperties:
    """Property-based tests for reference serialisation."""

    @given(color_names, steps)
    @settings(max_examples=200)
    def test_serialize_resolve_round_trip(self, name: str, step: int) -> None:
        """Invariant: serialize(resolve(s)) == s for every valid "name.step"."""
        value = f"{name}.{step}"
        ref = resolve_color_ref(value)
        assert ref is not None
        assert serialize_color_ref(ref) == value

    @given(st.text(max_size=30))
    @settings(max_examples=300)
    def test_resolve_never_raises(self, text: str) -> None:
        """Invariant: malformed input yields None, never an exception."""
        ref = resolve_color_ref(text)
        if ref is not None:
            assert serialize_color_ref(ref) == text


# =============================================================================
# Colour scales
# =============================================================================


class TestColorScaleProperties:
    """Property-based tests for scale generation."""

    @given(oklch_colors, scales)
    @settings(max_examples=100)
    def test_deterministic_and_complete(self, source: OKLCHColor, scale) -> None:
        """Invariant: equal definitions give identical output with every requested step."""
        first = generate_scale(ColorDefinition(source=source, scale=scale))
        second = generate_scale(ColorDefinition(source=source.model_copy(), scale=scale))

        assert first.model_dump_json() == second.model_dump_json()
        assert tuple(first.steps) == scale

    @given(oklch_colors)
    @settings(max_examples=100)
    def test_chroma_taper_and_constant_hue(self, source: OKLCHColor) -> None:
        """Invariant: ends never exceed mid chroma; hue is the source hue."""
        result = generate_scale(ColorDefinition(source=source))

        mid = result.steps[500].oklch.c
        assert result.steps[50].oklch.c <= mid
        assert result.steps[950].oklch.c <= mid
        assert all(step.oklch.h == source.h for step in result.steps.values())

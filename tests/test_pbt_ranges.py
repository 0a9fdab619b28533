# SPDX-License-Identifier: MIT
"""Property-based tests for range desugaring and matching.

These tests verify that:
- Tilde, caret and hyphen ranges admit exactly the releases they describe
- Desugared upper bounds keep out pre-releases of other release lines
- Rendered ranges match the same releases and, above 0.0.0, no fewer pre-releases
- || behaves as a disjunction and comparator order does not matter
"""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from semverzero import ComparatorSet, Range, Version, satisfies


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=20)

prerelease_tags = st.sampled_from(["alpha", "alpha.1", "beta.2", "rc.1", "0", "pre-x"])


@st.composite
def releases(draw):
    """Generate a Version without a pre-release."""
    return Version(draw(components), draw(components), draw(components))


@st.composite
def simple_ranges(draw):
    """Generate a short range expression mixing shorthand forms."""
    prefix = draw(st.sampled_from(["", "~", "^", ">=", "<", "<=", ">", "="]))
    parts = draw(st.lists(st.sampled_from(["0", "1", "2", "3", "x"]), min_size=1, max_size=3))
    return prefix + ".".join(parts)


# =============================================================================
# Properties
# =============================================================================


@given(base=releases(), step=st.integers(min_value=0, max_value=5))
@settings(max_examples=100)
def test_tilde_allows_patch_changes(base: Version, step: int) -> None:
    """~M.m.p admits later patches and nothing from the next minor."""
    expression = f"~{base}"

    assert satisfies(Version(base.major, base.minor, base.patch + step), expression)
    assert not satisfies(Version(base.major, base.minor + 1, 0), expression)


@given(base=releases(), minor_step=st.integers(min_value=0, max_value=5))
@settings(max_examples=100)
def test_caret_keeps_major(base: Version, minor_step: int) -> None:
    """^M.m.p with M > 0 admits later minors and nothing from the next major."""
    assume(base.major > 0)
    expression = f"^{base}"

    assert satisfies(Version(base.major, base.minor + minor_step, base.patch), expression)
    assert satisfies(Version(base.major, base.minor + 1, 0), expression)
    assert not satisfies(Version(base.major + 1, 0, 0), expression)


@given(base=releases(), tag=prerelease_tags, minor_step=st.integers(min_value=1, max_value=5))
@settings(max_examples=100)
def test_caret_excludes_inner_prereleases(base: Version, tag: str, minor_step: int) -> None:
    """^M.m.p never admits a pre-release of a later minor in the same major."""
    assume(base.major > 0)
    candidate = Version(base.major, base.minor + minor_step, 0, tag)

    assert not satisfies(candidate, f"^{base}")


@given(low=releases(), high=releases(), candidate=releases())
@settings(max_examples=200)
def test_hyphen_is_inclusive_interval(low: Version, high: Version, candidate: Version) -> None:
    """A - B with full bounds admits exactly the releases from A to B."""
    assume(low <= high)
    expression = f"{low} - {high}"

    assert satisfies(candidate, expression) == (low <= candidate <= high)


@given(
    first=simple_ranges(),
    second=simple_ranges(),
    candidate=releases(),
)
@settings(max_examples=200)
def test_disjunction(first: str, second: str, candidate: Version) -> None:
    """A || B matches exactly when A or B does."""
    combined = Range.parse(f"{first} || {second}")

    assert combined.is_match(candidate) == (
        Range.parse(first).is_match(candidate) or Range.parse(second).is_match(candidate)
    )


@given(
    tokens=st.lists(simple_ranges(), min_size=1, max_size=4),
    candidate=releases(),
    data=st.data(),
)
@settings(max_examples=100)
def test_comparator_order_irrelevant(tokens: list[str], candidate: Version, data) -> None:
    """Reordering the tokens of a comparator set does not change matching."""
    shuffled = data.draw(st.permutations(tokens))

    forward = ComparatorSet.parse(" ".join(tokens))
    backward = ComparatorSet.parse(" ".join(shuffled))
    assert forward.is_match(candidate) == backward.is_match(candidate)


@given(expression=simple_ranges(), candidate=releases())
@settings(max_examples=200)
def test_rendering_equivalent_for_releases(expression: str, candidate: Version) -> None:
    """The rendered range matches the same releases as the parsed expression."""
    version_range = Range.parse(expression)
    reparsed = Range.parse(str(version_range))

    assert reparsed.is_match(candidate) == version_range.is_match(candidate)


@given(expression=simple_ranges(), base=releases(), tag=prerelease_tags)
@settings(max_examples=200)
def test_rendering_only_widens_for_prereleases(expression: str, base: Version, tag: str) -> None:
    """The rendered range admits every pre-release the parsed expression admits.

    Rendering drops the pre-release restriction of synthesized upper bounds,
    so it may admit more. The one narrowing is an empty set, printed "*" and
    re-parsed as ">=0.0.0", which keeps out 0.0.0 pre-releases.
    """
    assume(base.triple != (0, 0, 0))
    candidate = Version(base.major, base.minor, base.patch, tag)
    version_range = Range.parse(expression)
    reparsed = Range.parse(str(version_range))

    if version_range.is_match(candidate):
        assert reparsed.is_match(candidate)

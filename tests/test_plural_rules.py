"""Tests for plural.py: count buckets, category slots and the scheme registry.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localestore.diagnostics import DiagnosticCode
from localestore.enums import CountBucket, PluralCategory
from localestore.errors import InvalidPluralSchemeError, LocaleError
from localestore.plural import PluralSchemeRegistry, select_bucket, select_slot

categories = st.sampled_from(["singular", "plural", "other"])
schemes = st.tuples(categories, categories, categories)


class TestSelectBucket:
    """Count to bucket mapping."""

    def test_one_is_one_bucket(self) -> None:
        """Count 1 selects the one bucket."""
        assert select_bucket(1) is CountBucket.ONE

    def test_zero_is_zero_bucket(self) -> None:
        """Count 0 selects the zero bucket."""
        assert select_bucket(0) is CountBucket.ZERO

    @pytest.mark.parametrize("count", [2, 3, -1, 100, -100])
    def test_other_counts_are_many_bucket(self, count: int) -> None:
        """Every other count, negatives included, selects the many bucket."""
        assert select_bucket(count) is CountBucket.MANY

    @given(count=st.integers().filter(lambda n: n not in (0, 1)))
    def test_many_bucket_property(self, count: int) -> None:
        """Any integer besides 0 and 1 maps to bucket 2."""
        assert select_bucket(count) == 2


class TestSelectSlot:
    """Category to variant slot table."""

    @given(size=st.integers(min_value=2, max_value=5))
    def test_singular_reads_slot_zero(self, size: int) -> None:
        """singular always reads slot 0."""
        assert select_slot("singular", size) == 0

    @given(size=st.integers(min_value=2, max_value=5))
    def test_plural_reads_slot_one(self, size: int) -> None:
        """plural always reads slot 1."""
        assert select_slot("plural", size) == 1

    def test_other_reads_slot_two_when_present(self) -> None:
        """other reads slot 2 when the entry has a third form."""
        assert select_slot("other", 3) == 2

    def test_other_falls_back_to_slot_zero(self) -> None:
        """other with only two forms reads the singular slot."""
        assert select_slot("other", 2) == 0

    def test_unknown_category_reads_slot_zero(self) -> None:
        """Unrecognized categories read the singular slot."""
        assert select_slot("dual", 3) == 0

    def test_enum_members_accepted(self) -> None:
        """PluralCategory members select the same slots as plain strings."""
        assert select_slot(PluralCategory.PLURAL, 2) == 1
        assert select_slot(PluralCategory.OTHER, 3) == 2


class TestPluralSchemeRegistry:
    """get_scheme / set_scheme behaviour."""

    def test_default_scheme(self) -> None:
        """A new registry carries the built-in default scheme."""
        registry = PluralSchemeRegistry()
        assert registry.get_scheme("default") == ("plural", "singular", "plural")

    def test_unregistered_code_gets_default(self) -> None:
        """Codes without an override resolve to the default scheme."""
        registry = PluralSchemeRegistry()
        assert registry.get_scheme("de_DE") == registry.get_scheme("default")
        assert "de_DE" not in registry

    def test_set_scheme_registers_override(self) -> None:
        """set_scheme stores categories as PluralCategory members."""
        registry = PluralSchemeRegistry()
        registry.set_scheme("fr_CA", ["singular", "singular", "plural"])
        scheme = registry.get_scheme("fr_CA")
        assert scheme == ("singular", "singular", "plural")
        assert all(isinstance(item, PluralCategory) for item in scheme)
        assert "fr_CA" in registry

    def test_set_scheme_overwrites(self) -> None:
        """A second registration replaces the first."""
        registry = PluralSchemeRegistry()
        registry.set_scheme("fr_CA", ["singular", "singular", "plural"])
        registry.set_scheme("fr_CA", ["other", "singular", "other"])
        assert registry.get_scheme("fr_CA") == ("other", "singular", "other")

    def test_default_can_be_overwritten(self) -> None:
        """Registering under "default" replaces the fallback scheme."""
        registry = PluralSchemeRegistry()
        registry.set_scheme("default", ["singular", "singular", "singular"])
        assert registry.get_scheme("xx_XX") == ("singular", "singular", "singular")

    def test_registries_do_not_share_state(self) -> None:
        """Changing one registry's default leaves a new registry untouched."""
        PluralSchemeRegistry().set_scheme("default", ["other", "other", "other"])
        assert PluralSchemeRegistry().get_scheme("default") == ("plural", "singular", "plural")

    def test_initial_overrides(self) -> None:
        """Constructor overrides are validated and registered."""
        registry = PluralSchemeRegistry({"fr_CA": ("singular", "singular", "plural")})
        assert registry.get_scheme("fr_CA")[0] == "singular"

    def test_schemes_view_is_read_only(self) -> None:
        """schemes exposes a mapping that cannot be mutated."""
        registry = PluralSchemeRegistry()
        with pytest.raises(TypeError):
            registry.schemes["fr_CA"] = ("plural", "plural", "plural")  # type: ignore[index]

    @given(scheme=schemes)
    def test_any_valid_triple_accepted(self, scheme: tuple[str, str, str]) -> None:
        """Every triple drawn from the vocabulary is accepted verbatim."""
        registry = PluralSchemeRegistry()
        registry.set_scheme("xx", scheme)
        assert registry.get_scheme("xx") == scheme


class TestInvalidSchemes:
    """Rejected schemes raise and leave the registry unchanged."""

    @pytest.mark.parametrize(
        "scheme",
        [
            ["singular", "plural"],
            ["singular", "plural", "other", "plural"],
            [],
        ],
    )
    def test_wrong_length_rejected(self, scheme: list[str]) -> None:
        """Triples of the wrong length raise SCHEME_LENGTH."""
        registry = PluralSchemeRegistry()
        registry.set_scheme("fr_CA", ["singular", "singular", "plural"])
        with pytest.raises(InvalidPluralSchemeError) as exc_info:
            registry.set_scheme("fr_CA", scheme)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SCHEME_LENGTH
        assert registry.get_scheme("fr_CA") == ("singular", "singular", "plural")

    @pytest.mark.parametrize(
        "scheme",
        [
            ["singular", "plural", "dual"],
            ["Singular", "plural", "plural"],
            ["plural", None, "plural"],
            ["plural", ["plural"], "plural"],
        ],
    )
    def test_unknown_category_rejected(self, scheme: list[object]) -> None:
        """Values outside the vocabulary raise SCHEME_CATEGORY."""
        registry = PluralSchemeRegistry()
        with pytest.raises(InvalidPluralSchemeError) as exc_info:
            registry.set_scheme("de_DE", scheme)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SCHEME_CATEGORY
        assert "de_DE" not in registry

    def test_error_is_value_error_and_locale_error(self) -> None:
        """InvalidPluralSchemeError can be caught as ValueError or LocaleError."""
        registry = PluralSchemeRegistry()
        with pytest.raises(ValueError, match="SCHEME_LENGTH"):
            registry.set_scheme("x", ["plural"])
        with pytest.raises(LocaleError):
            registry.set_scheme("x", ["plural"])

    def test_invalid_initial_override_raises(self) -> None:
        """Constructor overrides go through the same validation."""
        with pytest.raises(InvalidPluralSchemeError):
            PluralSchemeRegistry({"fr_CA": ("singular",)})

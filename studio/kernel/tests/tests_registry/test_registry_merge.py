"""
Club Studio Registry -- Lookup and Merge Tests

Covers:
  - every ComponentType and Trait has a lookup entry
  - unknown keys yield an empty tuple
  - merge order: type first, then traits in declaration order
  - later descriptors shadow earlier ones with the same key
"""

from studio.kernel.registry import (
    coerce,
    covered_traits,
    covered_types,
    descriptors_for_trait,
    descriptors_for_type,
    merge_descriptors,
)
from studio.kernel.types import ComponentType, PropertyKind, Trait


def keys(descriptors):
    return [d.key for d in descriptors]


# ============================================================================
# Exhaustiveness
# ============================================================================


class TestExhaustive:
    def test_every_type_has_descriptors_entry(self):
        assert covered_types() == set(ComponentType)

    def test_every_trait_has_descriptors_entry(self):
        assert covered_traits() == set(Trait)

    def test_every_trait_contributes_something(self):
        for trait in Trait:
            assert descriptors_for_trait(trait), trait

    def test_descriptor_keys_unique_within_type(self):
        for component_type in ComponentType:
            ks = keys(descriptors_for_type(component_type))
            assert len(ks) == len(set(ks)), component_type


# ============================================================================
# Lookups
# ============================================================================


class TestLookup:
    def test_string_type_lookup(self):
        assert descriptors_for_type("text") == descriptors_for_type(ComponentType.TEXT)

    def test_unknown_type_is_empty(self):
        assert descriptors_for_type("hologram") == ()

    def test_unknown_trait_is_empty(self):
        assert descriptors_for_trait("sparkle") == ()

    def test_coerce(self):
        assert coerce(Trait, "typography") is Trait.TYPOGRAPHY
        assert coerce(Trait, Trait.GLASS) is Trait.GLASS
        assert coerce(Trait, "nope") is None


# ============================================================================
# Merge
# ============================================================================


class TestMerge:
    def test_no_traits_is_type_list(self):
        assert merge_descriptors(ComponentType.CARD) == list(descriptors_for_type(ComponentType.CARD))

    def test_trait_shadows_type_descriptor(self):
        merged = {d.key: d for d in merge_descriptors(ComponentType.TEXT, [Trait.TYPOGRAPHY])}
        trait_version = {d.key: d for d in descriptors_for_trait(Trait.TYPOGRAPHY)}["fontSize"]
        assert merged["fontSize"] == trait_version
        assert merged["fontSize"].label == "Font size"

    def test_later_trait_shadows_earlier_trait(self):
        merged = {d.key: d for d in merge_descriptors(ComponentType.CONTAINER, [Trait.INTERACTION, Trait.GLASS])}
        assert merged["opacity"].label == "Glass opacity"

    def test_dedup_keeps_first_position(self):
        merged = keys(merge_descriptors(ComponentType.TEXT, [Trait.CONTENT]))
        assert merged[0] == "text"
        assert merged.count("text") == 1

    def test_unknown_trait_is_ignored(self):
        assert merge_descriptors(ComponentType.TEXT, ["sparkle"]) == merge_descriptors(ComponentType.TEXT)

    def test_unknown_type_with_trait(self):
        assert keys(merge_descriptors("hologram", [Trait.CONTENT])) == ["text"]

    def test_text_with_text_traits(self):
        merged = merge_descriptors(ComponentType.TEXT, [Trait.CONTENT, Trait.TYPOGRAPHY, Trait.INTERACTION])
        assert keys(merged) == ["text", "fontSize", "fontWeight", "textColor", "visible", "opacity"]
        by_key = {d.key: d for d in merged}
        assert by_key["text"].label == "Content"
        assert by_key["visible"].kind is PropertyKind.TOGGLE
        assert by_key["opacity"].kind is PropertyKind.SLIDER

"""Unit tests for the digital set variants.

Every variant must show the same set semantics; only the iteration order
and the behaviour of insert_new on a duplicate may differ.
"""

import pytest

from latticekit.domain import HyperRectDomain, Point
from latticekit.exceptions import PointOutOfDomainError, UnsupportedDomainError
from latticekit.sets import (
    DigitalSet,
    DigitalSetByBitmap,
    DigitalSetBySequence,
    DigitalSetBySortedSet,
    DigitalSetDomain,
)

VARIANTS = [DigitalSetBySequence, DigitalSetBySortedSet, DigitalSetByBitmap]


@pytest.fixture
def domain() -> HyperRectDomain:
    return HyperRectDomain(Point.of(1, 2, 3, 4), Point.of(5, 5, 3, 5))


@pytest.fixture(params=VARIANTS, ids=lambda cls: cls.__name__)
def set_type(request) -> type[DigitalSet]:
    return request.param


class TestSetSemantics:
    """Behaviour shared by all variants."""

    def test_empty_on_construction(self, set_type, domain) -> None:
        """A new set is empty and bound to its domain."""
        s = set_type(domain)
        assert s.size() == 0
        assert s.is_empty()
        assert s.domain is domain

    def test_insert_with_duplicate(self, set_type, domain) -> None:
        """Inserting three points plus a repeat gives three points."""
        s = set_type(domain)
        p1 = Point.of(4, 3, 3, 4)
        p2 = Point.of(2, 5, 3, 5)
        p3 = Point.of(2, 5, 3, 4)
        s.insert(p1)
        s.insert(p2)
        s.insert(p3)
        s.insert(p2)
        assert s.size() == 3
        assert len(s) == 3
        assert all(p in s for p in (p1, p2, p3))

    def test_insert_idempotent(self, set_type, domain) -> None:
        """Inserting twice is the same as inserting once."""
        once = set_type(domain)
        twice = set_type(domain)
        p = Point.of(3, 3, 3, 5)
        once.insert(p)
        twice.insert(p)
        twice.insert(p)
        assert once.size() == twice.size() == 1
        assert (p in once) == (p in twice)

    def test_erase(self, set_type, domain) -> None:
        """Erase removes present points and ignores absent ones."""
        s = set_type(domain)
        p = Point.of(1, 2, 3, 4)
        q = Point.of(5, 5, 3, 5)
        s.insert(p)
        s.erase(q)
        assert s.size() == 1
        s.erase(p)
        assert s.size() == 0
        assert p not in s
        s.erase(p)
        assert s.size() == 0

    def test_membership_matches_history(self, set_type, domain) -> None:
        """Membership is true iff inserted and not later erased."""
        s = set_type(domain)
        points = list(domain)
        inserted = points[::3] + points[::3]
        erased = points[::6]
        s.insert_all(inserted)
        s.erase_all(erased)
        expected = set(inserted) - set(erased)
        assert s.size() == len(expected)
        for p in points:
            assert (p in s) == (p in expected)
        assert set(s) == expected

    def test_iteration_restartable(self, set_type, domain) -> None:
        """Iterating twice reports the same points."""
        s = set_type(domain)
        s.insert_all(list(domain)[:7])
        assert list(s) == list(s)

    def test_contains_and_is_inside(self, set_type, domain) -> None:
        """contains() and is_inside() agree with the in operator."""
        s = set_type(domain)
        p = Point.of(2, 4, 3, 4)
        s.insert(p)
        assert s.contains(p)
        assert s.is_inside(p)
        assert not s.contains(Point.of(2, 4, 3, 5))

    def test_clear(self, set_type, domain) -> None:
        """clear() empties the set."""
        s = set_type(domain)
        s.insert_all(domain)
        s.clear()
        assert s.size() == 0
        assert list(s) == []

    def test_is_valid(self, set_type, domain) -> None:
        """A set filled through the public contract is valid."""
        s = set_type(domain)
        s.insert_all(list(domain)[::2])
        assert s.is_valid()

    def test_bounding_box(self, set_type, domain) -> None:
        """Tight box of the contents."""
        s = set_type(domain)
        assert s.compute_bounding_box() is None
        s.insert(Point.of(4, 3, 3, 4))
        s.insert(Point.of(2, 5, 3, 5))
        assert s.compute_bounding_box() == (Point.of(2, 3, 3, 4), Point.of(4, 5, 3, 5))

    def test_complement(self, set_type, domain) -> None:
        """Complement holds the domain points absent from the set."""
        s = set_type(domain)
        s.insert_all(list(domain)[:10])
        c = s.complement()
        assert type(c) is set_type
        assert c.size() == domain.size() - 10
        assert all((p in s) != (p in c) for p in domain)

    def test_complement_of_itself(self, set_type, domain) -> None:
        """assign_from_complement(self) leaves the complement in every variant."""
        small = HyperRectDomain(Point.of(0, 0), Point.of(2, 2))
        s = set_type(small)
        s.insert(Point.of(0, 0))
        s.assign_from_complement(s)
        assert s.size() == 8
        assert Point.of(0, 0) not in s
        assert s.is_valid()

    def test_copy_is_independent(self, set_type, domain) -> None:
        """Copies share content but not storage."""
        s = set_type(domain)
        p = Point.of(1, 2, 3, 4)
        s.insert(p)
        c = s.copy()
        c.erase(p)
        assert p in s
        assert p not in c

    def test_update(self, set_type, domain) -> None:
        """In-place union."""
        a = set_type(domain)
        b = DigitalSetBySortedSet(domain)
        a.insert(Point.of(1, 2, 3, 4))
        b.insert(Point.of(1, 2, 3, 4))
        b.insert(Point.of(5, 5, 3, 5))
        a |= b
        assert a.size() == 2
        assert a.same_points(b)

    def test_self_display(self, set_type, domain) -> None:
        """Display shows the variant and the size."""
        s = set_type(domain)
        s.insert(Point.of(4, 3, 3, 4))
        text = s.self_display()
        assert set_type.__name__ in text
        assert "size=1" in text
        assert "(4, 3, 3, 4)" in text
        assert str(s) == text


class TestVariantDifferences:
    """Documented differences between variants."""

    def test_sequence_keeps_insertion_order(self, domain) -> None:
        """List-backed sets iterate in insertion order."""
        s = DigitalSetBySequence(domain)
        points = [Point.of(4, 3, 3, 4), Point.of(2, 5, 3, 5), Point.of(2, 5, 3, 4)]
        s.insert_all(points)
        assert list(s) == points

    @pytest.mark.parametrize("set_type", [DigitalSetBySortedSet, DigitalSetByBitmap])
    def test_ordered_variants_iterate_in_domain_order(self, set_type, domain) -> None:
        """Sorted and bitmap sets iterate in domain order."""
        s = set_type(domain)
        points = [Point.of(4, 3, 3, 4), Point.of(2, 5, 3, 5), Point.of(2, 5, 3, 4)]
        s.insert_all(points)
        assert list(s) == sorted(points)

    def test_sequence_insert_new_duplicate_over_counts(self, domain) -> None:
        """Breaking insert_new's precondition is visible on a list-backed set."""
        s = DigitalSetBySequence(domain)
        p = Point.of(1, 2, 3, 4)
        s.insert_new(p)
        s.insert_new(p)
        assert s.size() == 2
        assert not s.is_valid()

    @pytest.mark.parametrize("set_type", [DigitalSetBySortedSet, DigitalSetByBitmap])
    def test_insert_new_duplicate_stays_consistent(self, set_type, domain) -> None:
        """Sorted and bitmap sets stay consistent on a duplicate insert_new."""
        s = set_type(domain)
        p = Point.of(1, 2, 3, 4)
        s.insert_new(p)
        s.insert_new(p)
        assert s.size() == 1
        assert s.is_valid()

    def test_sorted_set_out_of_order_inserts(self, domain) -> None:
        """Sorted set keeps order whatever the insertion order."""
        s = DigitalSetBySortedSet(domain)
        points = list(domain)
        for p in reversed(points):
            s.insert(p)
        s.erase(points[5])
        assert list(s) == points[:5] + points[6:]

    def test_container_variants_accept_out_of_domain_points(self, domain) -> None:
        """Container-only variants store any point; is_valid() flags it."""
        outside = Point.of(0, 0, 0, 0)
        for set_type in (DigitalSetBySequence, DigitalSetBySortedSet):
            s = set_type(domain)
            s.insert(outside)
            assert outside in s
            assert not s.is_valid()


class TestBitmapSet:
    """Offset-indexed variant specifics."""

    def test_out_of_domain_insert_raises(self, domain) -> None:
        """Inserting outside the domain is rejected."""
        s = DigitalSetByBitmap(domain)
        with pytest.raises(PointOutOfDomainError) as exc_info:
            s.insert(Point.of(0, 2, 3, 4))
        assert exc_info.value.point == Point.of(0, 2, 3, 4)
        with pytest.raises(PointOutOfDomainError):
            s.insert_new(Point.of(6, 2, 3, 4))
        assert s.size() == 0

    def test_out_of_domain_membership_and_erase(self, domain) -> None:
        """Out-of-domain points are never members and erase ignores them."""
        s = DigitalSetByBitmap(domain)
        outside = Point.of(9, 9, 9, 9)
        assert outside not in s
        s.erase(outside)
        assert s.size() == 0
        assert "not a point" not in s

    def test_requires_indexable_domain(self, domain) -> None:
        """A set domain view cannot back a bitmap."""
        view = DigitalSetDomain(DigitalSetBySortedSet(domain))
        with pytest.raises(UnsupportedDomainError):
            DigitalSetByBitmap(view)

    def test_mask_shape_and_read_only(self, domain) -> None:
        """mask() is shaped like the extent and not writeable."""
        s = DigitalSetByBitmap(domain)
        s.insert(Point.of(1, 2, 3, 4))
        mask = s.mask()
        assert mask.shape == (5, 4, 1, 2)
        assert bool(mask[0, 0, 0, 0])
        assert int(mask.sum()) == 1
        with pytest.raises(ValueError):
            mask[0, 0, 0, 1] = True

    def test_iteration_across_scan_chunks(self) -> None:
        """Iteration spans several scan chunks in domain order and starts lazily."""
        big = HyperRectDomain(Point.of(-50, -50), Point.of(49, 49))
        s = DigitalSetByBitmap(big)
        points = [Point.of(49, 49), Point.of(-50, -50), Point.of(10, -3), Point.of(0, 7)]
        s.insert_all(points)
        assert list(s) == sorted(points)
        assert next(iter(s)) == Point.of(-50, -50)

    def test_vectorized_complement(self, domain) -> None:
        """Complement of a bitmap by a bitmap keeps the count exact."""
        s = DigitalSetByBitmap(domain)
        s.insert_all(list(domain)[:4])
        c = s.complement()
        assert c.size() == 36
        assert c.is_valid()
        assert not any(p in c for p in s)

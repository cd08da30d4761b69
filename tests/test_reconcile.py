"""Tests for attribute-set reconciliation."""

from catalog.services.reconcile import dedupe_assignments, reconcile_attributes


class TestReconcileAttributes:
    def test_add_update_remove_example(self):
        diff = reconcile_attributes([(1, "L"), (2, "Blue")], [(2, "Red"), (3, "Heavy")])
        assert diff.to_add == [(3, "Heavy")]
        assert diff.to_update == [(2, "Red")]
        assert diff.to_remove == [1]

    def test_unchanged_value_is_still_updated(self):
        diff = reconcile_attributes([(1, "L")], [(1, "L")])
        assert diff.to_update == [(1, "L")]
        assert diff.changed == []

    def test_empty_submitted_removes_everything(self):
        diff = reconcile_attributes([(1, "L"), (2, "Blue")], [])
        assert diff.to_add == []
        assert diff.to_update == []
        assert sorted(diff.to_remove) == [1, 2]

    def test_empty_current_adds_everything(self):
        diff = reconcile_attributes([], [(1, "L"), (2, "Blue")])
        assert diff.to_add == [(1, "L"), (2, "Blue")]
        assert diff.to_update == []
        assert diff.to_remove == []

    def test_duplicate_submitted_ids_last_one_wins(self):
        diff = reconcile_attributes([(1, "S")], [(1, "M"), (2, "Red"), (1, "XL")])
        assert diff.to_update == [(1, "XL")]
        assert diff.to_add == [(2, "Red")]

    def test_lists_are_disjoint_and_cover_all_ids(self):
        current = [(1, "a"), (2, "b"), (3, "c"), (5, "e")]
        submitted = [(2, "b"), (3, "x"), (4, "d"), (6, "f")]
        diff = reconcile_attributes(current, submitted)

        added = {a for a, _ in diff.to_add}
        updated = {a for a, _ in diff.to_update}
        removed = set(diff.to_remove)

        assert added.isdisjoint(updated)
        assert added.isdisjoint(removed)
        assert updated.isdisjoint(removed)
        assert added | updated == {a for a, _ in submitted}
        assert removed == {1, 5}

    def test_reconciling_result_again_is_a_no_op(self):
        submitted = [(2, "Red"), (3, "Heavy")]
        reconcile_attributes([(1, "L"), (2, "Blue")], submitted)

        again = reconcile_attributes(submitted, submitted)
        assert again.to_add == []
        assert again.to_remove == []
        assert again.changed == []
        assert again.is_empty

    def test_changed_lists_only_differing_values(self):
        diff = reconcile_attributes([(1, "L"), (2, "Blue")], [(1, "L"), (2, "Red")])
        assert diff.changed == [(2, "Red")]
        assert not diff.is_empty


def test_dedupe_keeps_first_position_and_last_value():
    assert dedupe_assignments([(1, "a"), (2, "b"), (1, "c")]) == [(1, "c"), (2, "b")]

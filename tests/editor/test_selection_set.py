"""
Unit Tests for SelectionSet
"""

from doculoom.editor.selection import SelectionSet


class TestSelectionSet:

    def test_select_when_not_additive_then_replaces(self):
        sel = SelectionSet(["a", "b"])

        sel.select("c")

        assert sel.ids == ("c",)

    def test_select_when_additive_then_toggles(self):
        sel = SelectionSet(["a"])

        sel.select("b", additive=True)
        sel.select("a", additive=True)

        assert sel.ids == ("b",)

    def test_primary_when_several_then_most_recent(self):
        sel = SelectionSet()
        sel.select("a")
        sel.select("b", additive=True)

        assert sel.primary == "b"

    def test_primary_when_empty_then_none(self):
        assert SelectionSet().primary is None

    def test_retain_when_ids_gone_then_dropped_in_order(self):
        sel = SelectionSet(["a", "b", "c"])

        sel.retain(["c", "a"])

        assert sel.ids == ("a", "c")

    def test_iter_when_mutated_during_loop_then_safe(self):
        sel = SelectionSet(["a", "b"])

        for element_id in sel:
            sel.discard([element_id])

        assert len(sel) == 0

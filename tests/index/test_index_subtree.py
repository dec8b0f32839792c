import unittest

from drivetree.index import build_children_index, compute_subtree_ids
from drivetree.models import FolderNode


def _folders() -> list[FolderNode]:
    return [
        FolderNode(id="A", name="A"),
        FolderNode(id="B", name="B", parent_id="A"),
        FolderNode(id="C", name="C", parent_id="B"),
        FolderNode(id="D", name="D", parent_id="A"),
        FolderNode(id="E", name="E"),
        FolderNode(id="ORPHAN", name="orphan", parent_id="MISSING"),
        FolderNode(id="O1", name="o1", parent_id="ORPHAN"),
    ]


class TestSubtreeIndex(unittest.TestCase):
    def test_children_index_keeps_listing_order(self) -> None:
        children = build_children_index(_folders())
        self.assertEqual(children["A"], ["B", "D"])
        self.assertEqual(children[None], ["A", "E", "ORPHAN"])
        self.assertNotIn("MISSING", children)

    def test_empty_parent_string_is_root(self) -> None:
        children = build_children_index([FolderNode(id="X", name="x", parent_id="")])
        self.assertEqual(children[None], ["X"])

    def test_subtree_includes_start_and_descendants(self) -> None:
        self.assertEqual(compute_subtree_ids(_folders(), "A"), {"A", "B", "C", "D"})
        self.assertEqual(compute_subtree_ids(_folders(), "C"), {"C"})

    def test_subtree_from_root_covers_everything_reachable(self) -> None:
        ids = compute_subtree_ids(_folders(), None)
        self.assertEqual(ids, {"A", "B", "C", "D", "E", "ORPHAN", "O1"})

    def test_single_root_folder(self) -> None:
        folders = [FolderNode(id="r", name="root", parent_id=None)]
        self.assertEqual(compute_subtree_ids(folders, None), {"r"})

    def test_empty_listing(self) -> None:
        self.assertEqual(compute_subtree_ids([], None), set())

    def test_unknown_start_returns_only_start(self) -> None:
        self.assertEqual(compute_subtree_ids(_folders(), "NOPE"), {"NOPE"})

    def test_closed_under_children(self) -> None:
        folders = _folders()
        ids = compute_subtree_ids(folders, "A")
        for f in folders:
            if f.parent_id in ids:
                self.assertIn(f.id, ids)

    def test_cycle_terminates(self) -> None:
        folders = [
            FolderNode(id="X", name="x", parent_id="Y"),
            FolderNode(id="Y", name="y", parent_id="X"),
        ]
        self.assertEqual(compute_subtree_ids(folders, "X"), {"X", "Y"})
        self.assertEqual(compute_subtree_ids(folders, None), set())


if __name__ == "__main__":
    unittest.main()

import unittest

from drivetree.models import ROOT_CRUMB, Crumb, FileNode, FolderNode, item_kind


class TestNodes(unittest.TestCase):
    def test_folder_defaults_to_root_parent(self) -> None:
        folder = FolderNode(id="a", name="A")
        self.assertIsNone(folder.parent_id)
        self.assertIsNone(folder.created_time)

    def test_file_rejects_negative_size(self) -> None:
        with self.assertRaises(ValueError):
            FileNode(id="f", name="f.txt", size=-1)

    def test_item_kind(self) -> None:
        self.assertEqual(item_kind(FolderNode(id="a", name="A")), "folder")
        self.assertEqual(item_kind(FileNode(id="f", name="f", size=0)), "file")
        with self.assertRaises(TypeError):
            item_kind("not an item")  # type: ignore[arg-type]

    def test_root_crumb(self) -> None:
        self.assertEqual(ROOT_CRUMB, Crumb(id=None, name="Drive"))


if __name__ == "__main__":
    unittest.main()

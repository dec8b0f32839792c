import unittest

from drivetree.index import contains_normalized, normalize_for_search, search_subtree
from drivetree.models import FileNode, FolderNode


def _tree() -> tuple[list[FolderNode], list[FileNode]]:
    folders = [
        FolderNode(id="A", name="Reports"),
        FolderNode(id="B", name="Résumés", parent_id="A"),
        FolderNode(id="C", name="Photos"),
    ]
    files = [
        FileNode(id="f1", name="report-root.txt", size=1),
        FileNode(id="f2", name="Report-A.pdf", size=2, parent_id="A"),
        FileNode(id="f3", name="resume.docx", size=3, parent_id="B"),
        FileNode(id="f4", name="report-photos.png", size=4, parent_id="C"),
    ]
    return folders, files


class TestNormalize(unittest.TestCase):
    def test_normalize_for_search(self) -> None:
        self.assertEqual(normalize_for_search("  Résumé "), "resume")

    def test_contains_normalized(self) -> None:
        self.assertTrue(contains_normalized("Résumés", "resume"))
        self.assertTrue(contains_normalized("Report-A.pdf", "REPORT"))
        self.assertFalse(contains_normalized("Photos", "report"))


class TestSearchSubtree(unittest.TestCase):
    def test_blank_term_returns_nothing(self) -> None:
        folders, files = _tree()
        self.assertEqual(search_subtree("   ", None, folders, files), [])

    def test_from_root_searches_everything(self) -> None:
        folders, files = _tree()
        results = search_subtree("report", None, folders, files)
        self.assertEqual([r.id for r in results], ["A", "f1", "f2", "f4"])

    def test_from_folder_limits_to_subtree(self) -> None:
        folders, files = _tree()
        results = search_subtree("re", "A", folders, files)
        # Folder A itself, its child B, files under A and B; not root or C files.
        self.assertEqual([r.id for r in results], ["A", "B", "f2", "f3"])

    def test_accent_insensitive(self) -> None:
        folders, files = _tree()
        results = search_subtree("resume", "A", folders, files)
        self.assertEqual([r.id for r in results], ["B", "f3"])


if __name__ == "__main__":
    unittest.main()

import unittest
from typing import Optional

from drivetree.errors import InvalidArgumentError, RemoteOperationError
from drivetree.upload import (
    InMemoryFile,
    UploadEntry,
    skip_empty_files,
    upload_folder,
    upload_tree,
)


class FakeRemote:
    def __init__(self, fail_folder: Optional[str] = None, fail_file: Optional[str] = None) -> None:
        self.calls: list[tuple] = []
        self._next = 0
        self._fail_folder = fail_folder
        self._fail_file = fail_file

    async def create_folder(self, name: str, parent_id: Optional[str]) -> str:
        self.calls.append(("create_folder", name, parent_id))
        if name == self._fail_folder:
            raise RuntimeError("create failed")
        self._next += 1
        return f"F{self._next}"

    async def add_file(self, name, size, content, parent_id) -> None:
        self.calls.append(("add_file", name, size, parent_id))
        if name == self._fail_file:
            raise RuntimeError("add failed")


def _entry(path: str, data: bytes = b"data") -> UploadEntry:
    name = path.rsplit("/", 1)[-1]
    return UploadEntry(content=InMemoryFile(name=name, data=data), relative_path=path)


class TestUploadTree(unittest.IsolatedAsyncioTestCase):
    async def test_empty_entries_make_no_calls(self) -> None:
        remote = FakeRemote()
        plan = await upload_tree([], "T", remote)
        self.assertEqual(remote.calls, [])
        self.assertEqual(plan.as_dict(), {"": "T"})

    async def test_shared_ancestor_created_once(self) -> None:
        remote = FakeRemote()
        entries = [_entry("a/b/x.txt"), _entry("a/c/y.txt"), _entry("a/b/z.txt")]

        plan = await upload_tree(entries, None, remote)

        folder_calls = [c for c in remote.calls if c[0] == "create_folder"]
        self.assertEqual(
            folder_calls,
            [
                ("create_folder", "a", None),
                ("create_folder", "b", "F1"),
                ("create_folder", "c", "F1"),
            ],
        )
        file_calls = [c for c in remote.calls if c[0] == "add_file"]
        self.assertEqual(
            file_calls,
            [
                ("add_file", "x.txt", 4, "F2"),
                ("add_file", "y.txt", 4, "F3"),
                ("add_file", "z.txt", 4, "F2"),
            ],
        )
        self.assertEqual(plan.created_paths, ["a", "a/b", "a/c"])

    async def test_shallow_entries_processed_first(self) -> None:
        remote = FakeRemote()
        entries = [_entry("a/b/deep.txt"), _entry("top.txt"), _entry("a/mid.txt")]

        await upload_tree(entries, "T", remote)

        file_order = [c[1] for c in remote.calls if c[0] == "add_file"]
        self.assertEqual(file_order, ["top.txt", "mid.txt", "deep.txt"])
        self.assertEqual(remote.calls[0], ("add_file", "top.txt", 4, "T"))
        self.assertEqual(remote.calls[1], ("create_folder", "a", "T"))

    async def test_folder_created_before_its_files(self) -> None:
        remote = FakeRemote()
        await upload_tree([_entry("x/y/z/f.bin")], "T", remote)
        self.assertEqual(
            remote.calls,
            [
                ("create_folder", "x", "T"),
                ("create_folder", "y", "F1"),
                ("create_folder", "z", "F2"),
                ("add_file", "f.bin", 4, "F3"),
            ],
        )

    async def test_paths_are_normalized(self) -> None:
        remote = FakeRemote()
        await upload_tree([_entry("a/x.txt"), _entry("/a\\y.txt")], None, remote)
        folder_calls = [c for c in remote.calls if c[0] == "create_folder"]
        self.assertEqual(folder_calls, [("create_folder", "a", None)])

    async def test_progress_reported_after_each_file(self) -> None:
        remote = FakeRemote()
        progress: list[tuple[int, int, str]] = []
        await upload_tree(
            [_entry("a/1.txt"), _entry("2.txt")],
            None,
            remote,
            on_progress=lambda done, total, name: progress.append((done, total, name)),
        )
        self.assertEqual(progress, [(1, 2, "2.txt"), (2, 2, "1.txt")])

    async def test_empty_path_rejected_before_any_call(self) -> None:
        remote = FakeRemote()
        with self.assertRaises(InvalidArgumentError):
            await upload_tree([_entry("ok.txt"), _entry("//")], None, remote)
        self.assertEqual(remote.calls, [])

    async def test_folder_failure_aborts_upload(self) -> None:
        remote = FakeRemote(fail_folder="b")
        entries = [_entry("a/b/x.txt"), _entry("a/c/y.txt")]

        with self.assertRaises(RemoteOperationError) as ctx:
            await upload_tree(entries, None, remote)

        self.assertEqual(ctx.exception.details["operation"], "create_folder")
        self.assertEqual(ctx.exception.details["path"], "a/b")
        self.assertIsInstance(ctx.exception.cause, RuntimeError)
        self.assertEqual(
            remote.calls,
            [("create_folder", "a", None), ("create_folder", "b", "F1")],
        )

    async def test_file_failure_aborts_without_retry(self) -> None:
        remote = FakeRemote(fail_file="1.txt")
        entries = [_entry("1.txt"), _entry("2.txt")]

        with self.assertRaises(RemoteOperationError) as ctx:
            await upload_tree(entries, None, remote)

        self.assertEqual(ctx.exception.details["operation"], "add_file")
        self.assertEqual(ctx.exception.details["processed"], 0)
        self.assertEqual(remote.calls, [("add_file", "1.txt", 4, None)])


class TestUploadFolder(unittest.IsolatedAsyncioTestCase):
    def test_skip_empty_files(self) -> None:
        kept, skipped = skip_empty_files([_entry("a.txt"), _entry("b.txt", b"")])
        self.assertEqual([e.relative_path for e in kept], ["a.txt"])
        self.assertEqual(skipped, ["b.txt"])

    async def test_upload_folder_skips_empty_files_and_reports(self) -> None:
        remote = FakeRemote()
        skipped: list[str] = []
        entries = [_entry("d/a.txt"), _entry("d/empty.txt", b""), _entry("d/e/b.txt")]

        report = await upload_folder(entries, None, remote, on_skip_empty=skipped.append)

        self.assertEqual(skipped, ["empty.txt"])
        self.assertEqual(report.total, 3)
        self.assertEqual(report.uploaded, 2)
        self.assertEqual(report.created_folders, 2)
        self.assertEqual(report.skipped_empty, ["empty.txt"])
        self.assertNotIn("empty.txt", [c[1] for c in remote.calls])

    async def test_upload_folder_all_empty_makes_no_calls(self) -> None:
        remote = FakeRemote()
        report = await upload_folder([_entry("d/e.txt", b"")], None, remote)
        self.assertEqual(remote.calls, [])
        self.assertEqual(report.uploaded, 0)
        self.assertEqual(report.created_folders, 0)


if __name__ == "__main__":
    unittest.main()

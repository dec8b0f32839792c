import unittest

from drivetree.upload import UploadPlan


class TestUploadPlan(unittest.TestCase):
    def test_seeded_with_target(self) -> None:
        plan = UploadPlan("T")
        self.assertIn("", plan)
        self.assertEqual(plan.get(""), "T")
        self.assertEqual(plan.target_folder_id, "T")
        self.assertEqual(plan.created_paths, [])

    def test_root_target(self) -> None:
        plan = UploadPlan(None)
        self.assertIsNone(plan.target_folder_id)
        self.assertEqual(len(plan), 1)

    def test_record_grows_and_rejects_duplicates(self) -> None:
        plan = UploadPlan(None)
        plan.record("a", "id-a")
        plan.record("a/b", "id-b")
        self.assertEqual(plan.created_paths, ["a", "a/b"])
        self.assertEqual(plan.as_dict(), {"": None, "a": "id-a", "a/b": "id-b"})
        with self.assertRaises(ValueError):
            plan.record("a", "other")


if __name__ == "__main__":
    unittest.main()

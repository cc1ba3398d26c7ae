import unittest
from sdotool import objectdictionary as od


class TestObjectDictionary(unittest.TestCase):

    def setUp(self):
        speed = od.ObjectEntry(0x2001, "Speed", "0x0007", "rw")
        limits = od.ObjectEntry(0x2002, "Limits", "0x0006", "ro")
        limits._add_member(od.SubObjectEntry(0x2002, 1, value="0x10"))
        self.od = od.ObjectDictionary(0x191, 0x1234,
                                      {0x2002: limits, 0x2001: speed})

    def test_lookup(self):
        self.assertEqual(self.od.lookup_object(0x2001).name, "Speed")
        self.assertIsNone(self.od.lookup_object(0x2003))
        self.assertEqual(self.od.get(0x2002).name, "Limits")
        self.assertIn(0x2001, self.od)
        self.assertNotIn(0x2003, self.od)

    def test_iteration_is_sorted(self):
        self.assertEqual(list(self.od), [0x2001, 0x2002])
        self.assertEqual(len(self.od), 2)

    def test_missing_index_message(self):
        with self.assertRaises(KeyError) as cm:
            self.od[0x2003]
        self.assertIn("0x2003", str(cm.exception))

    def test_sub_objects(self):
        limits = self.od[0x2002]
        self.assertEqual(list(limits), [1])
        self.assertEqual(limits.sub_objects[1].value, "0x10")
        self.assertIsNone(limits.sub_objects[1].default_value)
        self.assertEqual(limits[1].data_type, "0x0005")
        self.assertEqual(limits[1].access, "rw")
        self.assertIsNone(limits.get(2))

    def test_access_properties(self):
        self.assertTrue(self.od[0x2001].readable)
        self.assertTrue(self.od[0x2001].writable)
        self.assertTrue(self.od[0x2002].readable)
        self.assertFalse(self.od[0x2002].writable)

    def test_defaults(self):
        entry = od.ObjectEntry(0x3000)
        self.assertEqual(entry.name, "Unnamed")
        self.assertEqual(entry.data_type, "0x0005")
        self.assertEqual(entry.access_rights, "ro")
        self.assertEqual(len(entry.sub_objects), 0)

    def test_repr(self):
        self.assertEqual(repr(self.od[0x2001]), "<ObjectEntry 'Speed' at 0x2001>")
        self.assertEqual(repr(self.od[0x2002][1]), "<SubObjectEntry at 0x2002:01>")


if __name__ == "__main__":
    unittest.main()

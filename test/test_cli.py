import io
import unittest
from unittest import mock

from sdotool import cli
from sdotool.objectdictionary.eds import import_eds

from .util import SAMPLE_EDS


class TestSession(unittest.TestCase):

    def setUp(self):
        self.od = import_eds(SAMPLE_EDS)
        self.lines = []

    def run_session(self, *answers):
        answers = list(answers)

        def prompt(text):
            if not answers:
                raise EOFError()
            return answers.pop(0)

        cli.Session(self.od, 2, prompt, self.lines.append).run()
        return "\n".join(self.lines)

    def test_valid_upload(self):
        out = self.run_session("0x2001", "skip", "upload", "0x01020304", "quit")
        self.assertIn("Object 0x2001: Name='Speed', Access='rw', DataType='0x0007'", out)
        self.assertIn("Valid SDO upload for 0x2001 (4 bytes)", out)
        self.assertIn("Request: 0x602 [40 01 20 00 00 00 00 00]", out)
        self.assertTrue(out.endswith("Goodbye!"))

    def test_length_mismatch(self):
        out = self.run_session("0x2001", "skip", "download", "0102", "quit")
        self.assertIn(
            "Invalid SDO: Message length mismatch: expected 4 bytes for "
            "DataType 0x0007, got 2", out)

    def test_sub_object(self):
        out = self.run_session("0x2002", "1", "upload", "0x0000")
        self.assertIn("Sub 0x01: Value='0x10', Default='0x00' (type=0x0006, access=ro)", out)
        self.assertIn("Valid SDO upload for 0x2002 (2 bytes)", out)

    def test_missing_sub_object(self):
        out = self.run_session("0x2002", "9", "upload", "0x0000")
        self.assertIn("Sub-index 0x09 not found", out)

    def test_bad_input_reprompts(self):
        out = self.run_session(
            "0xZZ",
            "0x6000",
            "0x2001", "0x100",
            "0x2001", "skip", "read",
            "0x2001", "skip", "upload", "0x123",
            "quit")
        self.assertIn("Invalid Object ID. Use 0x0000-0xFFFF or decimal.", out)
        self.assertIn("Object 0x6000 not found", out)
        self.assertIn("Invalid Sub-Index.", out)
        self.assertIn("Invalid type. Use 'upload' or 'download'.", out)
        self.assertIn("Invalid hex.", out)
        self.assertTrue(out.endswith("Goodbye!"))

    def test_end_of_input(self):
        out = self.run_session()
        self.assertEqual(out, "Goodbye!")


class TestMain(unittest.TestCase):

    def test_invalid_node_id(self):
        with mock.patch("sys.stderr"):
            self.assertEqual(cli.main(["-e", SAMPLE_EDS, "-n", "128"]), 2)

    def test_non_numeric_node_id(self):
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            self.assertEqual(cli.main(["-e", SAMPLE_EDS, "-n", "abc"]), 2)
        self.assertIn("Invalid Node ID abc", stderr.getvalue())
        self.assertNotIn("out of range", stderr.getvalue())

    def test_missing_file(self):
        with mock.patch("sys.stderr"):
            self.assertEqual(
                cli.main(["-e", "/path/to/wrong_file.eds", "-n", "1"]), 1)

    def test_runs_session(self):
        with mock.patch("builtins.input", side_effect=["quit"]), \
                mock.patch("builtins.print") as print_mock:
            self.assertEqual(cli.main(["-e", SAMPLE_EDS, "-n", "0x02"]), 0)
        print_mock.assert_any_call(
            "Loaded EDS: Device Type=0x00020192, Vendor ID=0x12345678")
        print_mock.assert_any_call("Goodbye!")


if __name__ == "__main__":
    unittest.main()

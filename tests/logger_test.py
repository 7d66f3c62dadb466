#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, CodingLog, CodingProgressStep, HeaderLog

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)

        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_progress_not_recorded_by_default(self):
        self.logger.coding_step_interval_count = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding symbols", 4))
        self.assertEqual(self.logger.logs, [])
        self.assertIn("Encoding symbols (2/4)", self.captured_output.getvalue())
        self.assertIn("Encoding symbols (4/4)", self.captured_output.getvalue())
        self.assertNotIn("(3/4)", self.captured_output.getvalue())

    def test_get_logs_by_type(self):
        self.logger.log(HeaderLog(3, 32))
        self.logger.log(CodingLog(72, 76))
        self.assertEqual(len(self.logger.get_logs()), 2)
        self.assertEqual([log.bits_written for log in self.logger.get_logs(CodingLog)], [76])

    def test_clear_logs(self):
        self.logger.log(HeaderLog(3, 32))
        self.logger.clear_logs()
        self.assertEqual(self.logger.logs, [])

    def test_save(self):
        self.logger.log(HeaderLog(3, 32))
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "log.txt")
            self.logger.save(path)
            with open(path) as file:
                content = file.read()
        self.assertIn("Header_log", content)
        self.assertIn("Leaves: 3, Header size: 32 bits", content)

if __name__ == '__main__':
    unittest.main()

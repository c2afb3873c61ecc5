"""Tests for structured log output of classification failures."""

import logging
import unittest

from searchbar_pkg.calculator import classify_arithmetic
from searchbar_pkg.logging_config import ClassificationFormatter, get_logger
from searchbar_pkg.url import is_navigable_address


class TestClassificationFormatter(unittest.TestCase):
    """Failure codes and reasons appear as key=value fields."""

    def make_record(self, **extra):
        record = logging.LogRecord("searchbar.calculator", logging.DEBUG, __file__, 1, "Not arithmetic: %r", ("5/0",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_code_field(self):
        line = ClassificationFormatter().format(self.make_record(code="NON_FINITE"))
        self.assertIn("[DEBUG] searchbar.calculator: Not arithmetic: '5/0'", line)
        self.assertTrue(line.endswith("| code=NON_FINITE"))

    def test_no_fields(self):
        line = ClassificationFormatter().format(self.make_record())
        self.assertNotIn("|", line)

    def test_field_order(self):
        line = ClassificationFormatter().format(self.make_record(engine="g", code="ECHO"))
        self.assertTrue(line.endswith("| code=ECHO engine=g"))


class TestFailureLogging(unittest.TestCase):
    """The pipelines attach their failure details to DEBUG records."""

    def test_arithmetic_failure_code(self):
        with self.assertLogs("searchbar.calculator", level="DEBUG") as logs:
            classify_arithmetic("(1+2")
        self.assertEqual(logs.records[0].code, "UNBALANCED_PARENS")

    def test_address_rejection_reason(self):
        with self.assertLogs("searchbar.url", level="DEBUG") as logs:
            is_navigable_address("256.1.1.1")
        self.assertIn("IPv4", logs.records[0].reason)

    def test_get_logger_namespace(self):
        self.assertEqual(get_logger("router").name, "searchbar.router")


if __name__ == "__main__":
    unittest.main()

import logging
import unittest

from apps.common.logger import AppLogger, get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_mutating_parent(self):
        parent = get_logger("qkart.tests").bind(component="carts")
        child = parent.bind(service="CartService")
        self.assertEqual(parent.context, {"component": "carts"})
        self.assertEqual(child.context, {"component": "carts", "service": "CartService"})

    def test_format_appends_key_value_pairs(self):
        line = AppLogger._format("Cart saved", {"email": "a@b.io", "items": 2, "total": None})
        self.assertEqual(line, "Cart saved | email=a@b.io items=2 total=None")

    def test_format_without_context_is_message_only(self):
        self.assertEqual(AppLogger._format("plain", {}), "plain")

    def test_records_are_emitted_with_context(self):
        log = get_logger("qkart.tests.emit").bind(component="carts")
        with self.assertLogs("qkart.tests.emit", level=logging.INFO) as captured:
            log.info("Checkout completed", email="a@b.io")
        self.assertEqual(
            captured.records[0].getMessage(),
            "Checkout completed | component=carts email=a@b.io",
        )

    def test_exception_attaches_exc_info(self):
        log = get_logger("qkart.tests.exc")
        with self.assertLogs("qkart.tests.exc", level=logging.ERROR) as captured:
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                log.exception("Unhandled")
        self.assertIsNotNone(captured.records[0].exc_info)

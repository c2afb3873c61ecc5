"""Tests for routing input to arithmetic, address or search."""

import unittest

from searchbar_pkg.config import SEARCH_ENGINES
from searchbar_pkg.router import (
    accept_preview,
    is_command,
    resolve_engine_command,
    route,
    search_url,
    submit,
)
from searchbar_pkg.types import Address, Arithmetic, SearchQuery

GOOGLE = SEARCH_ENGINES["g"]
BAIDU = SEARCH_ENGINES["b"]


class TestRoute(unittest.TestCase):
    """Exactly one outcome per input."""

    def test_scenarios(self):
        self.assertEqual(route("2 + 2"), Arithmetic("4"))
        self.assertEqual(route("not a url at all"), SearchQuery("not a url at all"))
        self.assertEqual(route("192.168.1.1"), Address("192.168.1.1"))
        self.assertEqual(route(" example.com "), Address("example.com"))

    def test_whitespace_only(self):
        outcome = route("  ")
        self.assertNotIsInstance(outcome, Arithmetic)
        self.assertNotIsInstance(outcome, Address)
        self.assertEqual(outcome, SearchQuery(""))

    def test_numbers_without_calculation_are_searched(self):
        self.assertEqual(route("1.5"), SearchQuery("1.5"))
        self.assertEqual(route("-5"), SearchQuery("-5"))

    def test_outcome_dicts(self):
        self.assertEqual(route("2*3").to_dict(), {"kind": "arithmetic", "value": "6"})
        self.assertEqual(
            route("localhost:8080").to_dict(),
            {"kind": "address", "address": "localhost:8080", "url": "https://localhost:8080"},
        )
        self.assertEqual(route("cats").to_dict(), {"kind": "search", "query": "cats"})


class TestAddressUrl(unittest.TestCase):
    def test_https_prefix(self):
        self.assertEqual(Address("example.com").url, "https://example.com")
        self.assertEqual(Address("http://example.com").url, "http://example.com")
        self.assertEqual(Address("https://example.com").url, "https://example.com")

    def test_existing_scheme_kept(self):
        for address in (
            "ftp://files.example.org",
            "ftps://files.example.org:990",
            "HTTPS://example.com",
            "Http://example.com/a",
            "http:example.com",
        ):
            self.assertEqual(Address(address).url, address)

    def test_bare_hosts_get_https(self):
        self.assertEqual(Address("httpbin.org").url, "https://httpbin.org")
        self.assertEqual(Address("https-proxy.example.com").url, "https://https-proxy.example.com")
        self.assertEqual(Address("localhost:8080").url, "https://localhost:8080")
        self.assertEqual(Address("192.168.1.1/admin").url, "https://192.168.1.1/admin")


class TestCommands(unittest.TestCase):
    """Test slash commands."""

    def test_is_command(self):
        self.assertTrue(is_command("/g"))
        self.assertTrue(is_command(" /dark "))
        self.assertFalse(is_command("/g foo"))
        self.assertFalse(is_command("g"))

    def test_resolve_engine(self):
        self.assertEqual(resolve_engine_command("/gh"), SEARCH_ENGINES["gh"])
        self.assertEqual(resolve_engine_command("/GH"), SEARCH_ENGINES["gh"])
        self.assertIsNone(resolve_engine_command("/dark"))
        self.assertIsNone(resolve_engine_command("/g x"))
        self.assertIsNone(resolve_engine_command("gh"))


class TestSubmit(unittest.TestCase):
    """Test the URL opened on submit."""

    def test_search_url_encoding(self):
        self.assertEqual(
            search_url(GOOGLE, "a b&c"), "https://www.google.com/search?q=a%20b%26c"
        )
        self.assertEqual(search_url(GOOGLE, "c/d"), "https://www.google.com/search?q=c%2Fd")
        self.assertEqual(search_url(GOOGLE, "it's (ok)!"), "https://www.google.com/search?q=it's%20(ok)!")
        self.assertEqual(
            search_url(SEARCH_ENGINES["z"], "知乎"),
            "https://www.zhihu.com/search?q=%E7%9F%A5%E4%B9%8E",
        )

    def test_nothing_opens(self):
        self.assertIsNone(submit("", GOOGLE))
        self.assertIsNone(submit("   ", GOOGLE))
        self.assertIsNone(submit("/g", GOOGLE))

    def test_addresses(self):
        self.assertEqual(submit("example.com", GOOGLE), "https://example.com")
        self.assertEqual(submit("https://x.org/a", GOOGLE), "https://x.org/a")
        self.assertEqual(submit("ftp://files.example.org", GOOGLE), "ftp://files.example.org")
        self.assertEqual(submit("HTTPS://example.com", GOOGLE), "HTTPS://example.com")
        self.assertEqual(submit("httpbin.org", GOOGLE), "https://httpbin.org")

    def test_searches(self):
        self.assertEqual(
            submit("hello world", BAIDU), "https://www.baidu.com/s?wd=hello%20world"
        )
        self.assertEqual(
            submit("javascript:alert(1)", GOOGLE),
            "https://www.google.com/search?q=javascript%3Aalert(1)",
        )
        self.assertEqual(submit("2+2", GOOGLE), "https://www.google.com/search?q=2%2B2")

    def test_accept_preview(self):
        self.assertEqual(accept_preview("2*3"), "6")
        self.assertEqual(accept_preview("hello"), "hello")
        self.assertEqual(accept_preview("5/0"), "5/0")


if __name__ == "__main__":
    unittest.main()

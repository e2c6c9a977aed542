import unittest

from yahtml.escape import escape_attribute, escape_text


class EscapeTextTest(unittest.TestCase):
    def test_escapes_all_special_characters(self) -> None:
        self.assertEqual(
            escape_text("This & that < \"quotes\" > 'apostrophes'"),
            "This &amp; that &lt; &quot;quotes&quot; &gt; &#39;apostrophes&#39;",
        )

    def test_plain_text_is_unchanged(self) -> None:
        for text in ["", "hello", "Hello World 123", "ünïcødé ok", "a/b?c=d#e"]:
            with self.subTest(text=text):
                self.assertEqual(escape_text(text), text)
                self.assertEqual(escape_attribute(text), text)

    def test_escapes_exactly_once_per_call(self) -> None:
        once = escape_text("&")
        self.assertEqual(once, "&amp;")
        self.assertEqual(escape_text(once), "&amp;amp;")
        self.assertNotEqual(escape_text(once), once)


class EscapeAttributeTest(unittest.TestCase):
    def test_escapes_value_with_quotes_and_symbols(self) -> None:
        self.assertEqual(
            escape_attribute('value with "quotes" & symbols <b>'),
            "value with &quot;quotes&quot; &amp; symbols &lt;b&gt;",
        )

    def test_apostrophe_is_kept(self) -> None:
        self.assertEqual(escape_attribute("it's"), "it's")
        self.assertEqual(escape_text("it's"), "it&#39;s")


if __name__ == "__main__":
    unittest.main()

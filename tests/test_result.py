"""
Result container.
"""

import unittest

from ascii_ramp.result import ASCIIResult, create_result


class TestASCIIResult(unittest.TestCase):

    def test_shape(self):
        result = ASCIIResult(text="ab \ncd \n")
        self.assertEqual(result.lines, ["ab ", "cd "])
        self.assertEqual((result.width, result.height), (3, 2))

    def test_empty(self):
        result = ASCIIResult(text="")
        self.assertEqual((result.width, result.height), (0, 0))

    def test_to_dict(self):
        result = create_result("$\n", ramp="classic", backend="pillow")
        payload = result.to_dict()
        self.assertTrue(payload["success"])
        self.assertFalse(payload["fallback"])
        self.assertEqual(payload["ascii"], "$\n")
        self.assertEqual(payload["metadata"]["ramp"], "classic")
        self.assertIn("generated_at", payload["metadata"])

    def test_fallback_flag(self):
        result = create_result("x\n", is_fallback=True)
        self.assertFalse(result.success)
        self.assertTrue(result.get_stats()["fallback"])

    def test_html_escapes_glyphs(self):
        html_doc = ASCIIResult(text="<>&\n").to_html()
        self.assertIn("&lt;&gt;&amp;", html_doc)

    def test_stats(self):
        stats = ASCIIResult(text="$$ \n$  \n").get_stats()
        self.assertEqual(stats["total_characters"], 6)
        self.assertEqual(stats["unique_characters"], 2)

    def test_str(self):
        self.assertEqual(str(ASCIIResult(text="$\n")), "$\n")


if __name__ == "__main__":
    unittest.main()

"""
Cell Extractor Tests
====================

Name derivation from cell text and icon metadata.

Run:
    python -m pytest tests/test_cell_extractor.py
"""

import unittest

from bs4 import BeautifulSoup

from rocket_pass.cell_extractor import extract_item, normalize_image_name, image_url_of


def row_cells(*cells_html):
    """Parse <td> contents into a list of cell tags."""
    html = "<table><tr>" + "".join(f"<td>{c}</td>" for c in cells_html) + "</tr></table>"
    return BeautifulSoup(html, "html.parser").find_all("td")


class TestNormalizeImageName(unittest.TestCase):

    def test_icon_rl_suffix_and_camel_case(self):
        self.assertEqual(normalize_image_name("RocketBoostIconRL.png"), "Rocket Boost")

    def test_underscore_icon_suffix(self):
        self.assertEqual(normalize_image_name("Some_Decal_icon.jpg"), "Some Decal")

    def test_file_prefix(self):
        self.assertEqual(normalize_image_name("File:Wheels.png"), "Wheels")

    def test_extension_is_case_insensitive(self):
        self.assertEqual(normalize_image_name("Octane.JPEG"), "Octane")
        self.assertEqual(normalize_image_name("Spinner.Gif"), "Spinner")

    def test_space_icon_suffix(self):
        self.assertEqual(normalize_image_name("Player Banner icon.png"), "Player Banner")

    def test_trailing_rl(self):
        self.assertEqual(normalize_image_name("DominusRL.png"), "Dominus")

    def test_plain_name_untouched(self):
        self.assertEqual(normalize_image_name("Boost"), "Boost")

    def test_empty(self):
        self.assertEqual(normalize_image_name(""), "")
        self.assertEqual(normalize_image_name(None), "")

    def test_only_suffix_leaves_nothing(self):
        self.assertEqual(normalize_image_name("IconRL.png"), "")


class TestExtractItem(unittest.TestCase):

    def test_text_name(self):
        item = extract_item(row_cells("  Wheel Name  "), 0, 4, False)
        self.assertIsNotNone(item)
        self.assertEqual(item.name, "Wheel Name")
        self.assertEqual(item.tier, 4)
        self.assertFalse(item.is_free)
        self.assertEqual(item.type, "Unknown")
        self.assertEqual(item.rarity, "Limited")
        self.assertEqual(item.image_url, "")

    def test_text_wins_over_image(self):
        cells = row_cells('<img alt="Other" src="https://img/x.png"> Real Name')
        item = extract_item(cells, 0, 1, True)
        self.assertEqual(item.name, "Real Name")
        self.assertEqual(item.image_url, "https://img/x.png")
        self.assertTrue(item.is_free)

    def test_empty_cell_is_none(self):
        self.assertIsNone(extract_item(row_cells("   "), 0, 1, False))

    def test_missing_index_is_none(self):
        cells = row_cells("Only One")
        self.assertIsNone(extract_item(cells, 1, 2, False))
        self.assertIsNone(extract_item(cells, -1, 2, False))

    def test_missing_row_is_none(self):
        self.assertIsNone(extract_item(None, 0, 1, True))
        self.assertIsNone(extract_item([], 0, 1, True))

    def test_image_key_preferred_over_alt(self):
        cells = row_cells('<img data-image-key="RocketBoostIconRL.png" alt="ignored">')
        self.assertEqual(extract_item(cells, 0, 1, False).name, "Rocket Boost")

    def test_empty_image_key_falls_back_to_alt(self):
        cells = row_cells('<img data-image-key="" alt="Boost">')
        self.assertEqual(extract_item(cells, 0, 1, False).name, "Boost")

    def test_markup_text_falls_back_to_image(self):
        cells = row_cells('&lt;div&gt;...&lt;/div&gt;<img alt="Trail_icon.png">')
        item = extract_item(cells, 0, 3, False)
        self.assertEqual(item.name, "Trail")

    def test_markup_text_without_image_is_none(self):
        cells = row_cells("&lt;div&gt;...&lt;/div&gt;")
        self.assertIsNone(extract_item(cells, 0, 3, False))

    def test_file_prefix_in_text(self):
        item = extract_item(row_cells("File:Wheels.png"), 0, 5, False)
        self.assertEqual(item.name, "Wheels")

    def test_markup_image_name_is_none(self):
        cells = row_cells('<img alt="&lt;span&gt;Boost&lt;/span&gt;">')
        self.assertIsNone(extract_item(cells, 0, 1, False))

    def test_markup_after_file_prefix_is_none(self):
        self.assertIsNone(extract_item(row_cells("File:&lt;div&gt;x"), 0, 1, False))

    def test_unnamed_image_is_none(self):
        self.assertIsNone(extract_item(row_cells('<img src="https://img/a.png">'), 0, 1, False))

    def test_lazy_image_source(self):
        cells = row_cells('<img alt="Boost" src="" data-src="https://img/lazy.png">')
        self.assertEqual(extract_item(cells, 0, 1, False).image_url, "https://img/lazy.png")

    def test_first_image_is_used(self):
        cells = row_cells('<img alt="First" src="a.png"><img alt="Second" src="b.png">')
        item = extract_item(cells, 0, 1, False)
        self.assertEqual(item.name, "First")
        self.assertEqual(item.image_url, "a.png")

    def test_image_url_of_none(self):
        self.assertEqual(image_url_of(None), "")


if __name__ == "__main__":
    unittest.main()

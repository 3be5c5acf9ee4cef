"""
End-to-end extraction of a page carrying Open Graph tags and schema.org microdata.
"""

import pytest
from metascraper import ItemProp, ItemScope, Meta, read_page

EXPECTED_META = [
    Meta(property="og:title", content="The Rock"),
    Meta(property="og:type", content="video.movie"),
    Meta(property="og:url", content="http://www.imdb.com/title/tt0117500/"),
    Meta(
        property="og:image",
        content="http://example.com/rock.jpg",
        extra=(
            Meta(property="og:image:width", content="300"),
            Meta(property="og:image:height", content="300"),
        ),
    ),
    Meta(property="og:image", content="http://example.com/rock2.jpg"),
    Meta(
        property="og:image",
        content="http://example.com/rock3.jpg",
        extra=(Meta(property="og:image:height", content="1000"),),
    ),
    Meta(name="keywords", content="a,b,c"),
    Meta(name="unusual", content="special"),
]

EXPECTED_SCHEMA = [
    ItemScope(
        tag_name="div",
        item_type="http://schema.org/Offer",
        props=(
            ItemProp(tag_name="span", item_prop="name", content="Blend-O-Matic"),
            ItemProp(tag_name="span", item_prop="price", content="$19.95"),
        ),
        children=(
            ItemScope(
                tag_name="div",
                item_type="http://schema.org/AggregateRating",
                item_prop="reviews",
                props=(
                    ItemProp(tag_name="meta", item_prop="ratingValue", content="4"),
                    ItemProp(tag_name="meta", item_prop="bestRating", content="5"),
                    ItemProp(tag_name="span", item_prop="ratingCount", content="25"),
                ),
            ),
        ),
    ),
    ItemScope(
        tag_name="div",
        item_type="http://schema.org/Event",
        props=(
            ItemProp(tag_name="div", item_prop="name", content="Spinal Tap"),
            ItemProp(
                tag_name="span",
                item_prop="description",
                content="One of the loudest bands ever reunites for an unforgettable two-day show.",
            ),
            ItemProp(tag_name="time", item_prop="startDate", content="May 8, 7:30pm", datetime="2011-05-08T19:30"),
        ),
    ),
    ItemScope(
        tag_name="div",
        item_type="http://schema.org/Person",
        props=(ItemProp(tag_name="a", item_prop="url", content="Alice Jones", href="alice.html"),),
    ),
    ItemScope(
        tag_name="div",
        item_type="http://schema.org/Person",
        props=(ItemProp(tag_name="a", item_prop="url", content="Bob Smith", href="bob.html"),),
    ),
]


@pytest.mark.integration
class TestPageExtraction:
    """Full extraction over the reference page."""

    @pytest.fixture
    def page(self, sample_page):
        return read_page(sample_page.encode("utf-8"), "https://www.example.com")

    def test_title(self, page):
        assert page.title == "TestPage"

    def test_text(self, page, sample_text):
        assert page.text == sample_text

    def test_meta_data(self, page):
        assert page.meta_data() == EXPECTED_META

    def test_schema_data(self, page):
        assert page.schema_data() == EXPECTED_SCHEMA

    def test_text_excludes_meta_content(self, page):
        assert "special" not in page.text
        assert "rock.jpg" not in page.text

    def test_json_shape(self, page):
        data = page.to_dict()

        assert data["url"] == "https://www.example.com"
        assert data["meta"][3]["extra"] == [
            {"property": "og:image:width", "content": "300"},
            {"property": "og:image:height", "content": "300"},
        ]
        assert data["schema"][0]["children"][0]["itemprop"] == "reviews"
        assert "children" not in data["schema"][0]["children"][0]

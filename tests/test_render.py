import pytest

from reading_list.blocks.templates.my_reading_list import render
from reading_list.media import MediaLibrary
from reading_list.models import BookEntry, CreateBookRequest, DisplayConfig
from reading_list.storage import StoreUnavailable

BLOCK = "my-reading-list/my-reading-list"


class BrokenResolver(MediaLibrary):
    def get_attachment_image_src(self, ref, size="medium"):
        raise RuntimeError("resolver offline")


class TestRender:
    """The pure render step over explicit entries and resolver."""

    def test_titles_only_by_default(self) -> None:
        entries = [
            BookEntry(id=1, title="Dune", body="<p>Spice</p>", image_ref=5),
            BookEntry(id=2, title="Foundation", body="<p>Empire</p>"),
        ]
        media = MediaLibrary()
        media.add_attachment("cover.jpg", 600, 900, attachment_id=5)

        out = render(DisplayConfig(), entries, media, {"class": "wp-block-x"})

        assert out == (
            '<div class="wp-block-x">'
            "<div><h2>Dune</h2></div>"
            "<div><h2>Foundation</h2></div>"
            "</div>"
        )

    def test_titles_are_escaped(self) -> None:
        entries = [BookEntry(id=1, title="<script>alert(1)</script> & Co")]
        out = render(DisplayConfig(), entries, MediaLibrary())

        assert "<script>" not in out
        assert "<h2>&lt;script&gt;alert(1)&lt;/script&gt; &amp; Co</h2>" in out

    def test_body_is_raw_markup(self) -> None:
        entries = [BookEntry(id=1, title="Dune", body="<p><em>Spice</em></p>")]
        out = render(DisplayConfig(showContent=True), entries, MediaLibrary())

        assert "<h2>Dune</h2><p><em>Spice</em></p>" in out

    def test_image_element_follows_title(self) -> None:
        media = MediaLibrary(uploads_url="https://example.org/uploads")
        media.add_attachment("cover.jpg", 600, 900, alt="Cover", attachment_id=5)
        entries = [BookEntry(id=1, title="Dune", body="<p>Spice</p>", image_ref=5)]

        out = render(DisplayConfig(showImage=True, showContent=True), entries, media)

        assert out == (
            "<div><div><h2>Dune</h2>"
            '<img width="200" height="300" src="https://example.org/uploads/cover-200x300.jpg" '
            'class="attachment-medium size-medium wp-post-image" alt="Cover" decoding="async" />'
            "<p>Spice</p></div></div>"
        )

    def test_failing_resolver_omits_image_only(self) -> None:
        entries = [
            BookEntry(id=1, title="Dune", image_ref=5),
            BookEntry(id=2, title="Foundation", image_ref=6),
        ]
        out = render(DisplayConfig(showImage=True), entries, BrokenResolver())

        assert "<img" not in out
        assert "<h2>Dune</h2>" in out
        assert "<h2>Foundation</h2>" in out


class TestRenderThroughRegistry:
    """Rendering a placement through the block registry."""

    def test_scenario_dune_and_foundation(self, platform, dune_and_foundation) -> None:
        out = platform.blocks.render(BLOCK, {"showImage": True, "showContent": False})

        assert "<h2>Dune</h2>" in out
        assert "<h2>Foundation</h2>" in out
        assert out.count("<img") == 1
        dune_part, foundation_part = out.split("<h2>Foundation</h2>")
        assert "<img" not in dune_part
        assert "foundation-200x300.jpg" in foundation_part
        assert "Spice must flow" not in out
        assert "Psychohistory" not in out

    def test_flags_off_shows_titles_only(self, platform, dune_and_foundation) -> None:
        out = platform.blocks.render(BLOCK, {})

        assert "<h2>Dune</h2>" in out
        assert "<h2>Foundation</h2>" in out
        assert "<img" not in out
        assert "<p>" not in out

    def test_empty_store_renders_container(self, platform) -> None:
        out = platform.blocks.render(BLOCK, {"showImage": True, "showContent": True})
        assert out == '<div class="wp-block-my-reading-list-my-reading-list"></div>'

    def test_wrapper_attributes_are_merged(self, platform) -> None:
        out = platform.blocks.render(BLOCK, {}, wrapper_attributes={"class": "alignwide", "id": "list"})
        assert out == (
            '<div class="wp-block-my-reading-list-my-reading-list alignwide" id="list"></div>'
        )

    def test_rendering_is_idempotent(self, platform, dune_and_foundation) -> None:
        attrs = {"showImage": True, "showContent": True}
        assert platform.blocks.render(BLOCK, attrs) == platform.blocks.render(BLOCK, attrs)

    def test_enabling_content_only_adds_bodies(self, platform, dune_and_foundation) -> None:
        without = platform.blocks.render(BLOCK, {"showImage": True})
        with_content = platform.blocks.render(BLOCK, {"showImage": True, "showContent": True})

        assert with_content.count("<h2>") == without.count("<h2>") == 2
        assert with_content.count("<img") == without.count("<img")
        assert "<p>Spice must flow.</p>" in with_content
        assert "<p>Psychohistory.</p>" in with_content
        stripped = with_content.replace("<p>Spice must flow.</p>", "").replace("<p>Psychohistory.</p>", "")
        assert stripped == without

    def test_every_book_is_rendered_in_store_order(self, platform) -> None:
        titles = [f"Book {i}" for i in range(25)]
        for title in titles:
            platform.store.insert_post(CreateBookRequest(title=title))

        out = platform.blocks.render(BLOCK, {})
        positions = [out.index(f"<h2>{t}</h2>") for t in titles]
        assert positions == sorted(positions)

    def test_unknown_block_renders_nothing(self, platform, dune_and_foundation) -> None:
        assert platform.blocks.render("acme/unknown", {"showImage": True}) == ""

    def test_block_without_template_renders_nothing(self, platform, dune_and_foundation) -> None:
        platform.blocks.register_block_type({"name": "other-plugin/list"})
        assert platform.blocks.render("other-plugin/list", {}) == ""

    def test_namespace_that_is_not_a_module_name_renders_nothing(self, platform) -> None:
        platform.blocks.register_block_type({"name": "a.b/list"})
        assert platform.blocks.render("a.b/list", {}) == ""

    def test_template_path_is_logged(self, platform, caplog) -> None:
        with caplog.at_level("DEBUG", logger="reading_list.blocks.registry"):
            platform.blocks.render(BLOCK, {})
        assert "reading_list.blocks.templates.my_reading_list" in caplog.text

    def test_store_failures_propagate(self, platform, dune_and_foundation) -> None:
        platform.store.available = False
        with pytest.raises(StoreUnavailable):
            platform.blocks.render(BLOCK, {})

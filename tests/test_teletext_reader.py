import pytest
from teletext_utils.TeletextReader.TeletextReader import TeletextReader
from teletext_utils.buffers import SpanBuffer

from helpers_for_testing import make_line, make_payload, make_run, make_subpage


# =============================================================================
# Tests for TeletextReader - Initialization
# =============================================================================


class TestTeletextReaderInit:
    """Tests for TeletextReader initialization."""

    def test_init_without_subpage(self):
        reader = TeletextReader()

        assert reader.subpage is None
        assert reader.lines is None
        assert reader.metadata is None
        assert reader.result is None

    def test_init_with_subpage(self):
        reader = TeletextReader(subpage=3)

        assert reader.subpage == 3


# =============================================================================
# Tests for TeletextReader - read()
# =============================================================================


class TestTeletextReaderRead:
    """Tests for TeletextReader.read() method."""

    def test_read_populates_properties(self):
        reader = TeletextReader()

        result = reader.read(make_payload(prevpg="100", nextpg="102", number=101))

        assert reader.lines is not None
        assert reader.metadata.page_number == 101
        assert reader.result is result

    def test_result_payload_shape(self):
        payload = make_payload(
            subpages=[make_subpage(1, [make_line(make_run(fg="gblue", bg="gblue", length=2))])],
            nextpg="102",
        )

        result = TeletextReader().read(payload)

        assert result["lines"] == [
            [{"text": "  ", "style": {"color": "blue", "background-color": "blue"}}]
        ]
        assert result["metadata"]["next_page"] == 102
        assert "previous_page" not in result["metadata"]
        assert result["metadata"]["subpage_count"] == 1

    def test_read_failed_fetch(self):
        reader = TeletextReader(subpage=2)

        result = reader.read(None, page_number=150)

        assert result["lines"] == []
        assert result["metadata"]["page"] == 150
        assert result["metadata"]["subpage"] == 1

    def test_reading_again_replaces_previous_page(self):
        reader = TeletextReader()
        reader.read(make_payload(number=100))

        reader.read(make_payload(number=200, subpages=[]))

        assert reader.metadata.page_number == 200
        assert reader.lines == []


# =============================================================================
# Tests for TeletextReader - render()
# =============================================================================


class TestTeletextReaderRender:
    """Tests for TeletextReader.render() method."""

    def test_render_before_read_raises(self):
        with pytest.raises(ValueError, match="No page has been read yet"):
            TeletextReader().render(SpanBuffer())

    def test_render_into_buffer(self):
        reader = TeletextReader()
        reader.read(
            make_payload(
                subpages=[
                    make_subpage(
                        1,
                        [
                            make_line(make_run(length=4, text="RIVI")),
                            make_line(make_run(length=3, charcode="3Dh")),
                        ],
                    )
                ]
            )
        )
        buffer = SpanBuffer()

        reader.render(buffer)

        assert buffer.text == "RIVI\n===\n"
        assert buffer.lines == reader.lines

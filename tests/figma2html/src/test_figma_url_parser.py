import pytest

from figma2html.src.figma_url_parser import parse_figma_url


class TestParseFigmaUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://www.figma.com/design/AbC123/My-File?node-id=1-2", ("AbC123", "1:2")),
            ("https://www.figma.com/file/AbC123/My-File?node-id=10%3A20", ("AbC123", "10:20")),
            ("https://www.figma.com/file/AbC123/My-File?id=3-4", ("AbC123", "3:4")),
            ("https://www.figma.com/file/AbC123/My-File#node-id=5-6", ("AbC123", "5:6")),
            ("https://www.figma.com/design/AbC123/My-File", ("AbC123", None)),
            ("AbC123", ("AbC123", None)),
            ("  AbC123  ", ("AbC123", None)),
        ],
    )
    def test_valid_urls(self, url: str, expected) -> None:
        assert parse_figma_url(url) == expected

    def test_invalid_url(self) -> None:
        assert parse_figma_url("https://example.com/not/figma") == (None, None)

"""Unit tests for the page variants."""

import pytest

from minichat.ui.state import DraftError
from minichat.ui.variants import DARK, LIGHT, REVEAL, VARIANTS, Indicator


class TestVariants:
    def test_three_variants_on_distinct_routes(self) -> None:
        assert len(VARIANTS) == 3
        assert len({v.path for v in VARIANTS}) == 3
        assert DARK.path == "/"

    def test_only_reveal_variant_animates(self) -> None:
        assert [v.name for v in VARIANTS if v.reveal] == ["reveal"]

    def test_reveal_variant_keeps_text_as_entered(self) -> None:
        assert REVEAL.trim_content is False
        assert DARK.trim_content is True
        assert LIGHT.trim_content is True

    def test_indicators(self) -> None:
        assert REVEAL.indicator is Indicator.LABEL
        assert REVEAL.typing_label
        assert DARK.indicator is Indicator.DOTS

    @pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.name)
    def test_every_error_has_a_message(self, variant) -> None:
        assert set(variant.errors) == set(DraftError)

    @pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.name)
    def test_head_html_includes_code_style(self, variant) -> None:
        head = variant.head_html()

        assert head.startswith("<style>")
        assert ".highlight" in head


class TestFieldError:
    def test_valid_draft_has_no_error(self) -> None:
        assert DARK.field_error("hello") is None

    def test_empty_draft_message(self) -> None:
        assert DARK.field_error("   ") == "Message cannot be empty."

    def test_long_draft_message(self) -> None:
        assert DARK.field_error("x" * 501) == "Max length is 500 characters."

    def test_localized_messages(self) -> None:
        assert REVEAL.field_error("") == REVEAL.errors[DraftError.EMPTY]
        assert REVEAL.field_error("") != DARK.field_error("")

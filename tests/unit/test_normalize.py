"""Tests for reply normalization."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from prin_search.exceptions import MalformedResponseError
from prin_search.normalize import claude_text, gemini_text, openai_text


def _completion(content: str | None) -> SimpleNamespace:
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


@pytest.mark.unit
class TestOpenAIText:
    def test_returns_content_exactly(self) -> None:
        assert openai_text(_completion("  Hello, world\n")) == "  Hello, world\n"

    def test_dict_payload(self) -> None:
        payload = {"choices": [{"message": {"role": "assistant", "content": "hi"}}]}
        assert openai_text(payload) == "hi"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"choices": []},
            {"choices": None},
            {"choices": [{}]},
            {"choices": [{"message": {}}]},
            {"choices": [{"message": None}]},
            {"choices": [{"message": {"content": None}}]},
            None,
        ],
    )
    def test_missing_path_is_empty(self, payload: object) -> None:
        assert openai_text(payload) == ""

    def test_sdk_object_with_null_content(self) -> None:
        assert openai_text(_completion(None)) == ""

    def test_strict_raises(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            openai_text({"choices": []}, strict=True, provider="grok")
        assert exc_info.value.provider == "grok"

    def test_strict_allows_empty_string_content(self) -> None:
        assert openai_text(_completion(""), strict=True) == ""


@pytest.mark.unit
class TestGeminiText:
    def test_uses_text_accessor(self) -> None:
        assert gemini_text(SimpleNamespace(text="A haiku")) == "A haiku"

    def test_none_text_is_empty(self) -> None:
        assert gemini_text(SimpleNamespace(text=None)) == ""

    def test_strict_raises_on_none(self) -> None:
        with pytest.raises(MalformedResponseError, match="gemini"):
            gemini_text(SimpleNamespace(text=None), strict=True)


@pytest.mark.unit
class TestClaudeText:
    def test_concatenates_and_skips_missing(self) -> None:
        assert claude_text([{"text": "a"}, {}, {"text": "b"}]) == "ab"

    def test_strips_whitespace(self) -> None:
        blocks = [SimpleNamespace(type="text", text="  first "), SimpleNamespace(type="text", text="second\n")]
        assert claude_text(blocks) == "first second"

    def test_non_text_blocks_are_empty(self) -> None:
        blocks = [SimpleNamespace(type="tool_use", id="t1"), SimpleNamespace(type="text", text="done")]
        assert claude_text(blocks) == "done"

    def test_empty_sequence(self) -> None:
        assert claude_text([]) == ""

    def test_missing_content(self) -> None:
        assert claude_text(None) == ""

    def test_strict_raises_on_missing_content(self) -> None:
        with pytest.raises(MalformedResponseError):
            claude_text(None, strict=True)

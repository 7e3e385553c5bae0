"""
Tests for the offline demo fallback.

Run: pytest tests/test_demo_generator.py -v
"""

from dataclasses import replace

import pytest

from services.content_generator import ContentValidationError
from services.content_types import ContentType, WritingStyle
from services.demo_generator import DEMO_MARKER, build_demo_result, generate_demo


@pytest.mark.parametrize("content_type", list(ContentType))
def test_every_type_mentions_topic_and_marker(content_type):
    content = generate_demo(content_type, "Energi Terbarukan", WritingStyle.formal)

    assert "Energi Terbarukan" in content
    assert DEMO_MARKER in content


def test_unknown_type_falls_back_to_article():
    assert generate_demo("puisi", "Hujan", "formal") == generate_demo(ContentType.article, "Hujan", "formal")


def test_caption_varies_with_style():
    casual = generate_demo("caption-ig", "Kopi Pagi", "santai")
    formal = generate_demo("caption-ig", "Kopi Pagi", "formal")

    assert "Jadi ceritanya" in casual
    assert "Berdasarkan pengalaman" in formal
    assert "#KopiPagi" in casual


def test_email_varies_with_style():
    formal = generate_demo(ContentType.formal_email, "Rapat Bulanan", WritingStyle.formal)
    casual = generate_demo(ContentType.formal_email, "Rapat Bulanan", WritingStyle.casual)

    assert "Berdasarkan pertimbangan yang matang" in formal
    assert "Dengan ini saya ingin menyampaikan" in casual


def test_demo_output_is_deterministic():
    first = generate_demo("artikel", "Hujan", "formal")
    second = generate_demo("artikel", "Hujan", "formal")

    assert first == second


class TestBuildDemoResult:
    def test_result_is_marked_as_demo(self, caption_request):
        result = build_demo_result(caption_request)

        assert result.is_demo is True
        assert result.metadata.iterations == 1
        assert result.metadata.word_count == len(result.content.split())
        assert len(result.alternatives) == 2
        assert all(DEMO_MARKER in alternative for alternative in result.alternatives)
        assert 0.0 <= result.quality_analysis.score.overall <= 10.0

    def test_demo_still_validates_request(self, caption_request):
        with pytest.raises(ContentValidationError):
            build_demo_result(replace(caption_request, template=""))

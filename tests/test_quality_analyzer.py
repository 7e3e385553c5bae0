"""
Unit tests for the quality metrics engine and score aggregator.

Run: pytest tests/test_quality_analyzer.py -v
"""

import math

import pytest

from services.content_types import ContentType
from services.quality_analyzer import (
    SCORE_WEIGHTS,
    WARNING_OVERGENERALIZATION,
    WARNING_REPEATED,
    WARNING_TOO_LONG,
    WARNING_TOO_SHORT,
    ContentQualityAnalyzer,
    QualityScore,
    score,
)
from services.quality_metrics import (
    engagement_score,
    factual_accuracy_score,
    keyword_density,
    originality_score,
    readability_score,
    seo_score,
    structure_score,
)

ARTICLE = """# Kecerdasan Buatan di Sekolah

Pendahuluan: kecerdasan buatan mulai dipakai guru untuk menyiapkan materi.

Banyak sekolah mencoba alat baru. Namun tidak semua guru merasa siap.

Kesimpulan: pelatihan guru perlu diperluas agar manfaatnya merata."""

SAMPLE_TEXTS = [
    "",
    "   ",
    "\n\n\t",
    "!!!???...",
    "a",
    "12345 67890",
    "Halo? Klik link di bio! #promo 😊",
    ARTICLE,
    "kata " * 5000,
    "Dalam era globalisasi, " * 40,
    "Studi menunjukkan 99.99% orang setuju. Para ahli mengatakan 1234% naik. " * 10,
]


class TestSubscoreBounds:
    """Every sub-score stays within [0, 10]"""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    @pytest.mark.parametrize("content_type", [item.value for item in ContentType] + ["lainnya"])
    def test_subscores_in_range(self, text, content_type):
        result = score(text, content_type, "kecerdasan buatan")

        for name, value in result.subscores().items():
            assert math.isfinite(value), name
            assert 0.0 <= value <= 10.0, name
        assert 0.0 <= result.overall <= 10.0

    def test_empty_text_scores_without_division_errors(self):
        result = score("", "artikel", "AI")

        assert all(math.isfinite(value) for value in result.subscores().values())
        assert math.isfinite(result.overall)
        assert result.readability == 10.0


class TestOverallScore:
    """overall is the rounded weighted sum of the six sub-scores"""

    def test_weights_sum_to_one(self):
        assert sum(SCORE_WEIGHTS.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_overall_is_weighted_sum(self, text):
        result = score(text, "artikel", "kecerdasan buatan")

        expected = round(sum(weight * getattr(result, name) for name, weight in SCORE_WEIGHTS.items()), 1)
        assert result.overall == expected

    def test_overall_cannot_be_passed_in(self):
        with pytest.raises(TypeError):
            QualityScore(1, 1, 1, 1, 1, 1, overall=9.9)  # type: ignore[call-arg]

    def test_score_is_frozen(self):
        result = QualityScore(5, 5, 5, 5, 5, 5)
        with pytest.raises(AttributeError):
            result.overall = 1.0  # type: ignore[misc]

    def test_scoring_is_idempotent(self):
        first = score(ARTICLE, ContentType.article, "kecerdasan buatan")
        second = score(ARTICLE, ContentType.article, "kecerdasan buatan")

        assert first == second


class TestMetrics:
    def test_short_sentences_read_easier_than_long_ones(self):
        easy = "Aku suka kopi. Dia suka teh. Kita makan roti."
        hard = (
            "Implementasi kebijakan pendidikan nasional memerlukan koordinasi antarlembaga "
            "pemerintahan yang berkesinambungan dan terintegrasi secara menyeluruh"
        )
        assert readability_score(easy) > readability_score(hard)

    def test_article_structure_markers(self):
        assert structure_score(ARTICLE, "artikel") == 8.0
        assert structure_score("Teks tanpa struktur.", "artikel") == 5.0

    def test_email_structure_greeting_and_closing(self):
        email = "Kepada Yth. Bapak Direktur\n\nMohon izin.\n\nHormat saya,\nRina"
        assert structure_score(email, ContentType.formal_email) == 7.0

    def test_assignment_structure_thesis_and_list(self):
        essay = "Argumen utama tulisan ini jelas.\n1. Poin pertama\n2. Poin kedua"
        assert structure_score(essay, "tugas-sekolah") == 7.0

    def test_unscored_content_type_gets_default_structure(self):
        assert structure_score("apa saja", "ringkasan-buku") == 7.0
        assert structure_score("apa saja", "tidak-dikenal") == 7.0

    def test_caption_engagement_bonuses(self):
        caption = "Halo? Yuk klik link di bio! #promo 😊"
        assert engagement_score(caption, "caption-ig") == 9.0
        assert engagement_score(caption, "artikel") == 7.5

    def test_keyword_density_counts_topic_words(self):
        text = "ai " + "kata " * 98 + "ai"
        assert keyword_density(text, "AI") == pytest.approx(2.0)
        assert seo_score(text, "AI") == 7.0

    def test_keyword_density_counts_repeated_topic_words(self):
        text = "ai " + "kata " * 99
        assert keyword_density(text, "AI dan AI") == pytest.approx(2.0)

    def test_seo_rewards_headings(self):
        assert seo_score("# Judul\nisi", "topik lain") == 6.0

    def test_originality_penalises_cliches_with_floor(self):
        assert originality_score("Tulisan segar.") == 8.0
        assert originality_score("Di zaman modern ini kita bekerja.") == 7.5
        assert originality_score("tidak dapat dipungkiri " * 20) == 5.0

    def test_factual_accuracy_flags_and_balance(self):
        assert factual_accuracy_score("Para ahli mengatakan hal itu benar.") == 6.0
        assert factual_accuracy_score("Para ahli mengatakan hal itu, namun data belum lengkap.") == 7.0
        assert factual_accuracy_score("Studi menunjukkan 1234% kenaikan. " * 5) == 4.0


class TestContentQualityAnalyzer:
    @pytest.fixture
    def analyzer(self):
        return ContentQualityAnalyzer()

    def test_repeated_sentences_warning(self, analyzer):
        text = (
            "Ini kalimat yang sama. Ini kalimat yang sama. Ini kalimat yang sama. "
            "Kalimat kedua berbeda. Kalimat ketiga juga lain."
        )
        analysis = analyzer.analyze(text, "artikel", "kalimat")

        assert WARNING_REPEATED in analysis.warnings

    def test_no_repeated_warning_for_distinct_sentences(self, analyzer):
        analysis = analyzer.analyze(ARTICLE, "artikel", "kecerdasan buatan")

        assert WARNING_REPEATED not in analysis.warnings

    def test_length_warnings(self, analyzer):
        assert WARNING_TOO_SHORT in analyzer.analyze("Halo.", "artikel", "halo").warnings
        long_text = "Kalimat panjang yang unik nomor {}. "
        text = "".join(long_text.format(index) for index in range(200))
        assert WARNING_TOO_LONG in analyzer.analyze(text, "artikel", "kalimat").warnings

    def test_overgeneralization_warning(self, analyzer):
        analysis = analyzer.analyze("Semua orang suka kopi di pagi hari.", "artikel", "kopi")

        assert WARNING_OVERGENERALIZATION in analysis.warnings

    def test_strengths_for_high_scores(self):
        strengths = ContentQualityAnalyzer.strengths(QualityScore(9, 9, 9, 9, 9, 9))

        assert len(strengths) == 6

    def test_suggestions_for_low_scores(self):
        suggestions = ContentQualityAnalyzer.suggestions(QualityScore(5, 5, 5, 5, 5, 5))

        assert len(suggestions) == 14
        assert "Gunakan call-to-action yang jelas" in suggestions

    def test_suggestions_follow_the_low_subscore(self):
        suggestions = ContentQualityAnalyzer.suggestions(QualityScore(9, 9, 5, 9, 9, 9))

        assert suggestions == [
            "Tambahkan pertanyaan untuk melibatkan pembaca",
            "Gunakan call-to-action yang jelas",
            "Sertakan contoh atau cerita untuk menarik perhatian",
        ]

    def test_strengths_follow_the_high_subscores(self):
        strengths = ContentQualityAnalyzer.strengths(QualityScore(5, 5, 5, 8, 5, 5))

        assert strengths == ["Optimasi SEO sangat baik"]

    def test_no_suggestions_for_high_scores(self):
        assert ContentQualityAnalyzer.suggestions(QualityScore(9, 9, 9, 9, 9, 9)) == []

    def test_analysis_score_matches_engine(self, analyzer):
        analysis = analyzer.analyze(ARTICLE, "artikel", "kecerdasan buatan")

        assert analysis.score == score(ARTICLE, "artikel", "kecerdasan buatan")

from __future__ import annotations

import re

from services.content_types import ContentType, enum_value

MAX_SCORE = 10.0

SENTENCE_SPLIT = re.compile(r"[.!?]+")
VOWEL_RUN = re.compile(r"[aeiou]+", re.IGNORECASE)
LIST_LINE = re.compile(r"^\s*(\d+\.|[-*•])\s*", re.MULTILINE)
HEADING_LINE = re.compile(r"^(#{1,6}\s|\d+\.)", re.MULTILINE)
HASHTAG = re.compile(r"#\w+")
EMOJI = re.compile("[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF\U0001F1E0-\U0001F1FF]")

CALL_TO_ACTION = re.compile(r"\b(klik|baca|lihat|coba|download|daftar|ikuti)\b", re.IGNORECASE)
EMOTIONAL_WORDS = re.compile(
    r"\b(amazing|luar biasa|fantastis|menakjubkan|hebat|keren)\b",
    re.IGNORECASE,
)
CONCESSIVE_CONNECTIVES = re.compile(r"\b(namun|tetapi|meskipun|walaupun)\b", re.IGNORECASE)

CLICHE_PHRASES = (
    "dalam era globalisasi",
    "di zaman modern ini",
    "tidak dapat dipungkiri",
    "sebagaimana kita ketahui",
)

VAGUE_AUTHORITY_PATTERNS = (
    re.compile(r"\d{4}%"),
    re.compile(r"\b\d{1,3}[.,]\d{2,}\s?%"),
    re.compile(r"menurut penelitian terbaru", re.IGNORECASE),
    re.compile(r"para ahli mengatakan", re.IGNORECASE),
    re.compile(r"studi menunjukkan", re.IGNORECASE),
)


def _clamp(value: float, lower: float = 0.0, upper: float = MAX_SCORE) -> float:
    return max(lower, min(upper, value))


def split_sentences(text: str) -> list[str]:
    return [part for part in SENTENCE_SPLIT.split(text) if part.strip()]


def count_syllables(text: str) -> int:
    """Approximate syllables as vowel runs; Indonesian spelling is close to phonetic."""
    return max(1, len(VOWEL_RUN.findall(text)))


def readability_score(text: str) -> float:
    sentence_count = max(1, len(split_sentences(text)))
    word_count = max(1, len(text.split()))

    words_per_sentence = word_count / sentence_count
    syllables_per_word = count_syllables(text) / word_count

    flesch = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    flesch = _clamp(flesch, 0.0, 100.0)
    return round(flesch / 10, 1)


def _article_structure(text: str) -> float:
    score = 5.0
    opening = text[:200].lower()
    lowered = text.lower()
    if "pendahuluan" in opening or "pengantar" in opening:
        score += 1
    if "kesimpulan" in lowered or "penutup" in lowered:
        score += 1
    paragraphs = [part for part in text.split("\n\n") if part.strip()]
    if len(paragraphs) >= 3:
        score += 1
    return score


def _assignment_structure(text: str) -> float:
    score = 5.0
    lowered = text.lower()
    if "thesis" in lowered or "argumen utama" in lowered:
        score += 1
    if LIST_LINE.search(text):
        score += 1
    return score


def _caption_structure(text: str) -> float:
    score = 5.0
    first_line = text.split("\n")[0]
    if first_line and ("?" in first_line or len(first_line) < 50):
        score += 1
    if "#" in text:
        score += 1
    return score


def _email_structure(text: str) -> float:
    score = 5.0
    lowered = text.lower()
    if any(greeting in lowered for greeting in ("dear", "kepada", "halo")):
        score += 1
    if "hormat" in lowered or "terima kasih" in lowered:
        score += 1
    return score


STRUCTURE_CHECKS = {
    ContentType.article.value: _article_structure,
    ContentType.school_assignment.value: _assignment_structure,
    ContentType.instagram_caption.value: _caption_structure,
    ContentType.formal_email.value: _email_structure,
}

DEFAULT_STRUCTURE_SCORE = 7.0


def structure_score(text: str, content_type: ContentType | str) -> float:
    check = STRUCTURE_CHECKS.get(enum_value(content_type))
    if check is None:
        return DEFAULT_STRUCTURE_SCORE
    return _clamp(check(text))


def engagement_score(text: str, content_type: ContentType | str) -> float:
    score = 5.0
    if "?" in text:
        score += 1
    if CALL_TO_ACTION.search(text):
        score += 1.5
    if EMOTIONAL_WORDS.search(text):
        score += 1
    if re.search(r"\d", text):
        score += 0.5
    if LIST_LINE.search(text):
        score += 1

    if enum_value(content_type) == ContentType.instagram_caption.value:
        if HASHTAG.search(text):
            score += 1
        if EMOJI.search(text):
            score += 0.5

    return _clamp(score)


def keyword_density(text: str, topic: str) -> float:
    """Percentage of words in ``text`` that are words of ``topic``."""
    lowered = text.lower()
    keyword_count = 0
    for word in topic.lower().split():
        keyword_count += len(re.findall(rf"\b{re.escape(word)}\b", lowered))
    word_count = max(1, len(text.split()))
    return keyword_count / word_count * 100


def seo_score(text: str, topic: str) -> float:
    score = 5.0
    density = keyword_density(text, topic)
    if 1 <= density <= 3:
        score += 2
    elif 0.5 < density < 5:
        score += 1

    if HEADING_LINE.search(text):
        score += 1

    if 300 <= len(text.split()) <= 2000:
        score += 1

    return _clamp(score)


def originality_score(text: str) -> float:
    lowered = text.lower()
    occurrences = sum(lowered.count(phrase) for phrase in CLICHE_PHRASES)
    return _clamp(8.0 - occurrences * 0.5, lower=5.0)


def factual_accuracy_score(text: str) -> float:
    score = 7.0
    red_flags = sum(len(pattern.findall(text)) for pattern in VAGUE_AUTHORITY_PATTERNS)
    score -= red_flags
    if CONCESSIVE_CONNECTIVES.search(text):
        score += 1
    return _clamp(score, lower=4.0)

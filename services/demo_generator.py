from __future__ import annotations

import logging
import re
import time

from services.content_generator import GenerationRequest, GenerationResult, build_metadata, validate_request
from services.content_types import ContentType, WritingStyle, enum_value
from services.quality_analyzer import ContentQualityAnalyzer

logger = logging.getLogger(__name__)

DEMO_MARKER = "Demo Mode"
DEMO_ALTERNATIVE_COUNT = 2


def _article(topic: str, style: str) -> str:
    lowered = topic.lower()
    return f"""# {topic}

Dalam era digital saat ini, {lowered} menjadi topik yang sangat relevan untuk dibahas.

## Pendahuluan
{topic} memiliki dampak yang signifikan dalam kehidupan sehari-hari. Berbagai aspek perlu dipertimbangkan untuk memahami fenomena ini secara komprehensif.

## Pembahasan Utama
Beberapa poin penting yang perlu diperhatikan:

1. **Aspek Pertama**: Penjelasan detail tentang aspek pertama
2. **Aspek Kedua**: Analisis mendalam tentang aspek kedua
3. **Aspek Ketiga**: Evaluasi komprehensif aspek ketiga

## Kesimpulan
Berdasarkan pembahasan di atas, dapat disimpulkan bahwa {lowered} merupakan hal yang penting untuk dipahami dan diterapkan dalam konteks yang tepat.

*Artikel ini dibuat dengan AI Writer Pro - {DEMO_MARKER}*"""


def _assignment(topic: str, style: str) -> str:
    lowered = topic.lower()
    return f"""# Tugas: {topic}

## Pendahuluan
Tugas ini membahas tentang {lowered} yang merupakan topik penting dalam pembelajaran.

## Tujuan Pembelajaran
- Memahami konsep dasar {lowered}
- Menganalisis berbagai aspek terkait
- Menarik kesimpulan yang tepat

## Pembahasan
### A. Definisi dan Konsep Dasar
{topic} dapat didefinisikan sebagai...

### B. Analisis Mendalam
Berdasarkan berbagai sumber, dapat dianalisis bahwa...

### C. Contoh Penerapan
Dalam kehidupan sehari-hari, {lowered} dapat ditemukan dalam...

## Kesimpulan
Dari pembahasan di atas, dapat disimpulkan bahwa...

## Daftar Pustaka
- Sumber 1: Referensi akademik terkait
- Sumber 2: Jurnal ilmiah yang relevan

*Tugas ini dibuat dengan AI Writer Pro - {DEMO_MARKER}*"""


def _caption(topic: str, style: str) -> str:
    lowered = topic.lower()
    casual = style == WritingStyle.casual.value
    opener = "😊 Jadi ceritanya..." if casual else "Berdasarkan pengalaman..."
    closer = (
        "Gimana menurut kalian? Share di comment ya! 💬"
        if casual
        else "Semoga bermanfaat untuk teman-teman semua."
    )
    hashtag = re.sub(r"\s+", "", topic)
    return f"""🌟 {topic} 🌟

Hey guys! Hari ini mau sharing tentang {lowered} nih!

{opener}

✨ Poin-poin penting:
• Point pertama yang menarik
• Insight yang bermanfaat
• Tips praktis untuk kalian

{closer}

#{hashtag} #ContentCreator #AIWriterPro #Indonesia #Viral #Trending

*Generated with AI Writer Pro - {DEMO_MARKER}*"""


def _email(topic: str, style: str) -> str:
    lowered = topic.lower()
    lead = (
        "Berdasarkan pertimbangan yang matang,"
        if style == WritingStyle.formal.value
        else "Dengan ini saya ingin menyampaikan bahwa"
    )
    return f"""Subject: {topic}

Kepada Yth.
[Nama Penerima]
[Jabatan]
[Perusahaan]

Dengan hormat,

Saya menulis surat ini untuk menyampaikan hal terkait {lowered}.

{lead} {lowered} merupakan hal yang perlu mendapat perhatian khusus.

Beberapa poin yang ingin saya sampaikan:
1. Poin pertama yang relevan
2. Aspek kedua yang penting
3. Usulan atau saran konstruktif

Demikian surat ini saya sampaikan. Atas perhatian dan kerjasamanya, saya ucapkan terima kasih.

Hormat saya,

[Nama Pengirim]
[Jabatan]
[Kontak]

*Email ini dibuat dengan AI Writer Pro - {DEMO_MARKER}*"""


def _book_summary(topic: str, style: str) -> str:
    lowered = topic.lower()
    return f"""# Ringkasan: {topic}

## Informasi Buku
- **Judul**: {topic}
- **Penulis**: [Nama Penulis]
- **Tahun Terbit**: [Tahun]
- **Genre**: [Genre Buku]

## Sinopsis Singkat
Buku ini membahas tentang {lowered} dengan pendekatan yang komprehensif dan mudah dipahami.

## Poin-Poin Utama

### Bab 1: Pengenalan
- Konsep dasar yang diperkenalkan
- Latar belakang pentingnya topik ini

### Bab 2: Pembahasan Inti
- Analisis mendalam tentang tema utama
- Contoh-contoh praktis yang relevan

### Bab 3: Aplikasi Praktis
- Cara menerapkan konsep dalam kehidupan
- Tips dan strategi yang bisa digunakan

## Key Takeaways
1. **Insight Utama**: Pembelajaran penting dari buku
2. **Aplikasi Praktis**: Cara menerapkan dalam kehidupan
3. **Inspirasi**: Motivasi yang bisa diambil

## Rekomendasi
Buku ini cocok untuk pembaca yang ingin memahami {lowered} secara mendalam.

**Rating**: ⭐⭐⭐⭐⭐

*Ringkasan ini dibuat dengan AI Writer Pro - {DEMO_MARKER}*"""


DEMO_TEMPLATES = {
    ContentType.article.value: _article,
    ContentType.school_assignment.value: _assignment,
    ContentType.instagram_caption.value: _caption,
    ContentType.formal_email.value: _email,
    ContentType.book_summary.value: _book_summary,
}


def generate_demo(content_type: ContentType | str, topic: str, style: WritingStyle | str) -> str:
    """Fill the canned template for ``content_type``; unknown types get the article template."""
    render = DEMO_TEMPLATES.get(enum_value(content_type), _article)
    return render(topic, enum_value(style))


def build_demo_result(
    request: GenerationRequest,
    analyzer: ContentQualityAnalyzer | None = None,
) -> GenerationResult:
    """Wrap demo content in a result shaped like a live generation."""
    request = validate_request(request)
    started_at = time.perf_counter()
    analyzer = analyzer or ContentQualityAnalyzer()

    content = generate_demo(request.content_type, request.topic, request.writing_style)
    analysis = analyzer.analyze(content, request.content_type, request.topic)
    alternatives = [
        f"{content}\n\n*Versi alternatif {number} - {DEMO_MARKER}*"
        for number in range(1, DEMO_ALTERNATIVE_COUNT + 1)
    ]
    logger.info("Served demo content for %s", enum_value(request.content_type))

    return GenerationResult(
        content=content,
        quality_analysis=analysis,
        alternatives=alternatives,
        metadata=build_metadata(content, started_at, iterations=1),
        is_demo=True,
    )

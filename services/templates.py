from __future__ import annotations

from dataclasses import dataclass

from services.content_types import ContentType, enum_value

FALLBACK_STRUCTURE = "Gunakan struktur yang logis dan mudah diikuti"


@dataclass(frozen=True)
class ContentTemplate:
    id: str
    content_type: ContentType
    name: str
    description: str
    structure: tuple[str, ...]
    example: str


TEMPLATES: tuple[ContentTemplate, ...] = (
    ContentTemplate(
        id="berita",
        content_type=ContentType.article,
        name="Artikel Berita",
        description="Format berita dengan 5W+1H",
        structure=(
            "Headline menarik",
            "Lead paragraph dengan 5W+1H",
            "Body dengan fakta dan data",
            "Quote dari narasumber",
            "Kesimpulan yang kuat",
        ),
        example="Cocok untuk: berita terkini, laporan kejadian, update informasi",
    ),
    ContentTemplate(
        id="tutorial",
        content_type=ContentType.article,
        name="Artikel Tutorial",
        description="Panduan step-by-step",
        structure=(
            "Pengenalan masalah yang akan diselesaikan",
            "Tools/bahan yang dibutuhkan",
            "Langkah-langkah detail dengan numbering",
            "Tips dan troubleshooting",
            "Kesimpulan dan next steps",
        ),
        example="Cocok untuk: how-to guides, tutorial teknis, panduan praktis",
    ),
    ContentTemplate(
        id="review",
        content_type=ContentType.article,
        name="Artikel Review",
        description="Ulasan produk/layanan",
        structure=("Pendahuluan produk", "Kelebihan", "Kekurangan", "Perbandingan", "Rekomendasi"),
        example="Cocok untuk: review produk, ulasan film, evaluasi layanan",
    ),
    ContentTemplate(
        id="opini",
        content_type=ContentType.article,
        name="Artikel Opini",
        description="Pendapat dan analisis",
        structure=(
            "Pernyataan thesis",
            "Argumen pendukung",
            "Contoh kasus",
            "Counter-argument",
            "Kesimpulan kuat",
        ),
        example="Cocok untuk: editorial, analisis isu, pendapat pribadi",
    ),
    ContentTemplate(
        id="essay",
        content_type=ContentType.school_assignment,
        name="Essay Akademik",
        description="Essay dengan struktur formal",
        structure=(
            "Pendahuluan + thesis",
            "Body paragraph 1",
            "Body paragraph 2",
            "Body paragraph 3",
            "Kesimpulan",
        ),
        example="Cocok untuk: essay argumentatif, analisis sastra, tugas bahasa",
    ),
    ContentTemplate(
        id="laporan",
        content_type=ContentType.school_assignment,
        name="Laporan Penelitian",
        description="Format laporan ilmiah",
        structure=("Abstrak", "Pendahuluan", "Metodologi", "Hasil & Pembahasan", "Kesimpulan & Saran"),
        example="Cocok untuk: laporan praktikum, penelitian sederhana, observasi",
    ),
    ContentTemplate(
        id="analisis",
        content_type=ContentType.school_assignment,
        name="Analisis Kasus",
        description="Analisis mendalam suatu topik",
        structure=("Latar belakang", "Identifikasi masalah", "Analisis penyebab", "Dampak", "Solusi"),
        example="Cocok untuk: studi kasus, analisis sosial, evaluasi kebijakan",
    ),
    ContentTemplate(
        id="presentasi",
        content_type=ContentType.school_assignment,
        name="Materi Presentasi",
        description="Outline untuk presentasi",
        structure=("Opening hook", "Agenda", "Poin utama 1-3", "Supporting data", "Call to action"),
        example="Cocok untuk: presentasi kelas, proposal proyek, pitch ide",
    ),
    ContentTemplate(
        id="akademik",
        content_type=ContentType.book_summary,
        name="Ringkasan Akademik",
        description="Ringkasan untuk keperluan studi",
        structure=("Informasi buku", "Thesis utama", "Poin-poin kunci", "Argumen penting", "Relevansi"),
        example="Cocok untuk: buku teks, jurnal akademik, referensi penelitian",
    ),
    ContentTemplate(
        id="review-buku",
        content_type=ContentType.book_summary,
        name="Review Buku",
        description="Ulasan dan penilaian buku",
        structure=(
            "Sinopsis singkat",
            "Kelebihan",
            "Kekurangan",
            "Target pembaca",
            "Rating & rekomendasi",
        ),
        example="Cocok untuk: novel, buku non-fiksi, buku pengembangan diri",
    ),
    ContentTemplate(
        id="poin-utama",
        content_type=ContentType.book_summary,
        name="Poin-Poin Utama",
        description="Ekstrak insight penting",
        structure=(
            "Key takeaways",
            "Konsep penting",
            "Quotes memorable",
            "Actionable insights",
            "Aplikasi praktis",
        ),
        example="Cocok untuk: buku bisnis, self-help, motivasi",
    ),
    ContentTemplate(
        id="promosi",
        content_type=ContentType.instagram_caption,
        name="Caption Promosi",
        description="Untuk mempromosikan produk/jasa",
        structure=("Hook menarik", "Benefit produk", "Social proof", "Call to action", "Hashtag relevan"),
        example="Cocok untuk: jualan online, promosi bisnis, launching produk",
    ),
    ContentTemplate(
        id="storytelling",
        content_type=ContentType.instagram_caption,
        name="Caption Storytelling",
        description="Bercerita untuk engagement",
        structure=(
            "Opening menarik",
            "Konflik/tantangan",
            "Resolusi",
            "Lesson learned",
            "Question untuk audience",
        ),
        example="Cocok untuk: personal branding, sharing experience, motivasi",
    ),
    ContentTemplate(
        id="motivasi",
        content_type=ContentType.instagram_caption,
        name="Caption Motivasi",
        description="Konten inspiratif dan motivasi",
        structure=(
            "Quote/statement kuat",
            "Penjelasan makna",
            "Contoh aplikasi",
            "Encouragement",
            "Hashtag motivasi",
        ),
        example="Cocok untuk: daily motivation, quotes, inspirasi hidup",
    ),
    ContentTemplate(
        id="lifestyle",
        content_type=ContentType.instagram_caption,
        name="Caption Lifestyle",
        description="Sharing aktivitas sehari-hari",
        structure=(
            "Situasi/moment",
            "Feeling/emotion",
            "Insight/reflection",
            "Relatable content",
            "Hashtag lifestyle",
        ),
        example="Cocok untuk: daily life, hobi, travel, food",
    ),
    ContentTemplate(
        id="lamaran",
        content_type=ContentType.formal_email,
        name="Email Lamaran Kerja",
        description="Surat lamaran via email",
        structure=(
            "Subject line profesional",
            "Salam pembuka",
            "Pengenalan diri",
            "Kualifikasi",
            "Penutup & lampiran",
        ),
        example="Cocok untuk: melamar pekerjaan, internship, volunteer",
    ),
    ContentTemplate(
        id="proposal",
        content_type=ContentType.formal_email,
        name="Email Proposal Bisnis",
        description="Proposal kerjasama bisnis",
        structure=("Subject menarik", "Pengenalan singkat", "Proposal value", "Benefit mutual", "Next steps"),
        example="Cocok untuk: partnership, sponsorship, kerjasama bisnis",
    ),
    ContentTemplate(
        id="komplain",
        content_type=ContentType.formal_email,
        name="Email Komplain",
        description="Menyampaikan keluhan formal",
        structure=(
            "Subject jelas",
            "Penjelasan masalah",
            "Dampak yang dialami",
            "Solusi yang diharapkan",
            "Penutup sopan",
        ),
        example="Cocok untuk: komplain layanan, return produk, feedback negatif",
    ),
    ContentTemplate(
        id="undangan",
        content_type=ContentType.formal_email,
        name="Email Undangan",
        description="Mengundang ke acara/meeting",
        structure=("Subject dengan tanggal", "Tujuan acara", "Detail waktu & tempat", "Agenda", "RSVP"),
        example="Cocok untuk: meeting, webinar, event, gathering",
    ),
)

_TEMPLATES_BY_ID = {template.id: template for template in TEMPLATES}


def get_template(template_id: str) -> ContentTemplate | None:
    return _TEMPLATES_BY_ID.get(template_id)


def list_templates(content_type: ContentType | str | None = None) -> list[ContentTemplate]:
    if content_type is None:
        return list(TEMPLATES)
    wanted = enum_value(content_type)
    return [template for template in TEMPLATES if template.content_type.value == wanted]


def template_structure(template_id: str) -> str:
    """Render a template's sections as a numbered prompt line, e.g. ``1) Abstrak, 2) ...``."""
    template = get_template(template_id)
    if template is None:
        return FALLBACK_STRUCTURE
    return ", ".join(f"{index}) {section}" for index, section in enumerate(template.structure, start=1))

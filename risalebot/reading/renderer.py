"""Turkish, WhatsApp-formatted rendering of pages, menus and errors."""

import re

from risalebot.config import ReadingConfig
from risalebot.models.command import (
    Command,
    InterludeCommand,
    MeaningMode,
    SozCommand,
    SozlerPageCommand,
)
from risalebot.models.page import InterludePage, PageResult
from risalebot.models.response import Button, NavigationInfo, RenderedResponse
from risalebot.models.toc import ChapterEntry, InterludeEntry, SubHeading, TocEntry
from risalebot.reading.parser import format_command
from risalebot.reading.text import sanitize_whatsapp

BUTTON_TEXTS: dict[str, str] = {
    "previous": "⬅️ Önceki Sayfa",
    "next": "➡️ Sonraki Sayfa",
    "meanings_open": "👁️ Anlamları Aç",
    "meanings_close": "🚫 Anlamları Kapat",
}

# WhatsApp reply messages accept at most three buttons
MAX_BUTTONS = 3


def number_emoji(number: int) -> str:
    """Render a number with keycap emoji, e.g. 12 → 1️⃣2️⃣."""
    if number == 10:
        return "🔟"
    return "".join(f"{digit}️⃣" for digit in str(number))


def page_command(page: PageResult, meaning: MeaningMode) -> Command:
    """Return the command that reopens ``page`` in the given meaning mode."""
    if page.scheme == "global" and page.global_id is not None:
        return SozlerPageCommand(sozler_page_id=page.global_id, show_meaning=meaning)
    if isinstance(page, InterludePage):
        return InterludeCommand(
            slug=page.interlude_slug, page_no=page.page_index, show_meaning=meaning
        )
    return SozCommand(soz_no=page.soz_no, page_no=page.page_index, show_meaning=meaning)


class ResponseRenderer:
    """Builds display text and buttons for the message delivery layer.

    Args:
        config: Reading settings (footnote length limit, chapter count).
    """

    def __init__(self, config: ReadingConfig | None = None) -> None:
        self._config = config or ReadingConfig()

    # ── Pages ─────────────────────────────────────────────────────────────

    def render_page(
        self,
        page: PageResult,
        next_info: NavigationInfo | None = None,
        previous_info: NavigationInfo | None = None,
    ) -> RenderedResponse:
        """Format a resolved page with its navigation."""
        parts = [self._page_header(page), ""]

        content = page.text_closed if page.meaning == "closed" else page.text_open
        parts.append(content or "_İçerik bulunamadı._")

        if page.footnotes and len("\n".join(parts)) < self._config.footnote_text_limit:
            parts.append("")
            parts.append("📝 *Dipnotlar:*")
            for footnote in page.footnotes:
                parts.append(f"[{footnote.marker}] {footnote.text}")

        if page.meaning == "closed" and page.dictionary:
            parts.append("")
            parts.append("📚 *Kelime Anlamları:*")
            for entry in page.dictionary:
                parts.append(f"• *{sanitize_whatsapp(entry.word)}:* {entry.meaning}")

        nav_commands: dict[str, str] = {}
        buttons: list[Button] = []

        if previous_info:
            command = format_command(previous_info.command)
            nav_commands["previous"] = command
            buttons.append(Button(id=command, title=BUTTON_TEXTS["previous"]))
            parts.append("")
            parts.append("⬅️ *Önceki sayfa:*")
            parts.append(f"• `{command}` _({previous_info.description})_")

        if next_info:
            command = format_command(next_info.command)
            nav_commands["next"] = command
            buttons.append(Button(id=command, title=BUTTON_TEXTS["next"]))
            parts.append("")
            parts.append("➡️ *Sonraki sayfa:*")
            parts.append(f"• `{command}` _({next_info.description})_")
            if next_info.global_command:
                global_command = format_command(next_info.global_command)
                nav_commands["next_global"] = global_command
                parts.append(f"• `{global_command}` _(Sözler Kitabı sayfası)_")

        toggled: MeaningMode = "open" if page.meaning == "closed" else "closed"
        toggle_command = format_command(page_command(page, toggled))
        nav_commands["toggle_meaning"] = toggle_command
        if toggled == "open":
            buttons.append(Button(id=toggle_command, title=BUTTON_TEXTS["meanings_open"]))
            parts.append("")
            parts.append(f"👁️ `{toggle_command}` _(Anlamları açar)_")
        else:
            buttons.append(Button(id=toggle_command, title=BUTTON_TEXTS["meanings_close"]))
            parts.append("")
            parts.append(f"🚫 `{toggle_command}` _(Anlamları gizler)_")

        if page.url:
            parts.append("")
            parts.append(f"🔗 *Kaynak:* {page.url}")

        return RenderedResponse(
            text="\n".join(parts),
            buttons=buttons[:MAX_BUTTONS],
            nav_commands=nav_commands,
        )

    def _page_header(self, page: PageResult) -> str:
        meaning_label = " (Anlam Kapalı)" if page.meaning == "closed" else ""
        global_prefix = ""
        if page.scheme == "global" and page.global_id is not None:
            global_prefix = f"Sözler {page.global_id}. Sayfa - "

        if isinstance(page, InterludePage):
            title = sanitize_whatsapp(page.interlude_title.replace("\n", " ").strip())
            title = title or page.interlude_slug
            return f"📜 *{global_prefix}{title} {page.page_index}. Sayfa{meaning_label}*"

        if global_prefix:
            return (
                f"🌐 *{global_prefix}{page.soz_no}. Söz "
                f"{page.page_index}. Sayfa{meaning_label}*"
            )
        return f"📖 *{page.soz_no}. Söz - {page.page_index}. Sayfa{meaning_label}*"

    # ── Table of contents ─────────────────────────────────────────────────

    def render_toc(self, toc: list[TocEntry]) -> RenderedResponse:
        """Format the table of contents.

        Consecutive interludes are listed without blank lines between them;
        a blank line separates a chapter from the interludes around it.
        """
        if not toc:
            return RenderedResponse(text=self.toc_unavailable())

        lines = ["📖 *RİSALE-İ NUR - SÖZLER | İÇİNDEKİLER*", ""]

        for position, entry in enumerate(toc):
            next_entry = toc[position + 1] if position + 1 < len(toc) else None
            page_range = f"Sayfa {entry.range.start_id}-{entry.range.end_id}"

            if isinstance(entry, InterludeEntry):
                # Sections not followed by a chapter get their own paragraph
                if entry.before_soz is None:
                    lines.append("")
                title = entry.title.replace("\n", " ").strip()
                lines.append(f"    • {title} *({page_range})*")
                _render_subheadings(entry.subheadings, entry.range.start_id, lines, "      ")
                if not isinstance(next_entry, InterludeEntry):
                    lines.append("")
            else:
                title = re.sub(r"^\d+\.\s*", "", entry.title)
                lines.append(
                    f"{number_emoji(entry.soz_no)} *{entry.soz_no}. {title}* "
                    f"({entry.range.count} sayfa) - *{page_range}*"
                )
                _render_subheadings(entry.subheadings, entry.range.start_id, lines, "    ")
                if not isinstance(next_entry, InterludeEntry):
                    lines.append("")

        chapter_count = sum(1 for entry in toc if isinstance(entry, ChapterEntry))
        lines.append(f"📍 *Toplam:* {chapter_count} Söz")
        lines.append("")
        lines.append("💡Komutlar için: `/risale`")

        return RenderedResponse(text="\n".join(lines))

    # ── Words ─────────────────────────────────────────────────────────────

    def render_words(self, words: list[tuple[str, str]]) -> RenderedResponse:
        if not words:
            return RenderedResponse(text=self.words_unavailable())

        lines = [
            "📚 *RİSALE-İ NUR - SÖZLER | RASTGELE KELİMELER*",
            "",
            "🔤 *Bu kelimeler Risale-i Nur Sözler Kitabı'ndan:*",
            "",
        ]
        for number, (word, meaning) in enumerate(words, start=1):
            lines.append(f"{number_emoji(number)} *{sanitize_whatsapp(word)}:* {meaning}")

        lines.append("")
        lines.append(
            "💡 Yeni kelimeler öğrenmeye devam etmek için *_\"risale kelimeler\"_* yazabilirsiniz."
        )
        return RenderedResponse(
            text="\n".join(lines),
            nav_commands={"again": "/risalekelimeler"},
        )

    # ── Help and errors ───────────────────────────────────────────────────

    def render_help(self) -> RenderedResponse:
        max_soz = self._config.max_soz_count
        text = "\n".join([
            "📖 *Risale-i Nur - Sözler Rehberi*",
            "",
            "🔍 *Örnek komutlar:*",
            "",
            "📚 *Bir Söz'ü sayfa sayfa okumak için:*",
            "• `risale söz 18` → 18. Söz'ün *1. sayfasını* açar (*anlamlar açık - varsayılan*)",
            "• `risale söz 18 sayfa 3` → 18. Söz'ün *3. sayfasını* açar (*anlamlar açık*)",
            "• `risale söz 18 kapalı` → 18. Söz'ün *1. sayfasını* açar, *anlamları gizler*",
            "• `risale söz 18 sayfa 3 kapalı` → 18. Söz'ün *3. sayfasını* açar, *anlamları gizler*",
            "",
            "🌍 *Sözler Kitabı'nın ortak sayfa numaraları için:*",
            "• `risale sözler sayfa 421` → Kitabın *421. sayfasını* açar",
            "• `risale sözler sayfa 421 kapalı` → Kitabın *421. sayfasını* açar, *anlamları gizler*",
            "",
            "📜 *Ara bölümler için:*",
            "• `risale lemeat sayfa 2` → Lemeât bölümünün *2. sayfasını* açar",
            "",
            "ℹ️ *Genel:*",
            "• `risale içindekiler` → İçindekiler listesini gösterir",
            "• `risale kelimeler` → Rastgele kelimeler ve anlamlarını gösterir",
            "• `/risale` → Bu yardım menüsünü gösterir",
            "",
            f"✨ *Toplam {max_soz} Söz mevcut (1-{max_soz})*",
            "💡 Her Söz'ün *kendi sayfa numaraları* vardır; ayrıca tüm kitap için "
            "ortak bir *sayfa sistemi* de bulunur.",
            "",
            "🤲 Hayırlı ve verimli okumalar dilerim!",
        ])
        return RenderedResponse(text=text)

    def render_error(self, message: str | None = None) -> RenderedResponse:
        text = message or "\n".join([
            "❌ Bir hata oluştu. Lütfen komutu doğru yazdığınızdan emin olun.",
            "",
            "Yardım için: `/risale`",
        ])
        return RenderedResponse(text=text)

    def chapter_not_found(self, soz_no: int) -> str:
        return (
            f"❌ {soz_no}. Söz bulunamadı. "
            f"Lütfen 1-{self._config.max_soz_count} arası bir sayı girin."
        )

    @staticmethod
    def chapter_page_not_found(soz_no: int, page_no: int, page_count: int) -> str:
        return (
            f"❌ {soz_no}. Söz'ün {page_no}. sayfası bulunamadı. "
            f"Bu söz {page_count} sayfa."
        )

    @staticmethod
    def page_not_found() -> str:
        return "❌ Sayfa bulunamadı."

    @staticmethod
    def global_page_out_of_range(page_id: int, total_pages: int) -> str:
        return (
            f"❌ Sözler Kitabı {page_id}. sayfa bulunamadı. "
            f"Lütfen 1-{total_pages} arası bir sayı girin."
        )

    @staticmethod
    def global_page_not_found(page_id: int) -> str:
        return f"❌ Sözler Kitabı {page_id}. sayfa bulunamadı."

    @staticmethod
    def interlude_not_found(slug: str, page_no: int) -> str:
        return f"❌ \"{sanitize_whatsapp(slug)}\" bölümünün {page_no}. sayfası bulunamadı."

    @staticmethod
    def toc_unavailable() -> str:
        return "❌ İçindekiler bulunamadı."

    @staticmethod
    def words_unavailable() -> str:
        return "❌ Kelime sözlüğü bulunamadı."


def _render_subheadings(
    subheadings: list[SubHeading], start_id: int, lines: list[str], indent: str
) -> None:
    """Append subheadings recursively; page numbers are global."""
    for sub in subheadings:
        page_no = start_id + (sub.page_index - 1)
        lines.append(f"{indent}• {sub.title} *(Sayfa {page_no})*")
        if sub.subheadings:
            _render_subheadings(sub.subheadings, start_id, lines, indent + "  ")

from dungeonkit.sprite_text import (
    WHITE,
    JustifyText,
    LineBreak,
    SpriteText,
    SpriteTextSection,
    SpriteTextStyle,
)


def test_default_text_is_left_aligned_and_wraps_on_words():
    text = SpriteText()
    assert text.sections == []
    assert text.alignment is JustifyText.LEFT
    assert text.linebreak_behavior is LineBreak.WORD_BOUNDARY


def test_default_style_is_white():
    style = SpriteTextStyle()
    assert style.color == WHITE
    assert style.background_color is None


def test_from_section_holds_value_and_style():
    style = SpriteTextStyle(font="damage", color=(1.0, 0.0, 0.0, 1.0))
    text = SpriteText.from_section("-12", style)
    assert len(text.sections) == 1
    assert text.sections[0].value == "-12"
    assert text.sections[0].style is style


def test_from_sections_keeps_order():
    sections = [SpriteTextSection("a"), SpriteTextSection("bc")]
    text = SpriteText.from_sections(iter(sections))
    assert [s.value for s in text.sections] == ["a", "bc"]


def test_section_from_style_is_empty():
    style = SpriteTextStyle(font="text")
    section = SpriteTextSection.from_style(style)
    assert section.value == ""
    assert section.style is style


def test_total_chars_count_counts_characters_not_bytes():
    text = SpriteText.from_sections(
        [SpriteTextSection("héllo"), SpriteTextSection("ö!"), SpriteTextSection()]
    )
    assert text.total_chars_count() == len("héllo") + len("ö!")


def test_with_alignment_returns_aligned_copy():
    text = SpriteText.from_section("x", SpriteTextStyle())
    centred = text.with_alignment(JustifyText.CENTER)
    assert centred.alignment is JustifyText.CENTER
    assert text.alignment is JustifyText.LEFT
    assert centred.sections == text.sections


def test_with_no_wrap_disables_wrapping():
    text = SpriteText.from_section("x", SpriteTextStyle())
    unwrapped = text.with_no_wrap()
    assert unwrapped.linebreak_behavior is LineBreak.NO_WRAP
    assert text.linebreak_behavior is LineBreak.WORD_BOUNDARY
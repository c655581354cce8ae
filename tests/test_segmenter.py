"""Tests for the segmenter."""

from teleprompter.segmenter import (
    MAX_LINE_LENGTH, SPACER, Segment, join_segments, segment, text_segments,
    wrap_part,
)


def test_single_line_is_one_segment():
    """Short text without newlines stays whole."""
    assert segment("Hello world") == [Segment("Hello world")]


def test_paragraphs_get_spacers_between():
    """Blank-line separated paragraphs are split with one spacer between."""
    segs = segment("Para one.\n\nPara two.")
    assert segs == [Segment("Para one."), SPACER, Segment("Para two.")]


def test_many_blank_lines_are_one_boundary():
    """Runs of three or more newlines still yield a single spacer."""
    segs = segment("A\n\n\n\nB")
    assert segs == [Segment("A"), SPACER, Segment("B")]


def test_single_newlines_split_when_no_paragraphs():
    """Without blank lines each line becomes its own block."""
    segs = segment("one\ntwo\nthree")
    assert [s.text for s in segs] == ["one", "", "two", "", "three"]
    assert [s.is_spacer for s in segs] == [False, True, False, True, False]


def test_paragraph_split_keeps_inner_newlines():
    """With paragraph boundaries present, single newlines stay inside a block."""
    segs = segment("line a\nline b\n\nline c")
    assert segs[0] == Segment("line a\nline b")
    assert segs[1] is SPACER


def test_crlf_is_normalised():
    """Windows line endings split the same way as Unix ones."""
    assert segment("Para one.\r\n\r\nPara two.") == segment("Para one.\n\nPara two.")


def test_empty_input():
    """Empty text gives a single empty segment."""
    segs = segment("")
    assert segs == [Segment("")]
    assert segs[0].is_skip_target


def test_long_text_without_spaces_hard_breaks():
    """150 chars with no whitespace wrap into 72 / 72 / 6, no spacers."""
    segs = segment("x" * 150, 72)
    assert [len(s.text) for s in segs] == [72, 72, 6]
    assert not any(s.is_spacer for s in segs)


def test_wrap_breaks_at_last_whitespace():
    """Wrapping prefers the last space inside the window and trims chunks."""
    chunks = wrap_part("aaaa bbbb cccc dddd", 10)
    assert chunks == ["aaaa bbbb", "cccc dddd"]


def test_wrap_breaks_on_space_at_window_end():
    """A space right after the first L characters is still a break point."""
    assert wrap_part("aaaa bbbb", 4) == ["aaaa", "bbbb"]


def test_wrap_uses_any_whitespace():
    """Tabs count as break points too."""
    assert wrap_part("aaaa\tbbbbbbbb", 8) == ["aaaa", "bbbbbbbb"]


def test_no_text_segment_exceeds_limit():
    """Every produced text segment fits the line budget."""
    text = ("The quick brown fox jumps over the lazy dog. " * 12 + "\n\n"
            + "Supercalifragilisticexpialidocious" * 5 + "\n\n" + "short")
    for limit in (10, 25, MAX_LINE_LENGTH):
        for s in segment(text, limit):
            assert len(s.text) <= limit


def test_wrapping_never_adds_spacers():
    """A long single paragraph produces only text segments."""
    segs = segment("word " * 100)
    assert len(segs) > 1
    assert all(not s.is_spacer for s in segs)


def test_spacer_never_first():
    """Even text opening with blank lines does not start with a spacer."""
    segs = segment("\n\nOpening line")
    assert not segs[0].is_spacer


def test_whitespace_only_paragraph_is_skip_target():
    """A blank paragraph is a text segment that navigation skips."""
    segs = segment("One\n\n   \n\nTwo")
    blank = segs[2]
    assert not blank.is_spacer
    assert blank.is_skip_target


def test_long_whitespace_paragraph_still_yields_segment():
    """A whitespace paragraph longer than the limit collapses to one blank segment."""
    segs = segment("One\n\n" + " " * 100 + "\n\nTwo", 72)
    assert [s.text for s in segs] == ["One", "", "", "", "Two"]
    assert [s.is_spacer for s in segs] == [False, True, False, True, False]


def test_round_trip_preserves_words():
    """Joining the segments loses nothing but whitespace at wrap points."""
    text = "First paragraph " * 10 + "\n\nSecond paragraph here."
    joined = join_segments(segment(text, 40))
    assert joined.split() == text.split()
    assert "\n\n" in joined


def test_text_segments_drops_skip_targets():
    """Only navigable segments remain."""
    segs = segment("A\n\n \n\nB")
    assert [s.text for s in text_segments(segs)] == ["A", "B"]

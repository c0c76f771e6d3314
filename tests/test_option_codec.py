import pytest

from models import AnswerOption
from option_codec import (
    decode_line,
    decode_lines,
    encode_option,
    encode_options,
    wrap_paragraph,
)


def test_decode_empty_line() -> None:
    assert decode_line("") == AnswerOption(
        text="<p></p>\n", correct=False, chosen_feedback="", not_chosen_feedback=""
    )


def test_decode_correct_option() -> None:
    assert decode_line("*Red Currant") == AnswerOption(
        text="<p>Red Currant</p>\n",
        correct=True,
        chosen_feedback="",
        not_chosen_feedback="",
    )


def test_decode_both_feedbacks() -> None:
    option = decode_line("Blueberry:Nice try:Well done")
    assert option.correct is False
    assert option.text == "<p>Blueberry</p>\n"
    assert option.chosen_feedback == "Nice try"
    assert option.not_chosen_feedback == "Well done"


def test_decode_chosen_feedback_only() -> None:
    option = decode_line("B:fbA")
    assert option.text == "<p>B</p>\n"
    assert option.chosen_feedback == "fbA"
    assert option.not_chosen_feedback == ""


def test_decode_extra_colons_stay_in_text() -> None:
    option = decode_line("*10:30 or 11:00:early:late")
    assert option.correct is True
    assert option.text == "<p>10:30 or 11:00</p>\n"
    assert option.chosen_feedback == "early"
    assert option.not_chosen_feedback == "late"


def test_decode_encodes_html() -> None:
    assert decode_line("Tom & <Jerry>").text == "<p>Tom &amp; &lt;Jerry&gt;</p>\n"


def test_decode_only_first_star_marks_correct() -> None:
    option = decode_line("**starred")
    assert option.correct is True
    assert option.text == "<p>*starred</p>\n"


def test_decode_non_string_is_empty_option() -> None:
    assert decode_line(None) == decode_line("")


def test_encode_plain_option() -> None:
    assert encode_option(AnswerOption(text="<p>A</p>\n", correct=True)) == "*A"
    assert encode_option(AnswerOption(text="<p>B</p>\n")) == "B"


def test_encode_feedbacks() -> None:
    option = AnswerOption(
        text="<p>A</p>", chosen_feedback="<p>yes</p>", not_chosen_feedback="no"
    )
    assert encode_option(option) == "A:yes:no"


def test_encode_empty_chosen_placeholder() -> None:
    option = AnswerOption(text="<p>A</p>", not_chosen_feedback="missed")
    assert encode_option(option) == "A::missed"
    option = AnswerOption(text="<p>A</p>", chosen_feedback="", not_chosen_feedback="missed")
    assert encode_option(option) == "A::missed"


def test_encode_skips_empty_feedback() -> None:
    option = AnswerOption(text="<p>A</p>", chosen_feedback="", not_chosen_feedback="")
    assert encode_option(option) == "A"


def test_encode_drops_markup() -> None:
    option = AnswerOption(
        text="<p>one <strong>bold</strong></p>\n<p>two</p>\n",
        chosen_feedback="<em>good</em>",
    )
    assert encode_option(option) == "one bold two:good"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "*Red Currant",
        "Blueberry:Nice try:Well done",
        "B:fbA",
        "*A::missed",
        "Tom & Jerry",
        "x<y and y>z",
        "AT&amp;T:fb",
        "Use &lt; here",
        "*a > b:&#39;hi&#39;:x<y",
    ],
)
def test_decode_encode_round_trip(line: str) -> None:
    option = decode_line(line)
    again = decode_line(encode_option(option))
    assert again == option


def test_wrap_paragraph() -> None:
    assert wrap_paragraph("x < y") == "<p>x &lt; y</p>\n"


def test_line_helpers() -> None:
    options = decode_lines(["*A", "B:fb"])
    assert encode_options(options) == ["*A", "B:fb"]


@pytest.mark.parametrize(
    "line",
    ["x<y and y>z", "Use &lt; here", "AT&amp;T", "*a > b:&#39;hi&#39;:x<y", "A:a<b & c:use &amp; here"],
)
def test_encode_restores_typed_line(line: str) -> None:
    assert encode_option(decode_line(line)) == line


def test_decode_encodes_feedback() -> None:
    option = decode_line("A:a<b & c:use &amp; here")
    assert option.text == "<p>A</p>\n"
    assert option.chosen_feedback == "a&lt;b &amp; c"
    assert option.not_chosen_feedback == "use &amp;amp; here"


def test_decode_keeps_literal_entities_in_text() -> None:
    option = decode_line("Use &lt; here")
    assert option.text == "<p>Use &amp;lt; here</p>\n"
    assert decode_line(encode_option(option)) == option

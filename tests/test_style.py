import pytest

from feedline.style import Styled, plain, styled


def test_plain_renders_text_unchanged_with_color():
    assert plain("hello").render(True) == "hello"


def test_plain_renders_text_unchanged_without_color():
    assert plain("hello").render(False) == "hello"


def test_styled_without_color_is_bare_text():
    assert styled("SUCCESS", "green", "bold").render(False) == "SUCCESS"


def test_styled_color_only():
    assert styled("x", "red").render(True) == "\x1b[31mx\x1b[0m"


def test_styled_bold_and_color():
    assert styled("x", "green", "bold").render(True) == "\x1b[1;32mx\x1b[0m"


def test_styled_with_color_wraps_text():
    rendered = styled("message", "dimmed").render(True)
    assert rendered.startswith("\x1b[")
    assert "message" in rendered
    assert rendered.endswith("\x1b[0m")


def test_style_order_does_not_matter():
    assert styled("a", "bold", "blue").render(True) == styled("a", "blue", "bold").render(True)


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        styled("x", "sparkly")


def test_str_is_plain_text():
    assert str(Styled("abc", ("red",))) == "abc"
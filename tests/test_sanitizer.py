import pytest

from app.ai.sanitizer import strip_reasoning


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("<think>X</think>Y", "Y"),
        ("  <think>weighing options\nmore</think>\n\n1. Goa\n2. Manali  ", "1. Goa\n2. Manali"),
        ("Intro line <think>never closed", "Intro line"),
        ("<think>never closed", ""),
        ("  Clean plan\nDay 1  ", "Clean plan\nDay 1"),
        ("</think>A<think>B", "</think>A"),
        ("<thinking out loud\n1. Ladakh", "1. Ladakh"),
        ("<think", "<think"),
        ("", ""),
        (None, ""),
    ],
)
def test_strip_reasoning(raw, expected):
    assert strip_reasoning(raw) == expected


def test_strip_reasoning_keeps_text_after_first_closing_tag_only():
    raw = "<think>a</think>Plan <think>b</think> tail"
    assert strip_reasoning(raw) == "Plan <think>b</think> tail"


@pytest.mark.parametrize("text", ["1. Goa\n- Day 1: beach", "<think>x</think>Plan", "Plan <think>x"])
def test_strip_reasoning_is_idempotent(text):
    once = strip_reasoning(text)
    assert strip_reasoning(once) == once

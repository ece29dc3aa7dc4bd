"""Tests for element and text object factories."""

import pytest

from uikit_blocks import (
    ButtonElement,
    CodeEditorElement,
    ImageElement,
    MultiStaticSelectElement,
    OverflowMenuElement,
    PlainTextInputElement,
    StaticSelectElement,
)
from uikit_blocks.params import ButtonElementParam


@pytest.fixture
def options(builder):
    return [
        {"text": builder.new_plain_text_object("One"), "value": "1"},
        {"text": builder.new_plain_text_object("Two"), "value": "2"},
    ]


@pytest.fixture
def actionable(builder, options):
    placeholder = builder.new_plain_text_object("Pick")
    return [
        builder.new_button_element({"text": builder.new_plain_text_object("Go")}),
        builder.new_overflow_menu_element({"options": options}),
        builder.new_plain_text_input_element({"multiline": True}),
        builder.new_static_select_element({"placeholder": placeholder, "options": options}),
        builder.new_multi_static_select_element({"placeholder": placeholder, "options": options}),
    ]


class TestTextObjects:
    def test_plain_text_defaults_emoji_false(self, builder):
        text = builder.new_plain_text_object("hi")
        assert text.type == "plain_text"
        assert text.emoji is False

    def test_plain_text_with_emoji(self, builder):
        assert builder.new_plain_text_object("hi :wave:", emoji=True).emoji is True

    def test_markdown_has_only_text(self, builder):
        text = builder.new_markdown_text_object("*bold*")
        assert text.model_dump() == {"type": "mrkdwn", "text": "*bold*"}


class TestActionIds:
    def test_types(self, actionable):
        assert [type(element) for element in actionable] == [
            ButtonElement,
            OverflowMenuElement,
            PlainTextInputElement,
            StaticSelectElement,
            MultiStaticSelectElement,
        ]

    def test_generated_at_construction(self, builder, actionable):
        assert [element.action_id for element in actionable] == ["id-1", "id-2", "id-3", "id-4", "id-5"]
        # constructing elements never touches the block list
        assert builder.get_blocks() == []

    def test_explicit_action_id_preserved(self, builder):
        button = builder.new_button_element(
            ButtonElementParam(text=builder.new_plain_text_object("Go"), action_id="approve")
        )
        assert button.action_id == "approve"

    def test_explicit_action_id_by_wire_name(self, builder):
        element = builder.new_plain_text_input_element({"actionId": "comment"})
        assert element.action_id == "comment"

    def test_built_element_keeps_action_id(self, builder):
        original = builder.new_button_element({"text": builder.new_plain_text_object("Go")})
        copy = builder.new_button_element(original)
        assert copy.action_id == original.action_id == "id-1"

    def test_empty_action_id_is_replaced(self, builder):
        element = builder.new_plain_text_input_element({"action_id": ""})
        assert element.action_id == "id-1"

    def test_button_fields(self, builder):
        button = builder.new_button_element({
            "text": builder.new_plain_text_object("Delete"),
            "value": "42",
            "style": "danger",
        })
        assert button.type == "button"
        assert button.value == "42"
        assert button.style == "danger"


class TestDisplayElements:
    def test_image_element_has_no_action_id(self, builder):
        image = builder.new_image_element({"image_url": "https://example.com/a.png", "alt_text": "a"})
        assert isinstance(image, ImageElement)
        assert not hasattr(image, "action_id")
        assert "actionId" not in image.model_dump(by_alias=True)

    def test_code_editor_element_has_no_action_id(self, builder):
        editor = builder.new_code_editor_element({"language": "python", "initial_value": "print()"})
        assert isinstance(editor, CodeEditorElement)
        assert not hasattr(editor, "action_id")

    def test_display_elements_do_not_consume_ids(self, builder):
        builder.new_image_element({"image_url": "u", "alt_text": "a"})
        builder.new_code_editor_element({})
        button = builder.new_button_element({"text": builder.new_plain_text_object("Go")})
        assert button.action_id == "id-1"

    def test_action_id_rejected_on_image(self, builder):
        with pytest.raises(ValueError):
            builder.new_image_element({"image_url": "u", "alt_text": "a", "action_id": "x"})

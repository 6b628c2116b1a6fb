from i18nlint.nodes import Directive, DynamicExpression, Element, Interpolation, Literal, PlainAttribute, Position, Text
from i18nlint.parser import parse_expression, parse_sfc, parse_template


def test_raw_names_keep_their_casing():
    document = parse_template('<MyComponent Label="Hi"/>')

    element = document.children[0]
    assert isinstance(element, Element)
    assert element.raw_name == "MyComponent"
    assert element.attributes[0].raw_name == "Label"
    assert element.children == []


def test_void_elements_do_not_swallow_siblings():
    div = parse_template('<div><input placeholder="x"><span>t</span></div>').children[0]

    assert [child.raw_name for child in div.children] == ["input", "span"]
    assert div.children[0].children == []


def test_unclosed_elements_are_closed_at_end():
    document = parse_template("<div><p>Hello")

    div = document.children[0]
    assert div.children[0].raw_name == "p"
    assert div.children[0].children[0].value == "Hello"


def test_mustache_is_split_from_text():
    p = parse_template("<p>Hello {{ name }}!</p>").children[0]

    kinds = [type(child) for child in p.children]
    assert kinds == [Text, Interpolation, Text]
    assert p.children[0].value == "Hello "
    assert p.children[1].position == Position(1, 9)
    assert isinstance(p.children[1].expression, DynamicExpression)
    assert p.children[2].value == "!"
    assert p.children[2].position == Position(1, 19)


def test_positions_span_lines():
    div = parse_template('<div>\n  <span title="Hi">Hey</span>\n</div>').children[0]

    span = div.children[1]
    assert span.position == Position(2, 2)
    assert span.attributes[0].value.position == Position(2, 14)
    assert span.children[0].position == Position(2, 19)


def test_entities_are_decoded():
    p = parse_template('<p title="Fish &amp; Chips">A &lt; B</p>').children[0]

    assert p.attributes[0].value.value == "Fish & Chips"
    assert p.children[0].value == "A < B"


def test_directives_are_recognized():
    div = parse_template(
        "<div v-text=\"'Hi'\" :title.prop=\"x\" @click.stop=\"go\" v-on:submit=\"send\" #default v-cloak class=\"c\"></div>"
    ).children[0]
    text, bind, on_click, on_submit, slot, cloak, plain = div.attributes

    assert isinstance(text, Directive) and text.directive_name == "v-text"
    assert text.value.expression == Literal("Hi", "'Hi'")
    assert (bind.key.name, bind.key.argument, bind.key.modifiers) == ("bind", "title", ("prop",))
    assert (on_click.key.name, on_click.key.argument, on_click.key.modifiers) == ("on", "click", ("stop",))
    assert (on_submit.key.name, on_submit.key.argument) == ("on", "submit")
    assert slot.key.name == "slot" and slot.value is None
    assert cloak.key.name == "cloak" and cloak.value is None
    assert isinstance(plain, PlainAttribute)


def test_parse_expression_literals():
    assert parse_expression("'Hello'") == Literal("Hello", "'Hello'")
    assert parse_expression(' "a\\nb" ').value == "a\nb"
    assert parse_expression("'it\\'s'").value == "it's"
    assert parse_expression("'\\u00e9'").value == "é"
    assert parse_expression("42").value == 42.0
    assert parse_expression("true").value is True
    assert parse_expression("null") == Literal(None, "null")
    assert parse_expression("   ") is None


def test_parse_expression_dynamic():
    assert isinstance(parse_expression("greeting"), DynamicExpression)
    assert isinstance(parse_expression("`Hello`"), DynamicExpression)
    assert isinstance(parse_expression("'a' + 'b'"), DynamicExpression)
    assert isinstance(parse_expression("$t('a')"), DynamicExpression)


def test_parse_sfc_returns_template_block():
    source = "<script>const a = '<div>';</script>\n<template><p>Hi</p></template>\n<style>p{}</style>"

    template = parse_sfc(source)

    assert template is not None
    assert template.raw_name == "template"
    assert template.children[0].raw_name == "p"


def test_parse_sfc_without_template():
    assert parse_sfc("<script>export default {}</script>") is None


def test_script_and_style_bodies_are_not_text():
    div = parse_template("<div><script>var a = 'x';</script><style>p { color: red }</style></div>").children[0]

    assert [child.raw_name for child in div.children] == ["script", "style"]
    assert all(child.children == [] for child in div.children)


def test_parse_sfc_skips_other_template_languages():
    assert parse_sfc('<template lang="pug">div Hello</template>') is None
    assert parse_sfc('<template lang="html"><p>Hi</p></template>').children[0].raw_name == "p"


def test_handler_slot_and_loop_values_are_never_literals():
    a = parse_template("<a @click=\"'Hello'\" #default=\"'Hi'\" v-for=\"'abc'\" v-text=\"'x'\"></a>").children[0]
    on_click, slot, loop, text = a.attributes

    assert on_click.value.expression == DynamicExpression("'Hello'")
    assert isinstance(slot.value.expression, DynamicExpression)
    assert isinstance(loop.value.expression, DynamicExpression)
    assert text.value.expression == Literal("x", "'x'")


def test_parenthesized_string_is_a_literal():
    assert parse_expression("('Hello')") == Literal("Hello", "'Hello'")
    assert parse_expression("(( 'a' ))").value == "a"
    assert parse_expression("(')')").value == ")"
    assert isinstance(parse_expression("('a') + ('b')"), DynamicExpression)


def test_text_positions_follow_the_source_around_entities():
    p = parse_template("<p>&amp;&amp;&amp;{{x}} Hi</p>").children[0]
    entities, mustache, words = p.children

    assert (entities.value, entities.position) == ("&&&", Position(1, 3))
    assert mustache.position == Position(1, 18)
    assert (words.value, words.position) == (" Hi", Position(1, 23))

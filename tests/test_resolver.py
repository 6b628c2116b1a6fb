from i18nlint.config import DEFAULT_ATTRIBUTES
from i18nlint.rules.no_bare_strings import TargetAttributeResolver

CATCH_ALL = {"title", "aria-label", "aria-placeholder", "aria-roledescription", "aria-valuetext"}


def test_resolve_is_cached_per_tag_name():
    resolver = TargetAttributeResolver(DEFAULT_ATTRIBUTES)

    first = resolver.resolve("input")
    second = resolver.resolve("input")

    assert first is second
    assert first == TargetAttributeResolver(DEFAULT_ATTRIBUTES).resolve("input")


def test_default_targets():
    resolver = TargetAttributeResolver(DEFAULT_ATTRIBUTES)

    assert resolver.resolve("input") == CATCH_ALL | {"placeholder"}
    assert resolver.resolve("img") == CATCH_ALL | {"alt"}
    assert resolver.resolve("div") == CATCH_ALL


def test_exact_names_are_case_sensitive():
    resolver = TargetAttributeResolver({"Input": ["x"]})

    assert resolver.resolve("INPUT") == frozenset()
    assert resolver.resolve("Input") == {"x"}


def test_all_matching_patterns_accumulate():
    resolver = TargetAttributeResolver({"/^my-/": ["a"], "/-button$/": ["b"], "/^other/": ["c"]})

    assert resolver.resolve("my-button") == {"a", "b"}


def test_pattern_flags():
    resolver = TargetAttributeResolver({"/^BUTTON$/i": ["label"]})

    assert resolver.resolve("button") == {"label"}
    assert resolver.resolve("buttons") == frozenset()


def test_kebab_name_aliases_to_pascal_case():
    resolver = TargetAttributeResolver({"MyComponent": ["label"], "my-component": ["hint"]})

    assert resolver.resolve("my-component") == {"label", "hint"}
    assert resolver.resolve("MyComponent") == {"label"}


def test_single_word_lowercase_name_aliases_too():
    resolver = TargetAttributeResolver({"Input": ["x"]})

    assert resolver.resolve("input") == {"x"}


def test_alias_that_equals_the_name_terminates():
    resolver = TargetAttributeResolver({"/^\\d+$/": ["n"]})

    assert resolver.resolve("123") == {"n"}


def test_non_kebab_names_are_not_aliased():
    resolver = TargetAttributeResolver({"MyComponent": ["label"]})

    assert resolver.resolve("my_component") == frozenset()
    assert resolver.resolve("my--component") == frozenset()


def test_alias_hop_applies_to_non_ascii_names():
    resolver = TargetAttributeResolver({"Ébox": ["x"]})

    assert resolver.resolve("ébox") == {"x"}

import pytest

from tagtree.attributes import AttributeSet, normalize_attributes, parse_attribute_string
from tagtree.errors import FormatError


def test_parse_attribute_string_keeps_order() -> None:
    assert parse_attribute_string('class="a b" id="c"') == {"class": "a b", "id": "c"}


def test_parse_attribute_string_joins_repeated_names() -> None:
    assert parse_attribute_string('class="a"  class="b"') == {"class": "a b"}


def test_parse_attribute_string_allows_empty_value() -> None:
    assert parse_attribute_string('alt=""') == {"alt": ""}


@pytest.mark.parametrize("text", ['class="open', 'class=open', 'class="a"id="b"', '"a"'])
def test_parse_attribute_string_rejects_malformed_input(text: str) -> None:
    with pytest.raises(FormatError):
        parse_attribute_string(text)


def test_normalize_attributes_splits_strings_but_not_lists() -> None:
    assert normalize_attributes({"class": "a b", "data": ["x y"]}) == {
        "class": ["a", "b"],
        "data": ["x y"],
    }


def test_adds_string_attributes() -> None:
    attrs = AttributeSet('class="stumpy"')
    attrs.add('class="killer"')
    assert attrs.render() == 'class="stumpy killer"'


def test_adds_mapping_with_string_and_list_values() -> None:
    attrs = AttributeSet('class="stumpy"')
    attrs.add({"id": "killer"})
    attrs.add({"class": ["wiley"]})
    assert attrs.render() == 'class="stumpy wiley" id="killer"'


def test_add_merges_instead_of_overwriting() -> None:
    attrs = AttributeSet()
    attrs.add({"class": "a"})
    attrs.add({"class": "b"})
    assert str(attrs) == 'class="a b"'


def test_add_none_is_a_no_op() -> None:
    attrs = AttributeSet('class="stumpy"')
    attrs.add(None)
    attrs.add({})
    attrs.add("")
    assert attrs.render() == 'class="stumpy"'


def test_duplicate_keys_in_one_string() -> None:
    attrs = AttributeSet({"src": "angry-baby.jpg", "class": "stumpy"})
    attrs.add('class="new" class="hotness"')
    assert attrs.render() == 'src="angry-baby.jpg" class="stumpy new hotness"'


def test_duplicate_values_are_preserved() -> None:
    attrs = AttributeSet({"class": "a a"})
    attrs.add({"class": "a"})
    assert attrs.get("class") == ["a", "a", "a"]


def test_replace_only_touches_given_names() -> None:
    attrs = AttributeSet({"src": "angry-baby.jpg", "class": "stumpy"})
    attrs.replace({"class": "new hotness"})
    assert attrs.render() == 'src="angry-baby.jpg" class="new hotness"'


def test_replace_with_string() -> None:
    attrs = AttributeSet({"src": "angry-baby.jpg", "class": "stumpy"})
    attrs.replace('class="new hotness"')
    assert attrs.to_dict() == {"src": ["angry-baby.jpg"], "class": ["new", "hotness"]}


def test_set_and_get() -> None:
    attrs = AttributeSet('id="old"')
    attrs.set("id", "killer")
    assert attrs.get("id") == ["killer"]
    assert attrs.get("missing") is None


def test_get_returns_a_copy() -> None:
    attrs = AttributeSet({"class": "a"})
    attrs.get("class").append("b")
    assert attrs.get("class") == ["a"]


def test_delete_single_and_many() -> None:
    attrs = AttributeSet({"src": "angry-baby.jpg", "class": "stumpy"})
    attrs.delete("class")
    assert attrs.render() == 'src="angry-baby.jpg"'
    attrs.delete(["src", "absent"])
    assert attrs.render() == ""
    assert "src" not in attrs
    assert len(attrs) == 0


def test_clear() -> None:
    attrs = AttributeSet({"a": "1", "b": "2"})
    attrs.clear()
    assert not attrs
    assert attrs.render() == ""


def test_empty_values_render_and_merge() -> None:
    attrs = AttributeSet({"src": "angry-baby.jpg", "class": "stumpy"})
    attrs.add('alt=""')
    assert attrs.render() == 'src="angry-baby.jpg" class="stumpy" alt=""'
    attrs.add('alt="alt text"')
    assert attrs.render() == 'src="angry-baby.jpg" class="stumpy" alt="alt text"'


def test_non_string_keys_and_values_are_stringified() -> None:
    attrs = AttributeSet({1: 2, "hidden": None})
    assert attrs.render() == '1="2" hidden=""'


def test_failed_parse_leaves_set_unchanged() -> None:
    attrs = AttributeSet({"class": "stumpy"})
    with pytest.raises(FormatError):
        attrs.add('id="ok" class="unterminated')
    with pytest.raises(FormatError):
        attrs.replace('class="unterminated')
    assert attrs.to_dict() == {"class": ["stumpy"]}


def test_unsupported_input_type() -> None:
    with pytest.raises(FormatError):
        AttributeSet(42)  # type: ignore[arg-type]


def test_sets_do_not_share_storage() -> None:
    first = AttributeSet()
    second = AttributeSet()
    first.add({"class": "a"})
    assert second.render() == ""
    assert first != second
    assert AttributeSet({"class": "a"}) == first


def test_iterates_names_in_insertion_order() -> None:
    attrs = AttributeSet('b="1" a="2"')
    attrs.add({"c": "3"})
    assert list(attrs) == ["b", "a", "c"]


def test_accepts_a_built_attribute_set() -> None:
    source = AttributeSet({"class": "a", "id": "main"})
    attrs = AttributeSet({"class": "b"})
    attrs.add(source)
    assert attrs.render() == 'class="b a" id="main"'
    attrs.replace(AttributeSet({"class": "c"}))
    assert attrs.render() == 'class="c" id="main"'
    source.add({"class": "later"})
    assert attrs.get("class") == ["c"]


def test_list_values_are_kept_verbatim() -> None:
    attrs = AttributeSet({"data": ["a", "", "b"]})
    assert attrs.get("data") == ["a", "", "b"]
    attrs.add({"data": ["", "c"]})
    assert attrs.get("data") == ["a", "", "b", "", "c"]


def test_empty_value_does_not_clear_existing_tokens() -> None:
    attrs = AttributeSet('alt="baby"')
    attrs.add('alt=""')
    assert attrs.render() == 'alt="baby"'

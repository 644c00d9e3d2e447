import pytest

from mcpserver.uritemplate import URITemplate

SOURCE_TEMPLATE = "test://{a}/test-resource{/b*}"
SOURCE_URI = "test://something/test-resource/a/b/c"


def test_source_example_matches():
    template = URITemplate(SOURCE_TEMPLATE)
    assert template.matches(SOURCE_URI) is True


def test_source_example_values():
    template = URITemplate(SOURCE_TEMPLATE)
    assert template.match(SOURCE_URI) == {"a": ["something"], "b": ["a", "b", "c"]}


def test_raw_round_trip():
    template = URITemplate(SOURCE_TEMPLATE)
    assert template.raw == SOURCE_TEMPLATE
    assert str(template) == SOURCE_TEMPLATE
    assert template == URITemplate(SOURCE_TEMPLATE)
    assert hash(template) == hash(URITemplate(SOURCE_TEMPLATE))


def test_variable_names_in_order():
    template = URITemplate(SOURCE_TEMPLATE)
    assert template.variable_names == ["a", "b"]


def test_non_matching_uri():
    template = URITemplate(SOURCE_TEMPLATE)
    assert template.matches("undefined-resource") is False
    assert template.match("undefined-resource") is None


def test_simple_variable_does_not_cross_slash():
    template = URITemplate("res://{name}")
    assert template.matches("res://one/two") is False


def test_optional_path_expression_absent():
    template = URITemplate("/items{/id}")
    assert template.match("/items") == {}


def test_query_expression():
    template = URITemplate("/search{?q,lang}")
    assert template.match("/search?q=cat&lang=en") == {"q": ["cat"], "lang": ["en"]}


def test_reserved_expansion_keeps_slashes():
    template = URITemplate("file://{+path}")
    assert template.match("file:///a/b") == {"path": ["/a/b"]}


def test_label_expression():
    template = URITemplate("file{.ext}")
    assert template.match("file.txt") == {"ext": ["txt"]}


def test_path_with_several_variables():
    template = URITemplate("{/x,y}")
    assert template.match("/1/2") == {"x": ["1"], "y": ["2"]}


def test_simple_list_value():
    template = URITemplate("color:{list}")
    assert template.match("color:red,green") == {"list": ["red", "green"]}


def test_percent_decoding():
    template = URITemplate("greet/{a}")
    assert template.match("greet/hello%20world") == {"a": ["hello world"]}


def test_literal_only_template():
    template = URITemplate("plain/path")
    assert template.matches("plain/path") is True
    assert template.matches("plain/path/more") is False


@pytest.mark.parametrize(
    "raw",
    ["test://{a", "test://a}", "{}", "{=x}", "{a b}", "{a:0}", "{a:3*}"],
)
def test_invalid_templates(raw):
    with pytest.raises(ValueError):
        URITemplate(raw)
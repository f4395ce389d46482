import pytest

from noripath.properties import NoriError, PropertyList, PropertyType


@pytest.mark.parametrize(
    "kind, value",
    [
        ("boolean", True),
        ("integer", 640),
        ("float", 2.5),
        ("color", (0.1, 0.2, 0.3)),
        ("point", (1.0, 2.0, 3.0)),
        ("vector", (0.0, 1.0, 0.0)),
        ("string", "gaussian"),
        ("transform", ((1, 0), (0, 1))),
    ],
)
def test_round_trip_each_type(kind, value):
    props = PropertyList()
    getattr(props, f"set_{kind}")("item", value)
    assert getattr(props, f"get_{kind}")("item") == value
    assert props.type_of("item") is PropertyType(kind)


def test_default_returned_when_missing():
    props = PropertyList()
    assert props.get_integer("height", 720) == 720
    assert props.get_string("angles", "") == ""


def test_missing_without_default_raises():
    props = PropertyList()
    with pytest.raises(NoriError, match="Property 'width' is missing!"):
        props.get_integer("width")


def test_wrong_type_raises_even_with_default():
    props = PropertyList()
    props.set_float("fov", 30.0)
    with pytest.raises(NoriError, match="expected <integer>"):
        props.get_integer("fov", 5)
    with pytest.raises(NoriError, match="wrong type"):
        props.get_boolean("fov")


def test_duplicate_set_warns_and_overrides(capsys):
    props = PropertyList()
    props.set_integer("width", 640)
    props.set_integer("width", 800)
    assert props.get_integer("width") == 800
    assert 'Property "width" was specified multiple times!' in capsys.readouterr().err


def test_redefining_changes_type():
    props = PropertyList()
    props.set_integer("radius", 2)
    props.set_float("radius", 2.0)
    assert props.get_float("radius") == 2.0
    with pytest.raises(NoriError):
        props.get_integer("radius")


def test_container_protocol():
    props = PropertyList()
    props.set_string("name", "box")
    props.set_boolean("flag", False)
    assert "name" in props
    assert "other" not in props
    assert sorted(props) == ["flag", "name"]
    assert len(props) == 2


def test_type_of_missing_raises():
    with pytest.raises(NoriError, match="missing"):
        PropertyList().type_of("nothing")


def test_transform_object_kept_identically():
    marker = object()
    props = PropertyList()
    props.set_transform("toWorld", marker)
    assert props.get_transform("toWorld") is marker
import pytest

from noripath.objects import ClassType, create_instance
from noripath.properties import NoriError, PropertyList
from noripath.rfilter import (
    BoxFilter,
    GaussianFilter,
    MitchellNetravaliFilter,
    TentFilter,
)


@pytest.mark.parametrize(
    "name, cls",
    [
        ("gaussian", GaussianFilter),
        ("mitchell", MitchellNetravaliFilter),
        ("tent", TentFilter),
        ("box", BoxFilter),
    ],
)
def test_registered_by_name(name, cls):
    filt = create_instance(name, PropertyList())
    assert isinstance(filt, cls)
    assert filt.class_type is ClassType.RECONSTRUCTION_FILTER


def test_gaussian_defaults_and_summary():
    filt = GaussianFilter()
    assert filt.radius == 2.0
    assert filt.stddev == 0.5
    assert str(filt) == "GaussianFilter[radius=2.000000, stddev=0.500000]"


def test_gaussian_vanishes_at_and_beyond_radius():
    filt = GaussianFilter()
    assert filt.eval(filt.radius) == 0.0
    assert filt.eval(filt.radius + 1.0) == 0.0


def test_gaussian_is_symmetric_and_decreasing():
    filt = GaussianFilter()
    samples = [filt.eval(x / 10) for x in range(0, 20)]
    assert all(a > b for a, b in zip(samples, samples[1:]))
    assert filt.eval(0.7) == filt.eval(-0.7)


def test_gaussian_reads_properties():
    props = PropertyList()
    props.set_float("radius", 3.0)
    props.set_float("stddev", 1.0)
    filt = GaussianFilter(props)
    assert filt.radius == 3.0
    assert filt.stddev == 1.0
    assert filt.eval(3.0) == 0.0
    assert filt.eval(2.9) > 0.0


def test_wrong_property_type_raises():
    props = PropertyList()
    props.set_integer("radius", 3)
    with pytest.raises(NoriError):
        GaussianFilter(props)


def test_mitchell_partition_of_unity():
    filt = MitchellNetravaliFilter()
    for t in (0.0, 0.25, 0.5, 0.8):
        total = sum(filt.eval(t + k) for k in range(-3, 4))
        assert total == pytest.approx(1.0)


def test_mitchell_vanishes_outside_and_is_continuous():
    filt = MitchellNetravaliFilter()
    assert filt.eval(filt.radius) == 0.0
    assert filt.eval(filt.radius - 1e-9) == pytest.approx(0.0, abs=1e-6)
    half = filt.radius / 2
    assert filt.eval(half - 1e-9) == pytest.approx(filt.eval(half), abs=1e-6)
    assert filt.eval(-0.3) == filt.eval(0.3)


def test_mitchell_reads_b_and_c():
    props = PropertyList()
    props.set_float("B", 0.0)
    props.set_float("C", 0.5)
    filt = MitchellNetravaliFilter(props)
    assert (filt.b, filt.c) == (0.0, 0.5)
    assert filt.eval(0.0) == pytest.approx(1.0)


def test_tent():
    filt = TentFilter()
    assert filt.radius == 1.0
    assert filt.eval(0.0) == 1.0
    assert filt.eval(2.0) == 0.0
    assert filt.eval(0.4) == filt.eval(-0.4)
    assert str(filt) == "TentFilter[]"


def test_box():
    filt = BoxFilter()
    assert filt.radius == 0.5
    assert {filt.eval(x) for x in (-0.4, 0.0, 0.3, 5.0)} == {1.0}
    assert str(filt) == "BoxFilter[]"


def test_filters_accept_no_children():
    with pytest.raises(NoriError):
        BoxFilter().add_child(TentFilter())
"""Tests for band containment and center points."""

from sankey_flow.layout.band import BandGeometry
from sankey_flow.parser.model import FlowBand, Orientation


def _horizontal(**kwargs):
    params = dict(x=10, y=50, x2=100, y2=50, height=20, height2=20)
    params.update(kwargs)
    return BandGeometry(**params)


def _vertical(**kwargs):
    params = dict(
        x=50, y=10, x2=50, y2=100, height=20, height2=20,
        orientation=Orientation.VERTICAL,
    )
    params.update(kwargs)
    return BandGeometry(**params)


def test_point_inside_horizontal_band():
    assert _horizontal().contains_point(50, 50)


def test_point_outside_horizontal_band():
    band = _horizontal()
    assert not band.contains_point(50, 80)
    assert not band.contains_point(5, 50)
    assert not band.contains_point(105, 50)


def test_equal_thickness_band_is_the_swept_rectangle():
    band = _horizontal()
    for px in (10, 55, 100):
        assert band.contains_point(px, 40)
        assert band.contains_point(px, 60)
        assert not band.contains_point(px, 39.9)
        assert not band.contains_point(px, 60.1)


def test_horizontal_taper():
    band = _horizontal(x=0, x2=100, height=40, height2=10)
    assert band.contains_point(1, 50)
    assert band.contains_point(99, 50)
    assert not band.contains_point(99, 60)
    # Halfway the thickness is 25, so the half-width is 12.5
    assert band.contains_point(50, 62)
    assert not band.contains_point(50, 63)


def test_sloped_centerline():
    band = _horizontal(x=0, y=0, x2=100, y2=100, height=10, height2=10)
    assert band.contains_point(50, 50)
    assert not band.contains_point(50, 10)


def test_degenerate_band_contains_nothing():
    assert not _horizontal(x=50, x2=50).contains_point(50, 50)
    assert not _vertical(y=50, y2=50).contains_point(50, 50)


def test_unset_band_contains_nothing():
    assert not _horizontal(x=None).contains_point(50, 50)
    assert not BandGeometry().contains_point(0, 0)


def test_reversed_band():
    band = _horizontal(x=100, x2=10)
    assert band.contains_point(50, 50)
    assert not band.contains_point(105, 50)


def test_height2_defaults_to_height():
    band = _horizontal(height2=None)
    assert band.contains_point(90, 59)


def test_point_inside_vertical_band():
    assert _vertical().contains_point(50, 50)


def test_point_outside_vertical_band():
    band = _vertical()
    assert not band.contains_point(80, 50)
    assert not band.contains_point(50, 5)
    assert not band.contains_point(50, 105)


def test_vertical_taper():
    band = _vertical(y=0, y2=100, height=40, height2=10)
    assert band.contains_point(50, 1)
    assert band.contains_point(50, 99)
    assert not band.contains_point(60, 99)


def test_orientation_accepts_strings():
    band = _vertical(orientation="vertical")
    assert band.contains_point(55, 50)
    assert not band.contains_point(50, 5)


def test_center_point():
    band = BandGeometry(x=10, y=20, x2=100, y2=80)
    assert band.center_point() == (55, 50)
    assert band.tooltip_position() == band.center_point()


def test_center_point_unset():
    assert BandGeometry().center_point() == (0, 0)


def test_flow_band_geometry():
    flow = FlowBand(
        x=20, y=40, x2=80, y2=60, height=10, height2=30,
        color="red", color_from="red", color_to="red", hover_color=None,
        source="A", target="B", value=5, orientation=Orientation.HORIZONTAL,
    )
    geom = flow.geometry()
    assert isinstance(geom, BandGeometry)
    assert (geom.height, geom.height2) == (10, 30)
    assert geom.center_point() == (50, 50)
    assert geom.contains_point(50, 59)
    assert not geom.contains_point(50, 61)

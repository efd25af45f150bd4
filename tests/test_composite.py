import pytest

from imgfilter.filters import (
    BlurFilter,
    FilterKind,
    FilterRegistry,
    SepiaFilter,
    compose,
    depth,
    layers,
)
from imgfilter.image import BaseImage


@pytest.fixture
def image(read_lines):
    img = BaseImage("x.jpg")
    read_lines()
    return img


def test_compose_by_name_matches_manual_nesting(image, read_lines):
    compose(image, ["blur", "sepia"]).render()
    composed = read_lines()
    SepiaFilter(BlurFilter(image)).render()

    assert composed == read_lines()


def test_compose_accepts_kinds(image):
    chain = compose(image, [FilterKind.SEPIA, FilterKind.BLUR])

    assert chain.kind is FilterKind.BLUR
    assert chain.inner.kind is FilterKind.SEPIA
    assert chain.inner.inner is image


def test_compose_empty_returns_inner(image):
    assert compose(image, []) is image


def test_compose_unknown_name_raises(image):
    with pytest.raises(KeyError):
        compose(image, ["sepia", "vignette"])


def test_layers_lists_base_first(image):
    chain = compose(image, ["bw", "sepia", "blur"])

    nodes = layers(chain)

    assert nodes[0] is image
    assert [node.kind for node in nodes[1:]] == [
        FilterKind.BLACK_AND_WHITE,
        FilterKind.SEPIA,
        FilterKind.BLUR,
    ]
    assert nodes[-1] is chain


def test_depth(image):
    assert depth(image) == 0
    assert depth(compose(image, ["blur", "blur", "sepia"])) == 3


def test_compose_uses_custom_registered_name(image, read_lines):
    FilterRegistry.register_filter("Vintage", FilterKind.SEPIA)

    chain = compose(image, ["blur", "vintage"])
    chain.render()

    assert chain.kind is FilterKind.SEPIA
    assert read_lines() == [
        "displaying base image: x.jpg",
        "applying blur filter.",
        "applying sepia filter.",
    ]


@pytest.mark.parametrize("entry", [None, 3, object()])
def test_compose_rejects_non_name_entries(image, entry):
    with pytest.raises(TypeError):
        compose(image, ["sepia", entry])

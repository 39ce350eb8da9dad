"""Tests for filename -> caption parsing."""

from pathlib import Path

import pytest

from photoslider.captions import ImageMeta, build_image_metas, file_stem, parse_author_title


@pytest.mark.parametrize(
    "name, expected",
    [
        ("jane doe - sunset", ("jane doe", "sunset")),
        ("jane doe-sunset", ("jane doe", "sunset")),
        ("  anna  -   lake view  ", ("anna", "lake view")),
        ("a%b - c%d%e", ("a<br>b", "c<br>d<br>e")),
        ("author - ", ("author", "")),
        (" - title", ("", "title")),
        ("-", ("", "")),
    ],
)
def test_split_on_dash(name, expected):
    assert parse_author_title(name) == expected


def test_splits_on_first_dash_only():
    assert parse_author_title("mary-jane - the-end") == ("mary", "jane - the-end")


def test_no_dash_gives_empty_author():
    assert parse_author_title("cabin%view") == ("", "cabin<br>view")


def test_no_dash_keeps_whitespace():
    assert parse_author_title(" sunset ") == ("", " sunset ")


def test_each_percent_becomes_one_break():
    author, title = parse_author_title("%% - %")
    assert author == "<br><br>"
    assert title == "<br>"


def test_build_image_metas(tmp_path: Path):
    paths = [tmp_path / "images" / "jane doe - sunset.jpg", tmp_path / "images" / "cabin%view.png"]

    metas = build_image_metas(paths, tmp_path)

    assert metas == [
        ImageMeta(rel_path="images/jane doe - sunset.jpg", author="jane doe", title="sunset"),
        ImageMeta(rel_path="images/cabin%view.png", author="", title="cabin<br>view"),
    ]


def test_build_image_metas_outside_base(tmp_path: Path):
    other = tmp_path / "elsewhere" / "x - y.gif"
    metas = build_image_metas([other], tmp_path / "root")
    assert metas[0].rel_path == other.as_posix()


@pytest.mark.parametrize(
    "name, expected",
    [("jane - sunset.jpg", "jane - sunset"), (".jpg", ""), ("noext", "noext"), ("a.b.png", "a.b")],
)
def test_file_stem(name, expected):
    assert file_stem(name) == expected


def test_bare_extension_file_has_empty_caption(tmp_path: Path):
    metas = build_image_metas([tmp_path / "images" / ".jpg"], tmp_path)
    assert metas == [ImageMeta(rel_path="images/.jpg", author="", title="")]

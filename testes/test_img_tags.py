import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from wp_export.parsers.img_tags import DESCRIPTION_ATTRIBUTES, describe_img_tag, get_attribute, scan_img_tags


@pytest.mark.parametrize(
    "markup, expected",
    [
        ('<img src="a.png">', [("a.png", "")]),
        ('<img src="a.png" alt="Desc">', [("a.png", "Desc")]),
        ('<img alt="Desc" src="a.png" />', [("a.png", "Desc")]),
        ('<img src="a.png" title="Title">', [("a.png", "Title")]),
        ('<img src="a.png" alt="Alt" title="Title">', [("a.png", "Alt")]),
        ('<img src="a.png" alt="   " title="Title">', [("a.png", "Title")]),
        ('<img src="a.png" alt="  padded  ">', [("a.png", "padded")]),
        ('<IMG SRC="a.png" ALT="Upper">', [("a.png", "Upper")]),
        ('<img\n  class="wp-image-5"\n  src="a.png"\n  alt="Multi">', [("a.png", "Multi")]),
        ('<img data-src="lazy.png" src="a.png">', [("a.png", "")]),
        ('<img data-alt="no" src="a.png">', [("a.png", "")]),
        ('<img alt="no src">', []),
        ("<img src='single.png'>", []),
        ('<imgsrc="a.png">', []),
        ('<image src="a.png">', []),
        ("", []),
        (None, []),
    ],
)
def test_scan_img_tags_rules(markup, expected):
    assert [(t.src, t.description) for t in scan_img_tags(markup)] == expected


def test_tags_are_reported_in_markup_order():
    markup = '<p><img src="1.png"></p><p>text</p><img src="2.png" alt="two"><img src="1.png">'
    tags = scan_img_tags(markup)
    assert [t.src for t in tags] == ["1.png", "2.png", "1.png"]
    assert tags[1].tag == '<img src="2.png" alt="two">'


def test_description_attributes_table_order():
    assert DESCRIPTION_ATTRIBUTES == ("alt", "title")


def test_get_attribute():
    tag = '<img src="a.png" width="300" alt="">'
    assert get_attribute(tag, "width") == "300"
    assert get_attribute(tag, "alt") == ""
    assert get_attribute(tag, "height") is None


def test_describe_img_tag_reads_attributes_in_table_order():
    assert describe_img_tag('<img data-alt="x" title=" Title " src="a.png">') == "Title"
    assert describe_img_tag('<img alt="  " title="Title" src="a.png">') == "Title"
    assert describe_img_tag('<img alt="Alt" title="Title" src="a.png">') == "Alt"
    assert describe_img_tag('<img src="a.png">') == ""

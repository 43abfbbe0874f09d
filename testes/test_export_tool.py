import json
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from wp_export.cli import main
from wp_export.export_tool import WordPressExportTool
from wp_export.models.config import ExportConfig
from wp_export.utils.errors import ConfigurationError, ExportDocumentError, ImageResolutionError

from export_factory import make_attachment, make_export, make_item


def site_export():
    return make_export(
        make_item("2", "page", post_name="about", title="About", link="https://example.com/about/"),
        make_item(
            "1",
            "post",
            post_name="first",
            title="First",
            link="https://example.com/first/",
            content='<p>Hi <img src="inline.png" alt="Inline"></p>',
            postmeta={"_thumbnail_id": "10"},
            categories=[("category", "news", "News"), ("post_tag", "python", "Python")],
        ),
        make_item("3", "page", post_name="sample-page", title="Sample"),
        make_attachment("10", "https://example.com/uploads/cover.jpg", parent="1", title="Cover"),
        make_attachment("11", "https://example.com/uploads/orphan.jpg", title="Orphan"),
        make_item("4", "post", status="trash", post_name="gone"),
    )


@pytest.fixture
def export_path(tmp_path):
    path = tmp_path / "export.xml"
    path.write_text(site_export(), encoding="utf-8")
    return str(path)


def test_parse_export_end_to_end(export_path, capsys):
    config = ExportConfig(input=export_path, frontmatter_fields=["title", "slug", "coverImage:cover", "categories"])
    posts = WordPressExportTool(config).parse_export()

    assert [(p.type, p.slug) for p in posts] == [("post", "first"), ("page", "about")]
    first, about = posts
    assert first.content == "Hi ![Inline](inline.png)"
    assert first.image_urls == [
        "https://example.com/uploads/cover.jpg",
        "https://example.com/first/inline.png",
    ]
    assert first.cover_image == "cover.jpg"
    assert first.cover_image_description == "Cover"
    assert first.image_descriptions == {"cover.jpg": "Cover", "inline.png": "Inline"}
    assert first.frontmatter == {
        "title": "First",
        "slug": "first",
        "cover": "cover.jpg",
        "categories": ["news"],
    }
    assert about.image_urls == []
    assert about.frontmatter["cover"] is None

    out = capsys.readouterr().out
    assert "1 normal posts found." in out
    assert "1 pages found." in out
    assert "2 attached images found." in out
    assert "1 images scraped from post body content." in out


def test_save_images_none_skips_image_discovery(export_path):
    config = ExportConfig(input=export_path, save_images="none")
    posts = WordPressExportTool(config).parse_export()
    assert all(p.image_urls == [] and p.cover_image is None for p in posts)


def test_unknown_frontmatter_field_fails_before_reading(tmp_path):
    config = ExportConfig(input=str(tmp_path / "does-not-exist.xml"), frontmatter_fields=["title", "bogus"])
    with pytest.raises(ConfigurationError):
        WordPressExportTool(config).parse_export()


def test_missing_export_file(tmp_path):
    config = ExportConfig(input=str(tmp_path / "does-not-exist.xml"))
    with pytest.raises(ExportDocumentError):
        WordPressExportTool(config).parse_export()


def test_unresolvable_scraped_image_aborts_run(tmp_path):
    path = tmp_path / "export.xml"
    path.write_text(make_export(make_item("1", link="/relative/", content='<img src="x.png">')), encoding="utf-8")
    with pytest.raises(ImageResolutionError):
        WordPressExportTool(ExportConfig(input=str(path))).parse_export()


def test_custom_translator_and_registry(export_path):
    tool = WordPressExportTool(
        ExportConfig(input=export_path, frontmatter_fields=["size"]),
        translate=lambda html: "",
        frontmatter_getters={"size": lambda post: len(post.image_urls)},
    )
    posts = tool.parse_export()
    assert [p.frontmatter for p in posts] == [{"size": 2}, {"size": 0}]
    assert all(p.content == "" for p in posts)


def test_summarize():
    assert WordPressExportTool.summarize([]) == {}


def test_cli_dumps_posts(export_path, tmp_path, capsys):
    dump = tmp_path / "out" / "posts.jsonl"
    code = main(["--input", export_path, "--frontmatter-fields", "title,date:published", "--dump", str(dump)])
    assert code == 0
    lines = [json.loads(line) for line in dump.read_text(encoding="utf-8").splitlines()]
    assert [line["slug"] for line in lines] == ["first", "about"]
    assert lines[0]["frontmatter"] == {"title": "First", "published": "2024-01-01T10:00:00+00:00"}
    assert lines[0]["coverImage"] == "cover.jpg"
    out = capsys.readouterr().out
    assert "post: 1" in out
    assert "page: 1" in out


def test_cli_reports_fatal_errors(export_path, tmp_path):
    report_dir = tmp_path / "reports"
    code = main(["--input", export_path, "--frontmatter-fields", "title,bogus", "--report-dir", str(report_dir)])
    assert code == 1
    entries = [json.loads(line) for line in (report_dir / "errors.jsonl").read_text(encoding="utf-8").splitlines()]
    assert entries[0]["code"] == "CONFIGURATION"
    assert "bogus" in entries[0]["error"]


def test_cli_missing_input_fails_pre_flight(tmp_path):
    report_dir = tmp_path / "reports"
    code = main(["--input", str(tmp_path / "missing.xml"), "--report-dir", str(report_dir)])
    assert code == 1
    entry = json.loads((report_dir / "errors.jsonl").read_text(encoding="utf-8").splitlines()[0])
    assert entry["code"] == "PRE_FLIGHT"

import json
import os
import sys
from datetime import timezone

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from wp_export.models.config import DEFAULT_FRONTMATTER_FIELDS, ExportConfig, load_config
from wp_export.utils.errors import ConfigurationError


def test_defaults():
    config = ExportConfig()
    assert config.save_images == "all"
    assert config.timezone == "utc"
    assert config.zone is timezone.utc
    assert config.frontmatter_fields == DEFAULT_FRONTMATTER_FIELDS
    assert config.saves_attached_images and config.saves_scraped_images


@pytest.mark.parametrize(
    "save_images, attached, scraped",
    [("none", False, False), ("attached", True, False), ("scraped", False, True), ("all", True, True)],
)
def test_save_images_gates_strategies(save_images, attached, scraped):
    config = ExportConfig(save_images=save_images)
    assert config.saves_attached_images is attached
    assert config.saves_scraped_images is scraped


def test_config_is_immutable():
    config = ExportConfig()
    with pytest.raises(Exception):
        config.timezone = "Europe/Paris"


def test_load_config_from_json_with_camel_case_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "input": "site.xml",
                "saveImages": "attached",
                "timezone": "Europe/Paris",
                "frontmatterFields": ["title", "date:published"],
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(path))
    assert config.input == "site.xml"
    assert config.save_images == "attached"
    assert config.timezone == "Europe/Paris"
    assert config.frontmatter_fields == ["title", "date:published"]


def test_overrides_win_over_file_and_none_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"saveImages": "attached", "timezone": "Europe/Paris"}), encoding="utf-8")
    config = load_config(str(path), {"save_images": "scraped", "timezone": None})
    assert config.save_images == "scraped"
    assert config.timezone == "Europe/Paris"


def test_comma_separated_frontmatter_fields():
    config = load_config(overrides={"frontmatter_fields": "title, date:published ,"})
    assert config.frontmatter_fields == ["title", "date:published"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"save_images": "some"},
        {"timezone": "Mars/Olympus"},
        {"unknown_option": True},
    ],
)
def test_invalid_values_raise_configuration_error(overrides):
    with pytest.raises(ConfigurationError):
        load_config(overrides=overrides)


def test_unreadable_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(bad))
    listing = tmp_path / "list.json"
    listing.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(listing))

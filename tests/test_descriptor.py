from __future__ import annotations

import json
from pathlib import Path

import pytest

from componentforge.descriptor import (
    apply_project_identity,
    dump_descriptor,
    load_descriptor,
    write_descriptor,
)
from componentforge.errors import DescriptorParseFailure


def test_load_missing_descriptor_is_empty(tmp_path: Path):
    assert load_descriptor(tmp_path) == {}
    assert load_descriptor(tmp_path, strict=True) == {}


def test_load_malformed_descriptor(tmp_path: Path):
    (tmp_path / "package.json").write_text("{ not json", encoding="utf-8")

    assert load_descriptor(tmp_path) == {}
    with pytest.raises(DescriptorParseFailure) as excinfo:
        load_descriptor(tmp_path, strict=True)
    assert excinfo.value.path == tmp_path / "package.json"


def test_load_rejects_non_object(tmp_path: Path):
    (tmp_path / "package.json").write_text("[]", encoding="utf-8")

    with pytest.raises(DescriptorParseFailure):
        load_descriptor(tmp_path, strict=True)


def test_apply_project_identity_sets_expected_fields():
    template = {"name": "template", "version": "0.0.0", "license": "ISC", "scripts": {"dev": "vite"}}

    result = apply_project_identity(template, "use-timer", "acme", "use-timer")

    assert result["name"] == "use-timer"
    assert result["keywords"] == ["use-timer"]
    assert result["description"] == "use-timer"
    assert result["homepage"] == "https://github.com/acme/use-timer#readme"
    assert result["repository"] == {"type": "git", "url": "https://github.com/acme/use-timer.git"}
    assert result["bugs"] == {"url": "https://github.com/acme/use-timer/issues"}
    assert result["author"] == "acme"
    assert result["license"] == "MIT"
    assert list(result)[:4] == ["name", "version", "license", "scripts"]
    assert template["name"] == "template"


def test_apply_project_identity_keeps_existing_repository_keys():
    template = {"repository": {"type": "svn", "directory": "packages/ui"}}

    result = apply_project_identity(template, "ui", "acme", "ui")

    assert result["repository"] == {
        "type": "git",
        "directory": "packages/ui",
        "url": "https://github.com/acme/ui.git",
    }


def test_apply_project_identity_without_contributors():
    result = apply_project_identity({}, "fancy-button", None, "Fancy Button", license="Apache-2.0")

    assert result == {
        "name": "fancy-button",
        "keywords": ["Fancy Button"],
        "description": "Fancy Button",
        "license": "Apache-2.0",
    }


def test_write_descriptor_pretty_prints(tmp_path: Path):
    descriptor = {"name": "demo", "keywords": ["demo"]}

    path = write_descriptor(tmp_path / "package.json", descriptor)

    text = path.read_text(encoding="utf-8")
    assert text == dump_descriptor(descriptor)
    assert text.endswith("}\n")
    assert '\n  "name": "demo"' in text
    assert json.loads(text) == descriptor

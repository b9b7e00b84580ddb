"""
Tests for main.py — the command-line entry point.

Covers:
  - --response with a saved annotate body → text card / JSON, exit 0
  - broken or missing inputs → error output, exit 1
  - image path without a configured key → ConfigurationError, exit 1
"""
from __future__ import annotations

import json

import pytest

import main


@pytest.fixture
def saved_response(tmp_path, vision_response):
    path = tmp_path / "response.json"
    path.write_text(json.dumps(vision_response), encoding="utf-8")
    return path


class TestSavedResponse:
    def test_text_card(self, saved_response, capsys):
        assert main.main(["--response", str(saved_response)]) == 0
        out = capsys.readouterr().out
        assert "Hoodie" in out
        assert "Nike" in out

    def test_json_output(self, saved_response, capsys):
        assert main.main(["--response", str(saved_response), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "Hoodie"
        assert data["category"] == "Tops"
        assert data["brand"] == "Nike"
        assert data["color"] == "Black"

    def test_invalid_json_fails(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("not json", encoding="utf-8")
        assert main.main(["--response", str(path), "--json"]) == 1
        assert "JSON parse error" in json.loads(capsys.readouterr().out)["error"]

    @pytest.mark.parametrize("body", ["[]", "{\"responses\": [[\"Hoodie\"]]}"])
    def test_json_that_is_not_a_response_fails(self, tmp_path, capsys, body):
        path = tmp_path / "odd.json"
        path.write_text(body, encoding="utf-8")
        assert main.main(["--response", str(path)]) == 1
        out = capsys.readouterr().out
        assert "Analysis failed" in out
        assert "malformed response" in out

    def test_missing_file_fails(self, tmp_path, capsys):
        assert main.main(["--response", str(tmp_path / "absent.json")]) == 1
        assert "Analysis failed" in capsys.readouterr().out


class TestImage:
    def test_missing_key_fails(self, tmp_path, capsys):
        image = tmp_path / "photo.jpg"
        image.write_bytes(b"\xff\xd8fake")
        assert main.main([str(image)]) == 1
        assert "GOOGLE_VISION_API_KEY" in capsys.readouterr().out

    def test_no_source_is_usage_error(self):
        with pytest.raises(SystemExit) as info:
            main.main([])
        assert info.value.code == 2

import json

import pytest

import main
from services import ads as ads_service
from services.history import JsonFileHistoryStore
from services.models import ScrapeResult


@pytest.fixture
def history_file(tmp_path):
    return str(tmp_path / "history.json")


@pytest.fixture
def fake_backend(monkeypatch, api_key, ads_json):
    monkeypatch.setattr(ads_service, "scrape_product_page", lambda url: ScrapeResult(heading="Morning Roast"))
    monkeypatch.setattr(ads_service, "request_completion", lambda *args: ads_json)


def test_generate_prints_and_records_history(fake_backend, history_file, capsys):
    code = main.main(["--history-file", history_file, "generate", "https://www.shop.example.com/p", "--language", "German"])
    assert code == 0
    out = capsys.readouterr().out
    assert "--- Ad 3 ---" in out
    entries = JsonFileHistoryStore(history_file).load()
    assert entries[0].label == "shop.example.com"
    assert len(entries[0].ads) == 3


def test_vary_and_translate_latest(fake_backend, history_file):
    assert main.main(["--history-file", history_file, "vary", "--title", "T", "--description", "D", "--cta", "C"]) == 0
    assert main.main(["--history-file", history_file, "translate", "--language", "English"]) == 0
    labels = [e.label for e in JsonFileHistoryStore(history_file).load()]
    assert labels == ["Translation to English", "Variations: T"]


def test_translate_with_empty_history(history_file, api_key, capsys):
    assert main.main(["--history-file", history_file, "translate", "--language", "English"]) == 1
    assert "History is empty" in capsys.readouterr().out


def test_parse_failure_prints_raw(monkeypatch, api_key, history_file, capsys):
    monkeypatch.setattr(ads_service, "scrape_product_page", lambda url: ScrapeResult())
    monkeypatch.setattr(ads_service, "request_completion", lambda *args: "not json")
    assert main.main(["--history-file", history_file, "generate", "https://shop.example.com"]) == 1
    assert "not json" in capsys.readouterr().out


def test_history_clear(fake_backend, history_file):
    main.main(["--history-file", history_file, "generate", "https://shop.example.com"])
    assert main.main(["--history-file", history_file, "history", "--clear"]) == 0
    with open(history_file, encoding="utf-8") as f:
        assert json.load(f) == []


@pytest.mark.parametrize("argv", [
    ["generate", "https://shop.example.com", "--language", "Klingon"],
    ["vary", "--title", "T", "--description", "D", "--cta", "C", "--language", "Klingon"],
    ["translate", "--language", "Klingon"],
])
def test_unknown_language_is_rejected_by_every_command(history_file, argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--history-file", history_file] + argv)
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err

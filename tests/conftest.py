"""Shared fixtures: a workspace directory populated with JSON inputs."""

import json
from datetime import date, datetime

import pytest

TODAY = date(2025, 1, 13)

APP_CONFIG = {
    "from": "Taro",
    "department": "Dev",
    "thunderbird_exe": "tb",
    "log_dir": "data",
    "input_dir": "config",
    "address_book_file": "address_book.json",
    "output_dir": "output",
    "start_time_file": "work_times.json",
}

ADDRESS_BOOK = [{"name": "Alice", "address": "alice@example.com"}]

MAIL_TEMPLATES = {
    "remote_work_start": {
        "to_names": ["Alice"],
        "cc_names": [],
        "subject_template": "[{department}] {from} start {time}",
        "body_template": "Working remotely from {time}.",
    },
    "remote_work_end": {
        "to_names": ["Alice"],
        "cc_names": [],
        "subject_template": "[{department}] {from} end {time}",
        "body_template": "Worked {work_time}.",
    },
}


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path):
    """Workspace with config/app.json, config/address_book.json and config/mail_templates.json."""
    write_json(tmp_path / "config" / "app.json", APP_CONFIG)
    write_json(tmp_path / "config" / "address_book.json", ADDRESS_BOOK)
    write_json(tmp_path / "config" / "mail_templates.json", MAIL_TEMPLATES)
    return tmp_path


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def clock_at():
    """Factory for clock callables returning TODAY at hour:minute."""

    def make(hour, minute):
        return lambda: datetime(TODAY.year, TODAY.month, TODAY.day, hour, minute)

    return make

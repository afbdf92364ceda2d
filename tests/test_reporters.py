import io
import json

import pandas as pd
import pytest

from a11yscan.reporters import (
    COLUMNS,
    console_report,
    csv_report,
    get_reporter,
    html_report,
    json_report,
)

URL = "https://example.com/about"


@pytest.fixture
def entries():
    return [
        {
            "code": "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37",
            "context": '<img src="logo.png">',
            "message": "Img element missing an alt attribute.",
            "selector": "#header > img",
            "type": "error",
            "typeCode": 1,
        },
        {
            "code": "WCAG2AA.Principle2.Guideline2_4.2_4_2.H25.2",
            "context": None,
            "message": "Check that the title element describes the document.",
            "selector": "",
            "type": "notice",
            "typeCode": 3,
        },
    ]


class TestJsonReport:
    def test_round_trips_entries(self, entries):
        assert json.loads(json_report(entries, URL)) == entries


class TestCsvReport:
    def test_columns_and_rows(self, entries):
        df = pd.read_csv(io.StringIO(csv_report(entries, URL)))
        assert list(df.columns) == COLUMNS
        assert list(df["type"]) == ["error", "notice"]
        assert list(df["typeCode"]) == [1, 3]

    def test_missing_type_code_keeps_integers(self, entries):
        entries.append(dict(entries[0], typeCode=None))
        rows = csv_report(entries, URL).splitlines()
        assert rows[1].endswith(",1")
        assert rows[2].endswith(",3")
        assert rows[3].endswith(",")
        assert "1.0" not in rows[1]

    def test_empty(self):
        assert csv_report([], URL).strip() == ",".join(COLUMNS)


class TestHtmlReport:
    def test_title_and_counts(self, entries):
        page = html_report(entries, URL)
        assert f'Accessibility Report For "{URL}"' in page
        assert "1 errors" in page
        assert "0 warnings" in page
        assert "1 notices" in page

    def test_markup_is_escaped(self, entries):
        page = html_report(entries, URL)
        assert "&lt;img src=&quot;logo.png&quot;&gt;" in page or "&lt;img src=\"logo.png\"&gt;" in page
        assert '<img src="logo.png">' not in page


class TestConsoleReport:
    def test_prints_entries(self, entries, capsys):
        text = console_report(entries, URL)
        out = capsys.readouterr().out
        assert out.strip() == text
        assert "[error] Img element missing an alt attribute." in text
        assert "#header > img" in text

    def test_no_issues(self, capsys):
        assert "No issues found!" in console_report([], URL)


class TestGetReporter:
    @pytest.mark.parametrize("name, reporter", [("json", json_report), ("csv", csv_report), ("html", html_report)])
    def test_known_types(self, name, reporter):
        assert get_reporter(name) is reporter

    def test_default_is_console(self):
        assert get_reporter(None) is console_report

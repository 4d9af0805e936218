import csv
from io import StringIO

from rcfpl.pipeline import display_headers, to_delimited_text

from tests.helpers import make_record, sample_pool


def test_empty_records_export_empty_string():
    assert to_delimited_text([]) == ""
    assert display_headers([]) == []


def test_header_and_rows_use_crlf_including_last_row():
    text = to_delimited_text(sample_pool()[:2])

    assert text.endswith("\r\n")
    lines = text.split("\r\n")
    assert lines[-1] == ""
    assert len(lines) == 4
    assert lines[0].split(",")[:4] == ["id", "web_name", "team", "element_type"]
    assert lines[0].split(",")[-1] == "consistency_score"


def test_values_are_native_text():
    record = make_record(9, "Gordon", team="NEW", position="MID", points_average=5.25, consistency_score=61)
    row = to_delimited_text([record]).split("\r\n")[1].split(",")

    assert row[0] == "9"
    assert row[3] == "MID"
    assert "5.25" in row
    assert row[-1] == "61.0"


def test_commas_and_quotes_are_escaped():
    records = [
        make_record(1, "Smith, Jr."),
        make_record(2, 'Bruno "Magic" Fernandes'),
        make_record(3, "Plain"),
    ]
    text = to_delimited_text(records)

    assert '"Smith, Jr."' in text
    assert '"Bruno ""Magic"" Fernandes"' in text
    assert ",Plain," in text


def test_csv_round_trip_restores_values():
    records = sample_pool() + [make_record(8, "Smith, Jr."), make_record(9, 'Bruno "Magic" Fernandes')]
    rows = list(csv.DictReader(StringIO(to_delimited_text(records), newline="")))

    assert len(rows) == len(records)
    for row, record in zip(rows, records):
        assert row["web_name"] == record.name
        assert row["team"] == record.team
        assert row["element_type"] == record.position.value
        assert int(row["id"]) == record.id
        assert int(row["matches_counted"]) == record.appearances
        assert float(row["return_rate_smooth"]) == record.return_rate_smoothed
        assert float(row["consistency_score"]) == record.consistency_score


def test_display_headers_put_name_first_and_drop_id():
    headers = display_headers(sample_pool())

    assert headers[0] == "web_name"
    assert "id" not in headers
    assert headers[4] == "points_avg"
    assert headers[-1] == "consistency_score"
    assert len(headers) == 13

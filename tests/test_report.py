from datetime import datetime

from hostsysmon.core.report import (
    build_markdown,
    format_timestamp,
    log_file_name,
    markdown_file_name,
    report_logs,
    section_name,
)

TS = "2026-10-18_12-00-00"


def test_names_embed_category_and_timestamp():
    assert format_timestamp(datetime(2026, 10, 18, 12, 0, 0)) == TS
    assert log_file_name("network", TS) == f"network_{TS}.log"
    assert markdown_file_name(TS) == f"report_{TS}.md"


def test_section_name_strips_suffix():
    assert section_name(f"memory_{TS}.log", TS) == "memory"
    assert section_name("notes.txt", TS) == "notes.txt"


def test_report_logs_only_match_this_timestamp(tmp_path):
    (tmp_path / f"load_{TS}.log").write_text("load")
    (tmp_path / f"cpu_{TS}.log").write_text("cpu")
    (tmp_path / "cpu_2026-10-18_11-59-59.log").write_text("old")
    (tmp_path / f"report_{TS}.md").write_text("# old report")

    assert [p.name for p in report_logs(tmp_path, TS)] == [f"cpu_{TS}.log", f"load_{TS}.log"]


def test_build_markdown(tmp_path):
    (tmp_path / f"memory_{TS}.log").write_text("=== Memory Metrics ===\nMem: 1 2 3\n")
    (tmp_path / f"cpu_{TS}.log").write_text("=== CPU Metrics ===\nall 3.00\n")

    assert build_markdown(tmp_path, TS) == (
        f"# System Monitoring Report ({TS})\n"
        "\n## cpu\n\n=== CPU Metrics ===\nall 3.00\n"
        "\n## memory\n\n=== Memory Metrics ===\nMem: 1 2 3\n"
    )

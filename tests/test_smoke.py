from css_color_inventory.inventory.orchestrator import build_report
from css_color_inventory.inventory.report import format_report


def test_smoke(tmp_path):
    (tmp_path / "panel.css").write_text(
        ".panel { color: #202124; background-color: white; box-shadow: 0 1px 2px rgba(0, 0, 0, 0.3); }",
        encoding="utf-8",
    )
    report = build_report(tmp_path)
    assert report.file_count == 1
    for color, count in report.rows():
        assert isinstance(color, str) and color.startswith(("rgb(", "rgba("))
        assert count >= 1
    assert "# of unique color values: 3" in format_report(report)

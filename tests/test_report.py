import pytest

from heat_load_calculator.project import LoadItem, LoadMethod, LoadProject
from heat_load_calculator.report import (
    ExportError,
    export_csv,
    format_quick_output,
    format_summary,
    render_csv,
)


def _project() -> LoadProject:
    project = LoadProject()
    project.add(LoadItem("Supply air", LoadMethod.AIR_SENSIBLE, 21_600.0))
    project.add(LoadItem("HW coil", LoadMethod.HYDRONIC, 100_000.0))
    return project


def test_render_csv_rows_and_total():
    assert render_csv(_project()) == (
        "Index,Name,Method,BTU_per_hr,kW,Tons\n"
        '1,"Supply air","AirSens",21600.0,6.331,1.800\n'
        '2,"HW coil","Hydronic",100000.0,29.308,8.333\n'
        ',"TOTAL","",121600.0,35.639,10.133\n'
    )


def test_render_csv_empty_project():
    assert render_csv(LoadProject()) == (
        "Index,Name,Method,BTU_per_hr,kW,Tons\n"
        ',"TOTAL","",0.0,0.000,0.000\n'
    )


def test_render_csv_negative_and_quoted_names():
    project = LoadProject()
    project.add(LoadItem('Wall "north"', LoadMethod.CONDUCTION, -600.0))
    lines = render_csv(project).splitlines()
    assert lines[1] == '1,"Wall ""north""","Cond(UA)",-600.0,-0.176,-0.050'


def test_export_csv_writes_file(tmp_path):
    target = tmp_path / "heat_load.csv"
    written = export_csv(_project(), target)
    assert written == target
    assert target.read_text(encoding="utf-8") == render_csv(_project())


def test_export_csv_unwritable_path(tmp_path):
    target = tmp_path / "missing" / "heat_load.csv"
    with pytest.raises(ExportError) as excinfo:
        export_csv(_project(), target)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert not target.exists()


def test_format_summary():
    text = format_summary(_project())
    lines = text.splitlines()
    assert "PROJECT LOAD SUMMARY" in text
    assert lines[2].startswith("#   Name")
    assert lines[4].startswith("1)  Supply air")
    assert "21600.0" in lines[4]
    total_line = next(line for line in lines if "TOTAL:" in line)
    assert total_line.split() == ["TOTAL:", "121600.0", "35.639", "10.133"]


def test_format_summary_truncates_long_names():
    project = LoadProject()
    project.add(LoadItem("X" * 40, LoadMethod.ACH_AIR, 4_500.0))
    row = format_summary(project).splitlines()[4]
    assert "X" * 27 in row
    assert "X" * 28 not in row


def test_format_quick_output():
    text = format_quick_output(LoadItem("Supply air", LoadMethod.AIR_SENSIBLE, 21_600.0))
    assert "BTU/hr: 21600.0" in text
    assert "kW:     6.331" in text
    assert "Tons:   1.800" in text


def test_export_csv_path_with_null_byte():
    with pytest.raises(ExportError) as excinfo:
        export_csv(_project(), "bad\0name.csv")
    assert isinstance(excinfo.value.__cause__, ValueError)

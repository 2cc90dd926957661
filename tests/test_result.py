"""结果集导出测试。"""

import csv
import dataclasses
import json

import pytest

from conftest import task
from pertnet.engine import calculate_pert
from pertnet.engine.result import CSV_COLUMNS


@pytest.fixture
def result():
    return calculate_pert([
        task("A", 1, 1, 1, description="setup"),
        task("B", 2, 2, 2),
        task("C", 4, 4, 4),
        task("D", 1, 1, 1, ["A", "B", "C"]),
    ])


def test_get_task(result):
    assert result.get_task("B").expected_time == 2
    with pytest.raises(ValueError):
        result.get_task("Z")


def test_bottleneck_ids(result):
    # A时差3，B时差2，都不是瓶颈
    assert result.get_bottleneck_ids() == []
    assert result.critical_path_ids == ("C", "D")


def test_result_is_read_only(result):
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.project_finish_time = 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.tasks[0].slack = 0


def test_to_dict_is_json_serializable(result):
    data = json.loads(json.dumps(result.to_dict()))
    assert data["project_finish_time"] == 5
    assert data["critical_path_ids"] == ["C", "D"]
    assert data["edges"] == [["A", "D"], ["B", "D"], ["C", "D"]]
    assert data["tasks"][3]["dependencies"] == ["A", "B", "C"]
    assert data["tasks"][0]["description"] == "setup"


def test_to_dataframe(result):
    df = result.to_dataframe()
    assert list(df.columns) == CSV_COLUMNS
    assert len(df) == 4
    assert df["task_id"].tolist() == ["A", "B", "C", "D"]
    assert df.loc[df["task_id"] == "A", "slack"].item() == 3
    assert df["is_critical"].tolist() == [False, False, True, True]
    assert df.loc[3, "dependencies"] == "A,B,C"


def test_save_to_csv(result, tmp_path):
    path = tmp_path / "report.csv"
    result.save_to_csv(str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_COLUMNS
    assert [row[0] for row in rows[1:]] == ["A", "B", "C", "D"]
    assert float(rows[4][CSV_COLUMNS.index("early_start")]) == 4


def test_visualize_writes_file(result, tmp_path):
    path = tmp_path / "gantt.png"
    result.visualize(str(path))
    assert path.exists()
    assert path.stat().st_size > 0

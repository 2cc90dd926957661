"""测试公共夹具。"""

import csv
import os

import matplotlib

# 测试中不弹出图形窗口
matplotlib.use("Agg")

import pytest

from pertnet.interfaces.base_task import TaskRecord
from pertnet.task.task import REQUIRED_HEADERS

EXAMPLE_CSV = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "examples", "release_plan", "tasks.csv"
)


def task(task_id, o, m, p, deps=(), description=""):
    """构造任务记录的简写"""
    return TaskRecord(
        id=task_id,
        description=description,
        optimistic_time=o,
        most_likely_time=m,
        pessimistic_time=p,
        dependencies=list(deps),
    )


@pytest.fixture
def linear_chain():
    return [
        task("A", 1, 2, 3),
        task("B", 2, 3, 4, ["A"]),
        task("C", 1, 1, 1, ["B"]),
    ]


@pytest.fixture
def converging_paths():
    return [
        task("A", 2, 2, 2),
        task("B", 5, 5, 5),
        task("C", 1, 1, 1, ["A", "B"]),
    ]


@pytest.fixture
def example_csv():
    return EXAMPLE_CSV


@pytest.fixture
def write_csv(tmp_path):
    """写入任务CSV文件，返回文件路径"""
    def _write(rows, headers=None, name="tasks.csv"):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(headers or REQUIRED_HEADERS)
            for row in rows:
                writer.writerow(row)
        return str(path)
    return _write

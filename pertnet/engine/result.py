"""PERT结果集模块。

此模块定义了引擎交给调用方的只读结果集，包括：
1. 按输入顺序排列的任务计算结果
2. 关键任务ID列表和项目总工期
3. 依赖边列表（供渲染器布局使用）
4. CSV导出、DataFrame视图和甘特图可视化

Typical usage example:

    result = PertEngine(tasks).calculate()
    result.save_to_csv("report.csv")
    result.visualize("gantt.png")
"""

import csv
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from pertnet.interfaces.base_engine import TaskSchedule

CSV_COLUMNS = [
    'task_id', 'description',
    'optimistic_time', 'most_likely_time', 'pessimistic_time', 'dependencies',
    'expected_time', 'variance',
    'early_start', 'early_finish', 'late_start', 'late_finish',
    'slack', 'is_critical', 'is_bottleneck',
]

CRITICAL_COLOR = '#E53E3E'
BOTTLENECK_COLOR = '#D69E2E'
NORMAL_COLOR = '#3182CE'


@dataclass(frozen=True)
class PertResult:
    """PERT结果集数据类"""
    tasks: Tuple[TaskSchedule, ...]  # 按输入顺序
    critical_path_ids: Tuple[str, ...]  # 关键任务ID，按输入顺序
    project_finish_time: float  # 项目总工期
    edges: Tuple[Tuple[str, str], ...]  # (前置任务ID, 依赖任务ID)

    def get_task(self, task_id: str) -> TaskSchedule:
        """获取任务计算结果

        Args:
            task_id: 任务ID

        Returns:
            任务计算结果

        Raises:
            ValueError: 任务不存在
        """
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise ValueError(f"任务{task_id}不存在")

    def get_bottleneck_ids(self) -> List[str]:
        """获取所有瓶颈任务ID（按输入顺序）"""
        return [t.id for t in self.tasks if t.is_bottleneck]

    def to_dict(self) -> Dict[str, Any]:
        """转换为可JSON序列化的字典"""
        tasks = []
        for task in self.tasks:
            data = asdict(task)
            data['dependencies'] = list(task.dependencies)
            tasks.append(data)
        return {
            'tasks': tasks,
            'critical_path_ids': list(self.critical_path_ids),
            'project_finish_time': self.project_finish_time,
            'edges': [list(edge) for edge in self.edges],
        }

    def _rows(self) -> List[List[Any]]:
        return [
            [
                t.id, t.description,
                t.optimistic_time, t.most_likely_time, t.pessimistic_time,
                ','.join(t.dependencies),
                t.expected_time, t.variance,
                t.early_start, t.early_finish, t.late_start, t.late_finish,
                t.slack, t.is_critical, t.is_bottleneck,
            ]
            for t in self.tasks
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """转换为DataFrame，每个任务一行

        Returns:
            列名与CSV报告相同的DataFrame
        """
        return pd.DataFrame(self._rows(), columns=CSV_COLUMNS)

    def save_to_csv(self, csv_path: str) -> None:
        """将结果保存到CSV文件

        Args:
            csv_path: CSV文件路径
        """
        with open(csv_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(CSV_COLUMNS)
            for row in self._rows():
                writer.writerow(row)

    def visualize(self, output_path: Optional[str] = None) -> None:
        """绘制甘特图

        每个任务一行：实心条表示 ES 到 EF，浅色条表示 EF 到 LF 之间的时差。
        - 红色：关键任务
        - 黄色：瓶颈任务
        - 蓝色：普通任务

        Args:
            output_path: 输出图片路径，如果为None则直接显示图形
        """
        n = len(self.tasks)
        y_pos = np.arange(n)
        starts = np.array([t.early_start for t in self.tasks], dtype=float)
        durations = np.array([t.expected_time for t in self.tasks], dtype=float)
        slacks = np.array([t.late_finish - t.early_finish for t in self.tasks], dtype=float)
        colors = [
            CRITICAL_COLOR if t.is_critical else BOTTLENECK_COLOR if t.is_bottleneck else NORMAL_COLOR
            for t in self.tasks
        ]

        fig, ax = plt.subplots(figsize=(12, max(3, 0.5 * n + 1)))
        ax.barh(y_pos, durations, left=starts, color=colors, edgecolor='black', height=0.6)
        ax.barh(y_pos, slacks, left=starts + durations, color=colors, alpha=0.25, height=0.6)

        ax.set_yticks(y_pos)
        ax.set_yticklabels([t.id for t in self.tasks])
        # 第一个任务显示在最上方
        ax.invert_yaxis()

        ax.axvline(self.project_finish_time, color='gray', linestyle='--', linewidth=1)
        ax.set_xlabel("Time")
        ax.set_ylabel("Task")
        ax.set_title(f"PERT Schedule (finish = {self.project_finish_time:.2f})")
        ax.grid(True, axis='x', color='gray', linestyle='-', alpha=0.3, linewidth=0.8)
        ax.set_axisbelow(True)
        fig.tight_layout()

        if output_path:
            fig.savefig(output_path, bbox_inches='tight')
            plt.close(fig)
        else:
            plt.show()

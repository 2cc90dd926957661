"""任务集合实现模块。

此模块实现了任务输入的具体功能，包括：
1. 从CSV文件加载任务
2. 校验必需列、任务ID唯一性、时间估计的数值合法性和大小关系
3. 校验依赖关系引用的任务均存在
4. 提供按ID和输入顺序的查询接口

所有校验错误会被汇总后一次性抛出，便于用户一次性修正输入文件。

Typical usage example:

    from pertnet.task import TaskSet

    tasks = TaskSet()
    tasks.load_tasks("tasks.csv")
    for record in tasks:
        print(record.id, record.dependencies)
"""

import csv
import logging
import math
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from pertnet.errors import TaskValidationError
from pertnet.interfaces.base_task import BaseTaskSet, TaskRecord

logger = logging.getLogger(__name__)

REQUIRED_HEADERS = [
    "task_id",
    "description",
    "optimistic_time",
    "most_likely_time",
    "pessimistic_time",
    "dependencies",
]

TIME_FIELDS = ["optimistic_time", "most_likely_time", "pessimistic_time"]


def parse_dependencies(raw: Optional[str]) -> List[str]:
    """解析逗号分隔的依赖字符串

    Args:
        raw: 原始依赖字符串，例如 "A, B,,C"

    Returns:
        去除空白和空项后的任务ID列表
    """
    if raw is None:
        return []
    return [dep.strip() for dep in str(raw).split(',') if dep.strip()]


def _parse_time(value: Optional[str]) -> Optional[float]:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


class TaskSet(BaseTaskSet):
    """任务集合实现类"""

    def __init__(self, strict_estimates: bool = True):
        """初始化任务集合

        Args:
            strict_estimates: 是否校验 O <= M <= P
        """
        self._strict_estimates = strict_estimates
        self._tasks: Dict[str, TaskRecord] = {}

    def load_tasks(self, task_csv: str) -> None:
        """从CSV文件加载任务

        Args:
            task_csv: 任务CSV文件路径

        Raises:
            FileNotFoundError: 文件不存在
            TaskValidationError: 文件内容校验失败
        """
        try:
            with open(task_csv, 'r', newline='', encoding='utf-8-sig') as f:
                reader = csv.DictReader(f)
                headers = reader.fieldnames or []
                missing = [h for h in REQUIRED_HEADERS if h not in headers]
                if missing:
                    raise TaskValidationError(
                        [f"缺少必需的CSV列：'{h}'" for h in missing]
                    )
                rows = [
                    row for row in reader
                    if any(v.strip() for v in row.values() if isinstance(v, str))
                ]
        except FileNotFoundError:
            raise FileNotFoundError(f"任务文件不存在：{task_csv}")

        self.from_rows(rows)
        logger.info(f"从{task_csv}加载了{len(self._tasks)}个任务")

    def from_rows(self, rows: Iterable[Mapping[str, Optional[str]]]) -> None:
        """从字典序列加载任务，校验规则与CSV文件相同

        第一行数据的行号为2（第1行为表头）。

        Args:
            rows: 每行一个字典，键为CSV列名

        Raises:
            TaskValidationError: 校验失败，携带全部错误信息
        """
        rows = list(rows)
        if not rows:
            raise TaskValidationError(["CSV文件为空或仅包含表头"])

        errors: List[str] = []
        records: List[TaskRecord] = []
        row_numbers: Dict[str, int] = {}

        for index, row in enumerate(rows):
            row_num = index + 2
            task_id = str(row.get('task_id') or '').strip()
            if not task_id:
                errors.append(f"第{row_num}行：'task_id'缺失或为空")
                continue

            if task_id in row_numbers or task_id in self._tasks:
                errors.append(f"第{row_num}行：任务ID重复：'{task_id}'")
            else:
                row_numbers[task_id] = row_num

            times: Dict[str, Optional[float]] = {}
            for name in TIME_FIELDS:
                times[name] = _parse_time(row.get(name))
                if times[name] is None:
                    errors.append(
                        f"第{row_num}行（任务{task_id}）：'{name}'必须为非负数，"
                        f"实际为'{row.get(name)}'"
                    )

            o = times['optimistic_time']
            m = times['most_likely_time']
            p = times['pessimistic_time']
            if o is not None and m is not None and p is not None:
                if self._strict_estimates and o > m:
                    errors.append(
                        f"第{row_num}行（任务{task_id}）：'optimistic_time'({o})"
                        f"不能大于'most_likely_time'({m})"
                    )
                if self._strict_estimates and m > p:
                    errors.append(
                        f"第{row_num}行（任务{task_id}）：'most_likely_time'({m})"
                        f"不能大于'pessimistic_time'({p})"
                    )
                records.append(TaskRecord(
                    id=task_id,
                    description=str(row.get('description') or '').strip(),
                    optimistic_time=o,
                    most_likely_time=m,
                    pessimistic_time=p,
                    dependencies=parse_dependencies(row.get('dependencies'))
                ))

        if errors:
            raise TaskValidationError(errors)

        # 第二遍：检查依赖是否都存在
        known_ids = set(self._tasks) | {r.id for r in records}
        for record in records:
            for dep_id in record.dependencies:
                if dep_id not in known_ids:
                    errors.append(
                        f"任务'{record.id}'（第{row_numbers[record.id]}行）："
                        f"依赖'{dep_id}'不是已有的'task_id'"
                    )
        if errors:
            raise TaskValidationError(errors)

        for record in records:
            self._tasks[record.id] = record

    def add_task(self, record: TaskRecord) -> None:
        """添加单个任务

        Args:
            record: 任务记录

        Raises:
            ValueError: 任务ID为空或重复
        """
        if not record.id:
            raise ValueError("任务ID不能为空")
        if record.id in self._tasks:
            raise ValueError(f"任务ID重复：{record.id}")
        self._tasks[record.id] = record

    def get_tasks(self) -> List[TaskRecord]:
        """获取所有任务（保持输入顺序）

        Returns:
            任务记录列表
        """
        return list(self._tasks.values())

    def get_task(self, task_id: str) -> Optional[TaskRecord]:
        """获取指定任务

        Args:
            task_id: 任务ID

        Returns:
            任务记录，如果任务不存在则返回None
        """
        return self._tasks.get(task_id)

    def get_task_ids(self) -> List[str]:
        """获取所有任务ID

        Returns:
            任务ID列表
        """
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(list(self._tasks.values()))

"""依赖图接口定义。

此模块定义了任务依赖图的核心抽象接口，包括：
1. 节点管理：每个任务对应一个节点，节点上保存可写的计算结果
2. 边管理：边由前置任务指向依赖它的任务
3. 结构查询：前驱、后继、环检测和拓扑排序

Typical usage example:

    from pertnet.interfaces import BaseGraph

    class CustomGraph(BaseGraph):
        def add_tasks(self, records) -> None:
            # 自定义建图逻辑
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .base_task import TaskRecord


@dataclass
class TaskNode:
    """任务节点数据类（计算过程中由引擎独占并逐步写入）"""
    id: str
    description: str
    optimistic_time: float
    most_likely_time: float
    pessimistic_time: float
    dependencies: List[str] = field(default_factory=list)
    expected_time: float = 0.0  # 期望时间TE
    variance: float = 0.0  # 方差
    early_start: float = 0.0  # 最早开始ES
    early_finish: float = 0.0  # 最早完成EF
    late_start: float = float('inf')  # 最晚开始LS，inf表示未计算
    late_finish: float = float('inf')  # 最晚完成LF，inf表示未计算
    slack: float = 0.0  # 时差
    is_critical: bool = False
    is_bottleneck: bool = False

    @classmethod
    def from_record(cls, record: TaskRecord) -> 'TaskNode':
        """由任务记录创建节点，并立即计算期望时间和方差

        Args:
            record: 任务记录

        Returns:
            初始化后的任务节点
        """
        o = record.optimistic_time
        m = record.most_likely_time
        p = record.pessimistic_time
        return cls(
            id=record.id,
            description=record.description,
            optimistic_time=o,
            most_likely_time=m,
            pessimistic_time=p,
            dependencies=list(record.dependencies),
            expected_time=(o + 4 * m + p) / 6,
            variance=((p - o) / 6) ** 2,
        )


class BaseGraph(ABC):
    """依赖图抽象基类"""

    @abstractmethod
    def add_tasks(self, records: Iterable[TaskRecord]) -> None:
        """添加任务节点及其依赖边

        Args:
            records: 任务记录序列

        Raises:
            MissingDependencyError: 依赖的任务不存在
        """
        pass

    @abstractmethod
    def get_nodes(self) -> List[str]:
        """获取所有任务ID（保持插入顺序）

        Returns:
            任务ID列表
        """
        pass

    @abstractmethod
    def get_edges(self) -> List[Tuple[str, str]]:
        """获取所有依赖边

        Returns:
            边列表，每条边为(前置任务ID, 依赖任务ID)元组
        """
        pass

    @abstractmethod
    def get_node(self, task_id: str) -> TaskNode:
        """获取任务节点

        Args:
            task_id: 任务ID

        Returns:
            任务节点对象

        Raises:
            ValueError: 任务不存在
        """
        pass

    @abstractmethod
    def get_predecessors(self, task_id: str) -> List[str]:
        """获取任务的所有前驱

        Args:
            task_id: 任务ID

        Returns:
            前驱任务ID列表
        """
        pass

    @abstractmethod
    def get_successors(self, task_id: str) -> List[str]:
        """获取任务的所有后继

        Args:
            task_id: 任务ID

        Returns:
            后继任务ID列表
        """
        pass

    @abstractmethod
    def find_cycle(self) -> Optional[List[str]]:
        """查找一个环

        Returns:
            按顺序排列的环上任务ID列表，如果不存在环则返回None
        """
        pass

    @abstractmethod
    def topological_order(self) -> List[str]:
        """计算一个拓扑序

        Returns:
            任务ID列表，每条边的起点都排在终点之前
        """
        pass

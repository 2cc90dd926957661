"""依赖图实现模块。

此模块实现了任务依赖图的具体功能，包括：
1. 由已校验的任务记录构建有向图，节点上保存任务节点对象
2. 使用NetworkX库管理DAG结构
3. 环检测和拓扑排序
4. 前驱、后继查询（邻接表预先索引，查询不需要扫描全部边）

Typical usage example:

    from pertnet.graph import DependencyGraph

    graph = DependencyGraph.build(records)
    order = graph.topological_order()
"""

import logging
from typing import Iterable, List, Optional, Tuple

import networkx as nx

from pertnet.errors import GraphConsistencyError, MissingDependencyError
from pertnet.interfaces.base_graph import BaseGraph, TaskNode
from pertnet.interfaces.base_task import TaskRecord

logger = logging.getLogger(__name__)


class DependencyGraph(BaseGraph):
    """任务依赖图实现类"""

    def __init__(self):
        """初始化依赖图"""
        self._graph = nx.DiGraph()

    @classmethod
    def build(cls, records: Iterable[TaskRecord]) -> 'DependencyGraph':
        """由任务记录构建依赖图

        Args:
            records: 任务记录序列

        Returns:
            构建完成的依赖图

        Raises:
            MissingDependencyError: 依赖的任务不存在
            GraphConsistencyError: 任务ID重复
        """
        graph = cls()
        graph.add_tasks(records)
        return graph

    def add_tasks(self, records: Iterable[TaskRecord]) -> None:
        """添加任务节点及其依赖边

        先添加全部节点，再添加边，因此依赖的声明顺序不受输入顺序限制。

        Args:
            records: 任务记录序列

        Raises:
            MissingDependencyError: 依赖的任务不存在
            GraphConsistencyError: 任务ID重复
        """
        records = list(records)
        duplicates = []
        for record in records:
            if self._graph.has_node(record.id):
                duplicates.append(record.id)
                continue
            self._graph.add_node(record.id, task=TaskNode.from_record(record))
        if duplicates:
            raise GraphConsistencyError(duplicates, reason="任务ID重复")

        for record in records:
            for dep_id in record.dependencies:
                if not self._graph.has_node(dep_id):
                    raise MissingDependencyError(record.id, dep_id)
                # 边方向：前置任务 -> 依赖任务
                self._graph.add_edge(dep_id, record.id)

        logger.debug(
            f"依赖图构建完成：{self._graph.number_of_nodes()}个任务，"
            f"{self._graph.number_of_edges()}条依赖"
        )

    def has_node(self, task_id: str) -> bool:
        """检查任务是否存在

        Args:
            task_id: 任务ID

        Returns:
            是否存在
        """
        return self._graph.has_node(task_id)

    def number_of_nodes(self) -> int:
        return self._graph.number_of_nodes()

    def get_nodes(self) -> List[str]:
        """获取所有任务ID（保持插入顺序）

        Returns:
            任务ID列表
        """
        return list(self._graph.nodes())

    def get_edges(self) -> List[Tuple[str, str]]:
        """获取所有依赖边

        Returns:
            边列表，每条边为(前置任务ID, 依赖任务ID)元组
        """
        return list(self._graph.edges())

    def get_node(self, task_id: str) -> TaskNode:
        """获取任务节点

        Args:
            task_id: 任务ID

        Returns:
            任务节点对象

        Raises:
            ValueError: 任务不存在
        """
        if task_id not in self._graph:
            raise ValueError(f"任务{task_id}不存在")
        return self._graph.nodes[task_id]['task']

    def get_predecessors(self, task_id: str) -> List[str]:
        """获取任务的所有前驱

        Args:
            task_id: 任务ID

        Returns:
            前驱任务ID列表
        """
        return list(self._graph.predecessors(task_id))

    def get_successors(self, task_id: str) -> List[str]:
        """获取任务的所有后继

        Args:
            task_id: 任务ID

        Returns:
            后继任务ID列表
        """
        return list(self._graph.successors(task_id))

    def find_cycle(self) -> Optional[List[str]]:
        """查找一个环

        自环（任务依赖自身）返回只含该任务的列表。

        Returns:
            按顺序排列的环上任务ID列表，如果不存在环则返回None
        """
        try:
            edges = nx.find_cycle(self._graph)
        except nx.NetworkXNoCycle:
            return None
        return [source for source, _ in edges]

    def topological_order(self) -> List[str]:
        """计算一个拓扑序

        Returns:
            任务ID列表，每条边的起点都排在终点之前

        Raises:
            GraphConsistencyError: 拓扑序无法覆盖全部任务
        """
        try:
            order = list(nx.topological_sort(self._graph))
        except nx.NetworkXUnfeasible as e:
            raise GraphConsistencyError(self.get_nodes(), reason=f"拓扑排序失败（{e}）") from e

        if len(order) != self._graph.number_of_nodes():
            placed = set(order)
            unplaced = [n for n in self._graph.nodes() if n not in placed]
            raise GraphConsistencyError(unplaced)
        return order

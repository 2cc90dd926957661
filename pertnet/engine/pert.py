"""PERT计算引擎实现模块。

此模块实现了PERT/CPM计算的完整流程：
1. 时间估计复核：拒绝非数值、NaN、无穷大、负数以及（严格模式下）O > M 或 M > P
2. 构建依赖图并检测循环依赖
3. 计算拓扑序
4. 正向计算最早开始/完成时间（ES/EF）
5. 以最大EF作为项目总工期
6. 按逆拓扑序反向计算最晚开始/完成时间（LS/LF）
7. 计算时差并标记关键任务和瓶颈任务

任何一步失败都会中止计算并抛出异常，不会返回部分结果。

Typical usage example:

    from pertnet.engine import PertEngine

    engine = PertEngine(records)
    result = engine.calculate()
    print(result.critical_path_ids, result.project_finish_time)
"""

import logging
import math
import numbers
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from pertnet.engine.result import PertResult
from pertnet.errors import (
    CyclicDependencyError,
    GraphConsistencyError,
    InvalidEstimateError,
    PertError
)
from pertnet.graph.graph import DependencyGraph
from pertnet.interfaces.base_engine import (
    BaseEngine,
    CalculationStatus,
    EngineConfig,
    TaskSchedule
)
from pertnet.interfaces.base_graph import TaskNode
from pertnet.interfaces.base_task import BaseTaskSet, TaskRecord

logger = logging.getLogger(__name__)

# 时差保留的小数位数，用于消除正反两次计算累积的浮点误差
SLACK_PRECISION = 5
# 瓶颈阈值：0 < 时差 <= 1.0 的任务视为瓶颈（接近关键）
BOTTLENECK_THRESHOLD = 1.0

ESTIMATE_FIELDS = ('optimistic_time', 'most_likely_time', 'pessimistic_time')


def classify_slack(slack: float) -> Tuple[bool, bool]:
    """根据时差判断任务类别

    Args:
        slack: 已按SLACK_PRECISION取整的时差

    Returns:
        (是否关键, 是否瓶颈)，两者不会同时为True
    """
    is_critical = slack == 0
    is_bottleneck = not is_critical and 0 < slack <= BOTTLENECK_THRESHOLD
    return is_critical, is_bottleneck


def validate_estimates(records: Iterable[TaskRecord], strict: bool = True) -> None:
    """复核任务的时间估计

    Args:
        records: 任务记录序列
        strict: 是否要求 O <= M <= P

    Raises:
        InvalidEstimateError: 时间估计无效
    """
    for record in records:
        for name in ESTIMATE_FIELDS:
            value = getattr(record, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidEstimateError(record.id, name, value, "不是数值")
            if not math.isfinite(value):
                raise InvalidEstimateError(record.id, name, value, "不是有限数值")
            if value < 0:
                raise InvalidEstimateError(record.id, name, value, "不能为负数")

        if strict:
            if record.optimistic_time > record.most_likely_time:
                raise InvalidEstimateError(
                    record.id, 'optimistic_time', record.optimistic_time,
                    f"大于most_likely_time({record.most_likely_time})"
                )
            if record.most_likely_time > record.pessimistic_time:
                raise InvalidEstimateError(
                    record.id, 'most_likely_time', record.most_likely_time,
                    f"大于pessimistic_time({record.pessimistic_time})"
                )


class PertEngine(BaseEngine):
    """PERT计算引擎实现类"""

    def __init__(
        self,
        tasks: Union[Sequence[TaskRecord], BaseTaskSet],
        config: Optional[EngineConfig] = None
    ):
        """初始化计算引擎

        Args:
            tasks: 任务记录序列或任务集合对象
            config: 引擎配置
        """
        super().__init__(config)
        if isinstance(tasks, BaseTaskSet):
            tasks = tasks.get_tasks()
        self._records: List[TaskRecord] = list(tasks)

    def calculate(self) -> PertResult:
        """执行PERT计算

        每次调用都会重新构建依赖图，多次调用之间不共享可变状态。

        Returns:
            计算完成的结果集

        Raises:
            InvalidEstimateError: 时间估计无效
            MissingDependencyError: 依赖的任务不存在
            CyclicDependencyError: 存在循环依赖
            GraphConsistencyError: 拓扑序无法覆盖全部任务或计算结果非有限值
        """
        self._status = CalculationStatus.RUNNING
        self._result = None
        try:
            validate_estimates(self._records, strict=self.config.strict_estimates)
            graph = DependencyGraph.build(self._records)

            cycle = graph.find_cycle()
            if cycle is not None:
                raise CyclicDependencyError(cycle)

            order = graph.topological_order()
            self._forward_pass(graph, order)
            finish = self._project_finish_time(graph)
            self._backward_pass(graph, order, finish)
            self._check_finite(graph)
            self._classify(graph)

            result = self._assemble(graph, finish)
        except PertError as e:
            self._status = CalculationStatus.ERROR
            logger.debug(f"PERT计算失败：{e}")
            raise

        self._result = result
        self._status = CalculationStatus.SOLVED
        logger.info(
            f"PERT计算完成：{len(result.tasks)}个任务，项目总工期={finish:.2f}，"
            f"关键任务{len(result.critical_path_ids)}个"
        )
        return result

    def _forward_pass(self, graph: DependencyGraph, order: List[str]) -> None:
        # 拓扑序保证处理某任务时其所有前驱的EF已确定
        for task_id in order:
            node = graph.get_node(task_id)
            node.early_start = max(
                (graph.get_node(p).early_finish for p in graph.get_predecessors(task_id)),
                default=0.0
            )
            node.early_finish = node.early_start + node.expected_time

    @staticmethod
    def _project_finish_time(graph: DependencyGraph) -> float:
        return max(
            (graph.get_node(n).early_finish for n in graph.get_nodes()),
            default=0.0
        )

    def _backward_pass(self, graph: DependencyGraph, order: List[str], finish: float) -> None:
        # 逆拓扑序保证处理某任务时其所有后继的LS已确定
        for task_id in reversed(order):
            node = graph.get_node(task_id)
            successors = graph.get_successors(task_id)
            if not successors:
                node.late_finish = finish
            else:
                node.late_finish = min(graph.get_node(s).late_start for s in successors)
            node.late_start = node.late_finish - node.expected_time

    @staticmethod
    def _check_finite(graph: DependencyGraph) -> None:
        task_ids = graph.get_nodes()
        if not task_ids:
            return
        values = np.array(
            [
                [node.early_start, node.early_finish, node.late_start, node.late_finish]
                for node in (graph.get_node(n) for n in task_ids)
            ],
            dtype=float
        )
        unfinished = ~np.isfinite(values).all(axis=1)
        if unfinished.any():
            raise GraphConsistencyError(
                [tid for tid, bad in zip(task_ids, unfinished) if bad],
                reason="存在未计算完成的时间参数"
            )

    def _classify(self, graph: DependencyGraph) -> None:
        for task_id in graph.get_nodes():
            node = graph.get_node(task_id)
            node.slack = round(node.late_start - node.early_start, SLACK_PRECISION)
            node.is_critical, node.is_bottleneck = classify_slack(node.slack)
            self._log_node(node)

    def _log_node(self, node: TaskNode) -> None:
        level = logging.INFO if self.config.verbose else logging.DEBUG
        logger.log(
            level,
            f"任务{node.id}：TE={node.expected_time:.2f}，ES={node.early_start:.2f}，"
            f"EF={node.early_finish:.2f}，LS={node.late_start:.2f}，"
            f"LF={node.late_finish:.2f}，时差={node.slack}"
        )

    @staticmethod
    def _assemble(graph: DependencyGraph, finish: float) -> PertResult:
        schedules = []
        for task_id in graph.get_nodes():
            node = graph.get_node(task_id)
            schedules.append(TaskSchedule(
                id=node.id,
                description=node.description,
                optimistic_time=node.optimistic_time,
                most_likely_time=node.most_likely_time,
                pessimistic_time=node.pessimistic_time,
                dependencies=tuple(node.dependencies),
                expected_time=node.expected_time,
                variance=node.variance,
                early_start=node.early_start,
                early_finish=node.early_finish,
                late_start=node.late_start,
                late_finish=node.late_finish,
                slack=node.slack,
                is_critical=node.is_critical,
                is_bottleneck=node.is_bottleneck,
            ))
        return PertResult(
            tasks=tuple(schedules),
            critical_path_ids=tuple(s.id for s in schedules if s.is_critical),
            project_finish_time=finish,
            edges=tuple(graph.get_edges()),
        )


def calculate_pert(
    tasks: Union[Sequence[TaskRecord], BaseTaskSet],
    config: Optional[EngineConfig] = None
) -> PertResult:
    """对任务执行一次PERT计算

    Args:
        tasks: 任务记录序列或任务集合对象
        config: 引擎配置

    Returns:
        计算完成的结果集
    """
    return PertEngine(tasks, config).calculate()

"""错误类型定义模块。

此模块定义了PERT计算过程中可能抛出的全部异常，包括：
1. MissingDependencyError：依赖的任务不存在
2. CyclicDependencyError：依赖关系中存在循环
3. GraphConsistencyError：图结构不一致（拓扑排序无法覆盖全部节点等）
4. InvalidEstimateError：时间估计值无效
5. TaskValidationError：任务输入文件校验失败

所有异常均继承自PertError，而PertError继承自ValueError，
因此调用方可以继续使用 ``except ValueError`` 捕获输入错误。

Typical usage example:

    from pertnet.errors import CyclicDependencyError

    try:
        result = engine.calculate()
    except CyclicDependencyError as e:
        print(e.cycle)
"""

from typing import Iterable, List, Optional


class PertError(ValueError):
    """PERT计算异常基类"""


class MissingDependencyError(PertError):
    """依赖的任务不存在"""

    def __init__(self, task_id: str, dependency_id: str):
        self.task_id = task_id
        self.dependency_id = dependency_id
        super().__init__(
            f"依赖错误：任务'{task_id}'依赖的任务'{dependency_id}'不存在"
        )


class CyclicDependencyError(PertError):
    """依赖关系中存在循环"""

    def __init__(self, cycle: Iterable[str]):
        self.cycle: List[str] = list(cycle)
        # 首尾相连，便于阅读
        path = " -> ".join(self.cycle + self.cycle[:1])
        super().__init__(f"存在循环依赖：{path}，无法进行PERT计算")


class GraphConsistencyError(PertError):
    """图结构不一致"""

    def __init__(self, task_ids: Iterable[str], reason: Optional[str] = None):
        self.task_ids: List[str] = list(task_ids)
        reason = reason or "拓扑排序未能覆盖全部任务"
        super().__init__(f"图结构不一致：{reason}：{', '.join(self.task_ids)}")


class InvalidEstimateError(PertError):
    """时间估计值无效"""

    def __init__(self, task_id: str, field: str, value: object, reason: str):
        self.task_id = task_id
        self.field = field
        self.value = value
        super().__init__(f"任务'{task_id}'的时间估计无效（{field}={value!r}）：{reason}")


class TaskValidationError(PertError):
    """任务输入校验失败，携带全部错误信息"""

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        super().__init__("\n".join(self.errors))

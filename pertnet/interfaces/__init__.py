"""核心接口定义模块。

此模块定义了系统的核心抽象接口，包括：
1. BaseTaskSet：任务输入的抽象基类
2. BaseGraph：依赖图的抽象基类
3. BaseEngine：计算引擎的抽象基类
4. BaseRenderer：结果渲染器的抽象基类

这些接口确保了"校验 → 计算 → 渲染"各阶段之间的解耦。每个接口都定义了：
- 必需的属性和方法
- 类型注解
- 详细的文档字符串

Typical usage example:

    from pertnet.interfaces import BaseRenderer

    class CustomRenderer(BaseRenderer):
        def render(self, result) -> str:
            # 自定义渲染逻辑
            pass
"""

from .base_task import BaseTaskSet, TaskRecord
from .base_graph import BaseGraph, TaskNode
from .base_engine import (
    BaseEngine,
    CalculationStatus,
    EngineConfig,
    TaskSchedule
)
from .base_renderer import BaseRenderer

__all__ = [
    # 任务输入接口
    "BaseTaskSet",
    "TaskRecord",

    # 依赖图接口
    "BaseGraph",
    "TaskNode",

    # 计算引擎接口
    "BaseEngine",
    "CalculationStatus",
    "EngineConfig",
    "TaskSchedule",

    # 渲染接口
    "BaseRenderer"
]

"""PertNet - PERT/CPM项目进度分析框架。

此包用于分析由相互依赖的任务组成的项目，主要功能包括：

1. 任务输入：从CSV文件加载并校验任务的三点时间估计和依赖关系
2. 依赖图：构建任务DAG，检测循环依赖和缺失依赖
3. PERT计算：正向/反向计算ES、EF、LS、LF，得到时差、关键路径和项目总工期
4. 结果输出：导出CSV报告、绘制甘特图、生成draw.io图表

Typical usage example:

    from pertnet.task import TaskSet
    from pertnet.engine import PertEngine
    from pertnet.render import DrawioRenderer

    tasks = TaskSet()
    tasks.load_tasks("tasks.csv")

    result = PertEngine(tasks).calculate()
    print(result.critical_path_ids, result.project_finish_time)

    DrawioRenderer().save(result, "pert.drawio")
"""

from .task.task import TaskSet
from .graph.graph import DependencyGraph
from .engine.pert import PertEngine, calculate_pert
from .engine.result import PertResult
from .render.drawio import DrawioRenderer, DiagramLayout
from .interfaces.base_task import TaskRecord
from .interfaces.base_engine import EngineConfig
from .errors import (
    PertError,
    MissingDependencyError,
    CyclicDependencyError,
    GraphConsistencyError,
    InvalidEstimateError,
    TaskValidationError
)

__version__ = "1.0.0"

__all__ = [
    # 主要组件
    "TaskSet",
    "TaskRecord",
    "DependencyGraph",
    "PertEngine",
    "PertResult",
    "EngineConfig",
    "calculate_pert",
    "DrawioRenderer",
    "DiagramLayout",

    # 异常
    "PertError",
    "MissingDependencyError",
    "CyclicDependencyError",
    "GraphConsistencyError",
    "InvalidEstimateError",
    "TaskValidationError",

    # 版本信息
    "__version__"
]

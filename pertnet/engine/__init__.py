"""PERT计算引擎模块。

此模块提供了PERT/CPM的计算功能：
1. 环检测和拓扑排序
2. 正向计算ES/EF，反向计算LS/LF
3. 时差计算，标记关键任务和瓶颈任务
4. 生成只读结果集，支持CSV导出、DataFrame视图和甘特图

Typical usage example:

    from pertnet.engine import PertEngine, EngineConfig

    engine = PertEngine(records, EngineConfig(strict_estimates=True))
    result = engine.calculate()
"""

from .pert import (
    BOTTLENECK_THRESHOLD,
    SLACK_PRECISION,
    PertEngine,
    calculate_pert,
    classify_slack,
    validate_estimates
)
from .result import PertResult
from ..interfaces.base_engine import CalculationStatus, EngineConfig

__all__ = [
    "PertEngine",
    "PertResult",
    "EngineConfig",
    "CalculationStatus",
    "calculate_pert",
    "classify_slack",
    "validate_estimates",
    "SLACK_PRECISION",
    "BOTTLENECK_THRESHOLD"
]

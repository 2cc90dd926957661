"""计算引擎接口定义。

此模块定义了PERT计算引擎的核心抽象接口，包括：
1. 配置管理：引擎参数设置
2. 状态跟踪：记录计算所处阶段
3. 结果管理：获取计算完成的结果集

Typical usage example:

    from pertnet.interfaces import BaseEngine, EngineConfig

    class CustomEngine(BaseEngine):
        def calculate(self) -> PertResult:
            # 自定义计算逻辑
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from pertnet.engine.result import PertResult


class CalculationStatus(Enum):
    """计算状态枚举类"""
    NOT_STARTED = auto()  # 未开始
    RUNNING = auto()      # 计算中
    SOLVED = auto()       # 已完成
    ERROR = auto()        # 计算出错


@dataclass
class EngineConfig:
    """引擎配置数据类"""
    strict_estimates: bool = True  # 是否拒绝不满足 O <= M <= P 的时间估计
    verbose: bool = False          # 是否输出详细日志


@dataclass(frozen=True)
class TaskSchedule:
    """任务计算结果数据类（只读快照）"""
    id: str
    description: str
    optimistic_time: float
    most_likely_time: float
    pessimistic_time: float
    dependencies: Tuple[str, ...]
    expected_time: float
    variance: float
    early_start: float
    early_finish: float
    late_start: float
    late_finish: float
    slack: float
    is_critical: bool
    is_bottleneck: bool


class BaseEngine(ABC):
    """计算引擎抽象基类"""

    def __init__(self, config: Optional[EngineConfig] = None):
        """初始化计算引擎

        Args:
            config: 引擎配置
        """
        self.config = config or EngineConfig()
        self._status = CalculationStatus.NOT_STARTED
        self._result: Optional['PertResult'] = None

    @property
    def status(self) -> CalculationStatus:
        """获取计算状态

        Returns:
            当前计算状态
        """
        return self._status

    @property
    def result(self) -> Optional['PertResult']:
        """获取计算结果

        Returns:
            结果集对象，如果计算未成功完成则返回None
        """
        return self._result

    @abstractmethod
    def calculate(self) -> 'PertResult':
        """执行计算

        Returns:
            计算完成的结果集

        Raises:
            PertError: 输入或图结构不满足计算前提
        """
        pass

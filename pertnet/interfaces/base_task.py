"""任务集合接口定义。

此模块定义了任务输入的核心抽象接口，包括：
1. 任务记录：任务ID、描述、三点时间估计和依赖关系
2. 任务加载：从CSV文件加载并校验任务
3. 任务查询：按ID或输入顺序获取任务

Typical usage example:

    from pertnet.interfaces import BaseTaskSet

    class CustomTaskSet(BaseTaskSet):
        def load_tasks(self, task_csv: str) -> None:
            # 自定义任务加载逻辑
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TaskRecord:
    """任务记录数据类（已校验的输入）"""
    id: str  # 任务ID，非空且唯一
    description: str  # 任务描述，可为空
    optimistic_time: float  # 乐观时间
    most_likely_time: float  # 最可能时间
    pessimistic_time: float  # 悲观时间
    dependencies: List[str] = field(default_factory=list)  # 前置任务ID列表


class BaseTaskSet(ABC):
    """任务集合抽象基类"""

    @abstractmethod
    def load_tasks(self, task_csv: str) -> None:
        """从CSV文件加载任务

        Args:
            task_csv: 任务CSV文件路径，包含任务ID、描述、三点时间估计和依赖关系

        Raises:
            FileNotFoundError: 文件不存在
            TaskValidationError: 文件内容校验失败
        """
        pass

    @abstractmethod
    def get_tasks(self) -> List[TaskRecord]:
        """获取所有任务（保持输入顺序）

        Returns:
            任务记录列表
        """
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Optional[TaskRecord]:
        """获取指定任务

        Args:
            task_id: 任务ID

        Returns:
            任务记录，如果任务不存在则返回None
        """
        pass

    @abstractmethod
    def get_task_ids(self) -> List[str]:
        """获取所有任务ID

        Returns:
            任务ID列表
        """
        pass

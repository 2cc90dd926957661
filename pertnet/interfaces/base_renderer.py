"""结果渲染接口定义。

此模块定义了结果渲染器的核心抽象接口，包括：
1. 文档生成：将结果集转换为目标格式的文本
2. 结果导出：将生成的文档写入文件

渲染器只读取结果集，不得修改。

Typical usage example:

    from pertnet.interfaces import BaseRenderer

    class CustomRenderer(BaseRenderer):
        def render(self, result) -> str:
            # 自定义渲染逻辑
            pass
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pertnet.engine.result import PertResult


class BaseRenderer(ABC):
    """结果渲染器抽象基类"""

    @abstractmethod
    def render(self, result: 'PertResult') -> str:
        """将结果集渲染为文档

        Args:
            result: PERT结果集

        Returns:
            文档字符串
        """
        pass

    @abstractmethod
    def save(self, result: 'PertResult', output_path: str) -> None:
        """将渲染结果保存到文件

        Args:
            result: PERT结果集
            output_path: 输出文件路径

        Raises:
            IOError: 写入文件失败
        """
        pass

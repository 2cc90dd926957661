"""任务依赖图模块。

此模块提供了依赖图的核心功能，包括：
1. 由任务记录构建有向无环图
2. 校验依赖引用的任务均存在
3. 环检测和拓扑排序

Typical usage example:

    from pertnet.graph import DependencyGraph

    graph = DependencyGraph.build(records)
    cycle = graph.find_cycle()
"""

from .graph import DependencyGraph

__all__ = ["DependencyGraph"]

"""任务输入管理模块。

此模块提供了任务输入的核心功能，包括：
1. 从CSV文件加载任务及其三点时间估计
2. 校验任务ID、时间估计和依赖关系
3. 提供任务查询接口

Typical usage example:

    from pertnet.task import TaskSet

    tasks = TaskSet()
    tasks.load_tasks("tasks.csv")
    print(tasks.get_task_ids())
"""

from .task import REQUIRED_HEADERS, TaskSet, parse_dependencies

__all__ = ["TaskSet", "REQUIRED_HEADERS", "parse_dependencies"]

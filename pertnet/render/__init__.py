"""结果渲染模块。

此模块将PERT结果集渲染为外部文档格式：
1. draw.io（mxGraph XML）图表，支持网格和拓扑分层两种布局

Typical usage example:

    from pertnet.render import DrawioRenderer

    DrawioRenderer().save(result, "pert.drawio")
"""

from .drawio import DiagramLayout, DrawioRenderer, task_label

__all__ = ["DrawioRenderer", "DiagramLayout", "task_label"]

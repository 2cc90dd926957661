"""draw.io图表渲染模块。

此模块将PERT结果集渲染为draw.io可直接打开的mxGraph XML文档：
1. 每个任务生成一个矩形节点，标签中显示TE、方差、ES/EF、LS/LF和时差
2. 关键任务标红，瓶颈任务标黄，其余任务为浅蓝色
3. 每条依赖生成一条带箭头的正交连线

Typical usage example:

    from pertnet.render import DrawioRenderer, DiagramLayout

    renderer = DrawioRenderer(DiagramLayout(mode="layered"))
    renderer.save(result, "pert.drawio")
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import networkx as nx

from pertnet.engine.result import PertResult
from pertnet.interfaces.base_engine import TaskSchedule
from pertnet.interfaces.base_renderer import BaseRenderer

logger = logging.getLogger(__name__)

BASE_STYLE = (
    "shape=rectangle;whiteSpace=wrap;html=1;rounded=1;strokeColor=#333333;"
    "fontSize=10;fontFamily=Inter;align=left;verticalAlign=top;"
    "spacingLeft=4;spacingRight=4;spacingTop=4;spacingBottom=4;"
)
NORMAL_FILL = "fillColor=#EBF8FF;"
CRITICAL_FILL = "fillColor=#FED7D7;"
BOTTLENECK_FILL = "fillColor=#FEFCBF;"
EDGE_STYLE = (
    "edgeStyle=orthogonalEdgeStyle;rounded=0;orthogonalLoop=1;jettySize=auto;"
    "html=1;endArrow=classic;strokeWidth=1;strokeColor=#6B7280;"
)

MODEL_ATTRIBUTES = {
    'dx': '1426', 'dy': '797', 'grid': '1', 'gridSize': '10', 'guides': '1',
    'tooltips': '1', 'connect': '1', 'arrows': '1', 'fold': '1', 'page': '1',
    'pageScale': '1', 'pageWidth': '827', 'pageHeight': '1169', 'math': '0',
    'shadow': '0',
}


@dataclass
class DiagramLayout:
    """图表布局配置数据类"""
    mode: str = "grid"      # grid：按输入顺序排成网格；layered：按拓扑层级分列
    columns: int = 5        # grid模式下每行的节点数
    x_spacing: int = 200    # 水平间距
    y_spacing: int = 150    # 垂直间距
    margin: int = 50        # 左上边距
    width: int = 180        # 节点宽度
    height: int = 100       # 节点高度

    def __post_init__(self):
        if self.mode not in ("grid", "layered"):
            raise ValueError(f"未知的布局模式：{self.mode}")
        if self.columns < 1:
            raise ValueError("columns必须为正整数")


def task_label(task: TaskSchedule) -> str:
    """生成任务节点的HTML标签

    Args:
        task: 任务计算结果

    Returns:
        HTML格式的标签（写入XML时会被转义）
    """
    label = (
        f"<b>{task.id}: {task.description or 'N/A'}</b><br>"
        f"TE: {task.expected_time:.2f} | Var: {task.variance:.2f}<br>"
        f"ES: {task.early_start:.2f} | EF: {task.early_finish:.2f}<br>"
        f"LS: {task.late_start:.2f} | LF: {task.late_finish:.2f}<br>"
        f"Slack: {task.slack:.2f}"
    )
    if task.is_critical:
        label += "<br><b>CRITICAL</b>"
    if task.is_bottleneck:
        label += "<br><i>BOTTLENECK</i>"
    return label


def task_style(task: TaskSchedule) -> str:
    if task.is_critical:
        return BASE_STYLE + CRITICAL_FILL
    if task.is_bottleneck:
        return BASE_STYLE + BOTTLENECK_FILL
    return BASE_STYLE + NORMAL_FILL


class DrawioRenderer(BaseRenderer):
    """draw.io mxGraph XML渲染器"""

    def __init__(self, layout: Optional[DiagramLayout] = None):
        """初始化渲染器

        Args:
            layout: 布局配置，默认为网格布局
        """
        self.layout = layout or DiagramLayout()

    def positions(self, result: PertResult) -> Dict[str, Tuple[int, int]]:
        """计算每个任务节点的左上角坐标

        Args:
            result: PERT结果集

        Returns:
            任务ID到(x, y)坐标的字典
        """
        layout = self.layout
        if layout.mode == "grid":
            return {
                task.id: (
                    (index % layout.columns) * layout.x_spacing + layout.margin,
                    (index // layout.columns) * layout.y_spacing + layout.margin,
                )
                for index, task in enumerate(result.tasks)
            }

        # layered：列号为拓扑层级，同层任务按输入顺序自上而下排列
        dag = nx.DiGraph()
        dag.add_nodes_from(task.id for task in result.tasks)
        dag.add_edges_from(result.edges)
        order = {task.id: index for index, task in enumerate(result.tasks)}
        coords: Dict[str, Tuple[int, int]] = {}
        for level, generation in enumerate(nx.topological_generations(dag)):
            for row, task_id in enumerate(sorted(generation, key=order.get)):
                coords[task_id] = (
                    level * layout.x_spacing + layout.margin,
                    row * layout.y_spacing + layout.margin,
                )
        return coords

    def build_tree(self, result: PertResult) -> ET.Element:
        """构建mxGraphModel元素树

        Args:
            result: PERT结果集

        Returns:
            mxGraphModel根元素
        """
        model = ET.Element('mxGraphModel', MODEL_ATTRIBUTES)
        root = ET.SubElement(model, 'root')
        ET.SubElement(root, 'mxCell', {'id': '0'})
        ET.SubElement(root, 'mxCell', {'id': '1', 'parent': '0'})

        coords = self.positions(result)
        for task in result.tasks:
            x, y = coords[task.id]
            cell = ET.SubElement(root, 'mxCell', {
                'id': task.id,
                'value': task_label(task),
                'style': task_style(task),
                'vertex': '1',
                'parent': '1',
            })
            ET.SubElement(cell, 'mxGeometry', {
                'x': str(x),
                'y': str(y),
                'width': str(self.layout.width),
                'height': str(self.layout.height),
                'as': 'geometry',
            })

        for count, (source, target) in enumerate(result.edges, start=1):
            edge = ET.SubElement(root, 'mxCell', {
                'id': f"edge-{source}-{target}-{count}",
                'style': EDGE_STYLE,
                'edge': '1',
                'parent': '1',
                'source': source,
                'target': target,
            })
            ET.SubElement(edge, 'mxGeometry', {'relative': '1', 'as': 'geometry'})

        return model

    def render(self, result: PertResult) -> str:
        """将结果集渲染为mxGraph XML字符串

        Args:
            result: PERT结果集

        Returns:
            XML文档字符串
        """
        model = self.build_tree(result)
        ET.indent(model, space="  ")
        return ET.tostring(model, encoding='unicode') + "\n"

    def save(self, result: PertResult, output_path: str) -> None:
        """将mxGraph XML写入文件

        Args:
            result: PERT结果集
            output_path: 输出文件路径
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.render(result))
        logger.info(f"draw.io图表已保存到{output_path}")
